"""Explicit success-or-error result contract for service operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from status_service.domain import EchoEnvelope, InfoReport, RootReport, StatusReport

from .errors import ServiceError

ServiceReport = Union[StatusReport, RootReport, InfoReport, EchoEnvelope]


@dataclass(frozen=True)
class ServiceResult:
    """Outcome of one service operation.

    Exactly one of `report` and `error` is set.

    Attributes:
        report: Produced report on success.
        error: Typed failure on error.
    """

    report: ServiceReport | None = None
    error: ServiceError | None = None

    def __post_init__(self) -> None:
        if (self.report is None) == (self.error is None):
            raise ValueError("exactly one of report and error must be set")

    @property
    def is_success(self) -> bool:
        """Return whether the operation produced a report.

        Returns:
            bool: True when `report` is set.

        Raises:
            RuntimeError: This property does not raise runtime errors.
        """

        return self.report is not None


def service_result_success(report: ServiceReport) -> ServiceResult:
    """Wrap one report into a successful result.

    Args:
        report: Produced report.

    Returns:
        ServiceResult: Success result.

    Raises:
        ValueError: Raised when report is None.
    """

    return ServiceResult(report=report)


def service_result_failure(error: ServiceError) -> ServiceResult:
    """Wrap one typed error into a failed result.

    Args:
        error: Typed service failure.

    Returns:
        ServiceResult: Error result.

    Raises:
        ValueError: Raised when error is None.
    """

    return ServiceResult(error=error)
