"""Status service producing health, root, info and echo reports.

Every operation is a single-shot read of the service context and runtime
counters. Operations return an explicit `ServiceResult`; unexpected faults
are converted to `UnhandledServiceError` results instead of propagating.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Callable

from status_service.domain import (
    EchoEnvelope,
    InfoReport,
    JsonValue,
    RootReport,
    ServiceContext,
    StatusReport,
    domain_format_timestamp,
)
from status_service.runtime import RuntimeProbePort

from .errors import BadRequestError, UnhandledServiceError
from .results import ServiceReport, ServiceResult, service_result_failure, service_result_success

ECHO_MESSAGE = "Echo endpoint"
HEALTHY_STATUS = "healthy"

_LOGGER = logging.getLogger(__name__)


class StatusService:
    """Stateless service answering liveness and introspection queries."""

    def __init__(self, context: ServiceContext, runtime_probe: RuntimeProbePort):
        """Initialize status service.

        Args:
            context: Immutable process context built at startup.
            runtime_probe: Read-only process runtime probe.

        Raises:
            ValueError: Raised when dependencies are invalid.
        """

        if context is None:
            raise ValueError("context must not be None")
        if runtime_probe is None:
            raise ValueError("runtime_probe must not be None")
        self._context = context
        self._runtime_probe = runtime_probe

    @property
    def context(self) -> ServiceContext:
        """Return the process context used by this service."""

        return self._context

    def service_get_health(self) -> ServiceResult:
        """Return an unconditional liveness report.

        Returns:
            ServiceResult: Success result carrying a `StatusReport`.

        Raises:
            RuntimeError: This operation does not raise runtime errors.
        """

        return self._service_guard(
            "health",
            lambda: StatusReport(
                status=HEALTHY_STATUS,
                timestamp=self._service_timestamp(),
                service=self._context.service_name,
            ),
        )

    def service_get_root(self) -> ServiceResult:
        """Return welcome, version and environment details.

        Returns:
            ServiceResult: Success result carrying a `RootReport`.

        Raises:
            RuntimeError: This operation does not raise runtime errors.
        """

        return self._service_guard(
            "root",
            lambda: RootReport(
                message=self._context.welcome_message,
                version=self._context.service_version,
                environment=self._context.environment_name,
                timestamp=self._service_timestamp(),
            ),
        )

    def service_get_info(self) -> ServiceResult:
        """Return uptime, memory and platform details of the running process.

        Returns:
            ServiceResult: Success result carrying an `InfoReport`.

        Raises:
            RuntimeError: This operation does not raise runtime errors.
        """

        return self._service_guard("info", self._service_build_info_report)

    def service_echo(self, raw_body: bytes) -> ServiceResult:
        """Reflect one caller-supplied JSON value back inside an envelope.

        Args:
            raw_body: Raw request body bytes. An empty body is read as `{}`.

        Returns:
            ServiceResult: Success result carrying an `EchoEnvelope`, or a
            `BadRequestError` result when the body is not valid JSON.

        Raises:
            RuntimeError: This operation does not raise runtime errors.
        """

        try:
            received = service_parse_json_body(raw_body)
        except BadRequestError as error:
            _LOGGER.info("service.echo_rejected", extra={"reason": error.message})
            return service_result_failure(error)

        return self._service_guard(
            "echo",
            lambda: EchoEnvelope(
                message=ECHO_MESSAGE,
                received=received,
                timestamp=self._service_timestamp(),
            ),
        )

    def _service_build_info_report(self) -> InfoReport:
        return InfoReport(
            service=self._context.service_name,
            version=self._context.service_version,
            uptime_seconds=self._context.context_uptime_seconds(),
            memory_stats=dict(self._runtime_probe.runtime_memory_stats()),
            platform_name=self._runtime_probe.runtime_platform_name(),
            runtime_version=self._runtime_probe.runtime_version(),
            timestamp=self._service_timestamp(),
        )

    def _service_timestamp(self) -> str:
        return domain_format_timestamp(self._context.context_now_utc())

    def _service_guard(self, operation_name: str, build_report: Callable[[], ServiceReport]) -> ServiceResult:
        try:
            return service_result_success(build_report())
        except Exception as error:  # pylint: disable=broad-exception-caught
            _LOGGER.exception(
                "service.operation_failed",
                extra={"operation": operation_name, "error": str(error)},
            )
            return service_result_failure(UnhandledServiceError(f"{operation_name} operation failed"))


def service_parse_json_body(raw_body: bytes) -> JsonValue:
    """Parse one request body as a strict JSON document.

    Args:
        raw_body: Raw request body bytes.

    Returns:
        JsonValue: Parsed JSON value; `{}` for an empty or whitespace-only body.

    Raises:
        BadRequestError: Raised when the body is not UTF-8, not valid JSON, or holds
            values that cannot be encoded back (out-of-range numbers, lone surrogates).
    """

    try:
        body_text = raw_body.decode("utf-8")
    except UnicodeDecodeError as error:
        raise BadRequestError("request body must be UTF-8 encoded JSON") from error

    if not body_text.strip():
        return {}

    try:
        parsed_value = json.loads(
            body_text,
            parse_constant=_service_reject_constant,
            parse_float=_service_parse_finite_float,
        )
    except (json.JSONDecodeError, RecursionError) as error:
        raise BadRequestError(f"request body is not valid JSON: {error}") from error

    try:
        json.dumps(parsed_value, allow_nan=False, ensure_ascii=False).encode("utf-8")
    except (ValueError, UnicodeEncodeError, RecursionError) as error:
        raise BadRequestError(f"request body cannot be reflected as JSON: {error}") from error
    return parsed_value


def _service_reject_constant(constant_name: str) -> JsonValue:
    raise json.JSONDecodeError(f"non-standard constant {constant_name}", constant_name, 0)


def _service_parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise json.JSONDecodeError(f"number out of range {literal}", literal, 0)
    return value
