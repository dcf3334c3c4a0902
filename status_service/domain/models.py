"""Typed domain models shared across runtime layers.

Reports are created fresh for every request and never mutated. The service
context is built once at startup and passed explicitly to every handler in
place of ambient process globals.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Literal, TypeAlias, Union

JsonValue: TypeAlias = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]

HealthState = Literal["healthy"]


def _domain_utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ServiceContext:
    """Immutable process context shared read-only by all request handlers.

    Attributes:
        service_name: Service identifier reported by health and info endpoints.
        service_version: Service version string.
        environment_name: Runtime environment label.
        welcome_message: Greeting reported by the root endpoint.
        started_at_utc: Wall-clock instant the process context was created.
        started_monotonic: Monotonic clock reading taken at the same instant.
        wall_clock: Provider of the current UTC wall-clock time.
        monotonic_clock: Provider of monotonic seconds used for uptime.
    """

    service_name: str
    service_version: str
    environment_name: str
    welcome_message: str
    started_at_utc: datetime
    started_monotonic: float
    wall_clock: Callable[[], datetime] = field(default=_domain_utc_now, repr=False, compare=False)
    monotonic_clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def context_now_utc(self) -> datetime:
        """Return the current wall-clock time in UTC.

        Returns:
            datetime: Timezone-aware current time.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return self.wall_clock().astimezone(timezone.utc)

    def context_uptime_seconds(self) -> float:
        """Return seconds elapsed since the context was created.

        Returns:
            float: Non-negative, non-decreasing uptime in seconds.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return max(0.0, float(self.monotonic_clock() - self.started_monotonic))


def domain_create_service_context(
    service_name: str,
    service_version: str,
    environment_name: str,
    welcome_message: str,
    wall_clock: Callable[[], datetime] | None = None,
    monotonic_clock: Callable[[], float] | None = None,
) -> ServiceContext:
    """Build the service context and record the process start instants.

    Args:
        service_name: Service identifier.
        service_version: Service version string.
        environment_name: Runtime environment label.
        welcome_message: Root endpoint greeting.
        wall_clock: Optional wall-clock provider override.
        monotonic_clock: Optional monotonic clock override.

    Returns:
        ServiceContext: Immutable context with start instants captured now.

    Raises:
        ValueError: Raised when a required label is blank.
    """

    for label_name, label_value in (
        ("service_name", service_name),
        ("service_version", service_version),
        ("environment_name", environment_name),
    ):
        if not label_value.strip():
            raise ValueError(f"{label_name} must not be blank")

    resolved_wall_clock = wall_clock or _domain_utc_now
    resolved_monotonic_clock = monotonic_clock or time.monotonic
    return ServiceContext(
        service_name=service_name,
        service_version=service_version,
        environment_name=environment_name,
        welcome_message=welcome_message,
        started_at_utc=resolved_wall_clock().astimezone(timezone.utc),
        started_monotonic=resolved_monotonic_clock(),
        wall_clock=resolved_wall_clock,
        monotonic_clock=resolved_monotonic_clock,
    )


@dataclass(frozen=True)
class StatusReport:
    """Liveness report returned by the health endpoint.

    Attributes:
        status: Always `healthy` while the process can answer.
        timestamp: RFC3339 UTC timestamp of the report.
        service: Service identifier.
    """

    status: HealthState
    timestamp: str
    service: str


@dataclass(frozen=True)
class RootReport:
    """Greeting and environment report returned by the root endpoint.

    Attributes:
        message: Welcome message.
        version: Service version.
        environment: Runtime environment label.
        timestamp: RFC3339 UTC timestamp of the report.
    """

    message: str
    version: str
    environment: str
    timestamp: str


@dataclass(frozen=True)
class InfoReport:
    """Process introspection report returned by the info endpoint.

    Attributes:
        service: Service identifier.
        version: Service version.
        uptime_seconds: Seconds since process start.
        memory_stats: Memory region name to byte count.
        platform_name: Operating system platform identifier.
        runtime_version: Python interpreter version.
        timestamp: RFC3339 UTC timestamp of the report.
    """

    service: str
    version: str
    uptime_seconds: float
    memory_stats: dict[str, int]
    platform_name: str
    runtime_version: str
    timestamp: str


@dataclass(frozen=True)
class EchoEnvelope:
    """Echo response wrapping the caller-supplied JSON value.

    Attributes:
        message: Fixed echo marker text.
        received: Caller JSON value reflected verbatim.
        timestamp: RFC3339 UTC timestamp of the report.
    """

    message: str
    received: JsonValue
    timestamp: str
