"""Container health probe and end-to-end smoke test over the status client."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

import httpx

from status_service.domain import domain_format_timestamp

from .errors import StatusClientError
from .http_client import StatusServiceClient


@dataclass(frozen=True)
class SmokeTestStep:
    """Outcome of one smoke test call.

    Attributes:
        name: Endpoint label such as `GET /health`.
        passed: Whether the call and its checks succeeded.
        detail: Response payload on success, error text on failure.
    """

    name: str
    passed: bool
    detail: Any


@dataclass(frozen=True)
class SmokeTestReport:
    """Ordered outcomes of one smoke test run.

    Attributes:
        steps: Step outcomes in execution order.
    """

    steps: tuple[SmokeTestStep, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        """Return whether every step passed and at least one step ran."""

        return bool(self.steps) and all(step.passed for step in self.steps)


def client_run_healthcheck(
    base_url: str,
    timeout_seconds: float = 3.0,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """Probe `GET /health` once and return a process exit code.

    Args:
        base_url: Service base URL.
        timeout_seconds: Request timeout.
        transport: Optional httpx transport override.

    Returns:
        int: 0 when the service reports `healthy` with HTTP 200, 1 otherwise.

    Raises:
        ValueError: Raised when base_url or timeout are invalid.
    """

    with StatusServiceClient(base_url, timeout_seconds=timeout_seconds, transport=transport) as client:
        try:
            health_payload = client.client_get_health()
        except StatusClientError:
            return 1
    return 0 if health_payload.get("status") == "healthy" else 1


def client_run_smoke_test(
    client: StatusServiceClient,
    clock: Callable[[], datetime] | None = None,
) -> SmokeTestReport:
    """Call all four endpoints in order and verify their core contracts.

    A failing step does not stop later steps, so one run reports every
    broken endpoint.

    Args:
        client: Client bound to the target service.
        clock: Optional wall-clock provider for the echo payload timestamp.

    Returns:
        SmokeTestReport: Ordered step outcomes.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    resolved_clock = clock or (lambda: datetime.now(timezone.utc))
    echo_payload = {
        "test": "Hello from client",
        "timestamp": domain_format_timestamp(resolved_clock()),
    }

    steps = (
        _client_run_step("GET /health", client.client_get_health, _client_check_health),
        _client_run_step("GET /", client.client_get_root, None),
        _client_run_step("GET /api/info", client.client_get_info, _client_check_info),
        _client_run_step(
            "POST /api/echo",
            lambda: client.client_post_echo(echo_payload),
            lambda payload: _client_check_echo(payload, echo_payload),
        ),
    )
    return SmokeTestReport(steps=steps)


def _client_run_step(
    name: str,
    call: Callable[[], dict[str, Any]],
    check: Callable[[dict[str, Any]], str | None] | None,
) -> SmokeTestStep:
    try:
        payload = call()
    except StatusClientError as error:
        return SmokeTestStep(name=name, passed=False, detail=str(error))

    failure = check(payload) if check is not None else None
    if failure is not None:
        return SmokeTestStep(name=name, passed=False, detail=failure)
    return SmokeTestStep(name=name, passed=True, detail=payload)


def _client_check_health(payload: dict[str, Any]) -> str | None:
    if payload.get("status") != "healthy":
        return f"unexpected health status: {payload.get('status')!r}"
    return None


def _client_check_info(payload: dict[str, Any]) -> str | None:
    uptime_seconds = payload.get("uptimeSeconds")
    if not isinstance(uptime_seconds, (int, float)) or uptime_seconds < 0:
        return f"invalid uptimeSeconds: {uptime_seconds!r}"
    return None


def _client_check_echo(payload: dict[str, Any], sent_payload: dict[str, Any]) -> str | None:
    if payload.get("received") != sent_payload:
        return "echo payload mismatch"
    return None
