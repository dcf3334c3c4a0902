"""Tests for the status client, container health probe and smoke test."""
# pylint: disable=duplicate-code

from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest
from fastapi.testclient import TestClient

from status_service.bootstrap import bootstrap_create_application
from status_service.client import (
    StatusClientConnectionError,
    StatusClientResponseError,
    StatusClientTimeoutError,
    StatusServiceClient,
    client_run_healthcheck,
    client_run_smoke_test,
)
from status_service.config import AppSettings

_BASE_URL = "http://status.test"


def _application_transport() -> httpx.MockTransport:
    """Build a transport forwarding client calls into an in-process application.

    Returns:
        httpx.MockTransport: Transport backed by a FastAPI test client.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    test_client = TestClient(bootstrap_create_application(settings=AppSettings(environment_name="test")))

    def _forward(request: httpx.Request) -> httpx.Response:
        forwarded = test_client.request(
            request.method,
            request.url.path,
            content=request.content,
            headers={"Content-Type": request.headers.get("Content-Type", "application/json")},
        )
        return httpx.Response(
            forwarded.status_code,
            content=forwarded.content,
            headers={"Content-Type": forwarded.headers["content-type"]},
        )

    return httpx.MockTransport(_forward)


def _static_transport(status_code: int, json_payload: object | None = None, text: str | None = None):
    """Build a transport answering every request with one fixed response.

    Args:
        status_code: Response status code.
        json_payload: Optional JSON body.
        text: Optional text body.

    Returns:
        httpx.MockTransport: Fixed-response transport.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    def _respond(_request: httpx.Request) -> httpx.Response:
        if json_payload is not None:
            return httpx.Response(status_code, json=json_payload)
        return httpx.Response(status_code, text=text or "")

    return httpx.MockTransport(_respond)


def _raising_transport(error_type: type[httpx.TransportError]) -> httpx.MockTransport:
    """Build a transport raising one transport error for every request.

    Args:
        error_type: httpx transport error class.

    Returns:
        httpx.MockTransport: Failing transport.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    def _fail(request: httpx.Request) -> httpx.Response:
        raise error_type("transport failure", request=request)

    return httpx.MockTransport(_fail)


def test_client_calls_all_endpoints_against_application() -> None:
    """Decode payloads of all four endpoints from a live application.

    Returns:
        None: Assertions validate client decoding.

    Raises:
        AssertionError: Raised when decoded payloads are wrong.
    """

    with StatusServiceClient(_BASE_URL, transport=_application_transport()) as client:
        health = client.client_get_health()
        root = client.client_get_root()
        info = client.client_get_info()
        echo = client.client_post_echo({"test": "hello"})

    assert health["status"] == "healthy"
    assert root["environment"] == "test"
    assert info["uptimeSeconds"] >= 0
    assert echo["received"] == {"test": "hello"}


def test_client_maps_timeout_to_timeout_error() -> None:
    """Raise StatusClientTimeoutError on transport timeouts.

    Returns:
        None: Assertions validate error mapping.

    Raises:
        AssertionError: Raised when mapping is incorrect.
    """

    client = StatusServiceClient(_BASE_URL, transport=_raising_transport(httpx.ReadTimeout))

    with pytest.raises(StatusClientTimeoutError, match="timed out"):
        client.client_get_health()


def test_client_maps_connect_failure_to_connection_error() -> None:
    """Raise StatusClientConnectionError when the server is unreachable.

    Returns:
        None: Assertions validate error mapping.

    Raises:
        AssertionError: Raised when mapping is incorrect.
    """

    client = StatusServiceClient(_BASE_URL, transport=_raising_transport(httpx.ConnectError))

    with pytest.raises(StatusClientConnectionError):
        client.client_get_info()


def test_client_maps_error_status_to_response_error() -> None:
    """Raise StatusClientResponseError carrying status and body.

    Returns:
        None: Assertions validate error mapping.

    Raises:
        AssertionError: Raised when mapping is incorrect.
    """

    client = StatusServiceClient(
        _BASE_URL,
        transport=_static_transport(400, json_payload={"status": "error", "code": "BAD_REQUEST"}),
    )

    with pytest.raises(StatusClientResponseError) as error_info:
        client.client_post_echo({"test": "hello"})

    assert error_info.value.status_code == 400
    assert "BAD_REQUEST" in error_info.value.body


def test_client_rejects_non_json_success_body() -> None:
    """Raise StatusClientResponseError for a 200 response that is not JSON.

    Returns:
        None: Assertions validate body validation.

    Raises:
        AssertionError: Raised when non-JSON body is accepted.
    """

    client = StatusServiceClient(_BASE_URL, transport=_static_transport(200, text="<html>proxy</html>"))

    with pytest.raises(StatusClientResponseError, match="non-JSON"):
        client.client_get_root()


def test_client_rejects_invalid_arguments() -> None:
    """Reject blank base URL and non-positive timeout.

    Returns:
        None: Assertions validate constructor checks.

    Raises:
        AssertionError: Raised when invalid arguments are accepted.
    """

    with pytest.raises(ValueError, match="base_url"):
        StatusServiceClient("  ")
    with pytest.raises(ValueError, match="timeout_seconds"):
        StatusServiceClient(_BASE_URL, timeout_seconds=0)


def test_client_healthcheck_returns_zero_for_healthy_service() -> None:
    """Return exit code 0 when the service reports healthy.

    Returns:
        None: Assertions validate probe exit code.

    Raises:
        AssertionError: Raised when exit code differs.
    """

    assert client_run_healthcheck(_BASE_URL, transport=_application_transport()) == 0


@pytest.mark.parametrize(
    "transport",
    [
        _static_transport(503, json_payload={"status": "healthy"}),
        _static_transport(200, json_payload={"status": "starting"}),
        _raising_transport(httpx.ConnectError),
        _raising_transport(httpx.ReadTimeout),
    ],
)
def test_client_healthcheck_returns_one_for_unhealthy_service(transport: httpx.MockTransport) -> None:
    """Return exit code 1 for error statuses, wrong payloads and transport failures.

    Args:
        transport: Transport simulating one failure mode.

    Returns:
        None: Assertions validate probe exit code.

    Raises:
        AssertionError: Raised when exit code differs.
    """

    assert client_run_healthcheck(_BASE_URL, transport=transport) == 1


def test_client_smoke_test_passes_against_application() -> None:
    """Pass every step against a working application.

    Returns:
        None: Assertions validate smoke test report.

    Raises:
        AssertionError: Raised when a step fails.
    """

    with StatusServiceClient(_BASE_URL, transport=_application_transport()) as client:
        report = client_run_smoke_test(client, clock=lambda: datetime(2026, 10, 17, tzinfo=timezone.utc))

    assert report.passed
    assert [step.name for step in report.steps] == ["GET /health", "GET /", "GET /api/info", "POST /api/echo"]
    assert report.steps[3].detail["received"] == {
        "test": "Hello from client",
        "timestamp": "2026-10-17T00:00:00.000Z",
    }


def test_client_smoke_test_reports_every_failing_step() -> None:
    """Continue after failures and report each failing step.

    Returns:
        None: Assertions validate failure reporting.

    Raises:
        AssertionError: Raised when failures are not reported.
    """

    with StatusServiceClient(_BASE_URL, transport=_raising_transport(httpx.ConnectError)) as client:
        report = client_run_smoke_test(client)

    assert not report.passed
    assert len(report.steps) == 4
    assert not any(step.passed for step in report.steps)


def test_client_smoke_test_detects_echo_mismatch() -> None:
    """Fail the echo step when the service does not reflect the payload.

    Returns:
        None: Assertions validate echo verification.

    Raises:
        AssertionError: Raised when mismatch is not detected.
    """

    transport = _static_transport(
        200,
        json_payload={"status": "healthy", "uptimeSeconds": 1.0, "received": {"other": True}},
    )
    with StatusServiceClient(_BASE_URL, transport=transport) as client:
        report = client_run_smoke_test(client)

    outcomes = {step.name: step.passed for step in report.steps}
    assert outcomes == {
        "GET /health": True,
        "GET /": True,
        "GET /api/info": True,
        "POST /api/echo": False,
    }
