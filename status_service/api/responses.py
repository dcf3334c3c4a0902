"""Request-boundary adapters mapping service results to HTTP responses."""

from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse

from status_service.domain import EchoEnvelope, InfoReport, JsonValue, RootReport, StatusReport
from status_service.service import ServiceError, ServiceReport, ServiceResult


def api_render_service_result(result: ServiceResult) -> JSONResponse:
    """Render one service result as a JSON response.

    Args:
        result: Explicit service outcome.

    Returns:
        JSONResponse: HTTP 200 with the serialized report, or the error
        payload with the status code of the typed failure.

    Raises:
        RuntimeError: This adapter does not raise runtime errors.
    """

    if result.error is not None:
        return api_render_service_error(result.error)

    return JSONResponse(content=api_serialize_report(result.report), status_code=status.HTTP_200_OK)


def api_render_service_error(error: ServiceError) -> JSONResponse:
    """Render one typed service failure as a JSON error response.

    Args:
        error: Typed service failure.

    Returns:
        JSONResponse: Error payload with the failure status code.

    Raises:
        RuntimeError: This adapter does not raise runtime errors.
    """

    return JSONResponse(content=api_error_payload(error.error_code, error.message), status_code=error.status_code)


def api_error_payload(error_code: str, message: str) -> dict[str, str]:
    """Build the error payload shared by all failure responses.

    Args:
        error_code: Stable machine-readable error code.
        message: Human-readable error description.

    Returns:
        dict[str, str]: Error payload.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "status": "error",
        "code": error_code,
        "message": message,
    }


def api_serialize_report(report: ServiceReport) -> dict[str, JsonValue]:
    """Serialize one typed report to its wire payload.

    Args:
        report: Report produced by the status service.

    Returns:
        dict[str, JsonValue]: JSON-serializable payload.

    Raises:
        TypeError: Raised when the report type is unknown.
    """

    if isinstance(report, StatusReport):
        return {
            "status": report.status,
            "timestamp": report.timestamp,
            "service": report.service,
        }
    if isinstance(report, RootReport):
        return {
            "message": report.message,
            "version": report.version,
            "environment": report.environment,
            "timestamp": report.timestamp,
        }
    if isinstance(report, InfoReport):
        return {
            "service": report.service,
            "version": report.version,
            "uptimeSeconds": report.uptime_seconds,
            "memoryStats": dict(report.memory_stats),
            "platformName": report.platform_name,
            "runtimeVersion": report.runtime_version,
            "timestamp": report.timestamp,
        }
    if isinstance(report, EchoEnvelope):
        return {
            "message": report.message,
            "received": report.received,
            "timestamp": report.timestamp,
        }
    raise TypeError(f"unsupported report type: {type(report).__name__}")
