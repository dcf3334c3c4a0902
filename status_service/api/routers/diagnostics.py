"""Diagnostics API router composition for introspection and echo endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from status_service.service import StatusService

from ..responses import api_render_service_result

_ECHO_REQUEST_BODY_SCHEMA = {
    "requestBody": {
        "required": False,
        "content": {"application/json": {"schema": {"description": "Any JSON value"}}},
    }
}


def api_create_diagnostics_router(status_service: StatusService) -> APIRouter:
    """Create diagnostics router with info and echo endpoints.

    Args:
        status_service: Service producing info and echo reports.

    Returns:
        APIRouter: Router exposing `/api/info` and `/api/echo`.

    Raises:
        ValueError: Raised when status_service is invalid.
    """

    if status_service is None:
        raise ValueError("status_service must not be None")

    router = APIRouter(prefix="/api", tags=["diagnostics"])

    @router.get("/info")
    def api_info() -> JSONResponse:
        """Return uptime, memory and platform details of the running process.

        Returns:
            JSONResponse: Info report payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        return api_render_service_result(status_service.service_get_info())

    @router.post("/echo", openapi_extra=_ECHO_REQUEST_BODY_SCHEMA)
    async def api_echo(request: Request) -> JSONResponse:
        """Reflect the request JSON body back to the caller.

        The raw body is parsed here instead of through request validation so
        malformed JSON maps to HTTP 400 and any top-level JSON value is accepted.

        Args:
            request: Incoming request.

        Returns:
            JSONResponse: Echo envelope, or HTTP 400 when the body is not JSON.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        raw_body = await request.body()
        return api_render_service_result(status_service.service_echo(raw_body))

    return router
