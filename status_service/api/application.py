"""FastAPI application factory for the status service.

This module defines API application composition: routes, request-boundary
guard, request logging and lifecycle logging.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from status_service.config import AppSettings
from status_service.observability import RequestLoggingMiddleware
from status_service.service import StatusService

from .middleware import RequestBoundaryMiddleware
from .responses import api_render_service_result
from .routers import api_create_diagnostics_router, api_create_health_router

_LOGGER = logging.getLogger(__name__)


def create_api_application(settings: AppSettings, status_service: StatusService) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        status_service: Service producing all endpoint reports.

    Returns:
        FastAPI: Framework application instance with all routes registered.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if status_service is None:
        raise ValueError("status_service must not be None")

    @asynccontextmanager
    async def api_lifespan(_application: FastAPI) -> AsyncIterator[None]:
        _LOGGER.info(
            "service.startup",
            extra={
                "service": settings.service_name,
                "host": settings.application_host,
                "port": settings.application_port,
                "environment": settings.environment_name,
            },
        )
        yield
        _LOGGER.info(
            "service.shutdown",
            extra={
                "service": settings.service_name,
                "uptime_seconds": status_service.context.context_uptime_seconds(),
            },
        )

    application = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        lifespan=api_lifespan,
    )
    application.state.status_service = status_service

    @application.get("/", tags=["foundation"])
    def foundation_index() -> JSONResponse:
        """Return welcome message, version and environment.

        Returns:
            JSONResponse: Root report payload.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        return api_render_service_result(status_service.service_get_root())

    application.include_router(api_create_health_router(status_service=status_service))
    application.include_router(api_create_diagnostics_router(status_service=status_service))

    # Last added runs first: logging wraps the boundary guard so 500s are logged with their status.
    application.add_middleware(RequestBoundaryMiddleware)
    application.add_middleware(RequestLoggingMiddleware)

    return application
