"""Request-boundary guard converting uncaught faults into HTTP 500 responses."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from status_service.service import UnhandledServiceError

from .responses import api_error_payload

_LOGGER = logging.getLogger(__name__)


class RequestBoundaryMiddleware(BaseHTTPMiddleware):
    """Keep one failing request from taking down the listening process."""

    async def dispatch(self, request: Request, call_next: Callable):  # type: ignore[override]
        try:
            return await call_next(request)
        except Exception as error:  # pylint: disable=broad-exception-caught
            _LOGGER.exception(
                "request.unhandled_error",
                extra={
                    "request_id": getattr(request.state, "request_id", None),
                    "method": request.method,
                    "path": request.url.path,
                    "error": str(error),
                },
            )
            return JSONResponse(
                content=api_error_payload(UnhandledServiceError.error_code, "internal server error"),
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
