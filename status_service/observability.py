"""Logging helpers for the status service runtime."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from time import perf_counter
from typing import Any, Callable
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"

_LOGGER = logging.getLogger("status_service.request")

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class JSONLogFormatter(logging.Formatter):
    """Serialize log records as JSON with contextual metadata."""

    _RESERVED_KEYS = {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
        "color_message",
    }

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        for key, value in record.__dict__.items():
            if key in self._RESERVED_KEYS:
                continue
            payload[key] = value

        return json.dumps(payload, default=str)


def observability_configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Install one root handler for application and uvicorn loggers.

    Calling this again replaces the previously installed handler.

    Args:
        level: Root logger level name.
        json_output: Emit JSON lines when True, plain text otherwise.

    Returns:
        None: Configures process-wide logging as side effect.

    Raises:
        ValueError: Raised when the level name is unknown.
    """

    resolved_level = logging.getLevelName(level.upper())
    if not isinstance(resolved_level, int):
        raise ValueError(f"unknown log level: {level}")

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved_level)

    for uvicorn_logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assign a request id and log start and end of every request."""

    async def dispatch(self, request: Request, call_next: Callable):  # type: ignore[override]
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        _LOGGER.info(
            "request.start",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "length": request.headers.get("content-length", "0"),
            },
        )
        start = perf_counter()
        response = await call_next(request)
        duration_ms = (perf_counter() - start) * 1000.0
        _LOGGER.info(
            "request.end",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response


__all__ = [
    "JSONLogFormatter",
    "REQUEST_ID_HEADER",
    "RequestLoggingMiddleware",
    "observability_configure_logging",
]
