"""Project-native typed exceptions for status service request failures."""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for request-scoped service failures.

    Attributes:
        status_code: HTTP status code the failure maps to.
        error_code: Stable machine-readable error code.
    """

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError, ValueError):
    """Caller supplied a request body that cannot be parsed."""

    status_code = 400
    error_code = "BAD_REQUEST"


class UnhandledServiceError(ServiceError, RuntimeError):
    """Unexpected fault raised while producing a response."""
