"""Project-native typed exceptions for status service client failures."""

from __future__ import annotations


class StatusClientError(Exception):
    """Base exception for client-side status service failures."""


class StatusClientConnectionError(StatusClientError, ConnectionError):
    """Transport-level connectivity failure while calling the service."""


class StatusClientTimeoutError(StatusClientError, TimeoutError):
    """Request exceeded the configured client timeout."""


class StatusClientResponseError(StatusClientError, RuntimeError):
    """Service answered with an unexpected status code or a non-JSON body.

    Attributes:
        status_code: HTTP status code of the response.
        body: Raw response text for diagnostics.
    """

    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
