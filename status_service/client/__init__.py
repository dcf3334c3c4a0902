"""Client package for calling a running status service."""

from .errors import (
    StatusClientConnectionError,
    StatusClientError,
    StatusClientResponseError,
    StatusClientTimeoutError,
)
from .http_client import StatusServiceClient
from .smoke import SmokeTestReport, SmokeTestStep, client_run_healthcheck, client_run_smoke_test

__all__ = [
    "SmokeTestReport",
    "SmokeTestStep",
    "StatusClientConnectionError",
    "StatusClientError",
    "StatusClientResponseError",
    "StatusClientTimeoutError",
    "StatusServiceClient",
    "client_run_healthcheck",
    "client_run_smoke_test",
]
