"""HTTP client for the four status service endpoints."""

from __future__ import annotations

from typing import Any

import httpx

from .errors import (
    StatusClientConnectionError,
    StatusClientError,
    StatusClientResponseError,
    StatusClientTimeoutError,
)


class StatusServiceClient:
    """Synchronous client returning decoded JSON payloads."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 3.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize client.

        Args:
            base_url: Service base URL such as `http://localhost:3000`.
            timeout_seconds: Per-request timeout.
            transport: Optional httpx transport override.

        Raises:
            ValueError: Raised when arguments are invalid.
        """

        if not base_url.strip():
            raise ValueError("base_url must not be blank")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self._http_client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )

    def __enter__(self) -> "StatusServiceClient":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.client_close()

    def client_close(self) -> None:
        """Release pooled connections.

        Returns:
            None: Closes the underlying httpx client as side effect.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        self._http_client.close()

    def client_get_health(self) -> dict[str, Any]:
        """Call `GET /health`.

        Returns:
            dict[str, Any]: Decoded status report.

        Raises:
            StatusClientError: Raised on transport failure or non-200 response.
        """

        return self._client_request_json("GET", "/health")

    def client_get_root(self) -> dict[str, Any]:
        """Call `GET /`.

        Returns:
            dict[str, Any]: Decoded root report.

        Raises:
            StatusClientError: Raised on transport failure or non-200 response.
        """

        return self._client_request_json("GET", "/")

    def client_get_info(self) -> dict[str, Any]:
        """Call `GET /api/info`.

        Returns:
            dict[str, Any]: Decoded info report.

        Raises:
            StatusClientError: Raised on transport failure or non-200 response.
        """

        return self._client_request_json("GET", "/api/info")

    def client_post_echo(self, payload: Any) -> dict[str, Any]:
        """Call `POST /api/echo` with one JSON value.

        Args:
            payload: JSON-serializable value to reflect.

        Returns:
            dict[str, Any]: Decoded echo envelope.

        Raises:
            StatusClientError: Raised on transport failure or non-200 response.
        """

        return self._client_request_json("POST", "/api/echo", json=payload)

    def _client_request_json(self, method: str, path: str, **request_kwargs: Any) -> dict[str, Any]:
        try:
            response = self._http_client.request(method, path, **request_kwargs)
        except httpx.TimeoutException as error:
            raise StatusClientTimeoutError(f"{method} {path} timed out") from error
        except httpx.TransportError as error:
            raise StatusClientConnectionError(f"{method} {path} failed: {error}") from error

        if response.status_code != httpx.codes.OK:
            raise StatusClientResponseError(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        try:
            decoded = response.json()
        except ValueError as error:
            raise StatusClientResponseError(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
                body=response.text,
            ) from error
        if not isinstance(decoded, dict):
            raise StatusClientError(f"{method} {path} returned a non-object JSON payload")
        return decoded
