"""Base z/OSMF client with httpx synchronous implementation."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.api.exceptions import (
    APIAuthenticationError,
    APIConnectionError,
    APIError,
    APINotFoundError,
    APIResponseParseError,
    APIServerError,
    APITimeoutError,
    APIValidationError,
)
from zosmf_sdk.api.response import ZosmfResponse
from zosmf_sdk.config.settings import get_settings

T = TypeVar("T", bound=BaseModel)

X_CSRF_ZOSMF_HEADER = "X-CSRF-ZOSMF-HEADER"


class BaseAPIClient:
    """Base z/OSMF client with httpx synchronous implementation.

    Features:
        - Lazy initialization of httpx.Client
        - Context manager support for proper resource cleanup
        - Basic auth and the z/OSMF CSRF header on every request
        - Unified error handling with custom exceptions
        - Support for Pydantic response model validation

    Usage:
        ```python
        with BaseAPIClient(connection) as client:
            data = client._get("/zosmf/restjobs/jobs")
        ```
    """

    def __init__(
        self,
        connection: ZOSConnection,
        timeout: float | None = None,
        verify: bool | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            connection: z/OSMF host, port and credentials
            timeout: Request timeout in seconds (default: ZOSMF_TIMEOUT)
            verify: Verify the server certificate (default: ZOSMF_VERIFY_SSL)
        """
        settings = get_settings()
        self.connection = connection
        self.base_url = connection.base_url
        self.timeout = settings.zosmf_timeout if timeout is None else timeout
        self.verify = settings.zosmf_verify_ssl if verify is None else verify
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                verify=self.verify,
                auth=httpx.BasicAuth(self.connection.user, self.connection.password),
                headers=self._standard_headers(),
            )
        return self._client

    def _standard_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            X_CSRF_ZOSMF_HEADER: "true",
        }

    def close(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> BaseAPIClient:
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Context manager exit with proper cleanup."""
        self.close()

    def _handle_response_error(self, response: httpx.Response) -> None:
        """Handle HTTP error responses with appropriate exceptions.

        z/OSMF error bodies are JSON documents carrying ``rc``, ``reason``,
        ``category`` and ``message``.

        Raises:
            APINotFoundError: For 404 responses
            APIValidationError: For 400 responses
            APIAuthenticationError: For 401/403 responses
            APIServerError: For 5xx responses
            APIError: For other error responses
        """
        if response.is_success:
            return

        status_code = response.status_code
        try:
            error_detail = response.json().get("message", response.text)
        except Exception:
            error_detail = response.text

        logger.debug(f"z/OSMF status code {status_code}: {error_detail}")

        if status_code == 404:
            raise APINotFoundError(f"Resource not found: {error_detail}")
        elif status_code == 400:
            raise APIValidationError(f"Validation error: {error_detail}")
        elif status_code in (401, 403):
            raise APIAuthenticationError(
                f"Authentication failed ({status_code}): {error_detail}", status_code
            )
        elif status_code >= 500:
            raise APIServerError(f"Server error ({status_code}): {error_detail}", status_code)
        else:
            raise APIError(f"API error ({status_code}): {error_detail}", status_code)

    def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Execute an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Resource path (e.g., "/zosmf/restjobs/jobs")
            params: Query parameters
            json: JSON body for POST/PUT requests
            content: Text body for PUT requests
            headers: Extra headers for this request only

        Returns:
            The successful httpx Response

        Raises:
            APIConnectionError: When connection fails
            APITimeoutError: When request times out
            APIError: For other API errors
        """
        logger.debug(f"{method} {self.base_url}{path}")
        kwargs: dict[str, Any] = {"method": method, "url": path, "params": params}
        if json is not None:
            kwargs["json"] = json
        if content is not None:
            kwargs["content"] = content
        if headers:
            kwargs["headers"] = headers
        try:
            response = self.client.request(**kwargs)
            self._handle_response_error(response)
            return response
        except httpx.TimeoutException as e:
            raise APITimeoutError(f"Request timeout: {path}") from e
        except httpx.ConnectError as e:
            raise APIConnectionError(
                f"Connection failed: {self.base_url}{path}"
            ) from e
        except APIError:
            raise
        except httpx.HTTPError as e:
            raise APIError(f"HTTP error: {e}") from e

    def _parse_json(self, response: httpx.Response, path: str) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise APIResponseParseError(
                f"Invalid JSON returned by {path}", response.status_code
            ) from e

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Execute a request and return the parsed JSON body (None when empty)."""
        response = self._send(
            method, path, params=params, json=json, content=content, headers=headers
        )
        return self._parse_json(response, path)

    def _validate(self, data: Any, response_model: type[T] | None) -> Any:
        if response_model is not None and isinstance(data, dict):
            return response_model.model_validate(data)
        return data

    def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        response_model: type[T] | None = None,
    ) -> Any:
        """Execute a GET request.

        Args:
            path: Resource path
            params: Query parameters
            response_model: Optional Pydantic model for response validation

        Returns:
            Parsed response (validated model if response_model provided)
        """
        data = self._request("GET", path, params=params)
        return self._validate(data, response_model)

    def _get_text(self, path: str, params: dict[str, Any] | None = None) -> str:
        """Execute a GET request and return the body as text."""
        response = self._send("GET", path, params=params, headers={"Accept": "text/plain"})
        return response.text

    def _put(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        response_model: type[T] | None = None,
    ) -> Any:
        """Execute a PUT request with a JSON body."""
        data = self._request("PUT", path, params=params, json=json, headers=headers)
        return self._validate(data, response_model)

    def _put_text(
        self,
        path: str,
        text: str,
        headers: dict[str, str] | None = None,
        response_model: type[T] | None = None,
    ) -> Any:
        """Execute a PUT request with a plain text body."""
        request_headers = {"Content-Type": "text/plain; charset=UTF-8"}
        if headers:
            request_headers.update(headers)
        data = self._request("PUT", path, content=text, headers=request_headers)
        return self._validate(data, response_model)

    def _put_raw(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ZosmfResponse:
        """Execute a PUT request and return the raw response."""
        return ZosmfResponse.from_httpx(self._send("PUT", path, json=json, headers=headers))

    def _delete(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ZosmfResponse:
        """Execute a DELETE request and return the raw response."""
        return ZosmfResponse.from_httpx(
            self._send("DELETE", path, params=params, headers=headers)
        )
