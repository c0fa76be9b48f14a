"""Custom exceptions for the z/OSMF HTTP client."""

from __future__ import annotations


class APIError(Exception):
    """Base exception for API-related errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class APIConnectionError(APIError):
    """Raised when connection to the z/OSMF server fails."""

    def __init__(self, message: str = "Failed to connect to z/OSMF server") -> None:
        super().__init__(message)


class APITimeoutError(APIError):
    """Raised when a z/OSMF request times out."""

    def __init__(self, message: str = "z/OSMF request timed out") -> None:
        super().__init__(message)


class APINotFoundError(APIError):
    """Raised when requested resource is not found (404)."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)


class APIValidationError(APIError):
    """Raised when request validation fails (400)."""

    def __init__(self, message: str = "Request validation failed") -> None:
        super().__init__(message, status_code=400)


class APIAuthenticationError(APIError):
    """Raised when credentials are rejected (401/403)."""

    def __init__(
        self, message: str = "Authentication failed", status_code: int = 401
    ) -> None:
        super().__init__(message, status_code=status_code)


class APIServerError(APIError):
    """Raised when server returns 5xx error."""

    def __init__(self, message: str = "z/OSMF server error", status_code: int = 500) -> None:
        super().__init__(message, status_code=status_code)


class APIResponseParseError(APIError):
    """Raised when a response body cannot be parsed."""

    def __init__(
        self, message: str = "Unable to parse response body", status_code: int | None = None
    ) -> None:
        super().__init__(message, status_code=status_code)
