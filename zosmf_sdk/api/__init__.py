"""HTTP layer for z/OSMF.

Provides the connection structure, the httpx based client and its errors.
"""

from zosmf_sdk.api.client import BaseAPIClient
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

__all__ = [
    "BaseAPIClient",
    "ZOSConnection",
    "ZosmfResponse",
    "APIError",
    "APIConnectionError",
    "APITimeoutError",
    "APINotFoundError",
    "APIValidationError",
    "APIAuthenticationError",
    "APIServerError",
    "APIResponseParseError",
]
