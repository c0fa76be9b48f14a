"""Encoding helpers for z/OSMF URLs and auth headers."""

from __future__ import annotations

import base64
from urllib.parse import quote

from zosmf_sdk.api.connection import ZOSConnection
from zosmf_sdk.shared.exceptions import InvalidParameterError

# characters JavaScript's encodeURIComponent leaves alone (besides alphanumerics and -_.)
_URI_COMPONENT_SAFE = "!~*'()"


def encode_uri_component(text: str) -> str:
    """Percent-encode a single URL path segment.

    Raises:
        InvalidParameterError: when text is empty
    """
    if not text:
        raise InvalidParameterError("text not specified")
    return quote(text, safe=_URI_COMPONENT_SAFE)


def get_auth_encoding(connection: ZOSConnection) -> str:
    """Base64 of ``user:password`` for the Basic auth header."""
    raw = f"{connection.user}:{connection.password}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")
