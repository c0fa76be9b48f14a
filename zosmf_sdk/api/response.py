"""Raw z/OSMF response holder."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel


class ZosmfResponse(BaseModel):
    """Status code, status text and body of a z/OSMF call.

    Used where the caller decides how to read the body, e.g. job delete
    which returns a job document when processed synchronously and nothing
    when processed asynchronously.
    """

    status_code: int
    status_text: str = ""
    body: Any = None

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> ZosmfResponse:
        body: Any
        if not response.content:
            body = None
        else:
            try:
                body = response.json()
            except ValueError:
                body = response.text
        return cls(
            status_code=response.status_code,
            status_text=response.reason_phrase,
            body=body,
        )
