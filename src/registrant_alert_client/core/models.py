"""Core response models."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx


@dataclass(slots=True, frozen=True)
class RawResponse:
    """HTTP response metadata with the body captured as bytes."""

    status_code: int
    headers: httpx.Headers
    body: bytes
    http_response: httpx.Response | None = field(default=None, repr=False, compare=False)

    @classmethod
    def capture(cls, response: httpx.Response, body: bytes) -> "RawResponse":
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            body=body,
            http_response=response,
        )

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


__all__ = [
    "RawResponse",
]
