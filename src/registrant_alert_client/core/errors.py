"""Error types raised by the client."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import RawResponse


class RegistrantAlertError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        raw_response: "RawResponse | None" = None,
    ) -> None:
        super().__init__(message)
        self.raw_response = raw_response


class RegistrantAlertArgumentError(RegistrantAlertError):
    """Invalid argument; raised before any request is sent."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f'invalid argument: "{name}" {message}')
        self.name = name
        self.message = message


class RegistrantAlertConfigError(RegistrantAlertError):
    """Invalid client configuration."""


class RegistrantAlertClientClosedError(RegistrantAlertError):
    """Raised when client is used after close."""


class RegistrantAlertTransportError(RegistrantAlertError):
    """Network/transport-level failure."""


class RegistrantAlertParseError(RegistrantAlertError):
    """Response body could not be decoded."""


class RegistrantAlertStatusError(RegistrantAlertError):
    """Non-2xx HTTP status on the raw data path."""

    def __init__(
        self,
        status_code: int,
        *,
        message: str = "",
        raw_response: "RawResponse | None" = None,
    ) -> None:
        text = f"API failed with status code: {status_code}"
        if message:
            text = f"{text} ({message})"
        super().__init__(text, raw_response=raw_response)
        self.status_code = status_code
        self.message = message


class RegistrantAlertApiError(RegistrantAlertError):
    """Error reported by the service inside the response body."""

    def __init__(self, code: int, messages: Sequence[str]) -> None:
        self.code = code
        self.messages = tuple(messages)
        super().__init__(f"API error: [{code}] [{' '.join(self.messages)}]")


__all__ = [
    "RegistrantAlertError",
    "RegistrantAlertArgumentError",
    "RegistrantAlertConfigError",
    "RegistrantAlertClientClosedError",
    "RegistrantAlertTransportError",
    "RegistrantAlertParseError",
    "RegistrantAlertStatusError",
    "RegistrantAlertApiError",
]
