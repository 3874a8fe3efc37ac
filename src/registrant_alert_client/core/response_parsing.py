"""Response body decoding and error detection shared by sync/async services."""

from __future__ import annotations

import json
from collections.abc import Mapping

from .errors import RegistrantAlertApiError, RegistrantAlertParseError, RegistrantAlertStatusError
from .messages import normalize_messages
from .models import RawResponse


def parse_error_message(exc: BaseException) -> str:
    return f"cannot parse response: {exc}"


def parse_api_payload(raw: RawResponse) -> dict[str, object]:
    """Decode the response body as a JSON object."""

    try:
        payload = json.loads(raw.body)
    except ValueError as exc:
        raise RegistrantAlertParseError(parse_error_message(exc), raw_response=raw) from exc

    if not isinstance(payload, dict):
        raise RegistrantAlertParseError(
            parse_error_message("response JSON root must be an object"),
            raw_response=raw,
        )
    return payload


def extract_api_error(payload: Mapping[str, object]) -> RegistrantAlertApiError | None:
    """Return the error embedded in the body, if any.

    A non-zero ``code`` or a non-null ``messages`` marks an error regardless of
    the HTTP status.
    """

    code = payload.get("code")
    if code is None:
        code = 0
    if isinstance(code, bool) or not isinstance(code, int):
        raise ValueError("code must be an integer")

    messages = normalize_messages(payload.get("messages"))
    if messages is None and code == 0:
        return None
    return RegistrantAlertApiError(code, messages or ())


def check_response_status(raw: RawResponse, *, message: str = "") -> None:
    if raw.is_success:
        return
    raise RegistrantAlertStatusError(raw.status_code, message=message, raw_response=raw)


__all__ = [
    "parse_error_message",
    "parse_api_payload",
    "extract_api_error",
    "check_response_status",
]
