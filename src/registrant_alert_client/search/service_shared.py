"""Shared request preparation and response demultiplexing for sync/async services."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..core.errors import RegistrantAlertParseError
from ..core.models import RawResponse
from ..core.response_parsing import extract_api_error, parse_api_payload, parse_error_message
from .models import AdvancedSearchTerm, BasicSearchTerms, RegistrantAlertResponse
from .options import Option, SearchRequest, apply_options, new_search_request, response_format
from .parser import parse_registrant_alert_response
from .request import encode_request
from .validators import (
    validate_advanced_search_terms,
    validate_basic_search_terms,
    validate_options,
)


def _finalize(
    request: SearchRequest,
    options: Iterable[Option | None],
    *,
    force_json: bool,
) -> bytes:
    resolved = list(options)
    validate_options(resolved)
    if force_json:
        # The parsers only understand JSON, whatever format the caller asked for.
        resolved.append(response_format("json"))
    return encode_request(apply_options(request, resolved))


def prepare_basic_request(
    api_key: str,
    terms: BasicSearchTerms | None,
    options: Iterable[Option | None],
    *,
    purchase: bool,
    force_json: bool,
) -> bytes:
    validate_basic_search_terms(terms)
    request = new_search_request(api_key, basic_search_terms=terms, purchase=purchase)
    return _finalize(request, options, force_json=force_json)


def prepare_advanced_request(
    api_key: str,
    terms: Sequence[AdvancedSearchTerm] | None,
    options: Iterable[Option | None],
    *,
    purchase: bool,
    force_json: bool,
) -> bytes:
    validate_advanced_search_terms(terms)
    request = new_search_request(api_key, advanced_search_terms=terms, purchase=purchase)
    return _finalize(request, options, force_json=force_json)


def demultiplex_response(raw: RawResponse) -> RegistrantAlertResponse:
    """Split a response body into a parsed result or an error.

    Decode failures carry the raw response; errors reported by the service in
    the body do not.
    """

    payload = parse_api_payload(raw)
    try:
        result = parse_registrant_alert_response(payload)
        api_error = extract_api_error(payload)
    except (TypeError, ValueError) as exc:
        raise RegistrantAlertParseError(parse_error_message(exc), raw_response=raw) from exc

    if api_error is not None:
        raise api_error
    return result


__all__ = [
    "prepare_basic_request",
    "prepare_advanced_request",
    "demultiplex_response",
]
