"""Wire serialization of search requests."""

from __future__ import annotations

import json

from .models import AdvancedSearchTerm, BasicSearchTerms
from .options import SearchRequest

_OPTIONAL_FIELD_MAP: tuple[tuple[str, str], ...] = (
    ("sinceDate", "since_date"),
    ("mode", "mode"),
    ("punycode", "punycode"),
    ("responseFormat", "response_format"),
    ("createdDateFrom", "created_date_from"),
    ("createdDateTo", "created_date_to"),
    ("updatedDateFrom", "updated_date_from"),
    ("updatedDateTo", "updated_date_to"),
    ("expiredDateFrom", "expired_date_from"),
    ("expiredDateTo", "expired_date_to"),
)


def _basic_terms_payload(terms: BasicSearchTerms) -> dict[str, list[str]]:
    payload: dict[str, list[str]] = {}
    if terms.include:
        payload["include"] = list(terms.include)
    if terms.exclude:
        payload["exclude"] = list(terms.exclude)
    return payload


def _advanced_term_payload(term: AdvancedSearchTerm) -> dict[str, object]:
    payload: dict[str, object] = {"field": term.field, "term": term.term}
    if term.exact_match:
        payload["exactMatch"] = True
    return payload


def build_request_payload(request: SearchRequest) -> dict[str, object]:
    """Build the JSON object sent to the service; empty values are omitted."""

    payload: dict[str, object] = {"apiKey": request.api_key}
    if request.basic_search_terms is not None:
        payload["basicSearchTerms"] = _basic_terms_payload(request.basic_search_terms)
    if request.advanced_search_terms:
        payload["advancedSearchTerms"] = [
            _advanced_term_payload(term) for term in request.advanced_search_terms
        ]
    for wire_name, field_name in _OPTIONAL_FIELD_MAP:
        value = getattr(request, field_name)
        if value == "" or value is False:
            continue
        payload[wire_name] = value
    return payload


def encode_request(request: SearchRequest) -> bytes:
    return json.dumps(
        build_request_payload(request),
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")


__all__ = [
    "build_request_payload",
    "encode_request",
]
