"""Request model and option applicators.

An option is a callable taking the request being built and returning an
updated copy. Options are applied in the order they are passed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import date

from .models import AdvancedSearchTerm, BasicSearchTerms, format_date

MODE_PREVIEW = "preview"
MODE_PURCHASE = "purchase"


@dataclass(slots=True, frozen=True)
class SearchRequest:
    """Logical body of a Registrant Alert API request."""

    api_key: str
    basic_search_terms: BasicSearchTerms | None = None
    advanced_search_terms: tuple[AdvancedSearchTerm, ...] | None = None
    since_date: str = ""
    mode: str = MODE_PREVIEW
    punycode: bool = True
    response_format: str = "json"
    created_date_from: str = ""
    created_date_to: str = ""
    updated_date_from: str = ""
    updated_date_to: str = ""
    expired_date_from: str = ""
    expired_date_to: str = ""


Option = Callable[[SearchRequest], SearchRequest]


def new_search_request(
    api_key: str,
    *,
    basic_search_terms: BasicSearchTerms | None = None,
    advanced_search_terms: Sequence[AdvancedSearchTerm] | None = None,
    purchase: bool = False,
) -> SearchRequest:
    return SearchRequest(
        api_key=api_key,
        basic_search_terms=basic_search_terms,
        advanced_search_terms=(
            tuple(advanced_search_terms) if advanced_search_terms is not None else None
        ),
        mode=MODE_PURCHASE if purchase else MODE_PREVIEW,
    )


def apply_options(request: SearchRequest, options: Iterable[Option]) -> SearchRequest:
    for option in options:
        request = option(request)
    return request


def response_format(output_format: str) -> Option:
    """Response output format ``json`` | ``xml``. Default: ``json``."""

    def _apply(request: SearchRequest) -> SearchRequest:
        return replace(request, response_format=output_format)

    return _apply


def since_date(value: date) -> Option:
    """Search through activities discovered since the given date."""

    return _date_option("since_date", value)


def punycode(enabled: bool) -> Option:
    """Encode domain names in the response to punycode. Default: true."""

    def _apply(request: SearchRequest) -> SearchRequest:
        return replace(request, punycode=enabled)

    return _apply


def created_date_from(value: date) -> Option:
    return _date_option("created_date_from", value)


def created_date_to(value: date) -> Option:
    return _date_option("created_date_to", value)


def updated_date_from(value: date) -> Option:
    return _date_option("updated_date_from", value)


def updated_date_to(value: date) -> Option:
    return _date_option("updated_date_to", value)


def expired_date_from(value: date) -> Option:
    return _date_option("expired_date_from", value)


def expired_date_to(value: date) -> Option:
    return _date_option("expired_date_to", value)


def _date_option(field_name: str, value: date) -> Option:
    rendered = format_date(value)

    def _apply(request: SearchRequest) -> SearchRequest:
        return replace(request, **{field_name: rendered})

    return _apply


__all__ = [
    "MODE_PREVIEW",
    "MODE_PURCHASE",
    "SearchRequest",
    "Option",
    "new_search_request",
    "apply_options",
    "response_format",
    "since_date",
    "punycode",
    "created_date_from",
    "created_date_to",
    "updated_date_from",
    "updated_date_to",
    "expired_date_from",
    "expired_date_to",
]
