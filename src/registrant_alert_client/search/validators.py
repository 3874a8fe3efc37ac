"""Argument validation run before any request is built."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..core.errors import RegistrantAlertArgumentError
from .models import AdvancedSearchTerm, BasicSearchTerms
from .options import Option

LIMIT_OF_SEARCH_TERMS = 4


def validate_basic_search_terms(terms: BasicSearchTerms | None) -> None:
    if terms is None:
        raise RegistrantAlertArgumentError("basicSearchTerms.include", "is required.")

    include = terms.include
    if not include or len(include) > LIMIT_OF_SEARCH_TERMS:
        raise RegistrantAlertArgumentError(
            "basicSearchTerms.include",
            "must have between 1 and 4 items.",
        )

    if terms.exclude is not None and len(terms.exclude) > LIMIT_OF_SEARCH_TERMS:
        raise RegistrantAlertArgumentError(
            "basicSearchTerms.exclude",
            "must have between 0 and 4 items.",
        )


def validate_advanced_search_terms(terms: Sequence[AdvancedSearchTerm] | None) -> None:
    if terms is None:
        raise RegistrantAlertArgumentError("advancedSearchTerms", "is required.")
    if len(terms) == 0 or len(terms) > LIMIT_OF_SEARCH_TERMS:
        raise RegistrantAlertArgumentError(
            "advancedSearchTerms",
            "must have between 1 and 4 items.",
        )

    for index, term in enumerate(terms):
        if term.field == "":
            raise RegistrantAlertArgumentError(f"advancedSearchTerms.{index}.Field", "is required.")
        if term.term == "":
            raise RegistrantAlertArgumentError(f"advancedSearchTerms.{index}.Term", "is required.")


def validate_options(options: Iterable[Option | None]) -> None:
    for option in options:
        if option is None:
            raise RegistrantAlertArgumentError("Option", "can not be nil")


__all__ = [
    "LIMIT_OF_SEARCH_TERMS",
    "validate_basic_search_terms",
    "validate_advanced_search_terms",
    "validate_options",
]
