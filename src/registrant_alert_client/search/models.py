"""Search terms and response models."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

DATE_FORMAT = "%Y-%m-%d"


def format_date(value: date | None) -> str:
    """Render a calendar day as ``YYYY-MM-DD``; ``None`` renders as ``""``."""

    if value is None:
        return ""
    # strftime does not zero-pad years below 1000 on every platform.
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date(text: str) -> date | None:
    """Parse ``YYYY-MM-DD``; the empty string means unset and yields ``None``."""

    if text == "":
        return None
    return datetime.strptime(text, DATE_FORMAT).date()


def _as_str_tuple(values: Sequence[str] | None, *, name: str) -> tuple[str, ...] | None:
    if values is None:
        return None
    if isinstance(values, str):
        raise TypeError(f"{name} must be a sequence of str, not str")
    if not isinstance(values, Sequence):
        raise TypeError(f"{name} must be Sequence[str]")
    normalized: list[str] = []
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"{name} entries must be str")
        normalized.append(value)
    return tuple(normalized)


@dataclass(slots=True, frozen=True)
class BasicSearchTerms:
    """Include terms must all appear in the registrant details, exclude terms must not."""

    include: Sequence[str] | None
    exclude: Sequence[str] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "include", _as_str_tuple(self.include, name="include"))
        object.__setattr__(self, "exclude", _as_str_tuple(self.exclude, name="exclude"))


@dataclass(slots=True, frozen=True)
class AdvancedSearchTerm:
    """Field-qualified search term, e.g. ``RegistrantContact.Organization``.

    With ``exact_match`` false the field may contain the term as a substring.
    """

    field: str
    term: str
    exact_match: bool = False


class Action(StrEnum):
    ADDED = "added"
    UPDATED = "updated"
    DROPPED = "dropped"
    DISCOVERED = "discovered"


@dataclass(slots=True, frozen=True)
class DomainItem:
    domain_name: str
    action: Action | str
    date: date | None


@dataclass(slots=True, frozen=True)
class RegistrantAlertResponse:
    domains_list: tuple[DomainItem, ...] | list[DomainItem]
    domains_count: int

    def __post_init__(self) -> None:
        if isinstance(self.domains_list, tuple):
            return
        object.__setattr__(self, "domains_list", tuple(self.domains_list))


__all__ = [
    "DATE_FORMAT",
    "format_date",
    "parse_date",
    "BasicSearchTerms",
    "AdvancedSearchTerm",
    "Action",
    "DomainItem",
    "RegistrantAlertResponse",
]
