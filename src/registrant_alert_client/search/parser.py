"""Parsers from Registrant Alert JSON payload into typed response objects.

Shape violations raise ``TypeError``/``ValueError``; callers map them to
``RegistrantAlertParseError`` together with the raw response.
"""

from __future__ import annotations

from collections.abc import Mapping

from .models import Action, DomainItem, RegistrantAlertResponse, parse_date

JsonObject = Mapping[str, object]

_ACTIONS = {action.value: action for action in Action}


def _optional_str(item: JsonObject, key: str) -> str:
    value = item.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


def _domain_item(item: object) -> DomainItem:
    if not isinstance(item, Mapping):
        raise TypeError("domainsList element must be an object")
    action = _optional_str(item, "action")
    return DomainItem(
        domain_name=_optional_str(item, "domainName"),
        action=_ACTIONS.get(action, action),
        date=parse_date(_optional_str(item, "date")),
    )


def _domains_count(payload: JsonObject) -> int:
    value = payload.get("domainsCount")
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("domainsCount must be an integer")
    return value


def parse_registrant_alert_response(payload: JsonObject) -> RegistrantAlertResponse:
    raw_list = payload.get("domainsList")
    if raw_list is None:
        raw_list = []
    if not isinstance(raw_list, list):
        raise TypeError("domainsList must be a list")
    return RegistrantAlertResponse(
        domains_list=tuple(_domain_item(item) for item in raw_list),
        domains_count=_domains_count(payload),
    )


__all__ = [
    "parse_registrant_alert_response",
]
