"""Registrant Alert search package."""

from .models import (
    Action,
    AdvancedSearchTerm,
    BasicSearchTerms,
    DomainItem,
    RegistrantAlertResponse,
)
from .options import (
    Option,
    created_date_from,
    created_date_to,
    expired_date_from,
    expired_date_to,
    punycode,
    response_format,
    since_date,
    updated_date_from,
    updated_date_to,
)

__all__ = [
    "BasicSearchTerms",
    "AdvancedSearchTerm",
    "Action",
    "DomainItem",
    "RegistrantAlertResponse",
    "Option",
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
