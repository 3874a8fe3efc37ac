"""Public package exports for Registrant Alert API client."""

from .async_client import AsyncRegistrantAlertClient
from .client import RegistrantAlertClient
from .config import RegistrantAlertClientConfig
from .core.errors import (
    RegistrantAlertApiError,
    RegistrantAlertArgumentError,
    RegistrantAlertClientClosedError,
    RegistrantAlertConfigError,
    RegistrantAlertError,
    RegistrantAlertParseError,
    RegistrantAlertStatusError,
    RegistrantAlertTransportError,
)
from .core.models import RawResponse

__all__ = [
    "RegistrantAlertClient",
    "AsyncRegistrantAlertClient",
    "RegistrantAlertClientConfig",
    "RawResponse",
    "RegistrantAlertError",
    "RegistrantAlertArgumentError",
    "RegistrantAlertConfigError",
    "RegistrantAlertClientClosedError",
    "RegistrantAlertTransportError",
    "RegistrantAlertParseError",
    "RegistrantAlertStatusError",
    "RegistrantAlertApiError",
]
