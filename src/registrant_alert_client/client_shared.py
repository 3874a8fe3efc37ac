"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import RegistrantAlertClientConfig
from .core.errors import RegistrantAlertConfigError


def validate_client_config(config: RegistrantAlertClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise RegistrantAlertConfigError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
