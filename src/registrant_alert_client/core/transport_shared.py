"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import RegistrantAlertClientConfig

MEDIA_TYPE = "application/json"


def build_default_headers(config: RegistrantAlertClientConfig) -> Mapping[str, str]:
    return {
        "Content-Type": MEDIA_TYPE,
        "Accept": MEDIA_TYPE,
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: RegistrantAlertClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def execute_error_message(exc: BaseException) -> str:
    return f"cannot execute request: {_describe(exc)}"


def read_error_message(exc: BaseException) -> str:
    return f"cannot read response: {_describe(exc)}"


def close_error_message(exc: BaseException) -> str:
    return f"cannot close response: {_describe(exc)}"


def _describe(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


__all__ = [
    "MEDIA_TYPE",
    "build_default_headers",
    "build_default_timeout",
    "execute_error_message",
    "read_error_message",
    "close_error_message",
]
