"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType

import httpx

from .client_shared import validate_client_config
from .config import RegistrantAlertClientConfig
from .core.errors import RegistrantAlertClientClosedError
from .core.models import RawResponse
from .core.transport import SyncTransport
from .search.models import AdvancedSearchTerm, BasicSearchTerms, RegistrantAlertResponse
from .search.options import Option
from .search.service import RegistrantAlertService


class RegistrantAlertClient:
    """Public Registrant Alert API client.

    ``http_client`` lets callers supply their own ``httpx.Client`` (proxies,
    timeouts, mocks); it is never closed by this client.
    """

    def __init__(
        self,
        api_key: str,
        *,
        config: RegistrantAlertClientConfig | None = None,
        http_client: httpx.Client | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config or RegistrantAlertClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config, client=http_client)
        self._service = RegistrantAlertService(self._transport, api_key=api_key)
        self._closed = False

    def basic_preview(
        self,
        terms: BasicSearchTerms | None,
        *options: Option,
    ) -> tuple[int, RawResponse]:
        """Return the number of matching domains. No credits are deducted."""
        self._ensure_open()
        return self._service.basic_preview(terms, *options)

    def basic_purchase(
        self,
        terms: BasicSearchTerms | None,
        *options: Option,
    ) -> tuple[RegistrantAlertResponse, RawResponse]:
        self._ensure_open()
        return self._service.basic_purchase(terms, *options)

    def basic_raw_data(
        self,
        terms: BasicSearchTerms | None,
        *options: Option,
    ) -> RawResponse:
        """Return the unparsed response; ``response_format`` is sent as given."""
        self._ensure_open()
        return self._service.basic_raw_data(terms, *options)

    def advanced_preview(
        self,
        terms: Sequence[AdvancedSearchTerm] | None,
        *options: Option,
    ) -> tuple[int, RawResponse]:
        self._ensure_open()
        return self._service.advanced_preview(terms, *options)

    def advanced_purchase(
        self,
        terms: Sequence[AdvancedSearchTerm] | None,
        *options: Option,
    ) -> tuple[RegistrantAlertResponse, RawResponse]:
        self._ensure_open()
        return self._service.advanced_purchase(terms, *options)

    def advanced_raw_data(
        self,
        terms: Sequence[AdvancedSearchTerm] | None,
        *options: Option,
    ) -> RawResponse:
        self._ensure_open()
        return self._service.advanced_raw_data(terms, *options)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RegistrantAlertClientClosedError("RegistrantAlertClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "RegistrantAlertClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "RegistrantAlertClient",
]
