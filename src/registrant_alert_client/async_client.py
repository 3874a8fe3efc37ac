"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType

import httpx

from .client_shared import validate_client_config
from .config import RegistrantAlertClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import RegistrantAlertClientClosedError
from .core.models import RawResponse
from .search.async_service import AsyncRegistrantAlertService
from .search.models import AdvancedSearchTerm, BasicSearchTerms, RegistrantAlertResponse
from .search.options import Option


class AsyncRegistrantAlertClient:
    """Public async Registrant Alert API client."""

    def __init__(
        self,
        api_key: str,
        *,
        config: RegistrantAlertClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = config or RegistrantAlertClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config, client=http_client)
        self._service = AsyncRegistrantAlertService(self._transport, api_key=api_key)
        self._closed = False

    async def basic_preview(
        self,
        terms: BasicSearchTerms | None,
        *options: Option,
    ) -> tuple[int, RawResponse]:
        self._ensure_open()
        return await self._service.basic_preview(terms, *options)

    async def basic_purchase(
        self,
        terms: BasicSearchTerms | None,
        *options: Option,
    ) -> tuple[RegistrantAlertResponse, RawResponse]:
        self._ensure_open()
        return await self._service.basic_purchase(terms, *options)

    async def basic_raw_data(
        self,
        terms: BasicSearchTerms | None,
        *options: Option,
    ) -> RawResponse:
        self._ensure_open()
        return await self._service.basic_raw_data(terms, *options)

    async def advanced_preview(
        self,
        terms: Sequence[AdvancedSearchTerm] | None,
        *options: Option,
    ) -> tuple[int, RawResponse]:
        self._ensure_open()
        return await self._service.advanced_preview(terms, *options)

    async def advanced_purchase(
        self,
        terms: Sequence[AdvancedSearchTerm] | None,
        *options: Option,
    ) -> tuple[RegistrantAlertResponse, RawResponse]:
        self._ensure_open()
        return await self._service.advanced_purchase(terms, *options)

    async def advanced_raw_data(
        self,
        terms: Sequence[AdvancedSearchTerm] | None,
        *options: Option,
    ) -> RawResponse:
        self._ensure_open()
        return await self._service.advanced_raw_data(terms, *options)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RegistrantAlertClientClosedError("AsyncRegistrantAlertClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncRegistrantAlertClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncRegistrantAlertClient",
]
