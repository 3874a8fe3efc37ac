"""Registrant Alert search entry points over an async transport."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.async_transport import AsyncTransport
from ..core.models import RawResponse
from ..core.response_parsing import check_response_status
from .models import AdvancedSearchTerm, BasicSearchTerms, RegistrantAlertResponse
from .options import Option
from .service_shared import (
    demultiplex_response,
    prepare_advanced_request,
    prepare_basic_request,
)


class AsyncRegistrantAlertService:
    """Single-request async executor for basic and advanced searches."""

    def __init__(self, transport: AsyncTransport, *, api_key: str) -> None:
        self._transport = transport
        self._api_key = api_key

    async def basic_preview(
        self,
        terms: BasicSearchTerms | None,
        *options: Option,
    ) -> tuple[int, RawResponse]:
        body = prepare_basic_request(
            self._api_key, terms, options, purchase=False, force_json=True
        )
        raw = await self._transport.post(body)
        return demultiplex_response(raw).domains_count, raw

    async def basic_purchase(
        self,
        terms: BasicSearchTerms | None,
        *options: Option,
    ) -> tuple[RegistrantAlertResponse, RawResponse]:
        body = prepare_basic_request(
            self._api_key, terms, options, purchase=True, force_json=True
        )
        raw = await self._transport.post(body)
        return demultiplex_response(raw), raw

    async def basic_raw_data(
        self,
        terms: BasicSearchTerms | None,
        *options: Option,
    ) -> RawResponse:
        body = prepare_basic_request(
            self._api_key, terms, options, purchase=True, force_json=False
        )
        raw = await self._transport.post(body)
        check_response_status(raw)
        return raw

    async def advanced_preview(
        self,
        terms: Sequence[AdvancedSearchTerm] | None,
        *options: Option,
    ) -> tuple[int, RawResponse]:
        body = prepare_advanced_request(
            self._api_key, terms, options, purchase=False, force_json=True
        )
        raw = await self._transport.post(body)
        return demultiplex_response(raw).domains_count, raw

    async def advanced_purchase(
        self,
        terms: Sequence[AdvancedSearchTerm] | None,
        *options: Option,
    ) -> tuple[RegistrantAlertResponse, RawResponse]:
        body = prepare_advanced_request(
            self._api_key, terms, options, purchase=True, force_json=True
        )
        raw = await self._transport.post(body)
        return demultiplex_response(raw), raw

    async def advanced_raw_data(
        self,
        terms: Sequence[AdvancedSearchTerm] | None,
        *options: Option,
    ) -> RawResponse:
        body = prepare_advanced_request(
            self._api_key, terms, options, purchase=True, force_json=False
        )
        raw = await self._transport.post(body)
        check_response_status(raw)
        return raw


__all__ = [
    "AsyncRegistrantAlertService",
]
