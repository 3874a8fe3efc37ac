"""Sync HTTP transport: one POST per call, body captured as bytes."""

from __future__ import annotations

import logging

import httpx

from ..config import RegistrantAlertClientConfig
from .errors import RegistrantAlertTransportError
from .models import RawResponse
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    close_error_message,
    execute_error_message,
    read_error_message,
)

logger = logging.getLogger("registrant_alert_client")


class SyncTransport:
    """Synchronous transport for Registrant Alert API."""

    def __init__(
        self,
        config: RegistrantAlertClientConfig,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = config.base_url
        self._headers = build_default_headers(config)
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=build_default_timeout(config))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def post(self, body: bytes) -> RawResponse:
        if self._closed:
            raise RegistrantAlertTransportError("transport is already closed")

        logger.debug("request start url=%s body_bytes=%s", self._url, len(body))
        try:
            request = self._client.build_request(
                "POST",
                self._url,
                content=body,
                headers=self._headers,
            )
            response = self._client.send(request, stream=True)
        except Exception as exc:
            raise RegistrantAlertTransportError(execute_error_message(exc)) from exc

        buffer = bytearray()
        error: Exception | None = None
        on_close = False
        try:
            for chunk in response.iter_bytes():
                buffer.extend(chunk)
        except Exception as exc:
            # iter_bytes closes the response itself once the stream is drained.
            error, on_close = exc, response.is_closed
        finally:
            close_error = _release(response)
        if error is None and close_error is not None:
            error, on_close = close_error, True

        raw = RawResponse.capture(response, bytes(buffer))
        if error is not None:
            message = close_error_message(error) if on_close else read_error_message(error)
            raise RegistrantAlertTransportError(message, raw_response=raw) from error

        logger.debug(
            "response received url=%s http_status=%s body_bytes=%s",
            self._url,
            raw.status_code,
            len(raw.body),
        )
        return raw


def _release(response: httpx.Response) -> Exception | None:
    try:
        response.close()
    except Exception as exc:
        return exc
    return None


__all__ = [
    "SyncTransport",
]
