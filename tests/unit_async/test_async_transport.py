from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import httpx
import pytest

from registrant_alert_client.core.async_transport import AsyncTransport
from registrant_alert_client.core.errors import RegistrantAlertTransportError
from tests.shared.payloads import PURCHASE_BODY
from tests.shared.transport import (
    FailingCloseStream,
    RecordingHandler,
    TrackingStream,
    TruncatedStream,
    async_http_client,
    build_config,
)


class _HangingStream(httpx.AsyncByteStream):
    def __init__(self):
        self.started = asyncio.Event()
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield b'{"domains'
        self.started.set()
        await asyncio.Event().wait()

    async def aclose(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_async_post_sends_headers_and_returns_body():
    handler = RecordingHandler(200, b'{"domainsCount":2}')
    transport = AsyncTransport(build_config(), client=async_http_client(handler))

    raw = await transport.post(b'{"apiKey":"k"}')

    request = handler.requests[0]
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"] == "registrant-alert-python/1.0.0"
    assert raw.body == b'{"domainsCount":2}'


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("handler", "prefix", "expected_body"),
    [
        (
            RecordingHandler(error=httpx.ConnectError("connection refused")),
            "cannot execute request: ",
            None,
        ),
        (
            RecordingHandler(200, stream=TruncatedStream(PURCHASE_BODY[:-10])),
            "cannot read response: ",
            PURCHASE_BODY[:-10],
        ),
        (
            RecordingHandler(200, stream=FailingCloseStream(b"{}")),
            "cannot close response: ",
            b"{}",
        ),
    ],
    ids=["execute", "read", "close"],
)
async def test_async_post_error_matrix(handler, prefix, expected_body):
    transport = AsyncTransport(build_config(), client=async_http_client(handler))

    with pytest.raises(RegistrantAlertTransportError) as exc_info:
        await transport.post(b"{}")

    assert str(exc_info.value).startswith(prefix)
    if expected_body is None:
        assert exc_info.value.raw_response is None
    else:
        assert exc_info.value.raw_response.body == expected_body


@pytest.mark.asyncio
async def test_async_post_releases_response_stream():
    stream = TrackingStream(b"{}")
    transport = AsyncTransport(build_config(), client=async_http_client(RecordingHandler(200, stream=stream)))

    await transport.post(b"{}")

    assert stream.closed is True


@pytest.mark.asyncio
async def test_async_post_cancellation_releases_stream():
    stream = _HangingStream()
    transport = AsyncTransport(build_config(), client=async_http_client(RecordingHandler(200, stream=stream)))

    task = asyncio.create_task(transport.post(b"{}"))
    await stream.started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert stream.closed is True


@pytest.mark.asyncio
async def test_async_transport_can_initialize_and_close_with_real_httpx_client():
    transport = AsyncTransport(build_config())
    await transport.close()
    with pytest.raises(RegistrantAlertTransportError, match="transport is already closed"):
        await transport.post(b"{}")
