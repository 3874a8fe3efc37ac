from __future__ import annotations

import httpx
import pytest

from registrant_alert_client.core.errors import RegistrantAlertTransportError
from registrant_alert_client.core.transport import SyncTransport
from tests.shared.payloads import PURCHASE_BODY
from tests.shared.transport import (
    BASE_URL,
    FailingCloseStream,
    RecordingHandler,
    TrackingStream,
    TruncatedStream,
    build_config,
    sync_http_client,
)


def test_post_sends_json_headers_and_body():
    handler = RecordingHandler(200, b'{"domainsCount":1}')
    transport = SyncTransport(build_config(), client=sync_http_client(handler))

    raw = transport.post(b'{"apiKey":"k"}')

    request = handler.requests[0]
    assert request.method == "POST"
    assert str(request.url) == BASE_URL
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"] == "registrant-alert-python/1.0.0"
    assert request.content == b'{"apiKey":"k"}'
    assert raw.status_code == 200
    assert raw.body == b'{"domainsCount":1}'


def test_post_does_not_inspect_status_code():
    handler = RecordingHandler(500, b"<html>down</html>")
    transport = SyncTransport(build_config(), client=sync_http_client(handler))

    raw = transport.post(b"{}")

    assert raw.status_code == 500
    assert raw.is_success is False
    assert raw.text == "<html>down</html>"


def test_post_wraps_connection_errors():
    handler = RecordingHandler(error=httpx.ConnectError("connection refused"))
    transport = SyncTransport(build_config(), client=sync_http_client(handler))

    with pytest.raises(RegistrantAlertTransportError) as exc_info:
        transport.post(b"{}")

    assert str(exc_info.value) == "cannot execute request: connection refused"
    assert exc_info.value.raw_response is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_post_reports_truncated_body_with_captured_bytes():
    partial = PURCHASE_BODY[:-10]
    handler = RecordingHandler(
        200,
        headers={"Content-Length": str(len(PURCHASE_BODY))},
        stream=TruncatedStream(partial),
    )
    transport = SyncTransport(build_config(), client=sync_http_client(handler))

    with pytest.raises(RegistrantAlertTransportError) as exc_info:
        transport.post(b"{}")

    assert str(exc_info.value).startswith("cannot read response: ")
    assert exc_info.value.raw_response is not None
    assert exc_info.value.raw_response.body == partial
    assert exc_info.value.raw_response.http_response.is_closed


def test_post_reports_close_failure_after_successful_read():
    stream = FailingCloseStream(b'{"domainsCount":4}')
    handler = RecordingHandler(200, stream=stream)
    transport = SyncTransport(build_config(), client=sync_http_client(handler))

    with pytest.raises(RegistrantAlertTransportError) as exc_info:
        transport.post(b"{}")

    assert str(exc_info.value) == "cannot close response: close failed"
    assert exc_info.value.raw_response.body == b'{"domainsCount":4}'
    assert stream.close_calls == 1


def test_post_releases_response_stream():
    stream = TrackingStream(b'{"domainsCount":4}')
    handler = RecordingHandler(200, stream=stream)
    transport = SyncTransport(build_config(), client=sync_http_client(handler))

    raw = transport.post(b"{}")

    assert stream.closed is True
    assert raw.http_response.is_closed


def test_close_leaves_caller_client_open():
    http_client = sync_http_client(RecordingHandler(200, b"{}"))
    transport = SyncTransport(build_config(), client=http_client)

    transport.close()

    assert http_client.is_closed is False
    http_client.close()


def test_close_owned_client_and_reject_further_posts():
    transport = SyncTransport(build_config())
    transport.close()
    transport.close()
    with pytest.raises(RegistrantAlertTransportError, match="transport is already closed"):
        transport.post(b"{}")
