from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from tradernet_mcp.config import Settings, TradernetSettings
from tradernet_mcp.tradernet.client import (
    MISSING_CREDENTIALS_MESSAGE,
    TradernetAPIError,
    TradernetClient,
    TradernetConfigError,
    encode_params,
)
from tradernet_mcp.tradernet.signer import sign


class _FixedClockClient(TradernetClient):
    def _timestamp(self) -> str:
        return "1700000000"


class _Recorder:
    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None) -> None:
        self._response = response or httpx.Response(200, json={"result": "ok"})
        self._error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._response


def _build_settings(public_key: str = "pub", private_key: str = "priv") -> Settings:
    return Settings(
        tradernet=TradernetSettings(
            public_key=public_key,
            private_key=private_key,
            api_url="https://api.example.test/api",
        )
    )


def _client(recorder: _Recorder, settings: Settings | None = None) -> TradernetClient:
    return _FixedClockClient(settings or _build_settings(), transport=httpx.MockTransport(recorder))


def test_call_posts_signed_json_to_command_url() -> None:
    recorder = _Recorder()
    client = _client(recorder)

    result = asyncio.run(client.call("getSecurityInfo", {"ticker": "AAPL.US", "sup": True}))

    assert result == {"result": "ok"}
    assert len(recorder.requests) == 1
    request = recorder.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.example.test/api/getSecurityInfo"

    body = request.content.decode("utf-8")
    assert body == '{"ticker":"AAPL.US","sup":true}'
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["X-NtApi-PublicKey"] == "pub"
    assert request.headers["X-NtApi-Timestamp"] == "1700000000"
    assert request.headers["X-NtApi-Sig"] == sign("priv", body + "1700000000")


def test_call_with_no_params_sends_empty_object() -> None:
    recorder = _Recorder()
    asyncio.run(_client(recorder).call("getOPQ"))

    assert recorder.requests[0].content == b"{}"


def test_encode_params_is_compact_and_keeps_unicode() -> None:
    assert encode_params({"text": "Сбербанк", "n": 1}) == '{"text":"Сбербанк","n":1}'


def test_missing_credentials_fail_before_network() -> None:
    recorder = _Recorder()
    client = _client(recorder, _build_settings(public_key="", private_key="priv"))

    with pytest.raises(TradernetConfigError) as exc_info:
        asyncio.run(client.call("getOPQ", {}))

    assert str(exc_info.value) == MISSING_CREDENTIALS_MESSAGE
    assert "TRADERNET_PUBLIC_KEY" in str(exc_info.value)
    assert "TRADERNET_PRIVATE_KEY" in str(exc_info.value)
    assert recorder.requests == []


def test_http_error_status_raises_api_error() -> None:
    recorder = _Recorder(response=httpx.Response(500, text="internal failure"))

    with pytest.raises(TradernetAPIError) as exc_info:
        asyncio.run(_client(recorder).call("getOPQ", {}))

    assert exc_info.value.status_code == 500
    assert str(exc_info.value) == "HTTP 500: internal failure"
    assert len(recorder.requests) == 1


def test_invalid_json_response_raises_parse_error() -> None:
    recorder = _Recorder(response=httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(TradernetAPIError) as exc_info:
        asyncio.run(_client(recorder).call("getOPQ", {}))

    assert str(exc_info.value).startswith("Invalid JSON response")
    assert exc_info.value.detail == "<html>oops</html>"


def test_transport_error_is_wrapped_and_not_retried() -> None:
    recorder = _Recorder(error=httpx.ConnectError("connection refused"))

    with pytest.raises(TradernetAPIError) as exc_info:
        asyncio.run(_client(recorder).call("putTradeOrder", {"qty": 1}))

    assert "connection refused" in str(exc_info.value)
    assert exc_info.value.status_code is None
    assert len(recorder.requests) == 1


def test_response_body_returned_as_is() -> None:
    payload = [{"id": 1}, {"id": 2}]
    recorder = _Recorder(response=httpx.Response(200, content=json.dumps(payload).encode("utf-8")))

    assert asyncio.run(_client(recorder).call("getSecuritySessions", {})) == payload
