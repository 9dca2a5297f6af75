from __future__ import annotations

import asyncio
from typing import Any

import pytest
from mcp import types
from mcp.server import Server
from pydantic import ValidationError

from tradernet_mcp.config import Settings, TradernetSettings
from tradernet_mcp.server.stdio import (
    ToolExecutionError,
    build_mcp_server,
    dispatch_tool_call,
    list_tool_definitions,
)
from tradernet_mcp.tools import ToolNotFoundError, create_registry
from tradernet_mcp.tradernet.client import TradernetConfigError


class _FakeClient:
    def __init__(self, error: Exception | None = None) -> None:
        self._error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def call(self, command: str, params: dict[str, Any] | None = None) -> Any:
        self.calls.append((command, params or {}))
        if self._error is not None:
            raise self._error
        return {"sessions": []}


def _build_settings() -> Settings:
    return Settings(tradernet=TradernetSettings(public_key="pub", private_key="priv"))


def test_tool_definitions_carry_input_schema() -> None:
    registry = create_registry(_build_settings(), client=_FakeClient())  # type: ignore[arg-type]

    tools = list_tool_definitions(registry)

    assert len(tools) == 12
    assert all(isinstance(tool, types.Tool) for tool in tools)
    place_order = next(tool for tool in tools if tool.name == "place_order")
    properties = place_order.inputSchema["properties"]
    assert properties["action"]["enum"] == ["buy", "buy_margin", "sell", "sell_short"]
    assert properties["expiration"]["default"] == "day"
    assert set(place_order.inputSchema["required"]) == {"instrument", "action", "order_type", "quantity"}


def test_dispatch_returns_text_content() -> None:
    client = _FakeClient()
    registry = create_registry(_build_settings(), client=client)  # type: ignore[arg-type]

    content = asyncio.run(dispatch_tool_call(registry, "get_security_sessions", {}))

    assert content == [types.TextContent(type="text", text='{\n  "sessions": []\n}')]
    assert client.calls == [("getSecuritySessions", {})]


def test_dispatch_raises_error_envelope_text() -> None:
    client = _FakeClient(error=TradernetConfigError("credentials missing"))
    registry = create_registry(_build_settings(), client=client)  # type: ignore[arg-type]

    with pytest.raises(ToolExecutionError) as exc_info:
        asyncio.run(dispatch_tool_call(registry, "get_portfolio", {}))

    assert str(exc_info.value) == "Error: credentials missing"


def test_dispatch_rejects_unknown_tool_and_bad_arguments() -> None:
    client = _FakeClient()
    registry = create_registry(_build_settings(), client=client)  # type: ignore[arg-type]

    with pytest.raises(ToolNotFoundError):
        asyncio.run(dispatch_tool_call(registry, "missing_tool", {}))
    with pytest.raises(ValidationError):
        asyncio.run(dispatch_tool_call(registry, "cancel_order", {"order_id": "abc"}))

    assert client.calls == []


def test_build_mcp_server_uses_configured_name() -> None:
    settings = _build_settings()
    settings.server.name = "tradernet-test"
    registry = create_registry(settings, client=_FakeClient())  # type: ignore[arg-type]

    server = build_mcp_server(registry, settings)

    assert isinstance(server, Server)
    assert server.name == "tradernet-test"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


def _sdk_call(server: Server, name: str, arguments: dict[str, Any]) -> types.CallToolResult:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = asyncio.run(handler(request))
    return result.root


def test_sdk_call_returns_success_content() -> None:
    settings = _build_settings()
    client = _FakeClient()
    server = build_mcp_server(create_registry(settings, client=client), settings)  # type: ignore[arg-type]

    result = _sdk_call(server, "get_security_sessions", {})

    assert not result.isError
    assert result.content[0].text == '{\n  "sessions": []\n}'
    assert client.calls == [("getSecuritySessions", {})]


def test_sdk_call_surfaces_error_envelope_text() -> None:
    settings = _build_settings()
    client = _FakeClient(error=TradernetConfigError("credentials missing"))
    server = build_mcp_server(create_registry(settings, client=client), settings)  # type: ignore[arg-type]

    result = _sdk_call(server, "get_portfolio", {})

    assert result.isError is True
    assert result.content[0].text == "Error: credentials missing"


def test_sdk_call_rejects_invalid_arguments_without_tool_call() -> None:
    settings = _build_settings()
    client = _FakeClient()
    server = build_mcp_server(create_registry(settings, client=client), settings)  # type: ignore[arg-type]

    result = _sdk_call(server, "place_order", {
        "instrument": "AAPL.US",
        "action": "buy",
        "order_type": "market",
        "quantity": True,
    })

    assert result.isError is True
    assert result.content[0].text
    assert client.calls == []
