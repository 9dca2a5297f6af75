"""
描述: MCP stdio 传输适配
主要功能:
    - 将 ToolRegistry 绑定到 mcp SDK 的低层 Server (list_tools / call_tool)
    - 错误信封转换为协议层错误结果 (isError)
    - 通过 stdin/stdout 运行直到通道关闭
"""

from __future__ import annotations

from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from tradernet_mcp.config import Settings
from tradernet_mcp.tools.registry import ToolRegistry


class ToolExecutionError(RuntimeError):
    """工具返回错误信封, 由 SDK 转换为 isError 结果"""
    pass


def list_tool_definitions(registry: ToolRegistry) -> list[types.Tool]:
    return [
        types.Tool(
            name=schema["name"],
            description=schema["description"],
            inputSchema=schema["inputSchema"],
        )
        for schema in registry.list_tools()
    ]


async def dispatch_tool_call(
    registry: ToolRegistry,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """
    分发一次工具调用

    抛出:
        ToolNotFoundError / ValidationError: 由 SDK 作为协议层拒绝返回
        ToolExecutionError: 工具返回错误信封, 文本与信封一致
    """
    result = await registry.call(name, arguments)
    if result.is_error:
        raise ToolExecutionError(result.text)
    return [types.TextContent(type="text", text=item.text) for item in result.content]


# region Server 构建与运行
def build_mcp_server(registry: ToolRegistry, settings: Settings) -> Server:
    server: Server = Server(settings.server.name, version=settings.server.version)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return list_tool_definitions(registry)

    @server.call_tool()
    async def _call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await dispatch_tool_call(registry, name, arguments)

    return server


async def run_stdio(server: Server) -> None:
    """阻塞运行直到 stdio 通道关闭"""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
# endregion
