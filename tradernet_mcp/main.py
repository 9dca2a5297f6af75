"""
描述: Tradernet MCP Server 主入口
主要功能:
    - 命令行参数解析与配置加载
    - 日志初始化
    - 按传输方式启动: stdio (默认) 或 HTTP 调试接口
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Sequence

from dotenv import load_dotenv

from tradernet_mcp.config import Settings, load_settings
from tradernet_mcp.server.stdio import build_mcp_server, run_stdio
from tradernet_mcp.tools import create_registry
from tradernet_mcp.tools.registry import ToolRegistry
from tradernet_mcp.utils.logger import setup_logging


logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tradernet-mcp",
        description="Expose the Tradernet REST API as MCP tools.",
    )
    parser.add_argument("--config", help="YAML config path (default: $CONFIG_PATH or config.yaml)")
    parser.add_argument("--transport", choices=["stdio", "http"], help="Transport to serve on")
    parser.add_argument("--host", help="HTTP bind host (http transport only)")
    parser.add_argument("--port", type=int, help="HTTP bind port (http transport only)")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG or INFO")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """命令行参数优先于配置文件与环境变量"""
    settings = load_settings(args.config)
    if args.transport:
        settings.server.transport = args.transport
    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port
    if args.log_level:
        settings.logging.level = args.log_level
    return settings


async def serve_stdio(registry: ToolRegistry, settings: Settings) -> None:
    server = build_mcp_server(registry, settings)
    await run_stdio(server)


def serve_http(registry: ToolRegistry, settings: Settings) -> None:
    import uvicorn

    from tradernet_mcp.server.http import create_app

    uvicorn.run(
        create_app(registry, settings),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.logging.level.lower(),
        log_config=None,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """
    启动服务

    返回:
        进程退出码: 正常关闭为 0, 启动失败为 1
    """
    args = _parse_args(argv)
    load_dotenv()
    try:
        settings = build_settings(args)
        setup_logging(settings.logging)
        registry = create_registry(settings)
        logger.info(
            "Tradernet MCP server starting",
            extra={"transport": settings.server.transport},
        )
        if settings.server.transport == "http":
            serve_http(registry, settings)
        else:
            asyncio.run(serve_stdio(registry, settings))
    except KeyboardInterrupt:
        logger.info("Tradernet MCP server stopped")
        return 0
    except Exception as exc:
        logger.exception("Server error: %s", exc)
        return 1
    return 0
