"""
描述: MCP 工具注册入口
主要功能:
    - 汇总 account、orders、market、alerts、raw 工具
    - create_registry 工厂: 每次调用构建独立的注册中心
"""

from __future__ import annotations

import logging

from tradernet_mcp.config import Settings
from tradernet_mcp.tools.account import GetPortfolioTool, GetSecuritySessionsTool, GetUserDataTool
from tradernet_mcp.tools.alerts import AddPriceAlertTool, DeletePriceAlertTool
from tradernet_mcp.tools.base import BaseTool, ToolContext
from tradernet_mcp.tools.market import GetQuotesHistoryTool, GetSecurityInfoTool, SearchTickersTool
from tradernet_mcp.tools.orders import CancelOrderTool, PlaceOrderTool, SetStopLossTakeProfitTool
from tradernet_mcp.tools.raw import RawApiCallTool
from tradernet_mcp.tools.registry import ToolNotFoundError, ToolRegistry
from tradernet_mcp.tradernet.client import TradernetClient


logger = logging.getLogger(__name__)

TOOL_CLASSES: tuple[type[BaseTool], ...] = (
    GetUserDataTool,
    GetPortfolioTool,
    PlaceOrderTool,
    CancelOrderTool,
    SetStopLossTakeProfitTool,
    GetSecurityInfoTool,
    GetQuotesHistoryTool,
    SearchTickersTool,
    AddPriceAlertTool,
    DeletePriceAlertTool,
    GetSecuritySessionsTool,
    RawApiCallTool,
)


def create_registry(settings: Settings, client: TradernetClient | None = None) -> ToolRegistry:
    """
    构建工具注册中心

    参数:
        settings: 全局配置对象
        client: Tradernet 客户端, 缺省时按 settings 新建

    返回:
        已注册工具的 ToolRegistry; tools.enabled 非空时仅注册其中列出的工具
    """
    context = ToolContext(settings=settings, client=client or TradernetClient(settings))
    enabled = set(settings.tools.enabled)
    known = {tool_cls.name for tool_cls in TOOL_CLASSES}
    for name in sorted(enabled - known):
        logger.warning("Enabled tool %s is not provided by this server, ignoring", name)

    registry = ToolRegistry()
    for tool_cls in TOOL_CLASSES:
        if enabled and tool_cls.name not in enabled:
            continue
        registry.register(tool_cls(context))
    return registry


__all__ = [
    "TOOL_CLASSES",
    "BaseTool",
    "ToolContext",
    "ToolNotFoundError",
    "ToolRegistry",
    "create_registry",
]
