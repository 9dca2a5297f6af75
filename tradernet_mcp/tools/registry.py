"""
描述: MCP 工具注册中心
主要功能:
    - 按实例管理工具注册 (无全局单例, 每个测试可独立构建)
    - 提供工具查找、参数校验、调用分发与元数据列表
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from tradernet_mcp.server.schema import ToolResult
from tradernet_mcp.tools.base import BaseTool


logger = logging.getLogger(__name__)


class ToolNotFoundError(LookupError):
    """请求的工具不存在或未启用"""
    pass


# region 工具注册中心
class ToolRegistry:
    """工具注册中心"""

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> BaseTool:
        if tool.name in self._tools:
            logger.warning("Tool %s already registered, overwriting", tool.name)
        self._tools[tool.name] = tool
        return tool

    def get(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def require(self, name: str) -> BaseTool:
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(f"Unknown tool: {name}")
        return tool

    def names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[dict[str, Any]]:
        """获取所有已注册工具的元数据"""
        return [tool.to_schema() for tool in self._tools.values()]

    def validate(self, name: str, arguments: dict[str, Any] | None) -> tuple[BaseTool, BaseModel]:
        tool = self.require(name)
        return tool, tool.validate(arguments)

    async def call(self, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """
        校验参数并执行工具

        抛出:
            ToolNotFoundError: 工具不存在
            pydantic.ValidationError: 参数不符合 schema (不发出任何网络请求)
        """
        tool, params = self.validate(name, arguments)
        logger.info("Calling tool %s", name, extra={"tool": name})
        return await tool.execute(params)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
# endregion
