"""
描述: MCP 工具基类定义
主要功能:
    - 定义 ToolContext 上下文对象 (依赖注入配置与客户端)
    - 定义 BaseTool 抽象基类: 参数模型、远端命令、统一响应信封
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel, StrictFloat, StrictInt

from tradernet_mcp.config import Settings
from tradernet_mcp.server.schema import ToolResult
from tradernet_mcp.tradernet.client import TradernetClient


logger = logging.getLogger(__name__)

# 数值参数保留调用方传入的类型, 整数价格序列化后仍为整数
Number = Union[StrictInt, StrictFloat]


# region 工具上下文与基类
@dataclass
class ToolContext:
    """工具执行上下文 (依赖注入)"""
    settings: Settings
    client: TradernetClient


class EmptyParams(BaseModel):
    """无参数工具的参数模型"""
    pass


class BaseTool:
    """
    MCP 工具基类

    子类声明:
        name: 工具名
        description: 面向助手的工具说明
        command: Tradernet 远端命令
        Params: pydantic 参数模型 (即工具的参数 schema)
    """
    name: str = ""
    description: str = ""
    command: str = ""
    Params: type[BaseModel] = EmptyParams

    def __init__(self, context: ToolContext) -> None:
        self.context = context
        if not self.name:
            raise ValueError(f"{self.__class__.__name__} must define 'name' attribute")

    @property
    def parameters(self) -> dict[str, Any]:
        return self.Params.model_json_schema()

    def validate(self, arguments: dict[str, Any] | None) -> BaseModel:
        """校验调用参数, 失败时抛出 pydantic.ValidationError"""
        return self.Params.model_validate(arguments or {})

    def resolve_command(self, params: BaseModel) -> str:
        return self.command

    def build_payload(self, params: BaseModel) -> dict[str, Any]:
        """将已校验参数映射为远端命令参数"""
        return {}

    async def run(self, params: BaseModel) -> Any:
        command = self.resolve_command(params)
        payload = self.build_payload(params)
        return await self.context.client.call(command, payload)

    async def execute(self, params: BaseModel) -> ToolResult:
        """
        执行工具逻辑并封装响应

        参数:
            params: 已校验的参数模型

        返回:
            成功或失败信封, 不向外抛出异常
        """
        try:
            data = await self.run(params)
        except Exception as exc:
            logger.warning(
                "Tool %s failed: %s",
                self.name,
                exc,
                extra={"tool": self.name},
            )
            return ToolResult.failure(str(exc))
        return ToolResult.success(data)

    def to_schema(self) -> dict[str, Any]:
        """返回 MCP 工具描述 (name / description / inputSchema)"""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameters,
        }
# endregion
