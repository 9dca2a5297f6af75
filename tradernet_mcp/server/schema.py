"""
描述: MCP 工具调用数据模型
主要功能:
    - 定义工具调用请求 (ToolRequest)
    - 定义统一响应信封 (ToolResult): 成功 / 失败两种形态
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, Field


# region 数据模型
class ToolRequest(BaseModel):
    """工具调用请求体 (HTTP 调试接口)"""
    params: dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """
    工具调用响应信封

    成功: {"content": [{"type": "text", "text": ...}]}
    失败: 同一结构并附带 "isError": true
    """
    content: list[TextContent]
    isError: bool | None = None

    @classmethod
    def success(cls, data: Any) -> "ToolResult":
        text = json.dumps(data, indent=2, ensure_ascii=False)
        return cls(content=[TextContent(text=text)])

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(content=[TextContent(text=f"Error: {message}")], isError=True)

    @property
    def is_error(self) -> bool:
        return bool(self.isError)

    @property
    def text(self) -> str:
        return self.content[0].text

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
# endregion
