"""
Generic escape hatch: call any Tradernet command with JSON-encoded params.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, Field

from tradernet_mcp.tools.base import BaseTool


logger = logging.getLogger(__name__)


class RawApiCallParams(BaseModel):
    command: str = Field(description="API command name")
    params: str = Field(default="{}", description="JSON string of parameters")
    use_v2: bool = Field(
        default=False,
        description="Use API v2 endpoint (/api/v2/cmd/) instead of v1",
    )


class RawApiCallTool(BaseTool):
    name = "raw_api_call"
    description = (
        "Make a raw API call to any Tradernet command. "
        "Use this for commands not covered by other tools."
    )
    Params = RawApiCallParams

    def resolve_command(self, params: RawApiCallParams) -> str:
        if params.use_v2:
            # v2 路由尚未接入, 与 v1 走同一端点
            logger.warning(
                "use_v2 requested for %s; calling the v1 endpoint",
                params.command,
                extra={"tool": self.name, "command": params.command},
            )
        return params.command

    def build_payload(self, params: RawApiCallParams) -> dict[str, Any]:
        try:
            parsed = json.loads(params.params)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in params: {exc}") from exc
        if not isinstance(parsed, dict):
            raise ValueError("Invalid JSON in params: expected a JSON object")
        return parsed
