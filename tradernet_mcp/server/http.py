"""
HTTP API for MCP tools (local debugging surface).
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Response
from pydantic import ValidationError

from tradernet_mcp.config import Settings
from tradernet_mcp.server.schema import ToolRequest
from tradernet_mcp.tools.registry import ToolNotFoundError, ToolRegistry


def create_router(registry: ToolRegistry, settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok", "service": settings.server.name}

    @router.get("/favicon.ico")
    async def favicon() -> Response:
        return Response(status_code=204)

    @router.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @router.get("/mcp/tools")
    async def list_tools() -> dict[str, Any]:
        return {"tools": registry.list_tools()}

    @router.post("/mcp/tools/{tool_name}")
    async def call_tool(tool_name: str, request: ToolRequest) -> dict[str, Any]:
        try:
            tool, params = registry.validate(tool_name, request.params)
        except ToolNotFoundError:
            raise HTTPException(status_code=404, detail="Tool not found")
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=json.loads(exc.json()))

        result = await tool.execute(params)
        return result.to_dict()

    return router


def create_app(registry: ToolRegistry, settings: Settings) -> FastAPI:
    app = FastAPI(title="Tradernet MCP Server", version=settings.server.version)
    app.include_router(create_router(registry, settings))
    return app
