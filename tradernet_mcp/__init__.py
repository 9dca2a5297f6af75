"""Tradernet MCP Server: exposes the Tradernet REST API as MCP tools."""

__version__ = "1.0.0"
