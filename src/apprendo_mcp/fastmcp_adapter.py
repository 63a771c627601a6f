"""Adapters for exposing the catalogue tools via FastMCP."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from apprendo_mcp.catalog import BookCatalog
from apprendo_mcp.config import ServerSettings
from apprendo_mcp.errors import MCPError
from apprendo_mcp.routes import register_routes
from apprendo_mcp.server import MCPServer
from apprendo_mcp.tools import build_server


class ToolDefinitionAdapter(Tool):
    """Expose a dispatcher tool as a FastMCP tool."""

    def __init__(self, server: MCPServer, name: str) -> None:
        """Create a FastMCP tool wrapper for the tool registered as ``name``."""
        definition = server.get_tool(name)
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            tags=set(),
        )
        self._server = server

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Delegate to the shared dispatcher and convert its envelope."""
        try:
            result = self._server.run_tool(self.name, parameters=arguments)
        except MCPError as error:
            raise ToolError(error.message) from error
        return ToolResult(
            content=[
                TextContent(type="text", text=item["text"]) for item in result.content
            ]
        )


def to_fastmcp_tools(server: MCPServer) -> list[Tool]:
    """Wrap every registered tool for FastMCP."""
    return [
        ToolDefinitionAdapter(server, tool["name"]) for tool in server.list_tools()
    ]


def build_fastmcp_app(
    catalog: BookCatalog, settings: ServerSettings | None = None
) -> tuple[FastMCP, MCPServer]:
    """Create a FastMCP server instance with all catalogue tools registered."""
    settings = settings or ServerSettings()
    app = FastMCP(
        name=settings.server_name,
        version=settings.server_version,
        instructions=(
            "Read-only book catalogue: list books and fetch summaries, details, "
            "tables of contents and chapter summaries."
        ),
    )
    server = build_server(catalog)
    for tool in to_fastmcp_tools(server):
        app.add_tool(tool)
    register_routes(app, catalog, settings)
    return app, server
