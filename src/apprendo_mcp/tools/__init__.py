"""Tool registration helpers for the book catalogue server."""

from __future__ import annotations

from apprendo_mcp.catalog import BookCatalog
from apprendo_mcp.server import MCPServer
from apprendo_mcp.tooling import ToolDefinition
from apprendo_mcp.tools.books import (
    get_book_details_tool,
    get_book_summary_tool,
    list_books_tool,
)
from apprendo_mcp.tools.chapters import (
    get_chapter_summary_tool,
    get_table_of_contents_tool,
)


def build_tools(catalog: BookCatalog) -> list[ToolDefinition]:
    """Instantiate all tool definitions against the provided catalogue."""
    return [
        list_books_tool(catalog),
        get_book_summary_tool(catalog),
        get_book_details_tool(catalog),
        get_table_of_contents_tool(catalog),
        get_chapter_summary_tool(catalog),
    ]


def build_server(catalog: BookCatalog) -> MCPServer:
    """Create a dispatcher with every catalogue tool registered."""
    server = MCPServer()
    server.register_tools(*build_tools(catalog))
    return server
