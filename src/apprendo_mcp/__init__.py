"""Model Context Protocol server for a read-only book catalogue."""

from apprendo_mcp.catalog import Book, BookCatalog, load_catalog
from apprendo_mcp.errors import MCPError
from apprendo_mcp.server import MCPServer, ToolResult
from apprendo_mcp.tooling import ToolDefinition, ToolParameters

__all__ = [
    "Book",
    "BookCatalog",
    "MCPError",
    "MCPServer",
    "ToolDefinition",
    "ToolParameters",
    "ToolResult",
    "load_catalog",
]
