"""Tools for listing books and reading their catalogue records."""

from __future__ import annotations

from apprendo_mcp.catalog import BookCatalog
from apprendo_mcp.tooling import ToolDefinition, ToolParameters
from apprendo_mcp.tools.common import BookIdParams, require_book, to_json_text


class ListBooksParams(ToolParameters):
    """Parameters for list_books (none)."""


def list_books_tool(catalog: BookCatalog) -> ToolDefinition:
    """Create the list_books tool definition."""

    def handler(_: dict[str, object]) -> str:
        return "\n".join(to_json_text(book.listing()) for book in catalog)

    return ToolDefinition(
        name="list_books",
        description="List all available books with their basic information",
        parameters_model=ListBooksParams,
        handler=handler,
    )


def get_book_summary_tool(catalog: BookCatalog) -> ToolDefinition:
    """Create the get_book_summary tool definition."""

    def handler(raw_params: dict[str, object]) -> str:
        params = BookIdParams.model_validate(raw_params)
        book = require_book(catalog, params.book_id)
        return to_json_text(book.overview())

    return ToolDefinition(
        name="get_book_summary",
        description="Get the main summary for a book",
        parameters_model=BookIdParams,
        handler=handler,
    )


def get_book_details_tool(catalog: BookCatalog) -> ToolDefinition:
    """Create the get_book_details tool definition."""

    def handler(raw_params: dict[str, object]) -> str:
        params = BookIdParams.model_validate(raw_params)
        book = require_book(catalog, params.book_id)
        return to_json_text(book.details())

    return ToolDefinition(
        name="get_book_details",
        description="Get detailed information about a specific book",
        parameters_model=BookIdParams,
        handler=handler,
    )
