"""Tools for reading a book's table of contents and chapter summaries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field

from apprendo_mcp.catalog import BookCatalog, to_text
from apprendo_mcp.errors import raise_mcp_error
from apprendo_mcp.tooling import ToolDefinition
from apprendo_mcp.tools.common import BookIdParams, require_book


class ChapterSummaryParams(BookIdParams):
    """Parameters for get_chapter_summary."""

    chapter_number: Any = Field(
        description="The chapter number to get summary for",
        json_schema_extra={"type": "integer"},
    )


def format_table_of_contents(contents: Mapping[str, str]) -> str:
    """Render each chapter as a heading followed by its description."""
    return "\n\n".join(
        f"## {chapter}\n{description}" for chapter, description in contents.items()
    )


def get_table_of_contents_tool(catalog: BookCatalog) -> ToolDefinition:
    """Create the get_table_of_contents tool definition."""

    def handler(raw_params: dict[str, object]) -> str:
        params = BookIdParams.model_validate(raw_params)
        book = require_book(catalog, params.book_id)
        return format_table_of_contents(book.contents())

    return ToolDefinition(
        name="get_table_of_contents",
        description="Get the table of contents for a book with chapter descriptions",
        parameters_model=BookIdParams,
        handler=handler,
    )


def get_chapter_summary_tool(catalog: BookCatalog) -> ToolDefinition:
    """Create the get_chapter_summary tool definition."""

    def handler(raw_params: dict[str, object]) -> str:
        params = ChapterSummaryParams.model_validate(raw_params)
        book = require_book(catalog, params.book_id)
        chapter = to_text(params.chapter_number)
        summary = book.chapter_summary(chapter)
        # An empty summary counts as missing.
        if not summary:
            raise_mcp_error(
                "NotFound",
                f"Chapter {chapter} not found for book {params.book_id}",
                {"book_id": params.book_id, "chapter_number": chapter},
            )
        return summary

    return ToolDefinition(
        name="get_chapter_summary",
        description="Get the summary for a specific chapter of a book",
        parameters_model=ChapterSummaryParams,
        handler=handler,
    )
