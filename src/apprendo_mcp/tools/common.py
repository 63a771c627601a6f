"""Shared helpers for MCP tools."""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field

from apprendo_mcp.catalog import Book, BookCatalog
from apprendo_mcp.errors import raise_book_not_found
from apprendo_mcp.tooling import ToolParameters


class BookIdParams(ToolParameters):
    """Parameters for tools keyed by a single book."""

    book_id: Any = Field(
        description="The unique identifier for the book",
        json_schema_extra={"type": "string"},
    )


def require_book(catalog: BookCatalog, book_id: object) -> Book:
    """Retrieve a book or raise an MCP-friendly not-found error."""
    book = catalog.find(book_id)
    if book is None:
        raise_book_not_found(book_id)
    return book


def to_json_text(payload: dict[str, Any]) -> str:
    """Serialize a payload as compact JSON text."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
