"""Shared test fixtures."""

from __future__ import annotations

import json
import pathlib
from typing import Any

import pytest

from apprendo_mcp.catalog import BookCatalog


@pytest.fixture()
def sample_records() -> list[dict[str, Any]]:
    """Provide a small catalogue covering full and sparse records."""
    return [
        {
            "book_id": "b1",
            "title": "T",
            "author": "A",
            "category": "Science",
            "subtitle": "A subtitle",
            "summary": "A short summary.",
            "length": "4h 10m",
            "release_date": "2020-01-01",
            "tier": "free",
            "has_summary": True,
            "has_chapter_summaries": True,
            "has_table_of_contents": True,
            "table_of_contents": {
                "Chapter 1": "Beginnings",
                "Chapter 2": "Endings",
            },
            "chapter_summaries": {"1": "intro", "3": "third chapter"},
        },
        {
            "book_id": "b2",
            "title": "Second",
            "author": "B",
            "category": "History",
            "subtitle": "",
            "summary": "Another summary.",
            "length": "2h",
            "release_date": "2019-05-05",
            "tier": "premium",
            "has_summary": True,
            "has_chapter_summaries": False,
            "has_table_of_contents": False,
        },
    ]


@pytest.fixture()
def sample_catalog(sample_records: list[dict[str, Any]]) -> BookCatalog:
    """Catalogue built from :func:`sample_records`."""
    return BookCatalog.from_records(sample_records)


@pytest.fixture()
def books_file(
    tmp_path: pathlib.Path, sample_records: list[dict[str, Any]]
) -> pathlib.Path:
    """Write the sample records to a JSON document on disk."""
    path = tmp_path / "books.json"
    path.write_text(json.dumps({"books": sample_records}), encoding="utf-8")
    return path


@pytest.fixture()
def anyio_backend() -> str:
    """Run async tests on asyncio, which the keep-alive timer relies on."""
    return "asyncio"
