"""Book records and the read-only catalogue loaded at startup.

The catalogue is read once from a JSON document shaped ``{"books": [...]}``.
A missing or malformed document never prevents the server from starting; it
produces an empty catalogue and an error on the operational log instead.
"""

from __future__ import annotations

import json
import logging
import pathlib
from collections.abc import Iterable, Iterator
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PrivateAttr

logger = logging.getLogger(__name__)

LISTING_FIELDS: tuple[str, ...] = (
    "book_id",
    "title",
    "author",
    "category",
    "subtitle",
    "summary",
    "length",
    "release_date",
    "tier",
    "has_summary",
    "has_chapter_summaries",
    "has_table_of_contents",
)


def to_text(value: object) -> str:
    """Render a scalar the way a JSON client would print it.

    ``None`` becomes ``""``, booleans are lowercase and integral floats drop
    their fractional part, so ``3.0`` and ``3`` both render as ``"3"``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _text_or_passthrough(value: object) -> object:
    if value is None or isinstance(value, (bool, int, float)):
        return to_text(value)
    return value


def _flag(value: object) -> object:
    return False if value is None else value


Text = Annotated[str, BeforeValidator(_text_or_passthrough)]
Flag = Annotated[bool, BeforeValidator(_flag)]


class Book(BaseModel):
    """A single catalogue entry.

    Scalar fields tolerate ``null`` and numbers. The record as authored is kept
    so that the detail view reproduces its keys and their order.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    book_id: Text
    title: Text = ""
    author: Text = ""
    category: Text = ""
    subtitle: Text = ""
    summary: Text = ""
    length: Text = ""
    release_date: Text = ""
    tier: Text = ""
    has_summary: Flag = False
    has_chapter_summaries: Flag = False
    has_table_of_contents: Flag = False
    table_of_contents: dict[str, Text] | None = None
    chapter_summaries: dict[str, Text] | None = None

    _record: dict[str, Any] | None = PrivateAttr(default=None)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Book:
        """Validate ``record`` and remember it for the detail view."""
        book = cls.model_validate(record)
        book._record = dict(record)
        return book

    def listing(self) -> dict[str, Any]:
        """Return the reduced view used by ``list_books``."""
        return self.model_dump(include=set(LISTING_FIELDS))

    def overview(self) -> dict[str, str]:
        """Return the identifier, title, author and summary."""
        return {
            "book_id": self.book_id,
            "title": self.title,
            "author": self.author,
            "summary": self.summary,
        }

    def details(self) -> dict[str, Any]:
        """Return the record as authored, keys in source order."""
        if self._record is not None:
            return dict(self._record)
        return self.model_dump(exclude_unset=True)

    def contents(self) -> dict[str, str]:
        """Return the table of contents, empty when the record has none."""
        return dict(self.table_of_contents or {})

    def chapter_summary(self, chapter: str) -> str | None:
        """Return the summary stored under ``chapter`` if any."""
        return (self.chapter_summaries or {}).get(chapter)


class CatalogDocument(BaseModel):
    """Top-level shape of the catalogue JSON document."""

    books: list[dict[str, Any]]


class BookCatalog:
    """Immutable, ordered collection of books."""

    def __init__(self, books: Iterable[Book] = ()) -> None:
        """Snapshot the provided books in their given order."""
        self._books: tuple[Book, ...] = tuple(books)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    @property
    def books(self) -> tuple[Book, ...]:
        """Books in catalogue order."""
        return self._books

    def find(self, book_id: object) -> Book | None:
        """Locate the first book whose identifier equals ``book_id``.

        Comparison is strict: a non-string ``book_id`` never matches.
        """
        for book in self._books:
            if book.book_id == book_id:
                return book
        return None

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> BookCatalog:
        """Build a catalogue from raw JSON-like records."""
        return cls(Book.from_record(record) for record in records)


def load_catalog(path: str | pathlib.Path) -> BookCatalog:
    """Load the catalogue from ``path``.

    Args:
        path: Location of the JSON document holding a ``books`` array.

    Returns:
        The loaded catalogue, or an empty one if the file is missing or
        cannot be parsed.

    """
    source = pathlib.Path(path)
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
        document = CatalogDocument.model_validate(raw)
        catalog = BookCatalog.from_records(document.books)
    except (OSError, ValueError) as exc:
        logger.error("Failed to load books from %s: %s", source, exc)
        return BookCatalog()

    logger.info("Loaded %d books", len(catalog))
    return catalog
