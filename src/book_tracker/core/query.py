"""Pure lookup functions over an in-memory catalog.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.  Results keep catalog order.
"""

from __future__ import annotations

from collections.abc import Sequence

from book_tracker.core.models import Book
from book_tracker.exceptions import DuplicateISBNError


def find_by_isbn(isbn: str, books: Sequence[Book]) -> list[Book]:
    """Return every record whose ISBN equals *isbn* exactly."""
    return [book for book in books if book.isbn == isbn]


def search_by_isbn(isbn: str, books: Sequence[Book]) -> Book | None:
    """Look up the single record carrying *isbn*.

    Returns ``None`` when no record matches.

    Raises
    ------
    DuplicateISBNError
        When the catalog holds more than one record with *isbn*.  The
        duplicate is reported, never repaired.
    """
    matches = find_by_isbn(isbn, books)
    if len(matches) > 1:
        raise DuplicateISBNError(
            f"Multiple books found with ISBN: {isbn}",
            hint="The catalog file contains duplicate entries; fix it by hand.",
        )
    return matches[0] if matches else None


def search_by_title(keyword: str, books: Sequence[Book]) -> list[Book]:
    """Case-insensitive substring match against titles."""
    needle = keyword.casefold()
    return [book for book in books if needle in book.title.casefold()]


def sort_by_title(books: Sequence[Book]) -> list[Book]:
    """Stable sort by case-insensitive title."""
    return sorted(books, key=lambda book: book.title.casefold())
