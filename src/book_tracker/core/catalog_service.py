"""Core catalog service — orchestrates lookups and the add workflow.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~book_tracker.core.catalog_store.CatalogStore`
injected at construction time and is otherwise stateless: the
in-memory catalog is passed in on every call and never retained.

Guarantees
----------
* No ``print()`` and no direct filesystem access.
* The caller's sequence of books is never mutated.
* A rejected add leaves the catalog file untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from book_tracker.core.catalog_store import CatalogStore
from book_tracker.core.dispatch import classify_operation
from book_tracker.core.models import Book, OperationKind, OperationResult
from book_tracker.core.query import find_by_isbn, search_by_isbn, search_by_title, sort_by_title
from book_tracker.core.record_parser import parse_record
from book_tracker.exceptions import DuplicateISBNError

logger = logging.getLogger(__name__)


class CatalogService:
    """Run one operation against a loaded catalog.

    Parameters
    ----------
    store:
        Persists the catalog after a successful add.
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store: CatalogStore = store

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_book(self, payload: str, books: Sequence[Book], path: Path) -> Book:
        """Validate *payload*, insert it in title order, and persist.

        Parameters
        ----------
        payload:
            A ``title:author:isbn:copies`` string.
        books:
            The catalog as loaded from *path*.
        path:
            The catalog file to rewrite.

        Raises
        ------
        MalformedEntryError, InvalidISBNError
            When *payload* fails validation.
        DuplicateISBNError
            When the ISBN is already in the catalog.
        PersistenceError
            When the catalog cannot be written.
        """
        book = parse_record(payload)

        if find_by_isbn(book.isbn, books):
            raise DuplicateISBNError(
                f"Cannot add: ISBN already exists: {book.isbn}",
            )

        updated = sort_by_title([*books, book])
        self._store.save(path, updated)
        logger.debug("Added %r, catalog now holds %d book(s)", book.title, len(updated))
        return book

    def execute(
        self,
        argument: str,
        books: Sequence[Book],
        path: Path,
    ) -> OperationResult:
        """Classify *argument* and run the matching operation.

        Raises
        ------
        BookTrackerError
            Any error from the selected operation, unchanged.
        """
        kind = classify_operation(argument)
        logger.debug("Operation %r classified as %s", argument, kind.value)

        if kind is OperationKind.ISBN_SEARCH:
            match = search_by_isbn(argument, books)
            found: tuple[Book, ...] = (match,) if match is not None else ()
        elif kind is OperationKind.ADD:
            found = (self.add_book(argument, books, path),)
        else:
            found = tuple(search_by_title(argument, books))

        return OperationResult(kind=kind, query=argument, books=found)
