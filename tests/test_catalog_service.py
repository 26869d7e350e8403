"""Tests for CatalogService (core/catalog_service.py).

The :class:`CatalogStore` dependency is **mocked** — no filesystem
access.  These tests verify:

* The add workflow: validation, uniqueness, title ordering, persistence.
* A rejected add never reaches the store.
* Persistence errors propagate unchanged.
* ``execute`` routes each argument shape to the right operation.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from book_tracker.core.catalog_service import CatalogService
from book_tracker.core.models import Book, OperationKind
from book_tracker.exceptions import (
    DuplicateISBNError,
    InvalidISBNError,
    MalformedEntryError,
    PersistenceError,
)

PATH = Path("books.txt")
HOBBIT = Book("The Hobbit", "J.R.R. Tolkien", "9780261102217", 3)
DUNE = Book("Dune", "Frank Herbert", "9780441013593", 5)


def _service() -> tuple[CatalogService, MagicMock]:
    store = MagicMock()
    return CatalogService(store), store


def _saved_books(store: MagicMock) -> list[Book]:
    store.save.assert_called_once()
    path, books = store.save.call_args.args
    assert path == PATH
    return list(books)


# ---------------------------------------------------------------------------
# add_book
# ---------------------------------------------------------------------------

class TestAddBook:
    def test_returns_new_record(self) -> None:
        svc, _ = _service()
        added = svc.add_book("Dune:Frank Herbert:9780441013593:5", [HOBBIT], PATH)
        assert added == DUNE

    def test_saves_sorted_by_title(self) -> None:
        svc, store = _service()
        svc.add_book("Dune:Frank Herbert:9780441013593:5", [HOBBIT], PATH)
        assert _saved_books(store) == [DUNE, HOBBIT]

    def test_sort_is_case_insensitive(self) -> None:
        svc, store = _service()
        svc.add_book("another day:Someone:9780000000002:1", [DUNE, HOBBIT], PATH)
        titles = [b.title for b in _saved_books(store)]
        assert titles == ["another day", "Dune", "The Hobbit"]

    def test_add_to_empty_catalog(self) -> None:
        svc, store = _service()
        svc.add_book("Dune:Frank Herbert:9780441013593:5", [], PATH)
        assert _saved_books(store) == [DUNE]

    def test_input_sequence_not_mutated(self) -> None:
        svc, _ = _service()
        books = [HOBBIT]
        svc.add_book("Dune:Frank Herbert:9780441013593:5", books, PATH)
        assert books == [HOBBIT]

    def test_duplicate_isbn_rejected(self) -> None:
        svc, store = _service()
        with pytest.raises(DuplicateISBNError, match="ISBN already exists: 9780261102217"):
            svc.add_book("Other:Someone:9780261102217:1", [HOBBIT], PATH)
        store.save.assert_not_called()

    @pytest.mark.parametrize(
        ("payload", "error"),
        [
            ("Dune:Frank Herbert:9780441013593", MalformedEntryError),
            ("Dune::9780441013593:5", MalformedEntryError),
            ("Dune:Frank Herbert:978044101359:5", InvalidISBNError),
            ("Dune:Frank Herbert:9780441013593:zero", MalformedEntryError),
            ("Dune:Frank Herbert:9780441013593:0", MalformedEntryError),
        ],
    )
    def test_invalid_payload_rejected(
        self, payload: str, error: type[Exception],
    ) -> None:
        svc, store = _service()
        with pytest.raises(error):
            svc.add_book(payload, [HOBBIT], PATH)
        store.save.assert_not_called()

    def test_persistence_error_propagates(self) -> None:
        svc, store = _service()
        store.save.side_effect = PersistenceError("Failed to save catalog: disk full")
        with pytest.raises(PersistenceError, match="disk full"):
            svc.add_book("Dune:Frank Herbert:9780441013593:5", [HOBBIT], PATH)


# ---------------------------------------------------------------------------
# execute
# ---------------------------------------------------------------------------

class TestExecute:
    def test_isbn_hit(self) -> None:
        svc, store = _service()
        result = svc.execute("9780261102217", [DUNE, HOBBIT], PATH)
        assert result.kind is OperationKind.ISBN_SEARCH
        assert result.books == (HOBBIT,)
        store.save.assert_not_called()

    def test_isbn_miss_is_not_an_error(self) -> None:
        svc, _ = _service()
        result = svc.execute("1234567890123", [DUNE, HOBBIT], PATH)
        assert result.kind is OperationKind.ISBN_SEARCH
        assert not result

    def test_isbn_duplicate_raises(self) -> None:
        svc, _ = _service()
        with pytest.raises(DuplicateISBNError):
            svc.execute(HOBBIT.isbn, [HOBBIT, HOBBIT], PATH)

    def test_title_search(self) -> None:
        svc, store = _service()
        result = svc.execute("hobbit", [DUNE, HOBBIT], PATH)
        assert result.kind is OperationKind.TITLE_SEARCH
        assert result.query == "hobbit"
        assert result.books == (HOBBIT,)
        store.save.assert_not_called()

    def test_title_search_no_results(self) -> None:
        svc, _ = _service()
        result = svc.execute("neuromancer", [DUNE, HOBBIT], PATH)
        assert result.kind is OperationKind.TITLE_SEARCH
        assert len(result) == 0

    def test_add(self) -> None:
        svc, store = _service()
        result = svc.execute("Dune:Frank Herbert:9780441013593:5", [HOBBIT], PATH)
        assert result.kind is OperationKind.ADD
        assert result.books == (DUNE,)
        assert _saved_books(store) == [DUNE, HOBBIT]
