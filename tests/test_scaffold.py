"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from book_tracker import __version__
from book_tracker.cli import exit_codes
from book_tracker.cli.app import main
from book_tracker.exceptions import (
    ArgumentError,
    BookTrackerError,
    DuplicateISBNError,
    InsufficientArgumentsError,
    InvalidFileNameError,
    InvalidISBNError,
    MalformedEntryError,
    PersistenceError,
    RecordError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InsufficientArgumentsError,
            InvalidFileNameError,
            MalformedEntryError,
            InvalidISBNError,
            DuplicateISBNError,
            PersistenceError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[BookTrackerError]
    ) -> None:
        assert issubclass(exc_class, BookTrackerError)

    def test_argument_errors_grouped(self) -> None:
        assert issubclass(InsufficientArgumentsError, ArgumentError)
        assert issubclass(InvalidFileNameError, ArgumentError)

    def test_record_errors_grouped(self) -> None:
        assert issubclass(MalformedEntryError, RecordError)
        assert issubclass(InvalidISBNError, RecordError)
        assert not issubclass(DuplicateISBNError, RecordError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(BookTrackerError, Exception)

    def test_hint_is_stored(self) -> None:
        err = BookTrackerError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = BookTrackerError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI bootstrap
# ---------------------------------------------------------------------------

class TestCLIBootstrap:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
