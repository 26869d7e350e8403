"""Custom exception hierarchy for book-tracker.

All exceptions that cross layer boundaries must inherit from
:class:`BookTrackerError`.  Raw ``OSError`` instances must NEVER
propagate beyond the infrastructure layer — they must be caught and
re-raised as :class:`PersistenceError`.

Hierarchy
---------
BookTrackerError
├── ArgumentError
│   ├── InsufficientArgumentsError
│   └── InvalidFileNameError
├── RecordError
│   ├── MalformedEntryError
│   └── InvalidISBNError
├── DuplicateISBNError
└── PersistenceError
"""

from __future__ import annotations


class BookTrackerError(Exception):
    """Base exception for all book-tracker errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line arguments ------------------------------------------------

class ArgumentError(BookTrackerError):
    """Raised when the command-line arguments are unusable."""


class InsufficientArgumentsError(ArgumentError):
    """Raised when the catalog path or operation argument is missing."""


class InvalidFileNameError(ArgumentError):
    """Raised when the catalog path does not name a ``.txt`` file."""


# --- Record validation -----------------------------------------------------

class RecordError(BookTrackerError):
    """Raised when a line cannot be turned into a book record."""


class MalformedEntryError(RecordError):
    """Raised for a wrong field count, empty text, or invalid copies."""


class InvalidISBNError(RecordError):
    """Raised when the ISBN field is not exactly 13 decimal digits."""


# --- Catalog integrity -----------------------------------------------------

class DuplicateISBNError(BookTrackerError):
    """Raised when an ISBN is not unique within the catalog.

    During lookup this signals pre-existing corruption of the catalog
    file; during add it means the new record was rejected.
    """


# --- Storage ---------------------------------------------------------------

class PersistenceError(BookTrackerError):
    """Raised when the catalog file cannot be read or written."""
