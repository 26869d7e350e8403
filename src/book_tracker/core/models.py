"""Domain models for book-tracker.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and serialisation.  They carry zero I/O
and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from book_tracker.exceptions import BookTrackerError
from book_tracker.utils.constants import FIELD_DELIMITER


# ---------------------------------------------------------------------------
# Book record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Book:
    """A single catalog entry.

    Instances are only built through
    :func:`~book_tracker.core.record_parser.parse_record` or directly in
    tests; the constructor itself performs no validation.
    """

    title: str
    """Trimmed, non-empty title."""

    author: str
    """Trimmed, non-empty author name."""

    isbn: str
    """Exactly 13 decimal digits, kept as text to preserve leading zeros."""

    copies: int
    """Number of copies held; strictly positive."""

    def to_line(self) -> str:
        """Serialise as one ``title:author:isbn:copies`` catalog line."""
        return FIELD_DELIMITER.join(
            (self.title, self.author, self.isbn, str(self.copies))
        )


# ---------------------------------------------------------------------------
# Load accounting
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RejectedLine:
    """A catalog line skipped during load, with the reason it failed."""

    line_number: int
    """1-based position of the line in the catalog file."""

    line: str
    """The offending source line, verbatim."""

    reason: BookTrackerError
    """The validation error raised for this line."""


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of loading one catalog file.

    Counts are derived from the tuples, so there is no separate counter
    state to keep in sync.
    """

    books: tuple[Book, ...]
    rejected: tuple[RejectedLine, ...] = ()

    @property
    def loaded(self) -> int:
        return len(self.books)

    @property
    def skipped(self) -> int:
        return len(self.rejected)


# ---------------------------------------------------------------------------
# Operation results
# ---------------------------------------------------------------------------

class OperationKind(enum.Enum):
    """What a command-line operation argument was classified as."""

    ISBN_SEARCH = "isbn-search"
    ADD = "add"
    TITLE_SEARCH = "title-search"


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Books produced by one dispatched operation, ready for display.

    ``books`` is empty when a search found nothing.  For
    :attr:`OperationKind.ADD` it holds exactly the newly added record.
    """

    kind: OperationKind
    query: str
    books: tuple[Book, ...]

    def __len__(self) -> int:
        return len(self.books)

    def __bool__(self) -> bool:
        return len(self.books) > 0
