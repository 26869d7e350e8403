"""Catalog store — turns catalog files into records and back.

The store owns the record format but delegates raw line I/O to a
:class:`~book_tracker.core.protocols.CatalogBackend` and rejected-line
reporting to an :class:`~book_tracker.core.protocols.ErrorLog`, both
injected at construction time.

Guarantees
----------
* Loading never fails because of line content; bad lines are skipped
  and reported, one error-log entry per line.
* Saving rewrites the whole file; errors propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from book_tracker.core.models import Book, LoadResult, RejectedLine
from book_tracker.core.protocols import CatalogBackend, ErrorLog
from book_tracker.core.record_parser import try_parse_record

logger = logging.getLogger(__name__)


class CatalogStore:
    """Load and save whole catalogs.

    Parameters
    ----------
    backend:
        Any object satisfying the :class:`CatalogBackend` protocol.
    error_log:
        Receives each rejected line together with the failure reason.
    """

    def __init__(self, backend: CatalogBackend, error_log: ErrorLog) -> None:
        self._backend: CatalogBackend = backend
        self._error_log: ErrorLog = error_log

    def load(self, path: Path) -> LoadResult:
        """Parse every line of *path*, preserving file order.

        Raises
        ------
        PersistenceError
            When the file itself cannot be read.
        """
        books: list[Book] = []
        rejected: list[RejectedLine] = []

        for line_number, line in enumerate(self._backend.read_lines(path), start=1):
            outcome = try_parse_record(line)
            if isinstance(outcome, Book):
                books.append(outcome)
                continue
            logger.debug("Rejected line %d of %s: %s", line_number, path, outcome)
            self._error_log.record(line, str(outcome))
            rejected.append(RejectedLine(line_number, line, outcome))

        logger.debug(
            "Loaded %d book(s) from %s, skipped %d line(s)",
            len(books), path, len(rejected),
        )
        return LoadResult(books=tuple(books), rejected=tuple(rejected))

    def save(self, path: Path, books: Sequence[Book]) -> None:
        """Overwrite *path* with *books*, one record per line.

        Raises
        ------
        PersistenceError
            When the write cannot complete.  Never retried.
        """
        self._backend.write_lines(path, (book.to_line() for book in books))
        logger.debug("Saved %d book(s) to %s", len(books), path)
