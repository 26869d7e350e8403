"""UTF-8 text-file implementation of :class:`~book_tracker.core.protocols.CatalogBackend`.

This module is the **only** place that reads or writes catalog files.
Every ``OSError`` and decoding failure is caught here and re-raised as
:class:`~book_tracker.exceptions.PersistenceError` — nothing raw escapes
the infrastructure boundary.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from book_tracker.exceptions import PersistenceError
from book_tracker.utils.constants import CATALOG_ENCODING


class TextFileBackend:
    """Concrete :class:`CatalogBackend` over plain text files.

    Usage::

        backend = TextFileBackend()
        lines = backend.read_lines(Path("library/books.txt"))

    This class satisfies the protocol structurally — no explicit
    inheritance required.
    """

    def __init__(self, encoding: str = CATALOG_ENCODING) -> None:
        self._encoding: str = encoding

    def read_lines(self, path: Path) -> list[str]:
        """Return the lines of *path* without terminators.

        Only ``\\n``, ``\\r`` and ``\\r\\n`` end a line; other Unicode
        separators such as ``\\u2028`` stay inside the line text.
        """
        try:
            with path.open(encoding=self._encoding, newline=None) as handle:
                return [line.rstrip("\n") for line in handle]
        except UnicodeDecodeError as exc:
            raise PersistenceError(
                f"Catalog is not valid {self._encoding} text: {path}",
            ) from exc
        except OSError as exc:
            raise PersistenceError(
                f"Failed to read catalog: {exc.strerror or exc}",
            ) from exc

    def write_lines(self, path: Path, lines: Iterable[str]) -> None:
        """Truncate *path* and write each line followed by a newline."""
        try:
            with path.open("w", encoding=self._encoding, newline="\n") as handle:
                for line in lines:
                    handle.write(line)
                    handle.write("\n")
        except OSError as exc:
            raise PersistenceError(
                f"Failed to save catalog: {exc.strerror or exc}",
                hint="Check that the catalog file is writable.",
            ) from exc
