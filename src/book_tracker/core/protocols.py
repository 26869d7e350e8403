"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the catalog logic stays free of file I/O.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol


class CatalogBackend(Protocol):
    """Contract for raw catalog storage.

    The backend moves text lines in and out of storage; it knows
    nothing about the record format.
    """

    def read_lines(self, path: Path) -> list[str]:
        """Return every line of *path* in order, without line terminators.

        Raises
        ------
        PersistenceError
            When the file cannot be read or decoded.
        """
        ...  # pragma: no cover

    def write_lines(self, path: Path, lines: Iterable[str]) -> None:
        """Replace the contents of *path* with *lines*, one per line.

        Prior contents are truncated, never appended to.

        Raises
        ------
        PersistenceError
            When the write cannot complete.
        """
        ...  # pragma: no cover


class ErrorLog(Protocol):
    """Contract for the sink that records rejected catalog lines."""

    def record(self, line: str, reason: str) -> None:
        """Append one entry describing the offending *line* and *reason*."""
        ...  # pragma: no cover
