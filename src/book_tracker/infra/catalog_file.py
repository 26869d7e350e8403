"""Infrastructure: catalog path validation and file preparation.

Rules
-----
* Name validation happens before any filesystem access.
* Missing parent directories and an empty catalog file are created;
  existing files are never touched.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

from pathlib import Path

from book_tracker.exceptions import InvalidFileNameError, PersistenceError
from book_tracker.utils.constants import CATALOG_SUFFIX


def validate_catalog_name(raw: str) -> Path:
    """Return *raw* as a path, or raise if it does not end in ``.txt``.

    The suffix check is case-insensitive, so ``BOOKS.TXT`` is accepted.
    """
    if not raw.lower().endswith(CATALOG_SUFFIX):
        raise InvalidFileNameError(
            f"Catalog file must end with {CATALOG_SUFFIX}",
            hint=f"Got: {raw}",
        )
    return Path(raw)


def prepare_catalog_file(path: Path) -> Path:
    """Ensure *path* and its parent directories exist.

    Returns *path* unchanged so the call can be chained.

    Raises
    ------
    PersistenceError
        When a directory or the file cannot be created.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
    except OSError as exc:
        raise PersistenceError(
            f"Cannot create catalog file {path}: {exc.strerror or exc}",
        ) from exc
    return path
