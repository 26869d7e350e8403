"""Shared pytest fixtures and configuration for the book-tracker test suite.

Guidelines
----------
* Core tests must be pure — storage is faked at the protocol boundary.
* Infra and CLI tests touch only ``tmp_path``.
* Tests must not depend on OS state or the working directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def catalog_path(tmp_path: Path) -> Path:
    """Path of a not-yet-created catalog inside ``tmp_path``."""
    return tmp_path / "library" / "books.txt"


@pytest.fixture()
def write_catalog(catalog_path: Path):
    """Write the given lines (newline-terminated) to the catalog file."""

    def _write(*lines: str) -> Path:
        catalog_path.parent.mkdir(parents=True, exist_ok=True)
        catalog_path.write_text(
            "".join(f"{line}\n" for line in lines), encoding="utf-8",
        )
        return catalog_path

    return _write
