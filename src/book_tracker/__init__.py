"""book-tracker — flat-file book catalog with add and search operations.

A small command-line tool with a strict layered architecture.
"""

from book_tracker.version import __version__

__all__: list[str] = ["__version__"]
