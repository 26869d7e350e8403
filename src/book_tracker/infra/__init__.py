"""Infrastructure layer — filesystem integration.

This layer wraps all interaction with the catalog file and the error
log.  Every raw ``OSError`` must be caught here and re-raised as a
:class:`~book_tracker.exceptions.BookTrackerError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from book_tracker.infra.catalog_file import prepare_catalog_file, validate_catalog_name
from book_tracker.infra.error_log import FileErrorLog, error_log_path
from book_tracker.infra.text_file_backend import TextFileBackend

__all__: list[str] = [
    "FileErrorLog",
    "TextFileBackend",
    "error_log_path",
    "prepare_catalog_file",
    "validate_catalog_name",
]
