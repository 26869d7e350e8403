"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O; storage goes through injected protocols.
* No imports from ``cli`` or ``infra``.
"""

from book_tracker.core.catalog_service import CatalogService
from book_tracker.core.catalog_store import CatalogStore
from book_tracker.core.dispatch import classify_operation
from book_tracker.core.models import Book, LoadResult, OperationKind, OperationResult, RejectedLine
from book_tracker.core.protocols import CatalogBackend, ErrorLog
from book_tracker.core.record_parser import parse_record, try_parse_record

__all__: list[str] = [
    "Book",
    "CatalogBackend",
    "CatalogService",
    "CatalogStore",
    "ErrorLog",
    "LoadResult",
    "OperationKind",
    "OperationResult",
    "RejectedLine",
    "classify_operation",
    "parse_record",
    "try_parse_record",
]
