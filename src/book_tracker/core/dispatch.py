"""Lexical classification of the operation argument.

Order matters: a 13-digit argument is always an ISBN search, even when
no such book exists; anything else containing the field delimiter is
an add payload; the rest is a title keyword.
"""

from __future__ import annotations

from book_tracker.core.models import OperationKind
from book_tracker.core.record_parser import is_isbn
from book_tracker.utils.constants import FIELD_DELIMITER


def classify_operation(argument: str) -> OperationKind:
    """Return the :class:`OperationKind` selected by *argument*'s shape."""
    if is_isbn(argument):
        return OperationKind.ISBN_SEARCH
    if FIELD_DELIMITER in argument:
        return OperationKind.ADD
    return OperationKind.TITLE_SEARCH
