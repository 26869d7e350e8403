"""Single validated-construction routine for book records.

Both call sites — catalog lines read from disk and the payload of an
add operation — go through :func:`parse_record`, so the two can never
drift apart.

Checks run in a fixed order and the first failure wins:

1. **Shape** — exactly four ``:``-separated fields once trailing empty
   fields are dropped, so ``a:b:isbn:3:`` is still a valid record.
2. **Text** — title and author non-empty after trimming.
3. **ISBN** — exactly 13 ASCII digits.
4. **Copies** — a signed 32-bit decimal integer, strictly positive.
"""

from __future__ import annotations

import re

from book_tracker.core.models import Book
from book_tracker.exceptions import InvalidISBNError, MalformedEntryError, RecordError
from book_tracker.utils.constants import (
    COPIES_MAX,
    COPIES_MIN,
    FIELD_COUNT,
    FIELD_DELIMITER,
    ISBN_LENGTH,
)

# ``\d`` would also accept non-ASCII digits, hence the explicit class.
ISBN_PATTERN: re.Pattern[str] = re.compile(rf"[0-9]{{{ISBN_LENGTH}}}")

_INTEGER_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")


def is_isbn(text: str) -> bool:
    """Return ``True`` when *text* is exactly 13 decimal digits."""
    return ISBN_PATTERN.fullmatch(text) is not None


def _parse_copies(text: str) -> int:
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise MalformedEntryError("Copies must be an integer")
    copies = int(text)
    if not COPIES_MIN <= copies <= COPIES_MAX:
        raise MalformedEntryError("Copies must be an integer")
    if copies <= 0:
        raise MalformedEntryError("Copies must be positive")
    return copies


def parse_record(line: str) -> Book:
    """Parse one ``title:author:isbn:copies`` line into a :class:`Book`.

    A title or author containing ``:`` cannot be represented and is
    rejected by the field-count check.

    Raises
    ------
    MalformedEntryError
        Wrong field count, empty title/author, or invalid copies.
    InvalidISBNError
        The ISBN field is not exactly 13 decimal digits.
    """
    parts = line.split(FIELD_DELIMITER)
    while parts and not parts[-1]:
        parts.pop()
    if len(parts) != FIELD_COUNT:
        raise MalformedEntryError(
            f"Line must have {FIELD_COUNT} fields",
            hint="Expected title:author:isbn:copies",
        )

    title, author, isbn, copies_text = (part.strip() for part in parts)

    if not title or not author:
        raise MalformedEntryError("Title/Author cannot be empty")

    if not is_isbn(isbn):
        raise InvalidISBNError(f"ISBN must be exactly {ISBN_LENGTH} digits")

    return Book(
        title=title,
        author=author,
        isbn=isbn,
        copies=_parse_copies(copies_text),
    )


def try_parse_record(line: str) -> Book | RecordError:
    """Result-style variant of :func:`parse_record`.

    Returns the record on success, or the validation error instead of
    raising it.
    """
    try:
        return parse_record(line)
    except RecordError as exc:
        return exc
