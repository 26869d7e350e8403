"""Catalog format constants shared by every layer."""

from __future__ import annotations

FIELD_DELIMITER: str = ":"
"""Separator between ``title:author:isbn:copies`` fields.  Never escaped."""

FIELD_COUNT: int = 4

ISBN_LENGTH: int = 13

CATALOG_SUFFIX: str = ".txt"
"""Required catalog file extension, compared case-insensitively."""

CATALOG_ENCODING: str = "utf-8"

ERROR_LOG_NAME: str = "errors.log"
"""File name of the error log written next to the catalog."""

COPIES_MIN: int = -(2**31)
COPIES_MAX: int = 2**31 - 1
"""Copies must fit a signed 32-bit integer; anything wider is not a number."""
