"""Infrastructure: the ``errors.log`` sink for rejected catalog lines.

Entries go through one dedicated stdlib logger, ``SINK_LOGGER``, with an
appending :class:`logging.FileHandler` attached per open error log, so
each line carries a timestamp and the file is never truncated.

Rules
-----
* The file is created lazily, on the first entry.
* The sink never propagates to the root logger, so entries do not leak
  onto the console.
* One error log is open at a time; :meth:`FileErrorLog.close` detaches
  its handler from the shared sink.
* A file that cannot be written is reported once as a warning and the
  remaining entries are dropped.  Loading the catalog carries on.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from types import TracebackType

from book_tracker.utils.constants import ERROR_LOG_NAME

logger = logging.getLogger(__name__)

SINK_LOGGER: str = f"{__name__}.sink"

_ENTRY_FORMAT = "%(asctime)s %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def error_log_path(catalog_path: Path) -> Path:
    """Return the error-log location for *catalog_path* (a sibling file)."""
    return catalog_path.with_name(ERROR_LOG_NAME)


class _AppendingFileHandler(logging.FileHandler):
    """File handler that turns write failures into a single warning."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, mode="a", encoding="utf-8", delay=True)
        self.failed: bool = False

    def emit(self, record: logging.LogRecord) -> None:
        if self.failed:
            return
        try:
            super().emit(record)
        except OSError:
            # Opening a delayed stream happens outside FileHandler's own guard.
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:
        self.failed = True
        logger.warning("Cannot write %s: %s", self.baseFilename, sys.exc_info()[1])


class FileErrorLog:
    """Concrete :class:`~book_tracker.core.protocols.ErrorLog` writing to a file.

    Usable as a context manager; :meth:`close` releases the file handle.
    """

    def __init__(self, path: Path) -> None:
        self.path: Path = path
        self._handler = _AppendingFileHandler(path)
        self._handler.setFormatter(
            logging.Formatter(_ENTRY_FORMAT, datefmt=_DATE_FORMAT)
        )
        self._logger = logging.getLogger(SINK_LOGGER)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        self._logger.addHandler(self._handler)

    @classmethod
    def for_catalog(cls, catalog_path: Path) -> FileErrorLog:
        """Open the ``errors.log`` that sits next to *catalog_path*."""
        return cls(error_log_path(catalog_path))

    @property
    def failed(self) -> bool:
        """``True`` once an entry could not be written."""
        return self._handler.failed

    def record(self, line: str, reason: str) -> None:
        """Append ``Invalid line: <line> -> <reason>`` with a timestamp."""
        self._logger.info("Invalid line: %s -> %s", line, reason)

    def close(self) -> None:
        self._logger.removeHandler(self._handler)
        self._handler.close()

    def __enter__(self) -> FileErrorLog:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
