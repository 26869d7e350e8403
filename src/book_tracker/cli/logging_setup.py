"""Logging configuration for the ``book-tracker`` command.

Library modules only ever call ``logging.getLogger(__name__)``; this
module attaches a :class:`rich.logging.RichHandler` to the package
logger once per invocation.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from book_tracker.cli.console import err_console

PACKAGE_LOGGER: str = "book_tracker"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route ``book_tracker.*`` log records to stderr via Rich.

    Calling this again replaces the previously installed handler, so
    repeated invocations in one process do not duplicate output.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=verbose,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
