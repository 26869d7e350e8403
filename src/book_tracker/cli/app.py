"""CLI application entry point and command routing for book-tracker.

This module is the **sole error boundary** for the entire application.
It catches :class:`~book_tracker.exceptions.BookTrackerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.markup import escape

from book_tracker.cli import exit_codes
from book_tracker.cli.console import err_console
from book_tracker.cli.logging_setup import configure_logging
from book_tracker.exceptions import BookTrackerError, InsufficientArgumentsError
from book_tracker.version import __version__

logger = logging.getLogger(__name__)

_USAGE_HINT = "Usage: book-tracker <catalogFile.txt> <operationArgument>"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Both positionals are optional at the parser level so that a missing
    argument surfaces as :class:`InsufficientArgumentsError` through the
    regular error boundary instead of an argparse usage exit.

    Everything after the catalog path is collected verbatim, so an
    operation such as ``-ism`` or ``-v`` is never read as an option.
    Only the first collected item is used.
    """
    parser = argparse.ArgumentParser(
        prog="book-tracker",
        description=(
            "Flat-file book catalog. The operation is a 13-digit ISBN to "
            "look up, a title:author:isbn:copies record to add, or a "
            "keyword to search titles for."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    parser.add_argument(
        "catalog",
        nargs="?",
        default=None,
        help="Path to the catalog file (must end in .txt).",
    )
    parser.add_argument(
        "operation",
        nargs=argparse.REMAINDER,
        help=(
            "ISBN, title:author:isbn:copies, or title keyword. Taken "
            "verbatim, even when it starts with '-'."
        ),
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_operation(catalog_path: Path, operation: str) -> int:
    """Load the catalog and run one operation against it.

    Flow:
    1. Wire the text-file backend and the ``errors.log`` sink.
    2. Load the catalog, logging rejected lines.
    3. Print the load summary.
    4. Dispatch the operation and render its result.
    """
    from book_tracker.cli.render import render_load_summary, render_result
    from book_tracker.core.catalog_service import CatalogService
    from book_tracker.core.catalog_store import CatalogStore
    from book_tracker.infra.error_log import FileErrorLog
    from book_tracker.infra.text_file_backend import TextFileBackend

    with FileErrorLog.for_catalog(catalog_path) as error_log:
        store = CatalogStore(TextFileBackend(), error_log)
        loaded = store.load(catalog_path)
        render_load_summary(catalog_path, operation, loaded)

        service = CatalogService(store)
        result = service.execute(operation, loaded.books, catalog_path)

    render_result(result)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the book-tracker CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    BookTrackerError
        For every user-facing failure; :func:`cli` renders it.
    """
    from book_tracker.infra.catalog_file import prepare_catalog_file, validate_catalog_name

    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    operation = args.operation[0] if args.operation else None
    if args.catalog is None or operation is None:
        raise InsufficientArgumentsError(
            "Need 2 arguments: <catalogFile.txt> <operationArgument>",
            hint=_USAGE_HINT,
        )

    catalog_path = validate_catalog_name(args.catalog)
    prepare_catalog_file(catalog_path)
    logger.debug("Using catalog %s", catalog_path)

    return _handle_operation(catalog_path, operation)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BookTrackerError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
