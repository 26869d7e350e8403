"""Allow ``python -m book_tracker`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m book_tracker`` behaves identically to the
``book-tracker`` console script.
"""

from __future__ import annotations

from book_tracker.cli.app import cli

if __name__ == "__main__":
    cli()
