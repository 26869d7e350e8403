"""Result rendering for the CLI layer.

This module is responsible for:

* Rendering books as a Rich table (Title / Author / ISBN / Copies).
* Printing the "no results" messages for empty searches.
* Printing the short load summary shown before each operation.

All display-related logic lives here — no business logic, no catalog
access.  User-supplied text is escaped so it is never read as markup.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from book_tracker.cli.console import console
from book_tracker.core.models import Book, LoadResult, OperationKind, OperationResult


def build_book_table(books: Sequence[Book], *, title: str | None = None) -> Table:
    """Build a table with one row per book, in the given order."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Title", justify="left", min_width=12)
    table.add_column("Author", justify="left", min_width=10)
    table.add_column("ISBN", justify="left", no_wrap=True)
    table.add_column("Copies", justify="right")

    for book in books:
        table.add_row(
            escape(book.title),
            escape(book.author),
            book.isbn,
            str(book.copies),
        )
    return table


def render_load_summary(path: Path, operation: str, result: LoadResult) -> None:
    """Print the catalog location, the operation, and the load counts."""
    console.print(f"[bold cyan]Catalog:[/bold cyan]   {escape(str(path.resolve()))}")
    console.print(f"[bold cyan]Operation:[/bold cyan] {escape(operation)}")
    console.print(f"[bold cyan]Loaded books:[/bold cyan] {result.loaded}")
    if result.skipped:
        console.print(
            f"[yellow]Skipped {result.skipped} invalid line(s); "
            "see errors.log for details.[/yellow]"
        )


def render_result(result: OperationResult) -> None:
    """Print the outcome of one dispatched operation."""
    console.print()

    if result.kind is OperationKind.ADD:
        console.print("[bold green]Book added successfully:[/bold green]")
        console.print(build_book_table(result.books))
        return

    if not result:
        if result.kind is OperationKind.ISBN_SEARCH:
            console.print("No book found with this ISBN.")
        else:
            console.print(f"No books found matching: {escape(result.query)}")
        return

    console.print(build_book_table(result.books))
