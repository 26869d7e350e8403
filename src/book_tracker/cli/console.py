"""Shared Rich consoles for the CLI layer.

Results go to stdout through :data:`console`; diagnostics, log records
and errors go to stderr through :data:`err_console`.  Both resolve the
underlying stream at write time, so redirected streams are honoured.
"""

from __future__ import annotations

from rich.console import Console

console = Console()
"""Console for operation results (tables, summaries)."""

err_console = Console(stderr=True)
"""Console for log output and the error boundary."""
