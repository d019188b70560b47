"""Rich console formatting utilities.

Provides the shared stderr console and message helpers used by the CLI.
Listing text itself bypasses Rich so alignment is never altered.
"""

from rich.console import Console
from rich.markup import escape

# Shared console instance for diagnostics and log records
err_console = Console(stderr=True, highlight=False, emoji=False)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[bold red]Error:[/] {escape(message)}", soft_wrap=True)


def print_diagnostic(message: str) -> None:
    """Print a bare diagnostic line to stderr, without any prefix."""
    err_console.print(escape(message), soft_wrap=True)
