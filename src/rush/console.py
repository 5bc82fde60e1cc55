"""Console output for the rush command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from rush.objects import Directory, File


class ConsoleOutput:
    """Text output for rush commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}")

    def show_text(self, text: str) -> None:
        """Print raw text without markup processing."""
        self.console.print(text, markup=False, highlight=False, end="")

    def show_info(self, obj: File | Directory) -> None:
        """Display a table describing a filesystem object.

        Args:
            obj: The object to describe. Must not raise on ``exists()``.
        """
        from rush.objects import File

        table = Table(title=str(obj), show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value")

        exists = obj.exists()
        table.add_row("Type", str(obj.OBJECT_TYPE) if exists else "-")
        table.add_row("Exists", "yes" if exists else "no")
        table.add_row("Empty", "yes" if obj.exists_and_is_empty() else "no")
        if isinstance(obj, File):
            table.add_row("Size", f"{obj.size()} bytes")
        else:
            table.add_row("Entries", str(len(obj.entries())) if exists else "0")

        self.console.print(table)
