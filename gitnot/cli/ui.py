# gitnot/cli/ui.py
"""
Shared UI helpers for gitnot commands.

Usage:
    from gitnot.cli.ui import ui

    ui.success("Initialized gitnot at version 0.0")
    ui.bullet("notes.md")
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape

console = Console()


class UI:
    """Consistent Rich styling for every gitnot command."""

    # -------------------------------------------------------------------------
    # Output Methods
    # -------------------------------------------------------------------------

    def print(self, msg: str, style: str = "") -> None:
        """Print with optional Rich styling."""
        if style:
            console.print(f"[{style}]{escape(msg)}[/{style}]")
        else:
            console.print(escape(msg))

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[red]✗[/red] {escape(msg)}")

    def warning(self, msg: str, detail: str = "") -> None:
        """Print a warning message."""
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}{detail_str}")

    def info(self, msg: str) -> None:
        """Print an info/dim message."""
        console.print(f"[dim]{escape(msg)}[/dim]")

    def hint(self, msg: str) -> None:
        """Print a suggestion for what to try next."""
        console.print(f"[cyan]→[/cyan] {escape(msg)}")

    def bullet(self, msg: str) -> None:
        console.print(f"  • {escape(msg)}")

    def category(self, label: str, shown: Sequence[str], total: int, style: str = "bold") -> None:
        """
        Print one status category as a preview line.

        Example output:
            New files (5): a.py, b.py, c.py
                ... and 2 more
        """
        names = ", ".join(escape(name) for name in shown)
        console.print(f"[{style}]{escape(label)}[/{style}] ({total}): {names}")
        if total > len(shown):
            console.print(f"    [dim]... and {total - len(shown)} more[/dim]")


ui = UI()

__all__ = ["UI", "ui", "console"]
