# gitnot/cli/cli.py
"""
gitnot CLI - Main application.

Modes:
    gitnot              Track changes and bump version
    gitnot --init       Initialize gitnot in the current folder
    gitnot --status     Show pending changes (without committing)
    gitnot --show       Display current version and tracked files
    gitnot --help       Show this help message

NOTE: Modes use lazy loading - a mode's module is imported only when it runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from gitnot.logging.logger import configure_logging

EPILOG = """
Examples:

  gitnot --init     Start tracking this folder

  gitnot            Save current state as new version

  gitnot --status   See what's changed since last version

Edit .gitnot/config.json to customize file extensions and ignore patterns.
"""

app = typer.Typer(
    name="gitnot",
    help="gitnot - simple snapshots and changelogs for personal projects.",
    add_completion=False,
)


@app.command(epilog=EPILOG)
def gitnot(
    init: bool = typer.Option(False, "--init", help="Initialize gitnot in this folder."),
    force: bool = typer.Option(False, "--force", "-f", help="Reset existing state. Only valid with --init."),
    status: bool = typer.Option(False, "--status", "-s", help="Show pending changes without committing."),
    show: bool = typer.Option(False, "--show", help="Display current version and tracked files."),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="Project folder to track (default: current directory).",
        file_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """
    gitnot - simple snapshots and changelogs for personal projects.

    With no flags, track changes and bump the version.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    if force and not init:
        raise typer.BadParameter("only valid together with --init", param_hint="'--force'")

    if init:
        from gitnot.cli.commands import init as mod

        mod.command(root=root, force=force)
    elif show:
        from gitnot.cli.commands import show as mod

        mod.command(root=root)
    elif status:
        from gitnot.cli.commands import status as mod

        mod.command(root=root)
    else:
        from gitnot.cli.commands import update as mod

        mod.command(root=root)


def main() -> None:
    """Console-script entrypoint."""
    app()


if __name__ == "__main__":
    main()
