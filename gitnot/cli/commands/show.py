# gitnot/cli/commands/show.py
"""
Show command: current version and tracked files.

Usage:
    gitnot --show
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from gitnot.cli.ui import ui
from gitnot.cli.utils import fail, open_engine
from gitnot.core.exceptions import GitnotError


def command(root: Optional[Path] = None) -> None:
    engine = open_engine(root)

    try:
        report = engine.show()
    except (GitnotError, OSError) as e:
        fail(e)

    ui.print(f"Current version: v{report.version:.1f}", style="bold")
    if not report.tracked:
        ui.info("No files are currently being tracked")
        return

    ui.print(f"Tracked files ({len(report.tracked)}):")
    for rel in report.tracked:
        ui.bullet(rel)
