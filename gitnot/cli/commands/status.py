# gitnot/cli/commands/status.py
"""
Status command: preview pending changes without writing anything.

Usage:
    gitnot --status
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from gitnot.cli.ui import ui
from gitnot.cli.utils import fail, open_engine
from gitnot.core.exceptions import GitnotError

_CATEGORIES = (
    ("new", "New files", "green"),
    ("changed", "Modified", "yellow"),
    ("deleted", "Deleted", "red"),
)


def command(root: Optional[Path] = None) -> None:
    engine = open_engine(root)

    try:
        report = engine.status()
    except (GitnotError, OSError) as e:
        fail(e)

    if not report.has_changes:
        ui.success("No changes detected")
        return

    previews = report.preview()
    for key, label, style in _CATEGORIES:
        preview = previews[key]
        if preview.total:
            ui.category(label, preview.shown, preview.total, style=style)
