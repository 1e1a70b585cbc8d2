# gitnot/cli/commands/update.py
"""
Update command: record a checkpoint.

Usage:
    gitnot             # Save current state as a new version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from gitnot.cli.ui import ui
from gitnot.cli.utils import fail, open_engine
from gitnot.core.exceptions import (
    GitnotError,
    NotInitializedError,
    SnapshotMissingError,
)

RESET_HINT = "Try 'gitnot --init --force' to reset if needed."


def command(root: Optional[Path] = None) -> None:
    engine = open_engine(root)

    try:
        report = engine.update()
    except (NotInitializedError, SnapshotMissingError) as e:
        fail(e)
    except (GitnotError, OSError) as e:
        fail(e, hint=RESET_HINT)

    if not report.has_changes:
        ui.success("No changes detected")
        return

    for outcome in report.degraded:
        ui.warning(f"{outcome.path}: {outcome.reason}")

    ui.success(f"Version bumped → v{report.version:.1f}")
    c = report.classification
    ui.info(
        f"{len(c.new)} new, {len(c.changed)} modified, {len(c.deleted)} deleted "
        f"({report.tracked} files tracked)"
    )
