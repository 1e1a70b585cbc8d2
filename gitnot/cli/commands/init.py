# gitnot/cli/commands/init.py
"""
Initialize command.

Usage:
    gitnot --init            # Start tracking this folder at v0.0
    gitnot --init --force    # Throw away existing state and start over
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from gitnot.cli.ui import ui
from gitnot.cli.utils import fail, open_engine
from gitnot.core.exceptions import GitnotError


def command(root: Optional[Path] = None, force: bool = False) -> None:
    """Seed the snapshot, changelogs, and fingerprints at version 0.0."""
    engine = open_engine(root)

    try:
        report = engine.initialize(reset=force)
    except (GitnotError, OSError) as e:
        fail(e)

    ui.success(f"Initialized gitnot at version {report.version:.1f}")
    ui.info(f"Tracking {len(report.tracked)} files")
    if report.wrote_default_config:
        ui.info(f"Wrote default config to {engine.store.paths.config_file}")
    for outcome in report.skipped + report.degraded:
        ui.warning(f"{outcome.path} not tracked", outcome.reason)
