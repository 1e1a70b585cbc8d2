# gitnot/cli/utils.py
"""
Shared CLI utilities.

Common functions used across multiple gitnot commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer

from gitnot.checkpoint.engine import CheckpointEngine
from gitnot.checkpoint.store import CheckpointStore
from gitnot.cli.ui import ui
from gitnot.core.exceptions import GitnotError, StorePersistenceError
from gitnot.logging.logger import get_logger
from gitnot.logging.tags import CLI

logger = get_logger(__name__)

PERMISSION_MESSAGE = "Permission denied. Check file/folder permissions."


def open_engine(root: Optional[Path]) -> CheckpointEngine:
    """Build an engine for the given working tree (default: current directory)."""
    return CheckpointEngine(CheckpointStore.open(root or Path.cwd()))


def is_permission_error(error: BaseException) -> bool:
    if isinstance(error, PermissionError):
        return True
    return isinstance(error, StorePersistenceError) and isinstance(error.cause, PermissionError)


def fail(error: BaseException, hint: str = "") -> NoReturn:
    """
    Report an error and exit with status 1.

    Permission problems get a fixed message instead of the raw OS error.
    """
    logger.debug(f"{CLI} {type(error).__name__}: {error}")
    if is_permission_error(error):
        ui.error(PERMISSION_MESSAGE)
    else:
        ui.error(str(error) if isinstance(error, GitnotError) else f"Error: {error}")
        if hint:
            ui.hint(hint)
    raise typer.Exit(1)


__all__ = ["PERMISSION_MESSAGE", "open_engine", "is_permission_error", "fail"]
