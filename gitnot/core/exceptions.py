# gitnot/core/exceptions.py
"""
Error hierarchy for gitnot.

Only store-level and precondition failures are raised. Problems with a
single tracked file are never exceptions; they are recorded as FileOutcome
entries in the run report instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from gitnot.checkpoint.snapshot import CommitOutcome


class GitnotError(Exception):
    """Base error for everything gitnot reports to the caller."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (path: {path})"
        super().__init__(message)


class NotInitializedError(GitnotError):
    """Raised when an operation needs prior state that does not exist."""

    def __init__(self, path: Optional[Path] = None):
        super().__init__("gitnot not initialized; run 'gitnot --init'", path)


class AlreadyInitializedError(GitnotError):
    """Raised when initialize is run over existing state without reset."""

    def __init__(self, path: Optional[Path] = None):
        super().__init__(
            "gitnot already initialized; use 'gitnot --init --force' to reset", path
        )


class SnapshotMissingError(GitnotError):
    """Raised when the snapshot mirror is gone during an update."""

    def __init__(self, path: Optional[Path] = None):
        super().__init__(
            "Snapshot folder missing. Please reinitialize with 'gitnot --init --force'",
            path,
        )


class SnapshotCommitError(GitnotError):
    """Raised when the snapshot mirror could not be replaced."""

    def __init__(self, outcome: "CommitOutcome", detail: str, path: Optional[Path] = None):
        self.outcome = outcome
        self.detail = detail
        super().__init__(f"Could not update snapshot ({outcome.value}): {detail}", path)


class StorePersistenceError(GitnotError):
    """Raised when a state file or directory cannot be written."""

    def __init__(self, message: str, path: Optional[Path] = None, cause: Optional[OSError] = None):
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, path)


__all__ = [
    "GitnotError",
    "NotInitializedError",
    "AlreadyInitializedError",
    "SnapshotMissingError",
    "SnapshotCommitError",
    "StorePersistenceError",
]
