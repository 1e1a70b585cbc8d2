# gitnot/core/__init__.py
"""
Core building blocks shared by every gitnot subsystem.

Public API:
    - StorePaths: on-disk layout of the .gitnot/ state directory
    - Exceptions: the gitnot error hierarchy
"""

from .exceptions import (
    AlreadyInitializedError,
    GitnotError,
    NotInitializedError,
    SnapshotCommitError,
    SnapshotMissingError,
    StorePersistenceError,
)
from .paths import STATE_DIR_NAME, StorePaths

__all__ = [
    "STATE_DIR_NAME",
    "StorePaths",
    "GitnotError",
    "NotInitializedError",
    "AlreadyInitializedError",
    "SnapshotMissingError",
    "SnapshotCommitError",
    "StorePersistenceError",
]
