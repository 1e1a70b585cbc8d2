"""
gitnot - lightweight snapshots and changelogs for personal projects.

gitnot notices which tracked files were added, modified, or deleted since the
last checkpoint, bumps a version counter, and appends a human-readable
changelog entry per file.

Quick Start:
    >>> from gitnot import CheckpointEngine, CheckpointStore
    >>> engine = CheckpointEngine(CheckpointStore.open("."))
    >>> engine.initialize()
    >>> # ... edit files ...
    >>> print(engine.update())

Architecture:
    gitnot/
    ├── core/         # Paths and error hierarchy
    ├── config/       # .gitnot/config.json
    ├── tracking/     # Which files are tracked
    ├── checkpoint/   # Fingerprints, diffs, changelogs, snapshots, engine
    ├── logging/      # Logger setup
    └── cli/          # Command-line interface
"""

from gitnot.checkpoint import (
    CheckpointEngine,
    CheckpointStore,
    Classification,
    FileOutcome,
    OutcomeKind,
    UpdateReport,
)
from gitnot.core import (
    AlreadyInitializedError,
    GitnotError,
    NotInitializedError,
    SnapshotCommitError,
    SnapshotMissingError,
    StorePersistenceError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CheckpointEngine",
    "CheckpointStore",
    "Classification",
    "FileOutcome",
    "OutcomeKind",
    "UpdateReport",
    "GitnotError",
    "NotInitializedError",
    "AlreadyInitializedError",
    "SnapshotMissingError",
    "SnapshotCommitError",
    "StorePersistenceError",
]
