# gitnot/checkpoint/__init__.py
"""
Change detection and versioned snapshots.

Key components:
- FingerprintStore: path -> content fingerprint, persisted last
- classify: new / changed / deleted / unchanged
- unified_diff + render_diff_markdown: changelog bodies
- VersionCounter: one 0.1 step per checkpoint
- SnapshotManager: atomically replaced content mirror
- CheckpointEngine: initialize / status / update / show

Usage:
    from gitnot.checkpoint import CheckpointEngine, CheckpointStore

    engine = CheckpointEngine(CheckpointStore.open("."))
    report = engine.update()
    print(report)
"""

from gitnot.checkpoint.changelog import ChangelogEntry, ChangelogStore, render_diff_markdown
from gitnot.checkpoint.classifier import classify
from gitnot.checkpoint.differ import diff_files, unified_diff
from gitnot.checkpoint.engine import CheckpointEngine, initialize, show, status, update
from gitnot.checkpoint.fingerprints import FingerprintMap, FingerprintStore
from gitnot.checkpoint.hashing import compute_bytes_fingerprint, compute_fingerprint
from gitnot.checkpoint.models import (
    Classification,
    FileOutcome,
    InitReport,
    OutcomeKind,
    Preview,
    ShowReport,
    StatusReport,
    UpdateReport,
)
from gitnot.checkpoint.snapshot import CommitOutcome, CommitResult, SnapshotManager
from gitnot.checkpoint.store import CheckpointStore
from gitnot.checkpoint.version import VersionCounter, round_version

__all__ = [
    # Fingerprints
    "compute_fingerprint",
    "compute_bytes_fingerprint",
    "FingerprintMap",
    "FingerprintStore",
    # Classification
    "classify",
    "Classification",
    # Diff + changelog
    "unified_diff",
    "diff_files",
    "render_diff_markdown",
    "ChangelogEntry",
    "ChangelogStore",
    # Version
    "VersionCounter",
    "round_version",
    # Snapshot
    "CommitOutcome",
    "CommitResult",
    "SnapshotManager",
    # Engine
    "CheckpointStore",
    "CheckpointEngine",
    "FileOutcome",
    "OutcomeKind",
    "Preview",
    "InitReport",
    "StatusReport",
    "UpdateReport",
    "ShowReport",
    "initialize",
    "status",
    "update",
    "show",
]
