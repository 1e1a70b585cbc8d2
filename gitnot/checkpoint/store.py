# gitnot/checkpoint/store.py
"""
CheckpointStore: every on-disk store of one working tree, as one value.

Operations receive the store explicitly instead of reaching for the current
directory, so tests can point it at a temp directory or swap parts out.

Usage:
    store = CheckpointStore.open("/path/to/project")
    store.version.read()
    store.fingerprints.load()
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from gitnot.config.loader import load_tracking_config
from gitnot.config.schema import TrackingConfig
from gitnot.core.exceptions import NotInitializedError, StorePersistenceError
from gitnot.core.paths import StorePaths
from gitnot.tracking.scanner import scan_tracked_files

from .changelog import ChangelogStore
from .fingerprints import FingerprintStore
from .snapshot import SnapshotManager
from .version import VersionCounter

FileLister = Callable[[Path, TrackingConfig], List[str]]


@dataclass
class CheckpointStore:
    """Bundle of the fingerprint, version, changelog, and snapshot stores."""

    paths: StorePaths
    fingerprints: FingerprintStore
    version: VersionCounter
    changelogs: ChangelogStore
    snapshots: SnapshotManager
    lister: FileLister = scan_tracked_files

    @classmethod
    def open(cls, root: str | Path, lister: Optional[FileLister] = None) -> "CheckpointStore":
        paths = StorePaths.for_root(root)
        return cls(
            paths=paths,
            fingerprints=FingerprintStore(paths.hashes_file),
            version=VersionCounter(paths.version_file),
            changelogs=ChangelogStore(paths),
            snapshots=SnapshotManager(paths),
            lister=lister or scan_tracked_files,
        )

    @property
    def root(self) -> Path:
        return self.paths.root

    def is_initialized(self) -> bool:
        """True once initialize has persisted a version or fingerprints."""
        return self.version.exists() or self.fingerprints.exists()

    def require_initialized(self) -> None:
        if not self.is_initialized():
            raise NotInitializedError(self.paths.state_dir)

    def load_config(self) -> TrackingConfig:
        return load_tracking_config(self.paths.config_file)

    def list_files(self) -> List[str]:
        """Sorted relative paths of the currently tracked files."""
        return sorted(set(self.lister(self.root, self.load_config())))

    def ensure_layout(self) -> None:
        """
        Create the state directory tree.

        Raises:
            StorePersistenceError: If a directory can't be created
        """
        for directory in (
            self.paths.state_dir,
            self.paths.snapshot_dir,
            self.paths.changelog_dir,
            self.paths.deleted_dir,
        ):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorePersistenceError("Could not create directory", path=directory, cause=e) from e


__all__ = ["CheckpointStore", "FileLister"]
