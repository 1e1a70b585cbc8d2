# gitnot/checkpoint/snapshot.py
"""
Snapshot mirror of every tracked file at the last checkpoint.

The mirror is the diff baseline for the NEXT run. It is replaced as a whole:
the new mirror is built in a fresh temporary directory and only swapped in
once every file copied cleanly.

Commit outcomes:
- COMMITTED: the new mirror is in place
- ABORTED:   nothing was swapped, the previous mirror is untouched
- DEGRADED:  the previous mirror was removed but the new one could not be
             moved into place; the store has no snapshot until reinitialized
"""

from __future__ import annotations

import shutil
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Tuple

from gitnot.core.exceptions import StorePersistenceError
from gitnot.core.paths import StorePaths
from gitnot.logging.logger import get_logger
from gitnot.logging.tags import SNAPSHOT

from .models import FileOutcome

logger = get_logger(__name__)

_TEMP_PREFIX = "snapshot_tmp_"


class CommitOutcome(str, Enum):
    COMMITTED = "committed"
    ABORTED = "aborted"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class CommitResult:
    outcome: CommitOutcome
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == CommitOutcome.COMMITTED


def copy_file(src: Path, dst: Path) -> None:
    """Copy file contents, creating parent directories of dst."""
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dst)


class SnapshotManager:
    """
    Owns .gitnot/snapshot/ and .gitnot/deleted/.

    Usage:
        snapshots = SnapshotManager(paths)
        result = snapshots.commit(files)
        if not result.ok:
            ...
    """

    def __init__(self, paths: StorePaths) -> None:
        self._paths = paths

    @property
    def directory(self) -> Path:
        return self._paths.snapshot_dir

    def exists(self) -> bool:
        return self._paths.snapshot_dir.is_dir()

    def has_copy(self, rel: str) -> bool:
        return self._paths.snapshot_file(rel).is_file()

    def seed(self, files: Iterable[str]) -> Tuple[List[str], List[FileOutcome]]:
        """
        Build the first mirror, copying files one by one.

        A file that fails to copy is skipped rather than failing the seed.

        Returns:
            (copied paths, SKIPPED outcomes for files that failed to copy)

        Raises:
            StorePersistenceError: If the mirror directory can't be created
        """
        snapshot_dir = self._paths.snapshot_dir
        try:
            if snapshot_dir.exists():
                shutil.rmtree(snapshot_dir)
            snapshot_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorePersistenceError("Could not create snapshot", path=snapshot_dir, cause=e) from e

        copied: List[str] = []
        outcomes: List[FileOutcome] = []
        for rel in files:
            try:
                copy_file(self._paths.working_file(rel), self._paths.snapshot_file(rel))
            except OSError as e:
                logger.warning(f"{SNAPSHOT} Could not copy {rel}: {e}")
                outcomes.append(FileOutcome.skipped(rel, f"copy failed: {e}"))
                continue
            copied.append(rel)

        logger.info(f"{SNAPSHOT} Seeded snapshot with {len(copied)} files")
        return copied, outcomes

    def commit(self, files: Iterable[str]) -> CommitResult:
        """
        Replace the mirror with the current content of files.

        Fail-closed: if any file can't be copied the previous mirror stays.
        """
        state_dir = self._paths.state_dir
        try:
            temp_dir = Path(tempfile.mkdtemp(prefix=_TEMP_PREFIX, dir=state_dir))
        except OSError as e:
            logger.warning(f"{SNAPSHOT} Could not create temp directory: {e}")
            return CommitResult(CommitOutcome.ABORTED, f"could not create temp directory: {e}")

        count = 0
        for rel in files:
            try:
                copy_file(self._paths.working_file(rel), temp_dir / rel)
            except OSError as e:
                shutil.rmtree(temp_dir, ignore_errors=True)
                logger.warning(f"{SNAPSHOT} Copy of {rel} failed, keeping previous snapshot: {e}")
                return CommitResult(CommitOutcome.ABORTED, f"could not copy {rel}: {e}")
            count += 1

        snapshot_dir = self._paths.snapshot_dir
        try:
            if snapshot_dir.exists():
                shutil.rmtree(snapshot_dir)
        except OSError as e:
            shutil.rmtree(temp_dir, ignore_errors=True)
            logger.warning(f"{SNAPSHOT} Could not remove old snapshot: {e}")
            return CommitResult(CommitOutcome.ABORTED, f"could not remove old snapshot: {e}")

        try:
            temp_dir.rename(snapshot_dir)
        except OSError as e:
            logger.warning(f"{SNAPSHOT} Could not move new snapshot into place: {e}")
            return CommitResult(
                CommitOutcome.DEGRADED,
                f"could not move {temp_dir} into place: {e}; reinitialize with 'gitnot --init --force'",
            )

        logger.info(f"{SNAPSHOT} Committed snapshot of {count} files")
        return CommitResult(CommitOutcome.COMMITTED)

    def relocate_deleted(self, rel: str) -> FileOutcome:
        """
        Move a deleted file's last snapshot copy into the deleted store.

        Copy first, then remove, so a failed copy never loses the content.
        """
        source = self._paths.snapshot_file(rel)
        if not source.is_file():
            return FileOutcome.skipped(rel, "no snapshot copy to preserve")

        target = self._paths.deleted_file(rel)
        try:
            copy_file(source, target)
        except OSError as e:
            logger.warning(f"{SNAPSHOT} Could not preserve deleted {rel}: {e}")
            return FileOutcome.degraded(rel, f"could not preserve content: {e}")

        try:
            source.unlink()
        except OSError as e:
            logger.warning(f"{SNAPSHOT} Preserved {rel} but could not remove snapshot copy: {e}")
            return FileOutcome.degraded(rel, f"snapshot copy not removed: {e}")

        logger.debug(f"{SNAPSHOT} Preserved deleted {rel}")
        return FileOutcome.ok(rel)


__all__ = ["CommitOutcome", "CommitResult", "SnapshotManager", "copy_file"]
