# gitnot/checkpoint/engine.py
"""
Checkpoint engine.

Orchestrates one run against a CheckpointStore:

    initialize  seed snapshot, changelogs, fingerprints, version 0.0
    status      classify only, zero writes
    update      the checkpoint:
                1. Load stored fingerprints
                2. Fingerprint the live files
                3. Classify (stop here if nothing changed)
                4. Bump the version once, take one timestamp
                5-7. Append changelog entries for new / changed / deleted files
                8. Commit the snapshot mirror
                9. Persist fingerprints
    show        current version and tracked paths

Fingerprints are always the last write. A run that stops early therefore
looks like "not checkpointed yet" to the next run, which replays it.
Per-file problems never abort a run; they become FileOutcomes in the report.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from gitnot.config.loader import ensure_default_config
from gitnot.core.exceptions import (
    AlreadyInitializedError,
    SnapshotCommitError,
    SnapshotMissingError,
    StorePersistenceError,
)
from gitnot.logging.logger import get_logger
from gitnot.logging.tags import CHECKPOINT

from .changelog import (
    DELETED_BODY,
    DIFF_SKIPPED_BODY,
    NEW_FILE_BODY,
    format_timestamp,
    render_diff_markdown,
)
from .classifier import classify
from .differ import diff_files
from .fingerprints import FingerprintStore
from .hashing import is_sentinel
from .models import (
    FileOutcome,
    InitReport,
    OutcomeKind,
    OutcomeLog,
    ShowReport,
    StatusReport,
    UpdateReport,
)
from .store import CheckpointStore

logger = get_logger(__name__)

Clock = Callable[[], datetime]

_SEVERITY = {OutcomeKind.OK: 0, OutcomeKind.SKIPPED: 1, OutcomeKind.DEGRADED: 2}


class CheckpointEngine:
    """
    Runs initialize / status / update / show against one store.

    Usage:
        engine = CheckpointEngine(CheckpointStore.open("."))
        report = engine.update()
        print(report)  # "v0.3: new=1, changed=2, deleted=0, ..."
    """

    def __init__(self, store: CheckpointStore, clock: Optional[Clock] = None) -> None:
        """
        Args:
            store: The on-disk stores to operate on
            clock: Source of the changelog timestamp. Defaults to local time.
        """
        self._store = store
        self._clock = clock or datetime.now

    @property
    def store(self) -> CheckpointStore:
        return self._store

    # =========================================================================
    # Initialize
    # =========================================================================

    def initialize(self, reset: bool = False) -> InitReport:
        """
        Start tracking the working tree at v0.0.

        Args:
            reset: Re-seed over existing state instead of refusing

        Raises:
            AlreadyInitializedError: If state exists and reset is False
            StorePersistenceError: If a directory or state file can't be written
        """
        store = self._store
        if store.is_initialized() and not reset:
            raise AlreadyInitializedError(store.paths.state_dir)

        report = InitReport()
        store.ensure_layout()
        report.wrote_default_config = ensure_default_config(store.paths.config_file)

        files = store.list_files()
        copied, skipped = store.snapshots.seed(files)
        for outcome in skipped:
            report.record(outcome)

        for rel in copied:
            try:
                store.changelogs.write_original(rel)
            except StorePersistenceError as e:
                logger.warning(f"{CHECKPOINT} {e}")
                report.record(FileOutcome.degraded(rel, f"changelog not written: {e}"))
                continue
            report.record(FileOutcome.ok(rel))

        store.fingerprints.save(FingerprintStore.compute(store.root, copied))
        store.version.write(0.0)

        report.tracked = list(copied)
        logger.info(f"{CHECKPOINT} {report}")
        return report

    # =========================================================================
    # Status
    # =========================================================================

    def status(self) -> StatusReport:
        """
        Classify pending changes without writing anything.

        Raises:
            NotInitializedError: If the store was never initialized
        """
        store = self._store
        store.require_initialized()

        before = store.fingerprints.load()
        current = FingerprintStore.compute(store.root, store.list_files())
        return StatusReport(classification=classify(before, current))

    # =========================================================================
    # Update
    # =========================================================================

    def update(self) -> UpdateReport:
        """
        Record a checkpoint of everything that changed since the last one.

        Raises:
            NotInitializedError: If the store was never initialized
            SnapshotMissingError: If the snapshot mirror is gone
            SnapshotCommitError: If the new mirror couldn't be swapped in
            StorePersistenceError: If the version or fingerprints can't be written
        """
        store = self._store
        store.require_initialized()

        # 1-3. Classify
        before = store.fingerprints.load()
        files = store.list_files()
        current = FingerprintStore.compute(store.root, files)
        classification = classify(before, current)

        report = UpdateReport(classification=classification, tracked=len(files))
        if not classification.has_changes:
            logger.info(f"{CHECKPOINT} No changes detected")
            return report

        # 4. One version and one timestamp for the whole run
        version = store.version.bump()
        timestamp = format_timestamp(self._clock())
        report.version = version
        report.timestamp = timestamp

        # 5. New files
        for rel in classification.new:
            report.record(self._append(rel, version, timestamp, NEW_FILE_BODY))

        # 6. Changed files
        for rel in classification.changed:
            report.record(self._record_change(rel, version, timestamp, current[rel]))

        # 7. Deleted files
        for rel in classification.deleted:
            logged = self._append(rel, version, timestamp, DELETED_BODY)
            preserved = store.snapshots.relocate_deleted(rel)
            report.record(_worst(logged, preserved))

        # 8. Snapshot
        if not store.snapshots.exists():
            logger.warning(f"{CHECKPOINT} Snapshot folder missing at {store.snapshots.directory}")
            raise SnapshotMissingError(store.snapshots.directory)

        result = store.snapshots.commit(files)
        if not result.ok:
            raise SnapshotCommitError(result.outcome, result.detail, store.snapshots.directory)

        # 9. Fingerprints last
        store.fingerprints.save(current)

        _log_outcomes(report)
        logger.info(f"{CHECKPOINT} {report}")
        return report

    def _record_change(self, rel: str, version: float, timestamp: str, fingerprint: str) -> FileOutcome:
        """Diff the snapshot copy against the live file and log it."""
        store = self._store
        if is_sentinel(fingerprint):
            return self._skip_diff(rel, version, timestamp, "file unreadable, diff skipped")
        if not store.snapshots.has_copy(rel):
            return self._skip_diff(rel, version, timestamp, "snapshot copy missing, diff skipped")

        diff_text = diff_files(store.paths.snapshot_file(rel), store.paths.working_file(rel))
        return self._append(rel, version, timestamp, render_diff_markdown(diff_text))

    def _skip_diff(self, rel: str, version: float, timestamp: str, reason: str) -> FileOutcome:
        appended = self._append(rel, version, timestamp, DIFF_SKIPPED_BODY)
        if not appended.is_ok:
            return appended
        return FileOutcome.degraded(rel, reason)

    def _append(self, rel: str, version: float, timestamp: str, body: str) -> FileOutcome:
        try:
            self._store.changelogs.append_entry(rel, version, timestamp, body)
        except StorePersistenceError as e:
            logger.warning(f"{CHECKPOINT} {e}")
            return FileOutcome.degraded(rel, f"changelog not written: {e}")
        return FileOutcome.ok(rel)

    # =========================================================================
    # Show
    # =========================================================================

    def show(self) -> ShowReport:
        """Current version and the paths recorded by the last checkpoint."""
        store = self._store
        return ShowReport(
            version=store.version.read(),
            tracked=sorted(store.fingerprints.load()),
        )


def _worst(*outcomes: FileOutcome) -> FileOutcome:
    return max(outcomes, key=lambda o: _SEVERITY[o.kind])


def _log_outcomes(report: OutcomeLog) -> None:
    for outcome in report.degraded:
        logger.warning(f"{CHECKPOINT} Degraded {outcome.path}: {outcome.reason}")
    for outcome in report.skipped:
        logger.debug(f"{CHECKPOINT} Skipped {outcome.path}: {outcome.reason}")


# =============================================================================
# Convenience functions
# =============================================================================


def initialize(store: CheckpointStore, reset: bool = False) -> InitReport:
    return CheckpointEngine(store).initialize(reset=reset)


def status(store: CheckpointStore) -> StatusReport:
    return CheckpointEngine(store).status()


def update(store: CheckpointStore, clock: Optional[Clock] = None) -> UpdateReport:
    return CheckpointEngine(store, clock=clock).update()


def show(store: CheckpointStore) -> ShowReport:
    return CheckpointEngine(store).show()


__all__ = ["Clock", "CheckpointEngine", "initialize", "status", "update", "show"]
