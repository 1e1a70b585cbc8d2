# tests/test_engine.py
"""
Tests for gitnot.checkpoint.engine module.

Covers the initialize / status / update / show run modes end to end on a
temp working tree.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from gitnot.checkpoint import snapshot as snapshot_module
from gitnot.checkpoint.changelog import (
    ADDED_HEADING,
    DELETED_BODY,
    DIFF_SKIPPED_BODY,
    NEW_FILE_BODY,
    REMOVED_HEADING,
)
from gitnot.checkpoint.engine import CheckpointEngine
from gitnot.checkpoint.hashing import compute_bytes_fingerprint
from gitnot.checkpoint.models import OutcomeKind
from gitnot.checkpoint.snapshot import CommitOutcome
from gitnot.checkpoint.store import CheckpointStore
from gitnot.core.exceptions import (
    AlreadyInitializedError,
    NotInitializedError,
    SnapshotCommitError,
    SnapshotMissingError,
)
from gitnot.core.paths import StorePaths

FIXED_TIMESTAMP = "2026-10-18 14:03"


def _state_files(paths: StorePaths) -> dict:
    """Every file under the state directory with its bytes."""
    return {
        p.relative_to(paths.state_dir).as_posix(): p.read_bytes()
        for p in sorted(paths.state_dir.rglob("*"))
        if p.is_file()
    }


class TestInitialize:
    def test_single_file(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})

        report = engine.initialize()

        assert report.tracked == ["a.txt"]
        assert paths.version_file.read_text(encoding="utf-8") == "0.0"
        assert paths.snapshot_file("a.txt").read_text(encoding="utf-8") == "x"
        assert paths.changelog_file("a.txt").read_text(encoding="utf-8") == (
            "# a.txt — original v0.0\n"
        )
        assert json.loads(paths.hashes_file.read_text(encoding="utf-8")) == {
            "a.txt": compute_bytes_fingerprint(b"x")
        }

    def test_creates_layout_and_default_config(self, engine: CheckpointEngine, paths: StorePaths):
        report = engine.initialize()

        assert report.tracked == []
        assert report.wrote_default_config
        assert paths.snapshot_dir.is_dir()
        assert paths.changelog_dir.is_dir()
        assert paths.deleted_dir.is_dir()
        assert paths.config_file.is_file()

    def test_respects_existing_config(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x", "b.md": "y"})
        paths.state_dir.mkdir()
        paths.config_file.write_text(json.dumps({"extensions": [".md"]}), encoding="utf-8")

        report = engine.initialize()

        assert report.tracked == ["b.md"]
        assert not report.wrote_default_config

    def test_refuses_existing_state(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        before = _state_files(paths)

        with pytest.raises(AlreadyInitializedError):
            engine.initialize()

        assert _state_files(paths) == before

    def test_reset_starts_over(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        write_files({"a.txt": "y"})
        engine.update()

        engine.initialize(reset=True)

        assert paths.version_file.read_text(encoding="utf-8") == "0.0"
        assert paths.snapshot_file("a.txt").read_text(encoding="utf-8") == "y"
        assert engine.status().has_changes is False

    def test_reset_marks_restart_in_existing_changelogs(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        write_files({"a.txt": "y"})
        engine.update()

        engine.initialize(reset=True)

        log = paths.changelog_file("a.txt").read_text(encoding="utf-8")
        header = "# a.txt — original v0.0\n"
        assert log.count(header) == 2
        assert log.index("## v0.1") < log.rindex(header)

    def test_vanished_file_is_skipped(self, project: Path, paths: StorePaths, clock, write_files):
        write_files({"a.txt": "x"})
        store = CheckpointStore.open(project, lister=lambda root, config: ["a.txt", "ghost.txt"])

        report = CheckpointEngine(store, clock=clock).initialize()

        assert report.tracked == ["a.txt"]
        assert [o.path for o in report.skipped] == ["ghost.txt"]
        assert json.loads(paths.hashes_file.read_text(encoding="utf-8")).keys() == {"a.txt"}


class TestStatus:
    def test_requires_initialization(self, engine: CheckpointEngine, paths: StorePaths):
        with pytest.raises(NotInitializedError):
            engine.status()

        assert not paths.state_dir.exists()

    def test_reports_without_writing(self, engine: CheckpointEngine, paths: StorePaths, project: Path, write_files):
        write_files({"a.txt": "x", "b.txt": "b"})
        engine.initialize()
        write_files({"a.txt": "y", "c.txt": "c"})
        (project / "b.txt").unlink()
        before = _state_files(paths)

        report = engine.status()

        c = report.classification
        assert (c.new, c.changed, c.deleted) == (("c.txt",), ("a.txt",), ("b.txt",))
        assert _state_files(paths) == before

    def test_preview_is_bounded(self, engine: CheckpointEngine, write_files):
        engine.initialize()
        write_files({f"f{i}.txt": str(i) for i in range(5)})

        preview = engine.status().preview()

        assert preview["new"].shown == ("f0.txt", "f1.txt", "f2.txt")
        assert preview["new"].overflow == 2
        assert preview["changed"].total == 0


class TestUpdate:
    def test_requires_initialization(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})

        with pytest.raises(NotInitializedError):
            engine.update()

        assert not paths.state_dir.exists()

    def test_changed_file(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        write_files({"a.txt": "y"})

        report = engine.update()

        assert report.version == 0.1
        assert report.timestamp == FIXED_TIMESTAMP
        assert paths.version_file.read_text(encoding="utf-8") == "0.1"
        log = paths.changelog_file("a.txt").read_text(encoding="utf-8")
        assert f"## v0.1 – {FIXED_TIMESTAMP}" in log
        added = log.index(ADDED_HEADING)
        removed = log.index(REMOVED_HEADING)
        assert log.index("L1: y", added) < removed
        assert log.index("L1: x", removed) > removed
        assert paths.snapshot_file("a.txt").read_text(encoding="utf-8") == "y"

    def test_deleted_file(self, engine: CheckpointEngine, paths: StorePaths, project: Path, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        (project / "a.txt").unlink()

        report = engine.update()

        assert report.version == 0.1
        assert paths.deleted_file("a.txt").read_text(encoding="utf-8") == "x"
        assert not paths.snapshot_file("a.txt").exists()
        assert "a.txt" not in json.loads(paths.hashes_file.read_text(encoding="utf-8"))
        assert paths.changelog_file("a.txt").read_text(encoding="utf-8").endswith(DELETED_BODY)

    def test_new_file(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        engine.initialize()
        write_files({"docs/new.md": "hello"})

        report = engine.update()

        assert report.classification.new == ("docs/new.md",)
        log = paths.changelog_file("docs/new.md").read_text(encoding="utf-8")
        assert log.startswith("# docs/new.md — tracked since v0.1\n")
        assert log.endswith(NEW_FILE_BODY)
        assert paths.snapshot_file("docs/new.md").read_text(encoding="utf-8") == "hello"

    def test_second_update_is_a_no_op(self, engine: CheckpointEngine, paths: StorePaths, clock, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        write_files({"a.txt": "y"})
        engine.update()
        before = _state_files(paths)
        calls = clock.calls

        report = engine.update()

        assert not report.has_changes
        assert report.version is None
        assert str(report) == "no changes"
        assert _state_files(paths) == before
        assert paths.version_file.read_text(encoding="utf-8") == "0.1"
        assert clock.calls == calls

    def test_version_increases_by_one_step_per_change(self, engine: CheckpointEngine, write_files):
        write_files({"a.txt": "0"})
        engine.initialize()

        versions = []
        for i in range(1, 13):
            write_files({"a.txt": str(i)})
            versions.append(engine.update().version)
            engine.update()

        assert versions == [round(0.1 * i, 1) for i in range(1, 13)]

    def test_changelog_is_append_only(self, engine: CheckpointEngine, store: CheckpointStore, write_files):
        write_files({"a.txt": "one\n"})
        engine.initialize()

        history = []
        for text in ("two\n", "two\nthree\n", "three\n"):
            write_files({"a.txt": text})
            engine.update()
            history.append(store.changelogs.read("a.txt"))

        for earlier, later in zip(history, history[1:]):
            assert later.startswith(earlier)
        assert [e.version for e in store.changelogs.read_entries("a.txt")] == ["0.1", "0.2", "0.3"]

    def test_entries_of_one_run_share_timestamp(self, engine: CheckpointEngine, store: CheckpointStore, project: Path, write_files):
        write_files({"a.txt": "x", "b.txt": "b"})
        engine.initialize()
        write_files({"a.txt": "y", "c.txt": "c"})
        (project / "b.txt").unlink()

        engine.update()

        for rel in ("a.txt", "b.txt", "c.txt"):
            (entry,) = store.changelogs.read_entries(rel)
            assert entry.version == "0.1"
            assert entry.timestamp == FIXED_TIMESTAMP

    def test_snapshot_matches_working_tree(self, engine: CheckpointEngine, paths: StorePaths, project: Path, write_files):
        write_files({"a.txt": "x", "src/b.py": "b = 1\n"})
        engine.initialize()
        write_files({"a.txt": "y\n", "src/c.py": "c = 2\n"})
        (project / "src" / "b.py").unlink()

        engine.update()

        mirrored = {
            p.relative_to(paths.snapshot_dir).as_posix(): p.read_bytes()
            for p in paths.snapshot_dir.rglob("*")
            if p.is_file()
        }
        assert mirrored == {"a.txt": b"y\n", "src/c.py": b"c = 2\n"}

    def test_missing_snapshot_copy_is_degraded(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        paths.snapshot_file("a.txt").unlink()
        write_files({"a.txt": "y"})

        report = engine.update()

        assert [(o.path, o.kind) for o in report.degraded] == [("a.txt", OutcomeKind.DEGRADED)]
        assert paths.changelog_file("a.txt").read_text(encoding="utf-8").endswith(DIFF_SKIPPED_BODY)
        assert paths.snapshot_file("a.txt").read_text(encoding="utf-8") == "y"

    def test_missing_snapshot_directory_aborts(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        hashes_before = paths.hashes_file.read_bytes()
        shutil.rmtree(paths.snapshot_dir)
        write_files({"a.txt": "y"})

        with pytest.raises(SnapshotMissingError):
            engine.update()

        assert paths.hashes_file.read_bytes() == hashes_before
        assert not paths.snapshot_dir.exists()

    def test_interrupted_run_is_replayed(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        shutil.rmtree(paths.snapshot_dir)
        write_files({"a.txt": "y"})
        with pytest.raises(SnapshotMissingError):
            engine.update()
        paths.snapshot_dir.mkdir()

        report = engine.update()

        assert report.classification.changed == ("a.txt",)
        assert report.version == 0.2

    def test_failed_commit_keeps_fingerprints(self, engine: CheckpointEngine, paths: StorePaths, write_files, monkeypatch):
        write_files({"a.txt": "x"})
        engine.initialize()
        hashes_before = paths.hashes_file.read_bytes()
        write_files({"a.txt": "y"})

        def _fail_mkdtemp(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(snapshot_module.tempfile, "mkdtemp", _fail_mkdtemp)

        with pytest.raises(SnapshotCommitError) as excinfo:
            engine.update()

        assert excinfo.value.outcome == CommitOutcome.ABORTED
        assert paths.hashes_file.read_bytes() == hashes_before
        assert paths.snapshot_file("a.txt").read_text(encoding="utf-8") == "x"

    def test_corrupt_fingerprints_treat_everything_as_new(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        paths.hashes_file.write_text("{oops", encoding="utf-8")

        report = engine.update()

        assert report.classification.new == ("a.txt",)
        assert json.loads(paths.hashes_file.read_text(encoding="utf-8")).keys() == {"a.txt"}


class TestShow:
    def test_version_and_tracked_files(self, engine: CheckpointEngine, write_files):
        write_files({"b.txt": "b", "a.txt": "a"})
        engine.initialize()
        write_files({"a.txt": "changed"})
        engine.update()

        report = engine.show()

        assert report.version == 0.1
        assert report.tracked == ["a.txt", "b.txt"]

    def test_uninitialized_is_empty(self, engine: CheckpointEngine):
        report = engine.show()

        assert report.version == 0.0
        assert report.tracked == []


class TestDamagedState:
    """Broken state files fall back to defaults instead of crashing."""

    def test_undecodable_fingerprints(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        engine.initialize()
        paths.hashes_file.write_bytes(b'{"a.txt": "\xff\xfe"}')

        assert engine.status().classification.new == ("a.txt",)
        report = engine.update()

        assert report.classification.new == ("a.txt",)

    @pytest.mark.parametrize("content", [b"nan", b"inf", b"1e308", b"\xff0.3"])
    def test_unusable_version_restarts_at_first_step(
        self, engine: CheckpointEngine, paths: StorePaths, write_files, content: bytes
    ):
        write_files({"a.txt": "x"})
        engine.initialize()
        paths.version_file.write_bytes(content)
        write_files({"a.txt": "y"})

        report = engine.update()

        assert report.version == 0.1
        assert paths.version_file.read_text(encoding="utf-8") == "0.1"

    def test_undecodable_config_uses_defaults(self, engine: CheckpointEngine, paths: StorePaths, write_files):
        write_files({"a.txt": "x"})
        paths.state_dir.mkdir()
        paths.config_file.write_bytes(b'{"extensions": ["\xff"]}')

        report = engine.initialize()

        assert report.tracked == ["a.txt"]
        assert engine.status().has_changes is False

    def test_escaping_fingerprint_keys_are_ignored(
        self, engine: CheckpointEngine, paths: StorePaths, project: Path, write_files
    ):
        write_files({"a.txt": "x"})
        engine.initialize()
        hashes = json.loads(paths.hashes_file.read_text(encoding="utf-8"))
        hashes["../../escape.txt"] = "0" * 40
        paths.hashes_file.write_text(json.dumps(hashes), encoding="utf-8")

        report = engine.update()

        assert not report.has_changes
        assert not (project / "escape.txt.log").exists()
        assert not (paths.state_dir / "escape.txt.log").exists()


class TestUnreadableFiles:
    def test_unreadable_changed_file_skips_diff(self, project: Path, paths: StorePaths, clock, write_files):
        write_files({"a.txt": "x"})
        store = CheckpointStore.open(project, lister=lambda root, config: ["a.txt"])
        engine = CheckpointEngine(store, clock=clock)
        engine.initialize()
        (project / "a.txt").unlink()
        (project / "a.txt").mkdir()

        with pytest.raises(SnapshotCommitError):
            engine.update()

        log = paths.changelog_file("a.txt").read_text(encoding="utf-8")
        assert log.endswith(DIFF_SKIPPED_BODY)
        assert REMOVED_HEADING not in log
