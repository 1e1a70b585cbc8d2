# tests/conftest.py
"""
Shared fixtures.

Every test works on its own working tree under tmp_path; nothing touches the
real current directory.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Dict

import pytest

from gitnot.checkpoint.engine import CheckpointEngine
from gitnot.checkpoint.store import CheckpointStore
from gitnot.core.paths import StorePaths

FIXED_MOMENT = datetime(2026, 10, 18, 14, 3)
FIXED_TIMESTAMP = "2026-10-18 14:03"


class FixedClock:
    """Clock returning the same moment every call."""

    def __init__(self, moment: datetime = FIXED_MOMENT) -> None:
        self.moment = moment
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return self.moment


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Empty working tree."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_files(project: Path) -> Callable[[Dict[str, str]], None]:
    """Write {relative path: text} into the working tree."""

    def _write(files: Dict[str, str]) -> None:
        for rel, text in files.items():
            target = project / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(text.encode("utf-8"))

    return _write


@pytest.fixture
def paths(project: Path) -> StorePaths:
    return StorePaths.for_root(project)


@pytest.fixture
def store(project: Path) -> CheckpointStore:
    return CheckpointStore.open(project)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def engine(store: CheckpointStore, clock: FixedClock) -> CheckpointEngine:
    return CheckpointEngine(store, clock=clock)
