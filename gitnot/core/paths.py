# gitnot/core/paths.py
"""
Path layout of the .gitnot/ state directory.

ALL components that need a state path should ask StorePaths for it.
No hardcoded state paths anywhere else in the codebase.

Layout:
    {root}/.gitnot/
    ├── version.txt
    ├── hashes.json
    ├── config.json
    ├── snapshot/<relative path>
    ├── changelogs/<relative path>.log
    └── deleted/<relative path>
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

STATE_DIR_NAME = ".gitnot"


@dataclass(frozen=True)
class StorePaths:
    """
    Resolved state paths for one working tree.

    Usage:
        paths = StorePaths.for_root(Path.cwd())
        paths.snapshot_file("src/app.py")
    """

    root: Path

    @classmethod
    def for_root(cls, root: str | Path) -> "StorePaths":
        return cls(root=Path(root).resolve())

    # =========================================================================
    # Directories
    # =========================================================================

    @property
    def state_dir(self) -> Path:
        return self.root / STATE_DIR_NAME

    @property
    def snapshot_dir(self) -> Path:
        return self.state_dir / "snapshot"

    @property
    def changelog_dir(self) -> Path:
        return self.state_dir / "changelogs"

    @property
    def deleted_dir(self) -> Path:
        return self.state_dir / "deleted"

    # =========================================================================
    # Files
    # =========================================================================

    @property
    def version_file(self) -> Path:
        return self.state_dir / "version.txt"

    @property
    def hashes_file(self) -> Path:
        return self.state_dir / "hashes.json"

    @property
    def config_file(self) -> Path:
        return self.state_dir / "config.json"

    # =========================================================================
    # Per tracked file
    # =========================================================================

    def working_file(self, rel: str) -> Path:
        """Live copy of a tracked file."""
        return self.root / rel

    def snapshot_file(self, rel: str) -> Path:
        return self.snapshot_dir / rel

    def changelog_file(self, rel: str) -> Path:
        return self.changelog_dir / f"{rel}.log"

    def deleted_file(self, rel: str) -> Path:
        return self.deleted_dir / rel


__all__ = ["STATE_DIR_NAME", "StorePaths"]
