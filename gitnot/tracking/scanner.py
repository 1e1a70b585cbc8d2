# gitnot/tracking/scanner.py
"""
File scanner for change tracking.

Walks the working tree and returns the relative paths of every tracked file:
1. Skip the .gitnot/ state directory
2. Keep files whose name ends with a configured extension
3. Drop files matched by an ignore pattern

The result is sorted, de-duplicated, and slash-normalized.
"""

from __future__ import annotations

import fnmatch
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Tuple

from gitnot.config.schema import TrackingConfig
from gitnot.core.paths import STATE_DIR_NAME
from gitnot.logging.logger import get_logger
from gitnot.logging.tags import SCAN

logger = get_logger(__name__)


# =============================================================================
# Filter rules
# =============================================================================


def is_state_path(rel: str) -> bool:
    """True when a relative path lives inside the state directory."""
    parts = PurePosixPath(rel.replace("\\", "/")).parts
    return bool(parts) and parts[0] == STATE_DIR_NAME


def has_tracked_extension(name: str, extensions: Iterable[str]) -> bool:
    """Case-insensitive suffix match of a file name against the allowlist."""
    lower = name.lower()
    return any(lower.endswith(ext.lower()) for ext in extensions)


def should_ignore(rel: str, patterns: Iterable[str]) -> bool:
    """
    Check a relative path against ignore patterns.

    Pattern kinds:
        "node_modules/*"  any whole path segment named node_modules
        "*.tmp"           glob against the base name or the full path
        "notes.txt"       exact base name
    """
    posix = rel.replace("\\", "/")
    segments = posix.split("/")
    base = segments[-1]
    directories = segments[:-1]

    for pattern in patterns:
        if pattern.endswith("/*"):
            directory = pattern[:-2].strip("/")
            if not directory:
                continue
            if "/" in directory:
                if f"/{directory}/" in f"/{posix}":
                    return True
            elif directory in directories:
                return True
            continue

        if "*" in pattern or "?" in pattern:
            if fnmatch.fnmatchcase(base, pattern) or fnmatch.fnmatchcase(posix, pattern):
                return True
            continue

        if base == pattern:
            return True

    return False


# =============================================================================
# Scanner
# =============================================================================


@dataclass
class ScanResult:
    """
    Result of scanning a working tree.

    Contains tracked paths and any directories that could not be read.
    """

    root: str
    files: List[str] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)
    skipped_ignored: int = 0
    skipped_extension: int = 0

    @property
    def total_tracked(self) -> int:
        return len(self.files)


class FileScanner:
    """
    Scans a working tree for trackable files.

    Usage:
        scanner = FileScanner(config)
        result = scanner.scan("/path/to/project")

        for rel in result.files:
            print(rel)
    """

    def __init__(self, config: Optional[TrackingConfig] = None) -> None:
        self._config = config or TrackingConfig()

    def scan(self, root: str | Path) -> ScanResult:
        root_path = Path(root).resolve()
        result = ScanResult(root=str(root_path))
        found: set[str] = set()

        def _on_error(error: OSError) -> None:
            result.errors.append((str(error.filename), str(error)))

        for dirpath, dirnames, filenames in os.walk(root_path, onerror=_on_error):
            current = Path(dirpath)
            rel_dir = current.relative_to(root_path).as_posix()
            if rel_dir == ".":
                rel_dir = ""

            # Prune the state directory in place so os.walk never enters it
            dirnames[:] = sorted(
                d for d in dirnames if not is_state_path(f"{rel_dir}/{d}".lstrip("/"))
            )

            for name in filenames:
                rel = f"{rel_dir}/{name}" if rel_dir else name
                if not (current / name).is_file():
                    continue
                if not has_tracked_extension(name, self._config.extensions):
                    result.skipped_extension += 1
                    continue
                if should_ignore(rel, self._config.ignore_patterns):
                    result.skipped_ignored += 1
                    continue
                found.add(rel)

        result.files = sorted(found)

        for path, error in result.errors:
            logger.warning(f"{SCAN} Skipped unreadable directory {path}: {error}")
        logger.info(
            f"{SCAN} Scanned {result.root}: {result.total_tracked} tracked, "
            f"{result.skipped_extension} other extensions, {result.skipped_ignored} ignored"
        )
        return result


def scan_tracked_files(root: str | Path, config: Optional[TrackingConfig] = None) -> List[str]:
    """
    Convenience function returning only the tracked relative paths.

    Args:
        root: Working tree root
        config: Tracking config. If None, uses defaults.

    Returns:
        Sorted list of slash-normalized relative paths
    """
    return FileScanner(config).scan(root).files


__all__ = [
    "ScanResult",
    "FileScanner",
    "scan_tracked_files",
    "should_ignore",
    "has_tracked_extension",
    "is_state_path",
]
