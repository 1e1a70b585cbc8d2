# gitnot/checkpoint/fingerprints.py
"""
Fingerprint store for .gitnot/hashes.json.

Key responsibilities:
- Load the "before" map (empty on any read or parse problem)
- Compute the "after" map for the live file list
- Save the map wholesale, as the last write of a successful run

Key non-responsibilities:
- NO classification (that's the classifier's job)
- NO partial updates on disk
"""

from __future__ import annotations

import json
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Dict, Iterable

from pydantic import TypeAdapter, ValidationError

from gitnot.core.exceptions import StorePersistenceError
from gitnot.logging.logger import get_logger
from gitnot.logging.tags import HASH

from .hashing import compute_fingerprint

logger = get_logger(__name__)

FingerprintMap = Dict[str, str]

_MAP_ADAPTER = TypeAdapter(Dict[str, str])


class FingerprintStore:
    """
    Manages the persisted path -> fingerprint map.

    Usage:
        store = FingerprintStore(paths.hashes_file)
        before = store.load()
        after = store.compute(root, files)
        ...
        store.save(after)
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> FingerprintMap:
        """
        Load the persisted map.

        Never fails: a missing, unreadable, or malformed file yields {}.
        Keys that would escape the working tree (absolute, or with ".."
        segments) are dropped.
        """
        if not self._path.exists():
            logger.debug(f"{HASH} No fingerprint store at {self._path}")
            return {}

        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            fingerprints = _MAP_ADAPTER.validate_python(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"{HASH} Failed to load fingerprints, starting empty: {e}")
            return {}

        loaded: FingerprintMap = {}
        for rel, digest in fingerprints.items():
            rel = _normalize(rel)
            if not is_safe_relative(rel):
                logger.warning(f"{HASH} Dropping unsafe path {rel!r} from {self._path}")
                continue
            loaded[rel] = digest
        return loaded

    def save(self, fingerprints: FingerprintMap) -> None:
        """
        Replace the persisted map.

        Written to a temp file first, then moved into place.

        Raises:
            StorePersistenceError: If the map cannot be written
        """
        temp_path = self._path.with_suffix(".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as f:
                json.dump(dict(sorted(fingerprints.items())), f, indent=2)
                f.write("\n")
            temp_path.replace(self._path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise StorePersistenceError("Could not save fingerprints", path=self._path, cause=e) from e

        logger.debug(f"{HASH} Saved {len(fingerprints)} fingerprints to {self._path}")

    @staticmethod
    def compute(root: Path, files: Iterable[str]) -> FingerprintMap:
        """Fingerprint every live file, keyed by its relative path."""
        return {_normalize(rel): compute_fingerprint(root / rel) for rel in files}


def _normalize(rel: str) -> str:
    return rel.replace("\\", "/")


def is_safe_relative(rel: str) -> bool:
    """True for a non-empty relative path that stays inside the working tree."""
    if not rel or PurePosixPath(rel).is_absolute() or PureWindowsPath(rel).drive:
        return False
    return ".." not in PurePosixPath(rel).parts


__all__ = ["FingerprintMap", "FingerprintStore", "is_safe_relative"]
