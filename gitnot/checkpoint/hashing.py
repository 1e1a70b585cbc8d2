# gitnot/checkpoint/hashing.py
"""
Content fingerprints for change detection.

Design:
- Fingerprint is a SHA-1 hex digest of the raw file bytes
- Same content in different paths = same fingerprint
- Unreadable files get a stable sentinel derived from their base name, so
  one bad file never stops classification of the others
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Union

from gitnot.logging.logger import get_logger
from gitnot.logging.tags import HASH

logger = get_logger(__name__)

UNREADABLE_PREFIX = "unreadable-"
_CHUNK_SIZE = 8192


def compute_fingerprint(path: Union[str, Path]) -> str:
    """
    Compute the fingerprint of a file's contents.

    Args:
        path: Path to the file

    Returns:
        40-character hex digest, or "unreadable-<name>" if the file can't be read

    Examples:
        >>> compute_fingerprint("empty.txt")
        'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    """
    p = Path(path)
    hasher = hashlib.sha1()

    try:
        with p.open("rb") as f:
            while chunk := f.read(_CHUNK_SIZE):
                hasher.update(chunk)
    except OSError as e:
        logger.warning(f"{HASH} Could not read {p}: {e}")
        return unreadable_sentinel(p)

    return hasher.hexdigest()


def compute_bytes_fingerprint(data: bytes) -> str:
    """Fingerprint of content that's already in memory."""
    return hashlib.sha1(data).hexdigest()


def unreadable_sentinel(path: Union[str, Path]) -> str:
    """Sentinel fingerprint used in place of a digest for unreadable files."""
    return f"{UNREADABLE_PREFIX}{Path(path).name}"


def is_sentinel(fingerprint: str) -> bool:
    return fingerprint.startswith(UNREADABLE_PREFIX)


__all__ = [
    "UNREADABLE_PREFIX",
    "compute_fingerprint",
    "compute_bytes_fingerprint",
    "unreadable_sentinel",
    "is_sentinel",
]
