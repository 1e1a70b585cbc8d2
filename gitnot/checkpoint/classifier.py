# gitnot/checkpoint/classifier.py
"""
Change classification for a checkpoint.

Compares the stored fingerprints with the live ones:
- new:       present only now
- changed:   present in both, fingerprint differs
- deleted:   present only before
- unchanged: present in both, same fingerprint

This module ONLY computes the sets - it does NOT act on them.
"""

from __future__ import annotations

from typing import Mapping

from gitnot.logging.logger import get_logger
from gitnot.logging.tags import CHECKPOINT

from .models import Classification

logger = get_logger(__name__)


def classify(before: Mapping[str, str], current: Mapping[str, str]) -> Classification:
    """
    Classify every known path into exactly one of the four sets.

    Args:
        before: Fingerprints persisted by the last checkpoint
        current: Fingerprints of the live file list

    Returns:
        Classification with sorted, pairwise disjoint path tuples
    """
    before_paths = set(before)
    current_paths = set(current)

    changed = []
    unchanged = []
    for path in sorted(before_paths & current_paths):
        if before[path] != current[path]:
            changed.append(path)
        else:
            unchanged.append(path)

    result = Classification(
        new=tuple(sorted(current_paths - before_paths)),
        changed=tuple(changed),
        deleted=tuple(sorted(before_paths - current_paths)),
        unchanged=tuple(unchanged),
    )
    logger.info(f"{CHECKPOINT} Classified: {result.summary}")
    return result


__all__ = ["classify"]
