# gitnot/checkpoint/differ.py
"""
Line-oriented unified diff between two text blobs.

Both sides are read best-effort: a missing or unreadable file counts as
empty text, so a diff degrades to "no previous content" instead of failing
the checkpoint.
"""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import List

from gitnot.logging.logger import get_logger
from gitnot.logging.tags import CHANGELOG

logger = get_logger(__name__)

CONTEXT_LINES = 3
NO_NEWLINE_MARKER = "\\ No newline at end of file"


def read_text_best_effort(path: Path) -> str:
    """File content as text, or "" when it can't be read."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"{CHANGELOG} Treating {path} as empty: {e}")
        return ""


def unified_diff(
    old_text: str,
    new_text: str,
    from_label: str = "before",
    to_label: str = "after",
) -> str:
    """
    Compute a unified diff with 3 lines of context.

    A last line without a trailing newline is followed by the conventional
    "\\ No newline at end of file" marker.

    Returns:
        The diff text, or "" when both sides are identical
    """
    old_lines = _split_lines(old_text)
    new_lines = _split_lines(new_text)

    out: List[str] = []
    for line in difflib.unified_diff(
        old_lines,
        new_lines,
        fromfile=from_label,
        tofile=to_label,
        n=CONTEXT_LINES,
    ):
        if line.endswith("\n"):
            out.append(line)
        else:
            out.append(f"{line}\n{NO_NEWLINE_MARKER}\n")
    return "".join(out)


def _split_lines(text: str) -> List[str]:
    # Lines end at "\n" only
    pieces = text.split("\n")
    lines = [f"{piece}\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def diff_files(old_path: Path, new_path: Path) -> str:
    """Unified diff of two files, each read best-effort."""
    return unified_diff(read_text_best_effort(old_path), read_text_best_effort(new_path))


__all__ = [
    "CONTEXT_LINES",
    "NO_NEWLINE_MARKER",
    "read_text_best_effort",
    "unified_diff",
    "diff_files",
]
