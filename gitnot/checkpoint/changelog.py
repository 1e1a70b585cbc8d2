# gitnot/checkpoint/changelog.py
"""
Per-file changelogs under .gitnot/changelogs/<relative path>.log.

Two parts:
- render_diff_markdown(): turns a unified diff into an Added/Removed summary
  with line numbers. Presentation only, it never touches version state.
- ChangelogStore: append-only writer for the version-stamped entries.

Changelog format:

    # notes.txt — original v0.0

    ## v0.1 – 2026-10-18 14:03
    ### ➕ Added
    L1: y

    ### ➖ Removed
    L1: x
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from gitnot.core.exceptions import StorePersistenceError
from gitnot.core.paths import StorePaths
from gitnot.logging.logger import get_logger
from gitnot.logging.tags import CHANGELOG

from .version import format_version

logger = get_logger(__name__)

# =============================================================================
# Entry bodies
# =============================================================================

NEW_FILE_BODY = "📄 New file added.\n"
DELETED_BODY = "🔻 File was deleted.\n"
NO_READABLE_DIFF_BODY = "📄 File changed (no readable diff)\n"
DIFF_SKIPPED_BODY = "📄 File changed (encoding issues, diff skipped)\n"
WHITESPACE_ONLY_BODY = "📄 Whitespace-only changes\n"

ADDED_HEADING = "### ➕ Added"
REMOVED_HEADING = "### ➖ Removed"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

_ENTRY_HEADING = re.compile(r"^## v(?P<version>\d+\.\d) – (?P<timestamp>.+)$")


# =============================================================================
# Diff rendering
# =============================================================================


def render_diff_markdown(diff_text: str) -> str:
    """
    Summarize a unified diff as line-numbered Added/Removed sections.

    Walks the diff tracking the old-side and new-side line numbers, reset at
    every hunk header. A removed line directly followed by an added line with
    the same trimmed content is whitespace churn and is dropped.

    Args:
        diff_text: Output of the text differ

    Returns:
        Markdown body for a changelog entry
    """
    if not diff_text:
        return NO_READABLE_DIFF_BODY

    lines = diff_text.split("\n")
    added: List[str] = []
    removed: List[str] = []
    old_ln = new_ln = 0
    in_hunk = False
    i = 0

    while i < len(lines):
        line = lines[i]

        if line.startswith("@@"):
            old_ln, new_ln = _parse_hunk_header(line, old_ln, new_ln)
            in_hunk = True
            i += 1
            continue

        # File headers (--- / +++) come before the first hunk
        if not in_hunk or not line:
            i += 1
            continue

        if line.startswith("\\"):
            i += 1
            continue

        if line.startswith("-"):
            partner = _next_diff_line(lines, i + 1)
            if (
                partner is not None
                and lines[partner].startswith("+")
                and line[1:].strip() == lines[partner][1:].strip()
            ):
                old_ln += 1
                new_ln += 1
                i = partner + 1
                continue
            removed.append(f"L{old_ln}: {line[1:].strip()}")
            old_ln += 1
        elif line.startswith("+"):
            added.append(f"L{new_ln}: {line[1:].strip()}")
            new_ln += 1
        else:
            old_ln += 1
            new_ln += 1
        i += 1

    if not added and not removed:
        return WHITESPACE_ONLY_BODY

    parts: List[str] = []
    if added:
        parts.append(ADDED_HEADING + "\n" + "".join(f"{entry}\n" for entry in added) + "\n")
    if removed:
        parts.append(REMOVED_HEADING + "\n" + "".join(f"{entry}\n" for entry in removed) + "\n")
    return "".join(parts)


def _parse_hunk_header(line: str, old_ln: int, new_ln: int) -> Tuple[int, int]:
    """Starting line numbers from "@@ -a,b +c,d @@"; unchanged if malformed."""
    fields = line.split()
    if len(fields) < 3:
        return old_ln, new_ln
    return _range_start(fields[1], "-", old_ln), _range_start(fields[2], "+", new_ln)


def _range_start(field: str, sign: str, fallback: int) -> int:
    if not field.startswith(sign):
        return fallback
    try:
        return int(field[1:].split(",")[0])
    except ValueError:
        return fallback


def _next_diff_line(lines: List[str], start: int) -> Optional[int]:
    """Index of the next line that isn't a no-newline marker."""
    for j in range(start, len(lines)):
        if not lines[j].startswith("\\"):
            return j
    return None


# =============================================================================
# Entries
# =============================================================================


def format_timestamp(moment) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def format_entry(version: float, timestamp: str, body: str) -> str:
    return f"\n## v{format_version(version)} – {timestamp}\n{body}"


def original_header(rel: str) -> str:
    return f"# {rel} — original v0.0\n"


def tracked_since_header(rel: str, version: float) -> str:
    return f"# {rel} — tracked since v{format_version(version)}\n"


@dataclass(frozen=True)
class ChangelogEntry:
    """One version-stamped block parsed back from a changelog."""

    version: str
    timestamp: str
    body: str


class ChangelogStore:
    """
    Append-only changelog files, one per tracked path.

    Deleted files keep their changelog forever.

    Usage:
        changelogs = ChangelogStore(paths)
        changelogs.write_original("notes.txt")
        changelogs.append_entry("notes.txt", 0.1, "2026-10-18 14:03", NEW_FILE_BODY)
    """

    def __init__(self, paths: StorePaths) -> None:
        self._paths = paths

    def exists(self, rel: str) -> bool:
        return self._paths.changelog_file(rel).exists()

    def write_original(self, rel: str) -> None:
        """Record initial tracking at v0.0."""
        self._append(rel, original_header(rel))

    def append_entry(self, rel: str, version: float, timestamp: str, body: str) -> None:
        """
        Append one entry; a changelog created here starts with a header.

        Raises:
            StorePersistenceError: If the changelog cannot be written
        """
        text = format_entry(version, timestamp, body)
        if not self.exists(rel):
            text = tracked_since_header(rel, version) + text
        self._append(rel, text)
        logger.debug(f"{CHANGELOG} v{format_version(version)} entry for {rel}")

    def read(self, rel: str) -> str:
        path = self._paths.changelog_file(rel)
        if not path.exists():
            return ""
        return path.read_text(encoding="utf-8")

    def read_entries(self, rel: str) -> List[ChangelogEntry]:
        """Version-stamped entries in file order (the header is not an entry)."""
        entries: List[ChangelogEntry] = []
        current: Optional[Tuple[str, str]] = None
        body: List[str] = []

        for line in self.read(rel).splitlines():
            match = _ENTRY_HEADING.match(line)
            if match:
                if current is not None:
                    entries.append(ChangelogEntry(*current, body="\n".join(body).strip()))
                current = (match.group("version"), match.group("timestamp"))
                body = []
            elif current is not None:
                body.append(line)

        if current is not None:
            entries.append(ChangelogEntry(*current, body="\n".join(body).strip()))
        return entries

    def _append(self, rel: str, text: str) -> None:
        path = self._paths.changelog_file(rel)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise StorePersistenceError("Could not append to changelog", path=path, cause=e) from e


__all__ = [
    "NEW_FILE_BODY",
    "DELETED_BODY",
    "NO_READABLE_DIFF_BODY",
    "DIFF_SKIPPED_BODY",
    "WHITESPACE_ONLY_BODY",
    "ADDED_HEADING",
    "REMOVED_HEADING",
    "render_diff_markdown",
    "format_timestamp",
    "format_entry",
    "ChangelogEntry",
    "ChangelogStore",
]
