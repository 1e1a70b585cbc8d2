# gitnot/checkpoint/models.py
"""
Result types for checkpoint runs.

- FileOutcome: what happened to one file (ok / degraded / skipped)
- Classification: new / changed / deleted / unchanged path sets
- InitReport, StatusReport, UpdateReport, ShowReport: per-operation reports
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

PREVIEW_LIMIT = 3


class OutcomeKind(str, Enum):
    """How a single file fared during a run."""

    OK = "ok"
    DEGRADED = "degraded"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class FileOutcome:
    """Per-file result; degraded and skipped outcomes carry a reason."""

    path: str
    kind: OutcomeKind = OutcomeKind.OK
    reason: str = ""

    @classmethod
    def ok(cls, path: str) -> "FileOutcome":
        return cls(path=path)

    @classmethod
    def degraded(cls, path: str, reason: str) -> "FileOutcome":
        return cls(path=path, kind=OutcomeKind.DEGRADED, reason=reason)

    @classmethod
    def skipped(cls, path: str, reason: str) -> "FileOutcome":
        return cls(path=path, kind=OutcomeKind.SKIPPED, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.kind == OutcomeKind.OK


@dataclass(frozen=True)
class Classification:
    """
    Disjoint path sets from comparing stored and current fingerprints.

    Each tuple is sorted. Together they cover every path known before or now.
    """

    new: Tuple[str, ...] = ()
    changed: Tuple[str, ...] = ()
    deleted: Tuple[str, ...] = ()
    unchanged: Tuple[str, ...] = ()

    @property
    def has_changes(self) -> bool:
        return bool(self.new or self.changed or self.deleted)

    @property
    def summary(self) -> str:
        return (
            f"new={len(self.new)}, changed={len(self.changed)}, "
            f"deleted={len(self.deleted)}, unchanged={len(self.unchanged)}"
        )


@dataclass(frozen=True)
class Preview:
    """First few paths of a category plus how many were left out."""

    shown: Tuple[str, ...]
    total: int

    @property
    def overflow(self) -> int:
        return self.total - len(self.shown)

    @classmethod
    def of(cls, paths: Tuple[str, ...], limit: int = PREVIEW_LIMIT) -> "Preview":
        return cls(shown=tuple(paths[:limit]), total=len(paths))


@dataclass
class OutcomeLog:
    """Accumulates FileOutcomes for a run."""

    outcomes: List[FileOutcome] = field(default_factory=list)

    def record(self, outcome: FileOutcome) -> FileOutcome:
        self.outcomes.append(outcome)
        return outcome

    def of_kind(self, kind: OutcomeKind) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.kind == kind]

    @property
    def degraded(self) -> List[FileOutcome]:
        return self.of_kind(OutcomeKind.DEGRADED)

    @property
    def skipped(self) -> List[FileOutcome]:
        return self.of_kind(OutcomeKind.SKIPPED)


@dataclass
class InitReport(OutcomeLog):
    """Result of initialize."""

    version: float = 0.0
    tracked: List[str] = field(default_factory=list)
    wrote_default_config: bool = False

    def __str__(self) -> str:
        return f"initialized v{self.version:.1f}, tracking {len(self.tracked)} files"


@dataclass
class StatusReport:
    """Result of status (read-only)."""

    classification: Classification

    @property
    def has_changes(self) -> bool:
        return self.classification.has_changes

    def preview(self, limit: int = PREVIEW_LIMIT) -> dict[str, Preview]:
        c = self.classification
        return {
            "new": Preview.of(c.new, limit),
            "changed": Preview.of(c.changed, limit),
            "deleted": Preview.of(c.deleted, limit),
        }


@dataclass
class UpdateReport(OutcomeLog):
    """Result of update; version is None for a no-op run."""

    classification: Classification = field(default_factory=Classification)
    version: Optional[float] = None
    timestamp: Optional[str] = None
    tracked: int = 0

    @property
    def has_changes(self) -> bool:
        return self.classification.has_changes

    def __str__(self) -> str:
        if not self.has_changes or self.version is None:
            return "no changes"
        return (
            f"v{self.version:.1f}: {self.classification.summary}, "
            f"degraded {len(self.degraded)}, skipped {len(self.skipped)}"
        )


@dataclass
class ShowReport:
    """Current version and tracked paths."""

    version: float
    tracked: List[str] = field(default_factory=list)


__all__ = [
    "PREVIEW_LIMIT",
    "OutcomeKind",
    "FileOutcome",
    "Classification",
    "Preview",
    "OutcomeLog",
    "InitReport",
    "StatusReport",
    "UpdateReport",
    "ShowReport",
]
