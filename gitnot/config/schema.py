# gitnot/config/schema.py
"""
Configuration schema for file tracking.

Mirrors .gitnot/config.json:

    {
      "extensions": [".txt", ".md", ...],
      "ignore_patterns": ["*.tmp", "*.bak"]
    }
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_EXTENSIONS: List[str] = [
    ".txt",
    ".md",
    ".csv",
    ".log",
    ".py",
    ".js",
    ".sh",
    ".html",
    ".css",
    ".c",
    ".java",
    ".json",
    ".yaml",
    ".yml",
    ".ini",
    ".toml",
    ".xml",
    ".rtf",
    ".go",
]

DEFAULT_IGNORE_PATTERNS: List[str] = ["*.tmp", "*.bak"]


class TrackingConfig(BaseModel):
    """
    Which files in the working tree are tracked.

    Attributes:
        extensions: File-name suffixes to track (case-insensitive).
        ignore_patterns: `dir/*` segment patterns, globs, or exact file names.
    """

    model_config = ConfigDict(extra="ignore")

    extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="Tracked file-name suffixes",
    )
    ignore_patterns: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS),
        description="Ignore rules applied after the extension filter",
    )

    @field_validator("extensions")
    @classmethod
    def _extensions_not_empty(cls, value: List[str]) -> List[str]:
        cleaned = [ext.strip() for ext in value if ext.strip()]
        if not cleaned:
            raise ValueError("extensions must contain at least one suffix")
        return cleaned

    @field_validator("ignore_patterns")
    @classmethod
    def _strip_patterns(cls, value: List[str]) -> List[str]:
        return [pattern.strip() for pattern in value if pattern.strip()]


__all__ = ["TrackingConfig", "DEFAULT_EXTENSIONS", "DEFAULT_IGNORE_PATTERNS"]
