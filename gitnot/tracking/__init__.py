# gitnot/tracking/__init__.py
"""
Discovery of the files gitnot tracks.

Key exports:
- FileScanner / scan_tracked_files: sorted relative paths of tracked files
- should_ignore, has_tracked_extension, is_state_path: the filter rules
"""

from .scanner import (
    FileScanner,
    ScanResult,
    has_tracked_extension,
    is_state_path,
    scan_tracked_files,
    should_ignore,
)

__all__ = [
    "FileScanner",
    "ScanResult",
    "scan_tracked_files",
    "should_ignore",
    "has_tracked_extension",
    "is_state_path",
]
