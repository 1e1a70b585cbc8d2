# gitnot/checkpoint/version.py
"""
Monotonic version counter stored in .gitnot/version.txt.

The version is a decimal with exactly one fractional digit. Every successful
checkpoint advances it by 0.1; rounding is explicit so repeated bumps never
accumulate binary floating-point error.
"""

from __future__ import annotations

import math
from pathlib import Path

from gitnot.core.exceptions import StorePersistenceError
from gitnot.logging.logger import get_logger
from gitnot.logging.tags import CHECKPOINT

logger = get_logger(__name__)

VERSION_STEP = 0.1

# Anything larger can't be bumped and formatted as one decimal
MAX_VERSION = 1e12


def round_version(value: float) -> float:
    """Round to one decimal: x10, +0.5, truncate, /10."""
    return int(value * 10 + 0.5) / 10.0


def format_version(value: float) -> str:
    return f"{value:.1f}"


class VersionCounter:
    """
    Reads, writes, and bumps the version file.

    Usage:
        counter = VersionCounter(paths.version_file)
        counter.read()   # 0.0 when absent
        counter.bump()   # 0.1
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read(self) -> float:
        """
        Current version.

        Returns 0.0 if the file is absent or doesn't hold a usable number
        (undecodable bytes, NaN, infinity, negative, or above MAX_VERSION).
        """
        try:
            text = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return 0.0
        except UnicodeDecodeError:
            logger.warning(f"{CHECKPOINT} Undecodable version file {self._path}, treating as 0.0")
            return 0.0
        except OSError as e:
            raise StorePersistenceError("Could not read version", path=self._path, cause=e) from e

        try:
            value = float(text)
        except ValueError:
            logger.warning(f"{CHECKPOINT} Unparsable version {text!r}, treating as 0.0")
            return 0.0

        if not math.isfinite(value) or value < 0 or value > MAX_VERSION:
            logger.warning(f"{CHECKPOINT} Out-of-range version {text!r}, treating as 0.0")
            return 0.0
        return value

    def write(self, value: float) -> None:
        """
        Persist a version.

        Raises:
            StorePersistenceError: If the file cannot be written
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(format_version(value), encoding="utf-8")
        except OSError as e:
            raise StorePersistenceError("Could not write version", path=self._path, cause=e) from e

    def bump(self) -> float:
        """Advance by one step, persist, and return the new version."""
        new_version = round_version(self.read() + VERSION_STEP)
        self.write(new_version)
        logger.info(f"{CHECKPOINT} Version bumped to v{format_version(new_version)}")
        return new_version


__all__ = ["VERSION_STEP", "MAX_VERSION", "VersionCounter", "round_version", "format_version"]
