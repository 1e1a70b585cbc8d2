# gitnot/config/__init__.py
"""
Tracking configuration (.gitnot/config.json).

Key exports:
- TrackingConfig: which files are tracked
- load_tracking_config: load with fallback to defaults
- ensure_default_config: write defaults when no config exists
"""

from .loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ensure_default_config,
    load_tracking_config,
    read_config_file,
)
from .schema import DEFAULT_EXTENSIONS, DEFAULT_IGNORE_PATTERNS, TrackingConfig

__all__ = [
    "TrackingConfig",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_IGNORE_PATTERNS",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "read_config_file",
    "load_tracking_config",
    "ensure_default_config",
]
