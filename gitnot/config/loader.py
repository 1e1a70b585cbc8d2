# gitnot/config/loader.py
"""
Loading of .gitnot/config.json.

A missing or broken config is never fatal: the tracker falls back to the
default TrackingConfig and keeps going. Only writing the default config
during initialize can fail the caller.

Usage:
    from gitnot.config.loader import load_tracking_config

    config = load_tracking_config(paths.config_file)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from gitnot.core.exceptions import GitnotError, StorePersistenceError
from gitnot.logging.logger import get_logger
from gitnot.logging.tags import CONFIG

from .schema import TrackingConfig

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(GitnotError):
    """Base error for configuration issues."""


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""


class ConfigParseError(ConfigError):
    """Raised when JSON parsing fails."""


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match the schema."""


# =============================================================================
# Loading
# =============================================================================


def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Read the raw config mapping.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If the file is unreadable or not a JSON object
    """
    if not path.exists():
        raise ConfigNotFoundError("Config file not found", path=path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Config is not valid UTF-8: {e}", path=path) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=path) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be an object", path=path)

    return data


def load_tracking_config(path: Path) -> TrackingConfig:
    """
    Load the tracking config, falling back to defaults on any problem.

    Args:
        path: Path to config.json

    Returns:
        Validated TrackingConfig (defaults when absent or invalid)
    """
    try:
        data = read_config_file(path)
        config = _validate(data, path)
    except ConfigNotFoundError:
        logger.debug(f"{CONFIG} No config at {path}, using defaults")
        return TrackingConfig()
    except ConfigError as e:
        logger.warning(f"{CONFIG} {e}; using defaults")
        return TrackingConfig()

    logger.debug(f"{CONFIG} Loaded config from {path}")
    return config


def ensure_default_config(path: Path, config: Optional[TrackingConfig] = None) -> bool:
    """
    Write the default config if none exists.

    Never overwrites an existing file.

    Returns:
        True if a config file was written.

    Raises:
        StorePersistenceError: If the file cannot be written
    """
    if path.exists():
        return False

    payload = (config or TrackingConfig()).model_dump(mode="json")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
            f.write("\n")
    except OSError as e:
        raise StorePersistenceError("Could not write config", path=path, cause=e) from e

    logger.info(f"{CONFIG} Wrote default config to {path}")
    return True


def _validate(data: Dict[str, Any], path: Path) -> TrackingConfig:
    try:
        return TrackingConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config: {e.error_count()} error(s)", path=path) from e


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "read_config_file",
    "load_tracking_config",
    "ensure_default_config",
]
