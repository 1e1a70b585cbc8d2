# gitnot/logging/__init__.py
"""
Logging helpers for gitnot.

    from gitnot.logging import get_logger
    logger = get_logger(__name__)
"""

from gitnot.logging.logger import DEFAULT_FORMAT, configure_logging, get_logger

__all__ = ["DEFAULT_FORMAT", "configure_logging", "get_logger"]
