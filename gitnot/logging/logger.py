# gitnot/logging/logger.py
"""
Unified logging setup for gitnot.

All modules use:
    from gitnot.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in the CLI entrypoint.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_HANDLER_NAME = "gitnot-cli"


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the package logger.

    Safe to call multiple times - the handler installed by an earlier call is
    replaced, so there is never more than one and it writes to the current
    stderr (or the given stream).
    """
    package_logger = logging.getLogger("gitnot")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here - configuration happens in configure_logging().
    """
    return logging.getLogger(name)
