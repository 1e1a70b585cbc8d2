# gitnot/cli/__init__.py
"""
gitnot command-line interface.

Usage:
    gitnot --init      # Start tracking
    gitnot             # Checkpoint
    gitnot --status    # Preview
    gitnot --show      # Version and tracked files
"""

from gitnot.cli.cli import app, main

__all__ = ["app", "main"]
