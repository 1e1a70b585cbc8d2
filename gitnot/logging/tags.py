# gitnot/logging/tags.py
"""
Subsystem tags prefixed to log lines.

Changing a tag here updates it project-wide.
"""

SCAN = "[SCAN]"
HASH = "[HASH]"
SNAPSHOT = "[SNAPSHOT]"
CHANGELOG = "[CHANGELOG]"
CHECKPOINT = "[CHECKPOINT]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
