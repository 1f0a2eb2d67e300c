"""API module for gitlink commands.

Each domain exposes ``cmd_*`` functions returning a StageResult; the CLI wraps
them for display.
"""

__all__ = []
