"""Get gitlink home directory path or path under it."""

import os
from pathlib import Path

from ...constants import GITLINK_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get gitlink home directory path or path under it.

    Checks GITLINK_HOME environment variable first, defaults to ~/.gitlink if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to gitlink home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.gitlink")
        >>> get_home_dir("config.json")
        Path("/Users/user/.gitlink/config.json")
    """
    gitlink_home_env = os.environ.get("GITLINK_HOME")
    if gitlink_home_env:
        gitlink_home = Path(gitlink_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            gitlink_home = Path(home_env) / GITLINK_HOME_EXT
        else:
            gitlink_home = Path.home() / GITLINK_HOME_EXT

    return gitlink_home / Path(*parts) if parts else gitlink_home
