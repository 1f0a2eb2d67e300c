"""Shared constants for the gitlink home directory and its artefacts."""

GITLINK_HOME_EXT = ".gitlink"  # user-level state/config directory suffix

CONFIG_FILE_NAME = "config.json"

DEFAULT_LOG_FILE_NAME = "gitlink.log"

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
