import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import DEFAULT_LOG_FILE_NAME

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    gitlink_home: Path | None = None,
    level: str = "INFO",
    file_name: str = DEFAULT_LOG_FILE_NAME,
) -> None:
    """Configure unified gitlink logging.

    Args:
        gitlink_home: Path to gitlink home directory. If None, derived from environment.
        level: Logging level name (DEBUG, INFO, WARN, ERROR)
        file_name: Log file name under the home directory
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if gitlink_home is None:
        from ..api.config.get_home_dir import get_home_dir

        gitlink_home = get_home_dir()

    # Ensure directory exists
    gitlink_home.mkdir(parents=True, exist_ok=True)
    log_file = gitlink_home / file_name

    root_logger = logging.getLogger("gitlink")
    root_logger.setLevel(level)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Does not configure handlers; the CLI entry point calls configure_logging().
    """
    return logging.getLogger(f"gitlink.{name}")
