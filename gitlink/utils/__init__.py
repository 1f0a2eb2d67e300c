"""gitlink utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule. ``logger`` is the exception: it owns
the shared logging state.
"""

from .get_package_version import get_package_version
from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "get_package_version",
]
