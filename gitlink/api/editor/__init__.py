"""Editor state providers."""

from ._BaseEditor import BaseEditor
from .CommandLineEditor import CommandLineEditor
from .parse_selection import parse_selection

__all__ = ["BaseEditor", "CommandLineEditor", "parse_selection"]
