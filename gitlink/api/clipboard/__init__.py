"""Clipboard sinks."""

from ._BaseClipboard import BaseClipboard
from .ClipboardError import ClipboardError
from .SystemClipboard import SystemClipboard

__all__ = ["BaseClipboard", "ClipboardError", "SystemClipboard"]
