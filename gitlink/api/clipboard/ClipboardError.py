"""Clipboard write failure."""


class ClipboardError(RuntimeError):
    """No clipboard command accepted the text."""
