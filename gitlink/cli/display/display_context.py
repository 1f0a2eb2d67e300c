"""Shared DisplayContext instance."""

from .DisplayContext import DisplayContext

display_context = DisplayContext()
