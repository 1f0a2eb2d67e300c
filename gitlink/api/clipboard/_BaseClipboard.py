"""Abstract clipboard sink."""

from abc import ABC, abstractmethod


class BaseClipboard(ABC):
    """Destination for copied text."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Replace the clipboard contents with ``text``."""
        pass
