"""Abstract editor state provider."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..link.Selection import Selection


class BaseEditor(ABC):
    """The active document and its selections."""

    @abstractmethod
    def active_document(self) -> Path | None:
        """Path of the active document, or None if no document is open."""
        pass

    @abstractmethod
    def selections(self) -> list[Selection]:
        """Current selections; never empty (a bare cursor is a collapsed selection)."""
        pass
