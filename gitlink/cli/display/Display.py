"""Where command messages and structured output go."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Sink for the four stages of a command.

    ``status``, ``success``, ``warning``, ``error`` and ``info`` carry
    human-readable messages; ``json_output`` writes the command's output dict.
    """

    @abstractmethod
    def status(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def success(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a failure. ``details`` adds a second, dimmed line."""

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Write ``data`` as ``format`` ("json" or "yaml")."""
