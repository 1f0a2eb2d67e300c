"""Factory for display implementations."""

from .CLIDisplay import CLIDisplay
from .Display import Display


class DisplayContext:
    """Hands out the display for a mode."""

    def get_display(self, mode: str = "cli") -> Display:
        if mode == "cli":
            return CLIDisplay()
        raise ValueError(f"Invalid display mode: {mode}. Must be 'cli'")
