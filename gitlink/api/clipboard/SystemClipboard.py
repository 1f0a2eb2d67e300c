"""Write to the system clipboard through a platform copy command."""

import shutil
import subprocess

from ...utils.logger import get_logger
from ._BaseClipboard import BaseClipboard
from .ClipboardError import ClipboardError

logger = get_logger("clipboard")

# Tried in order when no command is configured
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),  # macOS
    ("wl-copy",),  # Wayland
    ("xclip", "-selection", "clipboard"),  # X11
    ("xsel", "--clipboard", "--input"),  # X11
    ("clip",),  # Windows
)


class SystemClipboard(BaseClipboard):
    """Pipe text to the first clipboard command that accepts it."""

    def __init__(self, command: list[str] | None = None, timeout: float = 5.0):
        """
        Args:
            command: Explicit command reading the text on stdin; auto-detected if empty
            timeout: Seconds to wait for the command
        """
        self.command = list(command) if command else []
        self.timeout = timeout

    def _candidates(self) -> list[list[str]]:
        if self.command:
            return [self.command]
        return [list(command) for command in CLIPBOARD_COMMANDS if shutil.which(command[0])]

    def write(self, text: str) -> None:
        """Copy ``text`` to the clipboard.

        Raises:
            ClipboardError: If no clipboard command is available or all of them fail
        """
        candidates = self._candidates()
        for command in candidates:
            try:
                result = subprocess.run(
                    command,
                    input=text.encode("utf-8"),
                    capture_output=True,
                    timeout=self.timeout,
                )
            except subprocess.TimeoutExpired:
                logger.error(f"{command[0]} timed out after {self.timeout}s")
                continue
            except OSError as exc:
                logger.debug(f"Could not run {command[0]}: {exc}")
                continue

            if result.returncode == 0:
                logger.debug(f"Copied {len(text)} characters with {command[0]}")
                return
            logger.debug(f"{command[0]} exited with {result.returncode}")

        if not candidates:
            raise ClipboardError("No clipboard command found (tried pbcopy, wl-copy, xclip, xsel, clip)")
        raise ClipboardError(f"Clipboard command failed: {' '.join(candidates[-1])}")
