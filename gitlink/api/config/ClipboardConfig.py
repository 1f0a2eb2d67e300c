"""Clipboard configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ClipboardConfig(BaseModel):
    """How links are written to the system clipboard."""

    model_config = ConfigDict(extra="forbid")

    command: list[str] = Field(
        default_factory=list,
        description="Command reading the text on stdin; empty list auto-detects pbcopy/wl-copy/xclip/xsel/clip",
    )
    timeout: float = Field(5.0, gt=0, description="Seconds to wait for the clipboard command")
