"""Top-level gitlink configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ClipboardConfig import ClipboardConfig
from .get_config_path import get_config_path
from .GitConfig import GitConfig
from .LogConfig import LogConfig


def _describe(error: ValidationError) -> str:
    """First validation problem as ``section.field: message``."""
    problems = error.errors()
    if not problems:
        return str(error)
    first = problems[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", str(error))
    return f"{location}: {message}" if location else message


def _read_json_object(path: Path) -> dict[str, Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Configuration validation error: top level of {path} must be an object")
    return raw


class GitLinkConfig(BaseModel):
    """Settings read from ``config.json`` in the gitlink home directory.

    Every section is optional in the file and falls back to its defaults.
    """

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    clipboard: ClipboardConfig = Field(default_factory=ClipboardConfig)
    git: GitConfig = Field(default_factory=GitConfig)

    @classmethod
    def load(cls) -> "GitLinkConfig":
        """Read config.json, or return the defaults when it does not exist.

        Raises:
            ValueError: If the file is not a JSON object or a value is invalid
        """
        path = get_config_path()
        if not path.exists():
            return cls()

        raw = _read_json_object(path)
        try:
            return cls(**raw)
        except ValidationError as e:
            raise ValueError(f"Configuration validation error: {_describe(e)}") from e

    def to_dict(self) -> dict[str, Any]:
        """Sections as plain dicts, in file order."""
        return {
            "log": self.log.model_dump(),
            "clipboard": self.clipboard.model_dump(),
            "git": self.git.model_dump(),
        }
