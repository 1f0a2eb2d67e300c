"""Config API module."""

from .._output_schemas.config import ConfigShowOutput, ConfigVersionOutput
from .GitLinkConfig import GitLinkConfig

__all__ = ["ConfigShowOutput", "ConfigVersionOutput", "GitLinkConfig"]
