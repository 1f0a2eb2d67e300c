"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output of ``gitlink config show``.

    Without a section, ``content`` is ``{"sections": [...]}``.
    """

    section: str = Field(..., description="Requested section, or empty when listing")
    content: dict[str, Any] = Field(..., description="Section values, or the list of section names")
    config_path: str = Field(..., description="Location of config.json, whether or not it exists")


class ConfigVersionOutput(BaseOutputSchema):
    version: str = Field(..., description="Installed gitlink version")
    git_sha: str = Field(..., description="Short commit of a source checkout, else empty")
    full_version: str = Field(..., description="Version with the commit appended when known")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
