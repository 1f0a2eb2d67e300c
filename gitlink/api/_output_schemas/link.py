"""Output schemas for link commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkShowOutput(BaseOutputSchema):
    """Output schema for link show command.

    On failure every string field is empty and both line numbers are 0.
    """

    link: str = Field(..., description="Provider permalink, empty string on failure")
    remote_url: str = Field(..., description="Remote URL the link was derived from")
    provider: str = Field(..., description="github, bitbucket or unknown")
    owner: str = Field(..., description="Repository owner parsed from the remote URL")
    project: str = Field(..., description="Repository name parsed from the remote URL")
    commit: str = Field(..., description="HEAD commit the link points at")
    path: str = Field(..., description="File path relative to the repository root")
    start_line: int = Field(..., description="First linked line (one-based)")
    end_line: int = Field(..., description="Last linked line (one-based, inclusive)")
    dirty: bool = Field(..., description="True if the working tree has uncommitted changes")


class LinkCopyOutput(LinkShowOutput):
    """Output schema for link copy command. Same fields as link show."""


# Register schemas
register_output_schema("link", "show", LinkShowOutput)
register_output_schema("link", "copy", LinkCopyOutput)
