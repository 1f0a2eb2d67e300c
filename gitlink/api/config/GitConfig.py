"""Git executable configuration."""

from pydantic import BaseModel, ConfigDict, Field


class GitConfig(BaseModel):
    """How the git executable is invoked."""

    model_config = ConfigDict(extra="forbid")

    executable: str = Field("git", min_length=1, description="Git executable name or path")
    timeout: float = Field(10.0, gt=0, description="Seconds to wait for each git invocation")
