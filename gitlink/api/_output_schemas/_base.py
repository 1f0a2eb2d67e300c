"""Fields shared by every command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Common output of gitlink commands. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Messages explaining a failure")
    warnings: list[str] = Field(default_factory=list, description="Messages qualifying a success")
