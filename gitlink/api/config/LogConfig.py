"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_LOG_FILE_NAME


class LogConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")
    file: str = Field(DEFAULT_LOG_FILE_NAME, min_length=1, description="Log file name under the gitlink home")
