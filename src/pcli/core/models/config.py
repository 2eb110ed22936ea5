from enum import StrEnum
from typing import List, Optional

from pydantic import BaseModel, Field


class LoggerLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggerConfig(BaseModel):
    level: LoggerLevel = LoggerLevel.WARNING
    log_file: Optional[str] = None
    json_log: bool = False


class CommandsConfig(BaseModel):
    """Command discovery configuration."""

    load_builtins: bool = Field(
        default=True, description="Load the bundled help and version commands"
    )
    paths: List[str] = Field(
        default_factory=list,
        description="Directories scanned for command units, in load order",
    )


class AppConfig(BaseModel):
    """Top-level application configuration."""

    logger: LoggerConfig = Field(default_factory=LoggerConfig)
    commands: CommandsConfig = Field(default_factory=CommandsConfig)
