from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Controls for log level and format on standard error."""

    level: str = Field("WARNING")
    json_output: bool = False

    @field_validator("level")
    def validate_level(cls, value: str) -> str:
        normalized = value.upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"unknown log level: {value}")
        return normalized


class Settings(BaseModel):
    """Top-level project configuration."""

    project_name: str = Field("Terminal Quiz")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
