"""Configuration settings for ulfedit."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class UnicodeConfig(BaseModel):
    """Configuration for Unicode reference lookups."""

    default_font: Path | None = Field(
        default=None,
        description="Font used to show reference characters when it covers them",
    )
    fallback_fonts: list[Path] = Field(
        default_factory=list,
        description="Fonts searched in order for code points the default font lacks",
    )


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Only show errors on the console",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class UlfSettings(BaseModel):
    """Main application settings."""

    unicode: UnicodeConfig = Field(default_factory=UnicodeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> UlfSettings:
    """Get default application settings."""
    return UlfSettings()
