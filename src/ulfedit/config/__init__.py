"""Configuration management for ulfedit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- UnicodeConfig: Reference font lookup settings
- LoggingConfig: Logging settings
- UlfSettings: Main application settings
"""

from ulfedit.config.settings import (
    LoggingConfig,
    UlfSettings,
    UnicodeConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "UlfSettings",
    "UnicodeConfig",
    "get_default_settings",
]
