"""Utility functions for ulfedit.

This module provides utility functions including:

- Logging setup and configuration
- History event logging with session statistics
- Unicode code point descriptions
"""

from ulfedit.utils.logging import (
    EditStats,
    HistoryLogger,
    configure_logging,
    get_logger,
)
from ulfedit.utils.unicode_info import block_name, char_name, char_str, codepoint_str

__all__ = [
    "EditStats",
    "HistoryLogger",
    "block_name",
    "char_name",
    "char_str",
    "codepoint_str",
    "configure_logging",
    "get_logger",
]
