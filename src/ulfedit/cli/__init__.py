"""Command-line interface for ulfedit.

This module provides the CLI using Typer with rich output.

Key features:
- Font summaries and Unicode map listings
- Composited glyph and text previews drawn in the terminal
- Map edits recorded through the command history and saved
"""

from ulfedit.cli.app import cli, main

__all__ = ["cli", "main"]
