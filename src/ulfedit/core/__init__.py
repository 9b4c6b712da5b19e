"""Core editing services for ulfedit.

This module contains:

- Compositing (resolve an entry's pixel to a color id)
- Edit commands (one dataclass per kind of change)
- Command history (undo/redo with merging and macros)
- Font documents (history, file path and editing workflows)

Key functions:
- composited_pixel: Color id of one pixel of a map entry
- composite_glyph: Color ids of a whole glyph
- composite_text: Color ids of a string of glyphs

Key classes:
- CommandStack: Undo/redo history bound to a Font
- FontDocument: Editing session for one font file
"""

from ulfedit.core.commands import (
    AddBlock,
    AddEntry,
    Command,
    Direction,
    EditBlockStart,
    EditEntry,
    RemoveBlock,
    RemoveEntry,
    SetPixel,
)
from ulfedit.core.compositor import ColorId, composite_glyph, composite_text, composited_pixel
from ulfedit.core.document import FontDocument
from ulfedit.core.history import CommandStack, HistoryEvent, Macro

__all__ = [
    # Commands
    "AddBlock",
    "AddEntry",
    "Command",
    "Direction",
    "EditBlockStart",
    "EditEntry",
    "RemoveBlock",
    "RemoveEntry",
    "SetPixel",
    # Compositor
    "ColorId",
    "composite_glyph",
    "composite_text",
    "composited_pixel",
    # History
    "CommandStack",
    "HistoryEvent",
    "Macro",
    # Documents
    "FontDocument",
]
