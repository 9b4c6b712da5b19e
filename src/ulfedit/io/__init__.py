"""Font I/O layer for ulfedit.

This module handles reading and writing ULF font files and looking up
fallback system fonts with fontTools.

Key responsibilities:
- Encode and decode the ULF binary layout
- Load and save whole font files
- Find a fallback font family for a code point

Key classes:
- FontReader: Load a ULF file into a Font
- FontWriter: Save a Font to a ULF file
- FontFallbackResolver: Find fonts covering a code point
"""

from ulfedit.io.codec import decode_font, encode_font
from ulfedit.io.fallback import FontFallbackResolver
from ulfedit.io.reader import FontReader, load_font
from ulfedit.io.writer import FontWriter, save_font

__all__ = [
    "FontFallbackResolver",
    "FontReader",
    "FontWriter",
    "decode_font",
    "encode_font",
    "load_font",
    "save_font",
]
