"""ulfedit - Edit X16 Unilib (ULF) dual-layer pixel fonts.

A ULF font holds 256 one-bit base glyphs, 1024 two-bit overlay glyphs and a
sparse map from Unicode code points to base/overlay glyph pairs with
per-entry transform flags. ulfedit provides the font model, the binary
codec, the pixel compositor and an undo/redo command history, plus a small
CLI for inspecting and editing font files.

Example:
    $ ulfedit show font.ulf U+0041
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
