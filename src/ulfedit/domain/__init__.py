"""Domain models for ulfedit.

This module contains the models representing a ULF font: the packed glyph
rasters, the Unicode map and the Font aggregate that owns both. Models hold
data and bounds-checked accessors only; every edit made by the editor goes
through the command history in ``ulfedit.core``.

Key classes:
- BitmapGlyphStore: Base (1 bpp) and overlay (2 bpp) glyph rasters
- UnicodeMapEntry: Glyph pair and flags for one code point
- UnicodeMapBlock: A run of consecutive code points
- UnicodeMap: Ordered list of blocks
- Font: The aggregate root
"""

from ulfedit.domain.font import Font
from ulfedit.domain.glyphs import (
    BASE_COUNT,
    BASE_GLYPH_BYTES,
    BASE_RASTER_SIZE,
    GLYPH_HEIGHT,
    GLYPH_WIDTH,
    OVERLAY_COUNT,
    OVERLAY_GLYPH_BYTES,
    OVERLAY_RASTER_SIZE,
    BitmapGlyphStore,
    GlyphLayer,
)
from ulfedit.domain.unicode_map import (
    MAX_BLOCK_ENTRIES,
    MAX_CODEPOINT,
    UnicodeMap,
    UnicodeMapBlock,
    UnicodeMapEntry,
)

__all__: list[str] = [
    # Constants
    "BASE_COUNT",
    "BASE_GLYPH_BYTES",
    "BASE_RASTER_SIZE",
    "GLYPH_HEIGHT",
    "GLYPH_WIDTH",
    "MAX_BLOCK_ENTRIES",
    "MAX_CODEPOINT",
    "OVERLAY_COUNT",
    "OVERLAY_GLYPH_BYTES",
    "OVERLAY_RASTER_SIZE",
    # Enums
    "GlyphLayer",
    # Core types
    "BitmapGlyphStore",
    "Font",
    "UnicodeMap",
    "UnicodeMapBlock",
    "UnicodeMapEntry",
]
