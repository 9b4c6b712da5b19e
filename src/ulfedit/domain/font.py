"""Font aggregate root."""

from dataclasses import dataclass, field

from ulfedit.domain.glyphs import BitmapGlyphStore
from ulfedit.domain.unicode_map import UnicodeMap


@dataclass
class Font:
    """A ULF font: one glyph store and one Unicode map.

    A new Font is empty: all raster bytes are zero and the map has no
    blocks. Equality compares raster bytes and the ordered block contents.

    Attributes:
        glyphs: Base and overlay rasters
        unicode_map: Ordered code point blocks
    """

    glyphs: BitmapGlyphStore = field(default_factory=BitmapGlyphStore)
    unicode_map: UnicodeMap = field(default_factory=UnicodeMap)

    def copy(self) -> "Font":
        return Font(glyphs=self.glyphs.copy(), unicode_map=self.unicode_map.copy())
