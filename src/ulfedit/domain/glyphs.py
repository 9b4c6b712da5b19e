"""Packed raster storage for base and overlay glyphs.

This module defines the BitmapGlyphStore, which holds both glyph layers of a
ULF font as flat byte arrays in their on-disk packing:

- Base glyphs: 256 glyphs of 8x16 pixels at 1 bit per pixel. Each row is one
  byte, bit 7 being the leftmost pixel.
- Overlay glyphs: 1024 glyphs of 8x16 pixels at 2 bits per pixel. Each row is
  two bytes holding four pixels each, most significant pair first.
"""

from dataclasses import dataclass, field
from enum import Enum

GLYPH_WIDTH = 8
GLYPH_HEIGHT = 16

BASE_COUNT = 256
OVERLAY_COUNT = 1024
BASE_GLYPH_BYTES = 16
OVERLAY_GLYPH_BYTES = 32

BASE_RASTER_SIZE = BASE_COUNT * BASE_GLYPH_BYTES
OVERLAY_RASTER_SIZE = OVERLAY_COUNT * OVERLAY_GLYPH_BYTES


class GlyphLayer(Enum):
    """Glyph layer addressed by a pixel edit."""

    BASE = "base"
    OVERLAY = "overlay"


def _in_bounds(index: int, count: int, x: int, y: int) -> bool:
    return 0 <= index < count and 0 <= x < GLYPH_WIDTH and 0 <= y < GLYPH_HEIGHT


@dataclass(eq=True)
class BitmapGlyphStore:
    """Fixed-capacity base and overlay rasters with pixel accessors.

    Pixel accessors never fail on bad coordinates: getters return 0 and
    setters do nothing when the glyph index or the pixel position is out of
    range.

    Attributes:
        base: Base raster, BASE_RASTER_SIZE bytes
        overlay: Overlay raster, OVERLAY_RASTER_SIZE bytes
    """

    base: bytearray = field(default_factory=lambda: bytearray(BASE_RASTER_SIZE))
    overlay: bytearray = field(default_factory=lambda: bytearray(OVERLAY_RASTER_SIZE))

    def __post_init__(self) -> None:
        if len(self.base) != BASE_RASTER_SIZE:
            raise ValueError(f"Base raster must be {BASE_RASTER_SIZE} bytes")
        if len(self.overlay) != OVERLAY_RASTER_SIZE:
            raise ValueError(f"Overlay raster must be {OVERLAY_RASTER_SIZE} bytes")

    def get_base_pixel(self, index: int, x: int, y: int) -> int:
        """Return the base pixel (0 or 1) at (x, y) of glyph ``index``."""
        if not _in_bounds(index, BASE_COUNT, x, y):
            return 0
        row = self.base[index * BASE_GLYPH_BYTES + y]
        return (row >> (7 - x)) & 1

    def set_base_pixel(self, index: int, x: int, y: int, value: int) -> None:
        """Set the base pixel at (x, y) of glyph ``index``; any truthy value sets it."""
        if not _in_bounds(index, BASE_COUNT, x, y):
            return
        offset = index * BASE_GLYPH_BYTES + y
        mask = 1 << (7 - x)
        if value:
            self.base[offset] |= mask
        else:
            self.base[offset] &= ~mask & 0xFF

    def get_overlay_pixel(self, index: int, x: int, y: int) -> int:
        """Return the overlay pixel (0-3) at (x, y) of glyph ``index``."""
        if not _in_bounds(index, OVERLAY_COUNT, x, y):
            return 0
        offset = index * OVERLAY_GLYPH_BYTES + y * 2 + x // 4
        shift = 6 - (x % 4) * 2
        return (self.overlay[offset] >> shift) & 3

    def set_overlay_pixel(self, index: int, x: int, y: int, value: int) -> None:
        """Set the overlay pixel at (x, y) of glyph ``index`` to ``value & 3``."""
        if not _in_bounds(index, OVERLAY_COUNT, x, y):
            return
        offset = index * OVERLAY_GLYPH_BYTES + y * 2 + x // 4
        shift = 6 - (x % 4) * 2
        current = self.overlay[offset]
        self.overlay[offset] = (current & ~(3 << shift) & 0xFF) | ((value & 3) << shift)

    def get_pixel(self, layer: GlyphLayer, index: int, x: int, y: int) -> int:
        """Read a pixel from either layer."""
        if layer is GlyphLayer.BASE:
            return self.get_base_pixel(index, x, y)
        return self.get_overlay_pixel(index, x, y)

    def set_pixel(self, layer: GlyphLayer, index: int, x: int, y: int, value: int) -> None:
        """Write a pixel to either layer."""
        if layer is GlyphLayer.BASE:
            self.set_base_pixel(index, x, y, value)
        else:
            self.set_overlay_pixel(index, x, y, value)

    def base_glyph(self, index: int) -> bytes:
        """Return the 16 packed bytes of base glyph ``index``."""
        if not 0 <= index < BASE_COUNT:
            raise IndexError(f"Base glyph index out of range: {index}")
        start = index * BASE_GLYPH_BYTES
        return bytes(self.base[start:start + BASE_GLYPH_BYTES])

    def overlay_glyph(self, index: int) -> bytes:
        """Return the 32 packed bytes of overlay glyph ``index``."""
        if not 0 <= index < OVERLAY_COUNT:
            raise IndexError(f"Overlay glyph index out of range: {index}")
        start = index * OVERLAY_GLYPH_BYTES
        return bytes(self.overlay[start:start + OVERLAY_GLYPH_BYTES])

    def is_base_empty(self, index: int) -> bool:
        return not any(self.base_glyph(index))

    def is_overlay_empty(self, index: int) -> bool:
        return not any(self.overlay_glyph(index))

    def copy(self) -> "BitmapGlyphStore":
        return BitmapGlyphStore(base=bytearray(self.base), overlay=bytearray(self.overlay))
