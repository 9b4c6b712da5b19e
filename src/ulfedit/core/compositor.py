"""Pixel compositing of base and overlay layers.

Resolves a logical glyph pixel of a map entry to a color id. The overlay
layer is drawn on top of the base layer; overlay value 0 is transparent.
Flips only affect where the overlay is sampled, never the base layer.

Color ids name semantic roles. Mapping them to actual colors is left to the
presentation layer.
"""

from enum import IntEnum

from ulfedit.domain.font import Font
from ulfedit.domain.glyphs import GLYPH_HEIGHT, GLYPH_WIDTH
from ulfedit.domain.unicode_map import UnicodeMapEntry


class ColorId(IntEnum):
    """Semantic color of a composited pixel."""

    BACKGROUND = 0
    FOREGROUND = 1
    OVERLAY_A = 2
    OVERLAY_B = 3
    OVERLAY_FOREGROUND = 4


def composited_pixel(font: Font, entry: UnicodeMapEntry, x: int, y: int) -> ColorId:
    """Resolve the color id of pixel (x, y) for a map entry.

    Args:
        font: Font holding the glyph rasters
        entry: Map entry selecting glyphs and flags
        x: Column, 0-7
        y: Row, 0-15

    Returns:
        BACKGROUND for suppressed glyphs; the base pixel (inverted when
        ``reverse`` is set) where the overlay is transparent; otherwise the
        overlay value plus one
    """
    if entry.no_glyph:
        return ColorId.BACKGROUND

    ox = GLYPH_WIDTH - 1 - x if entry.hflip else x
    oy = GLYPH_HEIGHT - 1 - y if entry.vflip else y
    overlay = font.glyphs.get_overlay_pixel(entry.overlay_index, ox, oy)

    if overlay == 0:
        base = font.glyphs.get_base_pixel(entry.base_index, x, y)
        if entry.reverse:
            base = 1 - base
        return ColorId(base)

    return ColorId(overlay + 1)


def composite_glyph(font: Font, entry: UnicodeMapEntry) -> list[list[int]]:
    """Composite a whole glyph.

    Returns:
        GLYPH_HEIGHT rows of GLYPH_WIDTH color ids
    """
    return [
        [int(composited_pixel(font, entry, x, y)) for x in range(GLYPH_WIDTH)]
        for y in range(GLYPH_HEIGHT)
    ]


def composite_text(font: Font, text: str) -> list[list[int]]:
    """Composite a string into a strip of glyph cells.

    Each character takes one GLYPH_WIDTH-wide cell. Characters with no map
    entry leave a background cell.

    Returns:
        GLYPH_HEIGHT rows of ``len(text) * GLYPH_WIDTH`` color ids
    """
    rows: list[list[int]] = [[] for _ in range(GLYPH_HEIGHT)]
    blank = [int(ColorId.BACKGROUND)] * GLYPH_WIDTH

    for char in text:
        entry = font.unicode_map.find_entry(ord(char))
        if entry is None:
            for row in rows:
                row.extend(blank)
            continue
        for row, cells in zip(rows, composite_glyph(font, entry), strict=True):
            row.extend(cells)

    return rows
