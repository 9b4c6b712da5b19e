"""Unit tests for base/overlay pixel compositing."""

import pytest

from ulfedit.core.compositor import ColorId, composite_glyph, composite_text, composited_pixel
from ulfedit.domain import GLYPH_HEIGHT, GLYPH_WIDTH, Font, UnicodeMap, UnicodeMapBlock, UnicodeMapEntry


@pytest.fixture
def font() -> Font:
    """Create a font with base glyph 1 lit at (0, 0) and overlay glyph 2 set at (1, 0)."""
    font = Font()
    font.glyphs.set_base_pixel(1, 0, 0, 1)
    font.glyphs.set_overlay_pixel(2, 1, 0, 3)
    return font


class TestCompositedPixel:
    """Tests for composited_pixel."""

    @pytest.mark.parametrize(
        "base,overlay,reverse,expected",
        [
            (0, 0, False, ColorId.BACKGROUND),
            (1, 0, False, ColorId.FOREGROUND),
            (0, 0, True, ColorId.FOREGROUND),
            (1, 0, True, ColorId.BACKGROUND),
            (0, 1, False, ColorId.OVERLAY_A),
            (1, 2, False, ColorId.OVERLAY_B),
            (1, 3, True, ColorId.OVERLAY_FOREGROUND),
        ],
    )
    def test_truth_table(self, base: int, overlay: int, reverse: bool, expected: ColorId) -> None:
        """Test overlay wins when non-zero, base shows through otherwise."""
        font = Font()
        font.glyphs.set_base_pixel(0, 4, 4, base)
        font.glyphs.set_overlay_pixel(0, 4, 4, overlay)
        entry = UnicodeMapEntry(reverse=reverse)
        assert composited_pixel(font, entry, 4, 4) == expected

    def test_no_glyph(self, font: Font) -> None:
        """Test suppressed glyphs are background everywhere."""
        entry = UnicodeMapEntry(base_index=1, overlay_index=2, no_glyph=True, reverse=True)
        assert all(value == ColorId.BACKGROUND for row in composite_glyph(font, entry) for value in row)

    def test_hflip_moves_overlay_only(self, font: Font) -> None:
        """Test hflip mirrors the overlay sample and leaves the base alone."""
        entry = UnicodeMapEntry(base_index=1, overlay_index=2, hflip=True)
        assert composited_pixel(font, entry, 1, 0) == ColorId.BACKGROUND
        assert composited_pixel(font, entry, 6, 0) == ColorId.OVERLAY_FOREGROUND
        assert composited_pixel(font, entry, 0, 0) == ColorId.FOREGROUND

    def test_vflip_moves_overlay_only(self, font: Font) -> None:
        """Test vflip mirrors the overlay sample vertically."""
        entry = UnicodeMapEntry(base_index=1, overlay_index=2, vflip=True)
        assert composited_pixel(font, entry, 1, 15) == ColorId.OVERLAY_FOREGROUND
        assert composited_pixel(font, entry, 1, 0) == ColorId.BACKGROUND
        assert composited_pixel(font, entry, 0, 0) == ColorId.FOREGROUND

    def test_both_flips(self, font: Font) -> None:
        """Test both flips rotate the overlay by 180 degrees."""
        entry = UnicodeMapEntry(overlay_index=2, hflip=True, vflip=True)
        assert composited_pixel(font, entry, 6, 15) == ColorId.OVERLAY_FOREGROUND


class TestComposite:
    """Tests for whole-glyph and text compositing."""

    def test_glyph_shape(self, font: Font) -> None:
        """Test a composited glyph is 16 rows of 8 ids."""
        rows = composite_glyph(font, UnicodeMapEntry(base_index=1, overlay_index=2))
        assert len(rows) == GLYPH_HEIGHT
        assert all(len(row) == GLYPH_WIDTH for row in rows)
        assert rows[0][:2] == [ColorId.FOREGROUND, ColorId.OVERLAY_FOREGROUND]

    def test_text_strip(self, font: Font) -> None:
        """Test each character takes one cell and unmapped ones are blank."""
        font.unicode_map = UnicodeMap(
            [UnicodeMapBlock(ord("A"), [UnicodeMapEntry(base_index=1, reverse=True)])]
        )

        rows = composite_text(font, "A?")

        assert len(rows) == GLYPH_HEIGHT
        assert all(len(row) == 2 * GLYPH_WIDTH for row in rows)
        assert rows[0][0] == ColorId.BACKGROUND
        assert rows[0][1:GLYPH_WIDTH] == [ColorId.FOREGROUND] * (GLYPH_WIDTH - 1)
        assert rows[5][GLYPH_WIDTH:] == [ColorId.BACKGROUND] * GLYPH_WIDTH

    def test_empty_text(self, font: Font) -> None:
        """Test empty text gives empty rows."""
        assert composite_text(font, "") == [[] for _ in range(GLYPH_HEIGHT)]
