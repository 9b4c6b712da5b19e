"""Unit tests for FontDocument editing workflows."""

from pathlib import Path

import pytest

from ulfedit.core import FontDocument
from ulfedit.domain import MAX_BLOCK_ENTRIES, Font, GlyphLayer, UnicodeMapEntry
from ulfedit.exceptions import MapError
from ulfedit.io import load_font, save_font
from ulfedit.io.codec import MAP_OFFSET


@pytest.fixture
def doc() -> FontDocument:
    """Create a document with one three-entry block at 'A'."""
    doc = FontDocument()
    doc.add_block(0x41, count=3)
    doc.history.mark_clean()
    return doc


class TestFileOperations:
    """Tests for new/open/save."""

    def test_new_document(self) -> None:
        """Test a new document is untitled and clean."""
        doc = FontDocument()
        assert doc.title == "Untitled"
        assert not doc.is_modified
        assert doc.path is None

    def test_title_marks_changes(self, doc: FontDocument) -> None:
        """Test the title gains a marker while modified."""
        doc.set_block_start(0, 0x61)
        assert doc.title == "Untitled *"
        doc.history.undo()
        assert doc.title == "Untitled"

    def test_save_without_path(self, doc: FontDocument) -> None:
        """Test save declines when no path is known."""
        assert doc.save() is False

    def test_save_and_open(self, doc: FontDocument, tmp_path: Path) -> None:
        """Test saving records the path and marks the history clean."""
        path = tmp_path / "font.ulf"
        doc.edit_entry(0, 1, base_index=66)

        assert doc.save(path)
        assert doc.path == path
        assert not doc.is_modified
        assert doc.title == "font.ulf"
        assert doc.history_logger.stats.save_count == 1

        other = FontDocument()
        assert other.open(path)
        assert other.font == doc.font
        assert other.path == path
        assert not other.is_modified

    def test_save_failure(self, doc: FontDocument, tmp_path: Path) -> None:
        """Test a failed save keeps the document modified."""
        doc.set_block_start(0, 0x61)
        assert doc.save(tmp_path / "missing" / "font.ulf") is False
        assert doc.path is None
        assert doc.is_modified

    def test_open_failure_keeps_state(self, doc: FontDocument, tmp_path: Path) -> None:
        """Test failed opens leave font, history and path untouched."""
        doc.set_block_start(0, 0x61)
        font = doc.font
        short = tmp_path / "short.ulf"
        short.write_bytes(bytes(MAP_OFFSET - 1))

        assert doc.open(short) is False
        assert doc.open(tmp_path / "missing.ulf") is False
        assert doc.font is font
        assert doc.history.can_undo()

    def test_open_resets_history(self, doc: FontDocument, tmp_path: Path) -> None:
        """Test opening a file replaces the font and clears the history."""
        path = tmp_path / "font.ulf"
        save_font(Font(), path)
        doc.set_block_start(0, 0x61)

        assert doc.open(path)
        assert len(doc.font.unicode_map) == 0
        assert doc.history.font is doc.font
        assert not doc.history.can_undo()

    def test_new_resets(self, doc: FontDocument, tmp_path: Path) -> None:
        """Test new() drops font, path and history."""
        doc.save(tmp_path / "font.ulf")
        doc.new()
        assert doc.path is None
        assert len(doc.font.unicode_map) == 0
        assert doc.history.count() == 0


class TestPixelStrokes:
    """Tests for painting pixels."""

    def test_stroke_is_one_undo_step(self, doc: FontDocument) -> None:
        """Test a stroke across several pixels undoes at once."""
        doc.begin_stroke(GlyphLayer.OVERLAY)
        for x in range(3):
            assert doc.paint_pixel(GlyphLayer.OVERLAY, 7, x, 2, 2)
        doc.end_stroke()

        assert doc.history.undo_text() == "Paint overlay pixels"
        doc.history.undo()
        assert doc.font.glyphs.is_overlay_empty(7)

    def test_unchanged_pixel_not_pushed(self, doc: FontDocument) -> None:
        """Test painting a pixel its current value records nothing."""
        assert doc.paint_pixel(GlyphLayer.BASE, 0, 0, 0, 0) is False
        assert not doc.is_modified

    def test_out_of_range_pixel(self, doc: FontDocument) -> None:
        """Test out-of-range pixels are rejected."""
        assert doc.paint_pixel(GlyphLayer.BASE, 256, 0, 0, 1) is False
        assert doc.paint_pixel(GlyphLayer.OVERLAY, 0, 8, 0, 1) is False
        assert doc.history.count() == 1

    def test_empty_stroke(self, doc: FontDocument) -> None:
        """Test a stroke that changes nothing leaves no history."""
        doc.begin_stroke(GlyphLayer.BASE)
        doc.end_stroke()
        assert doc.history.count() == 1
        assert not doc.is_modified


class TestMapEdits:
    """Tests for map block and entry workflows."""

    def test_add_block_sorted(self, doc: FontDocument) -> None:
        """Test new blocks go to their sorted position."""
        assert doc.add_block(0x20) == 0
        assert doc.add_block(0x100, count=2) == 2
        assert [block.start_codepoint for block in doc.font.unicode_map] == [0x20, 0x41, 0x100]

    @pytest.mark.parametrize("start,count", [(-1, 1), (0x1000000, 1), (0x20, 0), (0x20, 256)])
    def test_add_block_validation(self, doc: FontDocument, start: int, count: int) -> None:
        """Test invalid starts or sizes raise MapError."""
        with pytest.raises(MapError):
            doc.add_block(start, count)

    def test_add_entry(self, doc: FontDocument) -> None:
        """Test entries go after the given entry or at the end."""
        doc.edit_entry(0, 0, base_index=10)
        assert doc.add_entry(0, after=0) == 1
        assert doc.add_entry(0) == 4
        assert doc.entry_for(0x41) == UnicodeMapEntry(base_index=10)
        assert doc.entry_for(0x42) == UnicodeMapEntry()

    def test_add_entry_declined(self, doc: FontDocument) -> None:
        """Test unknown or full blocks decline new entries."""
        assert doc.add_entry(5) == -1
        doc.add_block(0x1000, count=MAX_BLOCK_ENTRIES)
        assert doc.add_entry(1) == -1

    def test_remove(self, doc: FontDocument) -> None:
        """Test removing entries and blocks, with undo."""
        assert doc.remove(0, 2)
        assert doc.entry_for(0x43) is None
        assert doc.remove(0)
        assert len(doc.font.unicode_map) == 0

        doc.history.undo()
        doc.history.undo()
        assert doc.entry_for(0x43) == UnicodeMapEntry()

    def test_remove_last_entry_removes_block(self, doc: FontDocument, tmp_path: Path) -> None:
        """Test removing a block's only entry drops the block and later blocks survive a save."""
        doc.new()
        doc.add_block(0x41, count=1)
        doc.add_block(0x100, count=3)

        assert doc.remove(0, 0)
        assert [block.start_codepoint for block in doc.font.unicode_map] == [0x100]
        assert doc.history.undo_text() == "Remove map block"

        path = tmp_path / "font.ulf"
        assert doc.save(path)
        reopened = FontDocument()
        assert reopened.open(path)
        assert reopened.font.unicode_map == doc.font.unicode_map

        doc.history.undo()
        assert doc.entry_for(0x41) == UnicodeMapEntry()

    def test_remove_declined(self, doc: FontDocument) -> None:
        """Test removals outside the map do nothing."""
        assert doc.remove(3) is False
        assert doc.remove(0, 9) is False
        assert not doc.is_modified

    def test_edit_entry(self, doc: FontDocument) -> None:
        """Test entry edits apply and skip no-op changes."""
        assert doc.edit_entry(0, 0, overlay_index=700, hflip=True)
        assert doc.entry_for(0x41) == UnicodeMapEntry(overlay_index=700, hflip=True)
        assert doc.edit_entry(0, 0, hflip=True) is False
        assert doc.edit_entry(4, 0, hflip=True) is False

    def test_edit_entry_validation(self, doc: FontDocument) -> None:
        """Test bad field values raise MapError and record nothing."""
        with pytest.raises(MapError):
            doc.edit_entry(0, 0, base_index=300)
        assert not doc.is_modified

    def test_set_block_start(self, doc: FontDocument) -> None:
        """Test moving a block and rejecting no-op moves."""
        assert doc.set_block_start(0, 0x61)
        assert doc.entry_for(0x61) == UnicodeMapEntry()
        assert doc.set_block_start(0, 0x61) is False
        with pytest.raises(MapError):
            doc.set_block_start(0, 0x1000000)

    def test_edits_survive_save(self, doc: FontDocument, tmp_path: Path) -> None:
        """Test map edits are written to disk."""
        doc.edit_entry(0, 2, reverse=True, no_glyph=True)
        path = tmp_path / "font.ulf"
        doc.save(path)
        assert load_font(path).unicode_map.find_entry(0x43) == UnicodeMapEntry(
            reverse=True, no_glyph=True
        )
