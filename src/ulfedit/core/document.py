"""Editing session for one ULF font.

FontDocument ties a Font to its CommandStack and file path and carries the
editing workflows an editor front end needs: pixel strokes, map block and
entry edits, new/open/save. Each workflow checks its preconditions first
and declines instead of building a command that could not apply.
"""

from dataclasses import replace
from pathlib import Path

from ulfedit.core.commands import (
    AddBlock,
    AddEntry,
    EditBlockStart,
    EditEntry,
    RemoveBlock,
    RemoveEntry,
    SetPixel,
)
from ulfedit.core.history import CommandStack
from ulfedit.domain.font import Font
from ulfedit.domain.glyphs import BASE_COUNT, GLYPH_HEIGHT, GLYPH_WIDTH, OVERLAY_COUNT, GlyphLayer
from ulfedit.domain.unicode_map import (
    MAX_BLOCK_ENTRIES,
    UnicodeMapBlock,
    UnicodeMapEntry,
    check_codepoint,
)
from ulfedit.exceptions import FontError, MapError
from ulfedit.io.reader import FontReader
from ulfedit.io.writer import FontWriter
from ulfedit.utils.logging import HistoryLogger, get_logger

UNTITLED = "Untitled"


class FontDocument:
    """A font being edited, with its history and file path.

    Example:
        doc = FontDocument()
        if doc.open(Path("font.ulf")):
            doc.add_block(0x20, count=95)
            doc.save()
    """

    def __init__(self, font: Font | None = None, path: Path | None = None) -> None:
        self.font = font if font is not None else Font()
        self.path = path
        self.history = CommandStack(self.font)
        self.history_logger = HistoryLogger(get_logger("ulfedit.history"))
        self.history.subscribe(self.history_logger)

    @property
    def is_modified(self) -> bool:
        return not self.history.is_clean()

    @property
    def title(self) -> str:
        """File name (or "Untitled"), with " *" when there are unsaved edits."""
        name = self.path.name if self.path is not None else UNTITLED
        return f"{name} *" if self.is_modified else name

    # File operations

    def _reset(self, font: Font, path: Path | None) -> None:
        self.font = font
        self.path = path
        self.history.clear(font)

    def new(self) -> None:
        """Replace the font with an empty one and forget the path."""
        self._reset(Font(), None)

    def open(self, path: Path) -> bool:
        """Load a font file, replacing the current font on success.

        On failure the current font, history and path are left untouched.

        Returns:
            True if the file was loaded
        """
        try:
            font = FontReader(path).load()
        except (FileNotFoundError, FontError) as e:
            self.history_logger.log_failure("open", path, e)
            return False

        self._reset(font, path)
        self.history_logger.log_load(path, len(font.unicode_map))
        return True

    def save(self, path: Path | None = None) -> bool:
        """Write the font to ``path`` or the current path.

        Returns:
            True if written; False on failure or when no path is known
        """
        target = path if path is not None else self.path
        if target is None:
            return False

        try:
            FontWriter(self.font, target).save()
        except FontError as e:
            self.history_logger.log_failure("save", target, e)
            return False

        self.path = target
        self.history.mark_clean()
        self.history_logger.log_save(target)
        return True

    # Pixel strokes

    def begin_stroke(self, layer: GlyphLayer) -> None:
        """Start a drag stroke; its pixels undo as one step."""
        label = "Paint base pixels" if layer is GlyphLayer.BASE else "Paint overlay pixels"
        self.history.begin_macro(label)

    def paint_pixel(self, layer: GlyphLayer, glyph_index: int, x: int, y: int, value: int) -> bool:
        """Set a pixel through the history if it changes.

        Returns:
            True if a command was pushed
        """
        count = BASE_COUNT if layer is GlyphLayer.BASE else OVERLAY_COUNT
        if not (0 <= glyph_index < count and 0 <= x < GLYPH_WIDTH and 0 <= y < GLYPH_HEIGHT):
            return False
        if self.font.glyphs.get_pixel(layer, glyph_index, x, y) == value:
            return False

        self.history.push(SetPixel.capture(self.font, layer, glyph_index, x, y, value))
        return True

    def end_stroke(self) -> None:
        self.history.end_macro()

    # Map edits

    def entry_for(self, codepoint: int) -> UnicodeMapEntry | None:
        return self.font.unicode_map.find_entry(codepoint)

    def _has_block(self, block_index: int) -> bool:
        return 0 <= block_index < len(self.font.unicode_map)

    def add_block(self, start: int, count: int = 1) -> int:
        """Insert a block of ``count`` default entries at its sorted position.

        Returns:
            Index of the new block

        Raises:
            MapError: If ``start`` or ``count`` is out of range
        """
        check_codepoint(start)
        if not 1 <= count <= MAX_BLOCK_ENTRIES:
            raise MapError(f"Block size must be 1-{MAX_BLOCK_ENTRIES}, got {count}")

        index = self.font.unicode_map.sorted_insert_index(start)
        block = UnicodeMapBlock(start, [UnicodeMapEntry() for _ in range(count)])
        self.history.push(AddBlock(index, block))
        return index

    def add_entry(self, block_index: int, after: int | None = None) -> int:
        """Insert a default entry after entry ``after``, or at the block end.

        Returns:
            Index of the new entry, or -1 if the block is unknown or full
        """
        if not self._has_block(block_index):
            return -1
        block = self.font.unicode_map[block_index]
        if block.is_full():
            return -1

        if after is not None and 0 <= after < len(block.entries):
            entry_index = after + 1
        else:
            entry_index = len(block.entries)
        self.history.push(AddEntry(block_index, entry_index, UnicodeMapEntry()))
        return entry_index

    def remove(self, block_index: int, entry_index: int | None = None) -> bool:
        """Remove an entry, or the whole block when ``entry_index`` is None.

        Removing the only entry of a block removes the block, since a
        zero-count block header is the map terminator on disk.

        Returns:
            True if something was removed
        """
        if not self._has_block(block_index):
            return False

        entries = self.font.unicode_map[block_index].entries
        if entry_index is not None and not 0 <= entry_index < len(entries):
            return False

        if entry_index is None or len(entries) == 1:
            self.history.push(RemoveBlock.capture(self.font, block_index))
            return True

        self.history.push(RemoveEntry.capture(self.font, block_index, entry_index))
        return True

    def edit_entry(self, block_index: int, entry_index: int, **changes: int | bool) -> bool:
        """Change fields of an entry through the history.

        Args:
            block_index: Block holding the entry
            entry_index: Entry position within the block
            **changes: UnicodeMapEntry fields to replace

        Returns:
            True if the entry changed

        Raises:
            MapError: If a glyph index is out of range
            TypeError: If a field name is unknown
        """
        if not self._has_block(block_index):
            return False
        entries = self.font.unicode_map[block_index].entries
        if not 0 <= entry_index < len(entries):
            return False

        old_entry = entries[entry_index]
        new_entry = replace(old_entry, **changes)
        if new_entry == old_entry:
            return False

        self.history.push(EditEntry.capture(self.font, block_index, entry_index, new_entry))
        return True

    def set_block_start(self, block_index: int, start: int) -> bool:
        """Move a block to a new start code point.

        Returns:
            True if the start changed

        Raises:
            MapError: If ``start`` does not fit in 24 bits
        """
        if not self._has_block(block_index):
            return False
        check_codepoint(start)
        if self.font.unicode_map[block_index].start_codepoint == start:
            return False

        self.history.push(EditBlockStart.capture(self.font, block_index, start))
        return True
