"""Undoable edit commands.

Every change to a Font is expressed as one of the command variants below.
A command carries the state it needs in both directions and applies itself
with ``apply(font, Direction.FORWARD)`` or ``apply(font, Direction.INVERSE)``.
Commands hold no reference to the Font; the CommandStack passes it in.

Variants that must remember the state they overwrite are built with the
``capture`` classmethod, which reads that state from the font before any
change is made.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto

from ulfedit.domain.font import Font
from ulfedit.domain.glyphs import GlyphLayer
from ulfedit.domain.unicode_map import UnicodeMapBlock, UnicodeMapEntry


class Direction(Enum):
    """Which effect of a command to apply."""

    FORWARD = auto()
    INVERSE = auto()


@dataclass(frozen=True)
class SetPixel:
    """Set one pixel of a base or overlay glyph.

    Two SetPixel commands on the same layer, glyph and position merge into
    one, keeping the first command's old value.
    """

    layer: GlyphLayer
    glyph_index: int
    x: int
    y: int
    new_value: int
    old_value: int

    @classmethod
    def capture(
        cls, font: Font, layer: GlyphLayer, glyph_index: int, x: int, y: int, new_value: int
    ) -> "SetPixel":
        old_value = font.glyphs.get_pixel(layer, glyph_index, x, y)
        return cls(layer, glyph_index, x, y, new_value, old_value)

    @property
    def label(self) -> str:
        return "Edit base pixel" if self.layer is GlyphLayer.BASE else "Edit overlay pixel"

    def apply(self, font: Font, direction: Direction) -> None:
        value = self.new_value if direction is Direction.FORWARD else self.old_value
        font.glyphs.set_pixel(self.layer, self.glyph_index, self.x, self.y, value)

    def merged_with(self, other: "Command") -> "SetPixel | None":
        """Combine with a later command on the same pixel, or return None."""
        if not isinstance(other, SetPixel):
            return None
        if (other.layer, other.glyph_index, other.x, other.y) != (
            self.layer, self.glyph_index, self.x, self.y
        ):
            return None
        return replace(self, new_value=other.new_value)


@dataclass(frozen=True)
class AddBlock:
    """Insert a map block at ``index``."""

    index: int
    block: UnicodeMapBlock

    label = "Add map block"

    def apply(self, font: Font, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            font.unicode_map.insert_block(self.index, self.block.copy())
        else:
            font.unicode_map.remove_block(self.index)

    def merged_with(self, other: "Command") -> None:
        return None


@dataclass(frozen=True)
class RemoveBlock:
    """Remove the map block at ``index``, remembering its contents."""

    index: int
    block: UnicodeMapBlock

    label = "Remove map block"

    @classmethod
    def capture(cls, font: Font, index: int) -> "RemoveBlock":
        return cls(index, font.unicode_map[index].copy())

    def apply(self, font: Font, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            font.unicode_map.remove_block(self.index)
        else:
            font.unicode_map.insert_block(self.index, self.block.copy())

    def merged_with(self, other: "Command") -> None:
        return None


@dataclass(frozen=True)
class AddEntry:
    """Insert an entry into a block."""

    block_index: int
    entry_index: int
    entry: UnicodeMapEntry

    label = "Add map entry"

    def apply(self, font: Font, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            font.unicode_map.insert_entry(self.block_index, self.entry_index, self.entry)
        else:
            font.unicode_map.remove_entry(self.block_index, self.entry_index)

    def merged_with(self, other: "Command") -> None:
        return None


@dataclass(frozen=True)
class RemoveEntry:
    """Remove an entry from a block, remembering it."""

    block_index: int
    entry_index: int
    entry: UnicodeMapEntry

    label = "Remove map entry"

    @classmethod
    def capture(cls, font: Font, block_index: int, entry_index: int) -> "RemoveEntry":
        entry = font.unicode_map[block_index].entries[entry_index]
        return cls(block_index, entry_index, entry)

    def apply(self, font: Font, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            font.unicode_map.remove_entry(self.block_index, self.entry_index)
        else:
            font.unicode_map.insert_entry(self.block_index, self.entry_index, self.entry)

    def merged_with(self, other: "Command") -> None:
        return None


@dataclass(frozen=True)
class EditEntry:
    """Replace an entry as a whole."""

    block_index: int
    entry_index: int
    new_entry: UnicodeMapEntry
    old_entry: UnicodeMapEntry

    label = "Edit map entry"

    @classmethod
    def capture(
        cls, font: Font, block_index: int, entry_index: int, new_entry: UnicodeMapEntry
    ) -> "EditEntry":
        old_entry = font.unicode_map[block_index].entries[entry_index]
        return cls(block_index, entry_index, new_entry, old_entry)

    def apply(self, font: Font, direction: Direction) -> None:
        entry = self.new_entry if direction is Direction.FORWARD else self.old_entry
        font.unicode_map.replace_entry(self.block_index, self.entry_index, entry)

    def merged_with(self, other: "Command") -> None:
        return None


@dataclass(frozen=True)
class EditBlockStart:
    """Move a block to a new start code point."""

    block_index: int
    new_start: int
    old_start: int

    label = "Edit block start"

    @classmethod
    def capture(cls, font: Font, block_index: int, new_start: int) -> "EditBlockStart":
        return cls(block_index, new_start, font.unicode_map[block_index].start_codepoint)

    def apply(self, font: Font, direction: Direction) -> None:
        start = self.new_start if direction is Direction.FORWARD else self.old_start
        font.unicode_map.set_block_start(self.block_index, start)

    def merged_with(self, other: "Command") -> None:
        return None


Command = SetPixel | AddBlock | RemoveBlock | AddEntry | RemoveEntry | EditEntry | EditBlockStart
