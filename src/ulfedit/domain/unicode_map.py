"""Unicode map: code point ranges mapped to glyph pairs.

A ULF font maps code points to glyphs through an ordered list of blocks.
Each block starts at a code point and holds up to 255 consecutive entries;
entry ``i`` maps code point ``start_codepoint + i`` to a base glyph, an
overlay glyph and four transform flags.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from ulfedit.domain.glyphs import BASE_COUNT, OVERLAY_COUNT
from ulfedit.exceptions import MapError

MAX_CODEPOINT = 0xFFFFFF
MAX_BLOCK_ENTRIES = 255


@dataclass(frozen=True, slots=True)
class UnicodeMapEntry:
    """Glyph selection for a single code point.

    Immutable; edits replace the whole entry (see ``dataclasses.replace``).

    Attributes:
        base_index: Base glyph index (0-255)
        overlay_index: Overlay glyph index (0-1023)
        reverse: Invert the base layer
        no_glyph: Suppress the glyph entirely (renders as background)
        hflip: Mirror the overlay horizontally
        vflip: Mirror the overlay vertically
    """

    base_index: int = 0
    overlay_index: int = 0
    reverse: bool = False
    no_glyph: bool = False
    hflip: bool = False
    vflip: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.base_index < BASE_COUNT:
            raise MapError(f"Base index out of range: {self.base_index}")
        if not 0 <= self.overlay_index < OVERLAY_COUNT:
            raise MapError(f"Overlay index out of range: {self.overlay_index}")


@dataclass
class UnicodeMapBlock:
    """A contiguous code point range and its entries.

    Attributes:
        start_codepoint: First code point of the block (0-0xFFFFFF)
        entries: One entry per consecutive code point, at most 255
    """

    start_codepoint: int
    entries: list[UnicodeMapEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        check_codepoint(self.start_codepoint)
        if len(self.entries) > MAX_BLOCK_ENTRIES:
            raise MapError(
                f"Block holds {len(self.entries)} entries, maximum is {MAX_BLOCK_ENTRIES}"
            )

    @property
    def end_codepoint(self) -> int:
        """Last mapped code point (``start - 1`` for an empty block)."""
        return self.start_codepoint + len(self.entries) - 1

    def is_full(self) -> bool:
        return len(self.entries) >= MAX_BLOCK_ENTRIES

    def contains(self, codepoint: int) -> bool:
        return self.start_codepoint <= codepoint <= self.end_codepoint

    def entry_for(self, codepoint: int) -> UnicodeMapEntry | None:
        if not self.contains(codepoint):
            return None
        return self.entries[codepoint - self.start_codepoint]

    def copy(self) -> "UnicodeMapBlock":
        # Entries are frozen, a shallow list copy is enough.
        return UnicodeMapBlock(self.start_codepoint, list(self.entries))


def check_codepoint(codepoint: int) -> None:
    """Raise MapError if ``codepoint`` does not fit in 24 bits."""
    if not 0 <= codepoint <= MAX_CODEPOINT:
        raise MapError(f"Code point out of range: {codepoint:#x}")


@dataclass
class UnicodeMap:
    """Ordered collection of map blocks.

    Block order is the persisted order. Blocks are usually kept sorted by
    start code point, but only ``sorted_insert_index`` knows about that;
    nothing here enforces it.
    """

    blocks: list[UnicodeMapBlock] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[UnicodeMapBlock]:
        return iter(self.blocks)

    def __getitem__(self, index: int) -> UnicodeMapBlock:
        return self.blocks[index]

    def insert_block(self, index: int, block: UnicodeMapBlock) -> None:
        self.blocks.insert(index, block)

    def remove_block(self, index: int) -> UnicodeMapBlock:
        return self.blocks.pop(index)

    def insert_entry(self, block_index: int, entry_index: int, entry: UnicodeMapEntry) -> None:
        """Insert an entry, raising MapError if the block is already full."""
        block = self.blocks[block_index]
        if block.is_full():
            raise MapError(f"Block {block_index} already holds {MAX_BLOCK_ENTRIES} entries")
        block.entries.insert(entry_index, entry)

    def remove_entry(self, block_index: int, entry_index: int) -> UnicodeMapEntry:
        """Remove and return an entry.

        This may leave an empty block, which encodes as the map terminator
        and drops every following block on save. Editors remove the whole
        block instead (see ``FontDocument.remove``).
        """
        return self.blocks[block_index].entries.pop(entry_index)

    def replace_entry(self, block_index: int, entry_index: int, entry: UnicodeMapEntry) -> None:
        self.blocks[block_index].entries[entry_index] = entry

    def set_block_start(self, block_index: int, start: int) -> None:
        check_codepoint(start)
        self.blocks[block_index].start_codepoint = start

    def locate(self, codepoint: int) -> tuple[int, int] | None:
        """Find the (block index, entry index) mapping ``codepoint``.

        The first block in list order wins when ranges overlap.

        Returns:
            Index pair, or None if the code point is unmapped
        """
        for block_index, block in enumerate(self.blocks):
            if block.contains(codepoint):
                return block_index, codepoint - block.start_codepoint
        return None

    def find_entry(self, codepoint: int) -> UnicodeMapEntry | None:
        """Return the entry mapping ``codepoint``, or None if unmapped."""
        location = self.locate(codepoint)
        if location is None:
            return None
        block_index, entry_index = location
        return self.blocks[block_index].entries[entry_index]

    def sorted_insert_index(self, start: int) -> int:
        """Return the position that keeps blocks sorted by start code point.

        This is the index of the first block starting after ``start``, or the
        list length if there is none.
        """
        for index, block in enumerate(self.blocks):
            if block.start_codepoint > start:
                return index
        return len(self.blocks)

    def iter_codepoints(self) -> Iterator[tuple[int, UnicodeMapEntry]]:
        """Yield (code point, entry) pairs in block order."""
        for block in self.blocks:
            for offset, entry in enumerate(block.entries):
                yield block.start_codepoint + offset, entry

    @property
    def codepoint_count(self) -> int:
        return sum(len(block.entries) for block in self.blocks)

    def copy(self) -> "UnicodeMap":
        return UnicodeMap([block.copy() for block in self.blocks])
