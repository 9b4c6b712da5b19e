"""Binary codec between ULF byte buffers and Font models.

File layout (multi-byte fields little-endian):

    0x0000  overlay raster   1024 glyphs x 32 bytes
    0x8000  base raster       256 glyphs x 16 bytes
    0x9000  unicode map      blocks, terminated by a zero-count header

Each map block is a 4-byte header (24-bit start code point, 8-bit entry
count) followed by ``count`` 3-byte entries:

    byte 0  base index
    byte 1  overlay index, low 8 bits
    byte 2  bits 0-1 overlay index high bits, bit 2 hflip, bit 3 vflip,
            bit 6 no glyph, bit 7 reverse
"""

from ulfedit.domain.font import Font
from ulfedit.domain.glyphs import BASE_RASTER_SIZE, OVERLAY_RASTER_SIZE, BitmapGlyphStore
from ulfedit.domain.unicode_map import UnicodeMap, UnicodeMapBlock, UnicodeMapEntry
from ulfedit.exceptions import FontFormatError

OVERLAY_OFFSET = 0x0000
BASE_OFFSET = 0x8000
MAP_OFFSET = 0x9000

HEADER_SIZE = 4
ENTRY_SIZE = 3

FLAG_HFLIP = 0x04
FLAG_VFLIP = 0x08
FLAG_NO_GLYPH = 0x40
FLAG_REVERSE = 0x80
OVERLAY_HIGH_MASK = 0x03

TERMINATOR = bytes(HEADER_SIZE)


def encode_entry(entry: UnicodeMapEntry) -> bytes:
    """Pack a map entry into its 3-byte form."""
    flags = (entry.overlay_index >> 8) & OVERLAY_HIGH_MASK
    if entry.hflip:
        flags |= FLAG_HFLIP
    if entry.vflip:
        flags |= FLAG_VFLIP
    if entry.no_glyph:
        flags |= FLAG_NO_GLYPH
    if entry.reverse:
        flags |= FLAG_REVERSE
    return bytes((entry.base_index, entry.overlay_index & 0xFF, flags))


def decode_entry(data: bytes | bytearray | memoryview) -> UnicodeMapEntry:
    """Unpack a 3-byte map entry. Unused flag bits are ignored."""
    base_index, overlay_low, flags = data[0], data[1], data[2]
    return UnicodeMapEntry(
        base_index=base_index,
        overlay_index=((flags & OVERLAY_HIGH_MASK) << 8) | overlay_low,
        reverse=bool(flags & FLAG_REVERSE),
        no_glyph=bool(flags & FLAG_NO_GLYPH),
        hflip=bool(flags & FLAG_HFLIP),
        vflip=bool(flags & FLAG_VFLIP),
    )


def encode_block_header(start_codepoint: int, count: int) -> bytes:
    return start_codepoint.to_bytes(3, "little") + bytes((count,))


def encode_font(font: Font) -> bytes:
    """Serialize a font into a ULF buffer.

    Args:
        font: Font to serialize

    Returns:
        Overlay raster, base raster, then every block in list order and a
        zero terminator header
    """
    out = bytearray()
    out += font.glyphs.overlay
    out += font.glyphs.base
    for block in font.unicode_map:
        out += encode_block_header(block.start_codepoint, len(block.entries))
        for entry in block.entries:
            out += encode_entry(entry)
    out += TERMINATOR
    return bytes(out)


def decode_font(data: bytes | bytearray) -> Font:
    """Parse a ULF buffer into a new Font.

    Map parsing stops at the first zero-count header or when fewer than
    four bytes remain. A block whose entries run past the end of the buffer
    keeps the entries that fit, and parsing stops there.

    Args:
        data: Complete file contents

    Returns:
        Newly built Font

    Raises:
        FontFormatError: If the buffer is too short to hold both rasters
    """
    if len(data) < MAP_OFFSET:
        raise FontFormatError(
            f"expected at least {MAP_OFFSET:#x} bytes, got {len(data):#x}"
        )

    view = memoryview(data)
    glyphs = BitmapGlyphStore(
        base=bytearray(view[BASE_OFFSET:BASE_OFFSET + BASE_RASTER_SIZE]),
        overlay=bytearray(view[OVERLAY_OFFSET:OVERLAY_OFFSET + OVERLAY_RASTER_SIZE]),
    )

    blocks: list[UnicodeMapBlock] = []
    pos = MAP_OFFSET
    size = len(data)
    while pos + HEADER_SIZE <= size:
        start = int.from_bytes(view[pos:pos + 3], "little")
        count = view[pos + 3]
        pos += HEADER_SIZE
        if count == 0:
            break

        entries: list[UnicodeMapEntry] = []
        for _ in range(count):
            if pos + ENTRY_SIZE > size:
                break
            entries.append(decode_entry(view[pos:pos + ENTRY_SIZE]))
            pos += ENTRY_SIZE
        blocks.append(UnicodeMapBlock(start, entries))

    return Font(glyphs=glyphs, unicode_map=UnicodeMap(blocks))
