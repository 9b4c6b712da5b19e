"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library:
headers, font summaries, map listings and glyph drawings.
"""

from rich.console import Console
from rich.text import Text

from ulfedit.domain.unicode_map import UnicodeMapBlock, UnicodeMapEntry
from ulfedit.utils.unicode_info import block_name, codepoint_str

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

# One symbol per color id: background, foreground, overlay A, overlay B, overlay foreground
GLYPH_SYMBOLS = (".", "#", "a", "b", "@")


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]ulfedit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(
    font_path: str,
    file_size: int,
    blocks: int,
    codepoints: int,
    base_used: int,
    overlay_used: int,
) -> None:
    """Print font summary.

    Args:
        font_path: Path to the font file
        file_size: File size in bytes
        blocks: Number of map blocks
        codepoints: Number of mapped code points
        base_used: Base glyphs with at least one pixel set
        overlay_used: Overlay glyphs with at least one pixel set
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({file_size:,} bytes)")
    console.print(line1)
    console.print(f"  {blocks} blocks {SYM_DOT} {codepoints:,} code points")
    console.print(f"  {base_used}/256 base glyphs {SYM_DOT} {overlay_used}/1024 overlay glyphs")


def format_block(block: UnicodeMapBlock) -> str:
    """Format a block as ``U+0020–U+007E (95)  Basic Latin``."""
    label = (
        f"{codepoint_str(block.start_codepoint)}–{codepoint_str(block.end_codepoint)} "
        f"({len(block.entries)})"
    )
    name = block_name(block.start_codepoint)
    return f"{label}  {name}" if name else label


def print_blocks(blocks: list[UnicodeMapBlock]) -> None:
    """Print one line per map block."""
    if not blocks:
        console.print("  (no blocks)")
        return
    for index, block in enumerate(blocks):
        console.print(Text(f"  {index:>3}  {format_block(block)}"))


def format_flags(entry: UnicodeMapEntry) -> str:
    flags = [
        name
        for name, enabled in (
            ("reverse", entry.reverse),
            ("hflip", entry.hflip),
            ("vflip", entry.vflip),
            ("no-glyph", entry.no_glyph),
        )
        if enabled
    ]
    return ", ".join(flags) if flags else "none"


def print_entry(codepoint: int, entry: UnicodeMapEntry, name: str, fallback_family: str) -> None:
    """Print the details of one map entry.

    Args:
        codepoint: Code point mapped by the entry
        entry: The map entry
        name: Unicode character name ("" if unknown)
        fallback_family: Fallback font family ("" if none is needed)
    """
    header = codepoint_str(codepoint)
    block = block_name(codepoint)
    if block:
        header += f"  {block}"
    console.print(Text(f"  {header}"))
    if name:
        console.print(Text(f"  {name}"))
    if fallback_family:
        console.print(Text(f"  ({fallback_family})"))
    console.print(
        f"  base {entry.base_index} (0x{entry.base_index:02X}) {SYM_DOT} "
        f"overlay {entry.overlay_index} (0x{entry.overlay_index:03X}) {SYM_DOT} "
        f"flags: {format_flags(entry)}"
    )


def print_pixels(rows: list[list[int]]) -> None:
    """Draw rows of color ids, one symbol per pixel."""
    console.print()
    for row in rows:
        console.print(Text("  " + "".join(GLYPH_SYMBOLS[cell] for cell in row)))


def print_success(message: str) -> None:
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
