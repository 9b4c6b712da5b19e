"""CLI application entry point for ulfedit.

This module provides the command-line interface using Typer.
"""

import string
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from ulfedit import __version__
from ulfedit.cli.output import (
    console,
    print_blocks,
    print_entry,
    print_error,
    print_font_info,
    print_header,
    print_pixels,
    print_step,
    print_success,
)
from ulfedit.config import LoggingConfig, UlfSettings, UnicodeConfig, get_default_settings
from ulfedit.core import FontDocument, composite_glyph, composite_text
from ulfedit.domain import BASE_COUNT, OVERLAY_COUNT, Font
from ulfedit.exceptions import FontError, MapError
from ulfedit.io import FontFallbackResolver, FontReader, FontWriter
from ulfedit.utils import char_name, codepoint_str, configure_logging

# Create the Typer app
app = typer.Typer(
    name="ulfedit",
    help="Inspect and edit X16 Unilib (ULF) dual-layer pixel fonts.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]ulfedit[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_codepoint(text: str) -> int:
    """Parse ``U+0041``, ``0x41`` or ``41`` (hex) into a code point.

    Raises:
        typer.BadParameter: If the text is not a hex number
    """
    value = text.strip()
    for prefix in ("U+", "u+", "0x", "0X"):
        if value.startswith(prefix):
            value = value[len(prefix):]
            break
    # Hex digits only: no sign, underscore or second prefix
    if not value or any(char not in string.hexdigits for char in value):
        raise typer.BadParameter(f"Not a hex code point: {text}")
    return int(value, 16)


def _load(font_path: Path) -> Font:
    """Load a font or exit with an error message."""
    try:
        return FontReader(font_path).load()
    except FileNotFoundError:
        print_error(
            f"Input file not found: {font_path}",
            details=f"The file '{font_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1) from None
    except FontError as e:
        print_error(f"Could not load font: {e}")
        raise typer.Exit(code=1) from None


def _open_document(font_path: Path) -> FontDocument:
    doc = FontDocument()
    if not doc.open(font_path):
        print_error(f"Could not load font: {font_path}")
        raise typer.Exit(code=1)
    return doc


def _save_document(doc: FontDocument, output: Path | None) -> None:
    if not doc.save(output):
        print_error(f"Could not save font: {output or doc.path}")
        raise typer.Exit(code=1)
    print_success(f"Saved {doc.path}")


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only show errors on the console",
        ),
    ] = False,
    default_font: Annotated[
        Path | None,
        typer.Option("--default-font", help="Font that shows reference characters"),
    ] = None,
    fallback_fonts: Annotated[
        list[Path] | None,
        typer.Option("--fallback-font", help="Fallback font for reference characters (repeatable)"),
    ] = None,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect and edit X16 Unilib (ULF) dual-layer pixel fonts."""
    try:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level, quiet=quiet)
    except ValidationError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        )
        raise typer.Exit(code=1) from None

    settings = UlfSettings(
        unicode=UnicodeConfig(default_font=default_font, fallback_fonts=fallback_fonts or []),
        logging=logging_config,
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=settings.logging.quiet,
    )
    ctx.obj = settings


@app.command()
def info(
    font_path: Annotated[Path, typer.Argument(help="Path to a ULF font file", show_default=False)],
) -> None:
    """Show a summary of a font file."""
    print_header(__version__)
    print_step("Loading font")
    font = _load(font_path)

    print_font_info(
        font_path=str(font_path),
        file_size=font_path.stat().st_size,
        blocks=len(font.unicode_map),
        codepoints=font.unicode_map.codepoint_count,
        base_used=sum(not font.glyphs.is_base_empty(i) for i in range(BASE_COUNT)),
        overlay_used=sum(not font.glyphs.is_overlay_empty(i) for i in range(OVERLAY_COUNT)),
    )


@app.command("map")
def list_map(
    font_path: Annotated[Path, typer.Argument(help="Path to a ULF font file", show_default=False)],
) -> None:
    """List the Unicode map blocks of a font."""
    font = _load(font_path)
    print_blocks(font.unicode_map.blocks)


@app.command()
def show(
    ctx: typer.Context,
    font_path: Annotated[Path, typer.Argument(help="Path to a ULF font file", show_default=False)],
    codepoint: Annotated[str, typer.Argument(help="Code point, e.g. U+0041", show_default=False)],
) -> None:
    """Show the map entry and composited glyph of a code point."""
    cp = parse_codepoint(codepoint)
    font = _load(font_path)

    entry = font.unicode_map.find_entry(cp)
    if entry is None:
        print_error(f"{codepoint_str(cp)} is not mapped")
        raise typer.Exit(code=1)

    settings: UlfSettings = ctx.obj if ctx.obj is not None else get_default_settings()
    resolver = FontFallbackResolver(settings.unicode.default_font, settings.unicode.fallback_fonts)

    print_entry(cp, entry, char_name(cp), resolver.font_family_for(cp))
    print_pixels(composite_glyph(font, entry))


@app.command()
def preview(
    font_path: Annotated[Path, typer.Argument(help="Path to a ULF font file", show_default=False)],
    text: Annotated[str, typer.Argument(help="Text to composite", show_default=False)],
) -> None:
    """Draw a line of text with the font."""
    font = _load(font_path)
    print_pixels(composite_text(font, text))


@app.command()
def new(
    output: Annotated[Path, typer.Argument(help="Path of the font to create", show_default=False)],
) -> None:
    """Create an empty font file."""
    doc = FontDocument()
    target = FontWriter.default_path(output)
    if not doc.save(target):
        print_error(f"Could not save font: {target}")
        raise typer.Exit(code=1)
    print_success(f"Created {target}")


@app.command("add-block")
def add_block(
    font_path: Annotated[Path, typer.Argument(help="Path to a ULF font file", show_default=False)],
    start: Annotated[str, typer.Argument(help="First code point, e.g. U+0020", show_default=False)],
    count: Annotated[
        int,
        typer.Option("--count", "-n", help="Number of entries", min=1, max=255),
    ] = 1,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: overwrite input)"),
    ] = None,
) -> None:
    """Add a block of default entries to the Unicode map."""
    start_cp = parse_codepoint(start)
    doc = _open_document(font_path)
    try:
        index = doc.add_block(start_cp, count)
    except MapError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    console.print(f"  block {index}: {codepoint_str(start_cp)} ({count})")
    _save_document(doc, output)


@app.command("set-entry")
def set_entry(
    font_path: Annotated[Path, typer.Argument(help="Path to a ULF font file", show_default=False)],
    codepoint: Annotated[str, typer.Argument(help="Code point, e.g. U+0041", show_default=False)],
    base: Annotated[int | None, typer.Option("--base", "-b", help="Base glyph index (0-255)")] = None,
    overlay: Annotated[
        int | None, typer.Option("--overlay", "-l", help="Overlay glyph index (0-1023)")
    ] = None,
    reverse: Annotated[bool | None, typer.Option("--reverse/--no-reverse")] = None,
    hflip: Annotated[bool | None, typer.Option("--hflip/--no-hflip")] = None,
    vflip: Annotated[bool | None, typer.Option("--vflip/--no-vflip")] = None,
    no_glyph: Annotated[bool | None, typer.Option("--no-glyph/--glyph")] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: overwrite input)"),
    ] = None,
) -> None:
    """Edit the map entry of a code point."""
    cp = parse_codepoint(codepoint)
    doc = _open_document(font_path)

    location = doc.font.unicode_map.locate(cp)
    if location is None:
        print_error(f"{codepoint_str(cp)} is not mapped", details="Add a block covering it first.")
        raise typer.Exit(code=1)

    fields = {
        "base_index": base,
        "overlay_index": overlay,
        "reverse": reverse,
        "hflip": hflip,
        "vflip": vflip,
        "no_glyph": no_glyph,
    }
    changes = {name: value for name, value in fields.items() if value is not None}

    try:
        changed = doc.edit_entry(*location, **changes)
    except MapError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not changed:
        console.print(f"  {codepoint_str(cp)} unchanged")
        return
    _save_document(doc, output)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
