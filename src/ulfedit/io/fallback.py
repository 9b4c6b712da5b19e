"""Fallback font lookup for code points the default font cannot show.

Editors show the real Unicode character next to the pixel glyph. When the
default presentation font has no glyph for a code point, the resolver finds
a fallback font whose cmap covers it, using fontTools to read the fonts.
"""

from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from ulfedit.utils.logging import get_logger

logger = get_logger(__name__)


class FontFallbackResolver:
    """Finds a font family covering a code point.

    Fonts are opened lazily and their cmaps cached, so each file is read at
    most once. Unreadable fonts are logged and treated as covering nothing.

    Example:
        resolver = FontFallbackResolver(Path("DejaVuSans.ttf"), [Path("Symbola.ttf")])
        family = resolver.font_family_for(0x1F600)
    """

    def __init__(self, default_font: Path | None = None, fallback_fonts: list[Path] | None = None) -> None:
        """Initialize the resolver.

        Args:
            default_font: Font used for presentation when it covers the code point
            fallback_fonts: Fonts searched in order when the default font does not
        """
        self._default_font = default_font
        self._fallback_fonts = list(fallback_fonts or [])
        self._coverage: dict[Path, tuple[frozenset[int], str]] = {}

    def _load(self, path: Path) -> tuple[frozenset[int], str]:
        cached = self._coverage.get(path)
        if cached is not None:
            return cached

        coverage: tuple[frozenset[int], str] = (frozenset(), "")
        try:
            font = TTFont(str(path), lazy=True)
            try:
                cmap = font.getBestCmap() or {}
                family = font["name"].getBestFamilyName() or ""
                coverage = (frozenset(cmap), family)
            finally:
                font.close()
        except (OSError, TTLibError, KeyError) as e:
            logger.warning("Could not read fallback font", path=str(path), error=str(e))

        self._coverage[path] = coverage
        return coverage

    def covers(self, path: Path, codepoint: int) -> bool:
        """Check whether the font at ``path`` maps ``codepoint``."""
        codepoints, _ = self._load(path)
        return codepoint in codepoints

    def font_family_for(self, codepoint: int) -> str:
        """Return the fallback family name for ``codepoint``.

        Returns:
            Empty string when the default font already covers the code point
            or when no fallback font does, otherwise the family name of the
            first covering fallback font
        """
        if self._default_font is not None and self.covers(self._default_font, codepoint):
            return ""

        for path in self._fallback_fonts:
            codepoints, family = self._load(path)
            if codepoint in codepoints and family:
                return family
        return ""
