"""Font reader for loading ULF files.

This module provides the FontReader class, which reads a whole ULF file in
one call and decodes it into a Font.
"""

from pathlib import Path

from ulfedit.domain.font import Font
from ulfedit.exceptions import FontFormatError, FontLoadError
from ulfedit.io.codec import decode_font
from ulfedit.utils.logging import get_logger

logger = get_logger(__name__)


class FontReader:
    """Loads a ULF file into a Font.

    Example:
        reader = FontReader(Path("font.ulf"))
        font = reader.load()
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the ULF font file
        """
        self._font_path = font_path

    def load(self) -> Font:
        """Read and decode the font file.

        Returns:
            Newly built Font

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file cannot be read or is too short
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            data = self._font_path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        try:
            font = decode_font(data)
        except FontFormatError as e:
            raise FontLoadError(str(self._font_path), e.details) from e

        logger.debug(
            "Decoded font",
            path=str(self._font_path),
            size=len(data),
            blocks=len(font.unicode_map),
        )
        return font


def load_font(path: Path) -> Font:
    """Load a ULF file. See FontReader.load."""
    return FontReader(path).load()
