"""Font writer for saving ULF files."""

from pathlib import Path

from ulfedit.domain.font import Font
from ulfedit.exceptions import FontSaveError
from ulfedit.io.codec import encode_font
from ulfedit.utils.logging import get_logger

ULF_SUFFIX = ".ulf"

logger = get_logger(__name__)


class FontWriter:
    """Writes a Font to a ULF file.

    The whole file is encoded in memory and written with a single call.
    A failed write leaves the previous file contents unspecified.

    Example:
        writer = FontWriter(font, Path("output.ulf"))
        writer.save()
    """

    def __init__(self, font: Font, output_path: Path) -> None:
        """Initialize the font writer.

        Args:
            font: The font to write
            output_path: Path where the font will be saved
        """
        self._font = font
        self._output_path = output_path

    def save(self) -> int:
        """Encode and write the font.

        Returns:
            Number of bytes written

        Raises:
            FontSaveError: If the file cannot be written
        """
        data = encode_font(self._font)
        try:
            self._output_path.write_bytes(data)
        except OSError as e:
            raise FontSaveError(str(self._output_path), str(e)) from e

        logger.debug("Encoded font", path=str(self._output_path), size=len(data))
        return len(data)

    @staticmethod
    def default_path(path: Path) -> Path:
        """Give ``path`` the .ulf extension if it has no suffix.

        Converts: font -> font.ulf
                  font.ulf -> font.ulf
                  font.bin -> font.bin
        """
        if path.suffix:
            return path
        return path.with_suffix(ULF_SUFFIX)


def save_font(font: Font, path: Path) -> int:
    """Write a font to ``path``. See FontWriter.save."""
    return FontWriter(font, path).save()
