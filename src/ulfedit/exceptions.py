"""Exception hierarchy for ulfedit."""


class UlfError(Exception):
    """Base exception for all ulfedit errors."""

    pass


class FontError(UlfError):
    """Errors related to font loading or saving."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontSaveError(FontError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class FontFormatError(FontError):
    """Buffer is not a valid ULF font."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid font data: {details}")


class MapError(UlfError, ValueError):
    """Unicode map value outside its allowed range."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class HistoryError(UlfError):
    """Misuse of the command history (unbalanced or nested macros)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
