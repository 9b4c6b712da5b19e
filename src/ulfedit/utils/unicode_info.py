"""Unicode code point descriptions.

Pure query helpers used to label map entries: code point formatting, the
printable character, the Unicode block name and the character name. Block
names and character data come from ``fontTools.unicodedata``.
"""

from fontTools import unicodedata

MAX_UNICODE = 0x10FFFF


def codepoint_str(codepoint: int) -> str:
    """Format a code point as ``U+0041``."""
    return f"U+{codepoint:04X}"


def char_str(codepoint: int) -> str:
    """Return the character for ``codepoint``, or "" if it is not printable.

    C0 and C1 control codes and values beyond the Unicode range give "".
    """
    if codepoint < 0x20 or 0x7F <= codepoint < 0xA0 or codepoint > MAX_UNICODE:
        return ""
    return chr(codepoint)


def block_name(codepoint: int) -> str:
    """Return the Unicode block name, or "" for unassigned ranges."""
    if not 0 <= codepoint <= MAX_UNICODE:
        return ""
    name = unicodedata.block(chr(codepoint))
    return "" if name == "No_Block" else name


def _is_noncharacter(codepoint: int) -> bool:
    return 0xFDD0 <= codepoint <= 0xFDEF or (codepoint & 0xFFFE) == 0xFFFE


def char_name(codepoint: int) -> str:
    """Return the Unicode character name for ``codepoint``.

    Code points without a name get ICU-style extended names:
    ``<control-0007>``, ``<private-use-E000>``, ``<lead-surrogate-D800>``,
    ``<trail-surrogate-DC00>``, ``<noncharacter-FFFF>`` and
    ``<unassigned-0378>``. Values outside the Unicode range give "".
    Never raises.
    """
    if not 0 <= codepoint <= MAX_UNICODE:
        return ""
    char = chr(codepoint)
    name = unicodedata.name(char, "")
    if name:
        return name

    category = unicodedata.category(char)
    if category == "Cc":
        kind = "control"
    elif category == "Co":
        kind = "private-use"
    elif category == "Cs":
        kind = "lead-surrogate" if codepoint < 0xDC00 else "trail-surrogate"
    elif _is_noncharacter(codepoint):
        kind = "noncharacter"
    elif category == "Cn":
        kind = "unassigned"
    else:
        return ""
    return f"<{kind}-{codepoint:04X}>"
