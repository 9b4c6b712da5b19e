"""Unit tests for Unicode code point descriptions."""

import pytest

from ulfedit.utils.unicode_info import block_name, char_name, char_str, codepoint_str


class TestCodepointStr:
    """Tests for codepoint_str."""

    @pytest.mark.parametrize(
        "codepoint,expected",
        [(0x41, "U+0041"), (0x0, "U+0000"), (0x1F600, "U+1F600"), (0xFFFFFF, "U+FFFFFF")],
    )
    def test_format(self, codepoint: int, expected: str) -> None:
        """Test at least four upper-case hex digits are used."""
        assert codepoint_str(codepoint) == expected


class TestCharStr:
    """Tests for char_str."""

    def test_printable(self) -> None:
        """Test printable code points give their character."""
        assert char_str(0x41) == "A"
        assert char_str(0xA0) == "\xa0"
        assert char_str(0x1F600) == "\U0001F600"

    @pytest.mark.parametrize("codepoint", [0x00, 0x1F, 0x7F, 0x9F, 0x110000, 0xFFFFFF])
    def test_not_printable(self, codepoint: int) -> None:
        """Test controls and non-Unicode values give an empty string."""
        assert char_str(codepoint) == ""


class TestBlockName:
    """Tests for block_name."""

    @pytest.mark.parametrize(
        "codepoint,expected",
        [(0x41, "Basic Latin"), (0x3B1, "Greek and Coptic"), (0xE000, "Private Use Area")],
    )
    def test_known_blocks(self, codepoint: int, expected: str) -> None:
        """Test assigned ranges report their block."""
        assert block_name(codepoint) == expected

    @pytest.mark.parametrize("codepoint", [0x40000, 0x110000, -1])
    def test_no_block(self, codepoint: int) -> None:
        """Test unassigned or invalid code points give an empty string."""
        assert block_name(codepoint) == ""


class TestCharName:
    """Tests for char_name."""

    def test_named(self) -> None:
        """Test regular characters use their Unicode name."""
        assert char_name(0x41) == "LATIN CAPITAL LETTER A"

    def test_control(self) -> None:
        """Test controls get an extended name."""
        assert char_name(0x07) == "<control-0007>"

    def test_private_use(self) -> None:
        """Test private use code points get an extended name."""
        assert char_name(0xE000) == "<private-use-E000>"

    @pytest.mark.parametrize(
        "codepoint,expected",
        [
            (0x378, "<unassigned-0378>"),
            (0xFFFF, "<noncharacter-FFFF>"),
            (0xFDD0, "<noncharacter-FDD0>"),
            (0x10FFFE, "<noncharacter-10FFFE>"),
            (0xD800, "<lead-surrogate-D800>"),
            (0xDFFF, "<trail-surrogate-DFFF>"),
        ],
    )
    def test_extended_names(self, codepoint: int, expected: str) -> None:
        """Test unnamed code points get ICU extended names."""
        assert char_name(codepoint) == expected

    @pytest.mark.parametrize("codepoint", [0x110000, 0xFFFFFF, -1])
    def test_out_of_range(self, codepoint: int) -> None:
        """Test values outside Unicode give an empty string."""
        assert char_name(codepoint) == ""
