"""Unit tests for hexcolorize.color: hex validation and RGBColor."""

from __future__ import annotations

import dataclasses

import pytest

from hexcolorize.color import RGBColor, is_valid_hex, parse_hex
from hexcolorize.errors import ColorizeError, InvalidHexError

# ======================================================================
# Valid hex strings
# ======================================================================


class TestParseHexValid:
    """parse_hex() accepts an optional '#' plus six hex digits, any case."""

    def test_mixed_case_with_hash(self) -> None:
        assert parse_hex("#12AB34") == RGBColor(18, 171, 52)

    def test_without_hash(self) -> None:
        assert parse_hex("12ab34") == RGBColor(18, 171, 52)

    def test_black(self) -> None:
        assert parse_hex("#000000") == RGBColor(0, 0, 0)

    def test_white(self) -> None:
        assert parse_hex("#FFFFFF") == RGBColor(255, 255, 255)

    @pytest.mark.parametrize(
        "hex_color,expected",
        [
            ("#FF0000", (255, 0, 0)),
            ("#00ff00", (0, 255, 0)),
            ("0000Ff", (0, 0, 255)),
            ("#808080", (128, 128, 128)),
            ("#fFa500", (255, 165, 0)),
        ],
    )
    def test_exact_bytes(self, hex_color: str, expected: tuple) -> None:
        assert parse_hex(hex_color).as_tuple() == expected

    def test_returns_fresh_value_each_call(self) -> None:
        first = parse_hex("#FF0000")
        second = parse_hex("#00FF00")
        assert first == RGBColor(255, 0, 0)
        assert second == RGBColor(0, 255, 0)

    def test_from_hex_alias(self) -> None:
        assert RGBColor.from_hex("#0a0B0c") == RGBColor(10, 11, 12)


# ======================================================================
# Invalid hex strings
# ======================================================================


class TestParseHexInvalid:
    """Anything outside ^#?[0-9a-fA-F]{6}$ raises InvalidHexError."""

    @pytest.mark.parametrize(
        "hex_color",
        [
            "FF00",
            "#FF0000 0",
            "#FF00000",
            "#FF000H",
            "",
            "#",
            "##FF0000",
            "#F00",
            "0xFF0000",
            " #FF0000",
            "#FF0000\n",
            "red",
        ],
    )
    def test_rejected(self, hex_color: str) -> None:
        with pytest.raises(InvalidHexError, match="invalid hex code"):
            parse_hex(hex_color)

    def test_error_keeps_original_input(self) -> None:
        with pytest.raises(InvalidHexError) as excinfo:
            parse_hex("#GGGGGG")
        assert excinfo.value.original_input == "#GGGGGG"

    def test_error_is_value_error_and_colorize_error(self) -> None:
        with pytest.raises(ValueError):
            parse_hex("nope")
        with pytest.raises(ColorizeError):
            parse_hex("nope")

    def test_error_string_has_category(self) -> None:
        with pytest.raises(InvalidHexError) as excinfo:
            parse_hex("#12")
        assert str(excinfo.value).startswith("HEXERR: ")

    def test_non_string_is_type_error(self) -> None:
        with pytest.raises(TypeError, match="must be a str"):
            parse_hex(0xFF0000)


class TestIsValidHex:
    def test_valid(self) -> None:
        assert is_valid_hex("#abcdef")
        assert is_valid_hex("ABCDEF")

    def test_invalid(self) -> None:
        assert not is_valid_hex("#abcde")
        assert not is_valid_hex(None)


# ======================================================================
# RGBColor
# ======================================================================


class TestRGBColor:
    def test_frozen(self) -> None:
        color = RGBColor(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            color.r = 5

    def test_to_hex_is_lowercase(self) -> None:
        assert RGBColor(255, 171, 0).to_hex() == "#ffab00"

    def test_to_hex_round_trips(self) -> None:
        assert parse_hex("#12AB34").to_hex() == "#12ab34"

    def test_out_of_range_high(self) -> None:
        with pytest.raises(ValueError, match="0-255"):
            RGBColor(256, 0, 0)

    def test_out_of_range_negative(self) -> None:
        with pytest.raises(ValueError, match="0-255"):
            RGBColor(0, -1, 0)

    def test_float_not_allowed(self) -> None:
        with pytest.raises(ValueError, match="ints"):
            RGBColor(1.0, 0, 0)

    def test_bool_not_allowed(self) -> None:
        with pytest.raises(ValueError, match="ints"):
            RGBColor(True, 0, 0)
