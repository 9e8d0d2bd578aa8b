"""Tests for the screen mode codec."""

import pytest

from termcodec import screen
from termcodec.errors import (
    InvalidModeConfigurationError,
    MissingFieldError,
    TypeMismatchError,
    UnknownEnumValueError,
)
from termcodec.screen import Color, EnableWrapping, Monochrome, ScreenKind

TEXT = ScreenKind.TEXT
GRAPHICS = ScreenKind.GRAPHICS

# (color kind, screen kind, width, height, bit depth, sequence)
LEGAL_REQUESTS = [
    ("monochrome", "text", 40, 25, None, "\x1b[=0h"),
    ("color", "text", 40, 25, None, "\x1b[=1h"),
    ("monochrome", "text", 80, 25, None, "\x1b[=2h"),
    ("color", "text", 80, 25, None, "\x1b[=3h"),
    ("color", "graphics", 320, 200, 2, "\x1b[=4h"),
    ("monochrome", "graphics", 320, 200, None, "\x1b[=5h"),
    ("monochrome", "graphics", 640, 200, None, "\x1b[=6h"),
    ("color", "graphics", 320, 200, None, "\x1b[=13h"),
    ("color", "graphics", 640, 200, 4, "\x1b[=14h"),
    ("monochrome", "graphics", 640, 350, None, "\x1b[=15h"),
    ("color", "graphics", 640, 350, 4, "\x1b[=16h"),
    ("monochrome", "graphics", 640, 480, None, "\x1b[=17h"),
    ("color", "graphics", 640, 480, 4, "\x1b[=18h"),
    ("color", "graphics", 300, 200, 8, "\x1b[=19h"),
]


class TestLegalTable:
    """Tests for the fixed table of supported modes."""

    def test_has_fifteen_modes(self) -> None:
        assert len(screen.ALL) == 15
        assert len(set(screen.ALL)) == 15

    def test_enable_wrapping(self) -> None:
        assert screen.encode(EnableWrapping()) == "\x1b[=7h"

    def test_legal_modes_in_table_order(self) -> None:
        pairs = list(screen.legal_modes())
        assert [mode for mode, _ in pairs] == list(screen.ALL)
        assert pairs[0] == (Monochrome(TEXT, (40, 25)), "\x1b[=0h")
        assert pairs[-1] == (Color(GRAPHICS, (300, 200), 8), "\x1b[=19h")

    def test_every_mode_encodes(self) -> None:
        for mode, sequence in screen.legal_modes():
            assert screen.encode(mode) == sequence

    @pytest.mark.parametrize(("color", "kind", "width", "height", "depth", "expected"), LEGAL_REQUESTS)
    def test_decoded_request_encodes(self, color, kind, width, height, depth, expected) -> None:
        """Should encode every table entry rebuilt through decode_request."""
        mode = screen.decode_request(color, kind, {"width": width, "height": height}, depth)
        assert screen.encode(mode) == expected


class TestEncodeRejects:
    """Tests for modes that are well-formed but unsupported."""

    def test_unsupported_bit_depth(self) -> None:
        with pytest.raises(InvalidModeConfigurationError):
            screen.encode(Color(TEXT, (40, 25), 3))

    def test_unsupported_modes(self, unsupported_modes: list) -> None:
        for mode in unsupported_modes:
            with pytest.raises(InvalidModeConfigurationError):
                screen.encode(mode)

    def test_none_bit_depth_is_not_a_wildcard(self) -> None:
        """Should treat a missing bit depth and a given one as different modes."""
        assert screen.encode(Color(GRAPHICS, (320, 200))) == "\x1b[=13h"
        assert screen.encode(Color(GRAPHICS, (320, 200), 2)) == "\x1b[=4h"
        with pytest.raises(InvalidModeConfigurationError):
            screen.encode(Color(GRAPHICS, (640, 480)))

    def test_error_lists_all_configurations(self) -> None:
        with pytest.raises(InvalidModeConfigurationError) as exc_info:
            screen.encode(Color(TEXT, (40, 25), 3))

        error = exc_info.value
        assert len(error.valid) == 15
        assert error.mode == Color(TEXT, (40, 25), 3)
        message = str(error)
        assert message.startswith("Invalid mode configuration, valid configurations are:\n- ")
        for mode in screen.ALL:
            assert f"- {screen.name_of(mode)}" in message

    def test_canonical_form(self) -> None:
        assert screen.name_of(Monochrome(TEXT, (40, 25))) == (
            "Monochrome(screen_kind=ScreenKind.TEXT, dims=(40, 25))"
        )
        assert screen.name_of(EnableWrapping()) == "EnableWrapping()"

    def test_invalid_mode_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            screen.encode(Monochrome(GRAPHICS, (1, 1)))

    def test_dims_list_normalized(self) -> None:
        assert Monochrome(TEXT, [40, 25]) == Monochrome(TEXT, (40, 25))  # type: ignore[arg-type]
        assert screen.encode(Monochrome(TEXT, [40, 25])) == "\x1b[=0h"  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "mode",
        [
            Color(GRAPHICS, (640, 480), 4.0),
            Color(GRAPHICS, (320, 200), True),
            Color(GRAPHICS, (640, 480), "4"),
            Monochrome("text", (40, 25)),
            Monochrome(TEXT, (40.0, 25)),
            Color(TEXT, (40, 25.0)),
            Monochrome(TEXT, (True, 25)),
        ],
    )
    def test_wrong_field_types_rejected(self, mode) -> None:
        """Should match fields by type, not only by value."""
        with pytest.raises(InvalidModeConfigurationError):
            screen.encode(mode)

    def test_unhashable_bit_depth_rejected(self) -> None:
        with pytest.raises(InvalidModeConfigurationError):
            screen.encode(Color(GRAPHICS, (640, 480), [4]))  # type: ignore[arg-type]

    def test_non_mode_rejected(self) -> None:
        with pytest.raises(InvalidModeConfigurationError):
            screen.encode((TEXT, (40, 25)))  # type: ignore[arg-type]


class TestDecodeRequest:
    """Tests for building modes from loose input."""

    def test_mixed_case_tokens(self) -> None:
        mode = screen.decode_request("Monochrome", "TEXT", {"width": 40, "height": 25})
        assert mode == Monochrome(TEXT, (40, 25))
        assert screen.encode(mode) == "\x1b[=0h"

    def test_dims_as_pair(self) -> None:
        assert screen.decode_request("color", "graphics", (640, 480), 4) == Color(GRAPHICS, (640, 480), 4)

    def test_integral_float_dims(self) -> None:
        assert screen.decode_request("color", "text", {"width": 80.0, "height": 25.0}) == Color(TEXT, (80, 25))

    def test_monochrome_ignores_bit_depth(self) -> None:
        assert screen.decode_request("monochrome", "graphics", (640, 480), 4) == Monochrome(GRAPHICS, (640, 480))

    def test_non_integer_bit_depth_treated_as_absent(self) -> None:
        assert screen.decode_request("color", "text", (40, 25), "4") == Color(TEXT, (40, 25))
        assert screen.decode_request("color", "text", (40, 25), -1) == Color(TEXT, (40, 25))

    def test_no_table_check(self) -> None:
        """Should build modes that encode will later reject."""
        mode = screen.decode_request("color", "text", (1234, 5678), 9)
        assert mode == Color(TEXT, (1234, 5678), 9)
        with pytest.raises(InvalidModeConfigurationError):
            screen.encode(mode)

    @pytest.mark.parametrize(
        ("args", "field", "position"),
        [
            ((), "ColorKind", 1),
            (("color",), "ScreenKind", 2),
            (("color", "text"), "Dimensions", 3),
            ((None, "text", (40, 25)), "ColorKind", 1),
        ],
    )
    def test_missing_field(self, args, field: str, position: int) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            screen.decode_request(*args)

        assert exc_info.value.field == field
        assert exc_info.value.position == position
        assert f"#{position} ({field})" in str(exc_info.value)

    @pytest.mark.parametrize(
        "args",
        [
            (5, None, (40, 25)),
            (5,),
            ("color", 5, None),
            ("color", "text", 40),
        ],
    )
    def test_fields_checked_in_order(self, args) -> None:
        """Should report a bad earlier field before a missing later one."""
        with pytest.raises(TypeMismatchError):
            screen.decode_request(*args)

    def test_missing_field_lists_accepted_values(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            screen.decode_request("color")
        assert exc_info.value.valid == ("text", "graphics")

    def test_non_string_kinds(self) -> None:
        with pytest.raises(TypeMismatchError):
            screen.decode_request(1, "text", (40, 25))
        with pytest.raises(TypeMismatchError):
            screen.decode_request("color", ["text"], (40, 25))

    @pytest.mark.parametrize(
        "dims",
        [
            40,
            "40x25",
            (40, 25, 1),
            {"width": 40},
            {"width": "40", "height": 25},
            {"width": 40, "height": -25},
            (40.5, 25),
            (True, 25),
        ],
    )
    def test_bad_dims(self, dims) -> None:
        with pytest.raises(TypeMismatchError):
            screen.decode_request("color", "text", dims)

    def test_unknown_screen_kind(self) -> None:
        with pytest.raises(UnknownEnumValueError) as exc_info:
            screen.decode_request("color", "pixels", (40, 25))

        assert exc_info.value.enum == "ScreenKind"
        assert exc_info.value.valid == ("text", "graphics")
        assert "text, graphics" in str(exc_info.value)

    def test_unknown_color_kind(self) -> None:
        with pytest.raises(UnknownEnumValueError) as exc_info:
            screen.decode_request("greyscale", "text", (40, 25))

        assert exc_info.value.enum == "ColorKind"
        assert exc_info.value.valid == ("monochrome", "color")

    def test_screen_kind_checked_before_color_kind(self) -> None:
        with pytest.raises(UnknownEnumValueError) as exc_info:
            screen.decode_request("greyscale", "pixels", (40, 25))
        assert exc_info.value.enum == "ScreenKind"
