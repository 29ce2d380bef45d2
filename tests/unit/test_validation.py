"""Unit tests for the input validators.

These tests verify:
- Dimension validation against the per-axis constraints
- Position validation against the room size
- Orientation and Y / N confirmation parsing
- Reporting never changes a validation outcome
"""

import pytest

from robot_room.contracts import NullReporter
from robot_room.domain import (
    ROOM_CONSTRAINTS,
    Severity,
    UnknownAxisError,
    is_valid_dimension,
    parse_confirmation,
    parse_integer,
    validate_orientation,
    validate_position,
)


class TestParseInteger:
    """Tests for parse_integer."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("7", 7), (" 12 ", 12), ("+3", 3), ("-1", -1), (4, 4)],
    )
    def test_whole_numbers(self, value: object, expected: int) -> None:
        """Whole numbers parse, with surrounding whitespace ignored."""
        assert parse_integer(value) == expected

    @pytest.mark.parametrize("value", ["3.5", "3.0", "abc", "1_000", "", "5a", None, True, 2.0])
    def test_rejects_non_integers(self, value: object) -> None:
        """Fractions, floats, bools and text do not parse."""
        assert parse_integer(value) is None


class TestIsValidDimension:
    """Tests for is_valid_dimension."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_value(self, value: object) -> None:
        """Missing values are invalid."""
        assert is_valid_dimension(value, "width") is False

    def test_not_a_number(self) -> None:
        assert is_valid_dimension("abc", "width") is False

    def test_float_rejected(self) -> None:
        """A decimal point is invalid even for a whole value."""
        assert is_valid_dimension("3.5", "width") is False
        assert is_valid_dimension("3.0", "width") is False

    def test_below_min(self) -> None:
        assert is_valid_dimension(ROOM_CONSTRAINTS["width"].min - 1, "width") is False
        assert is_valid_dimension(ROOM_CONSTRAINTS["height"].min - 1, "height") is False

    def test_above_max(self) -> None:
        assert is_valid_dimension(ROOM_CONSTRAINTS["width"].max + 1, "width") is False
        assert is_valid_dimension(ROOM_CONSTRAINTS["height"].max + 1, "height") is False

    def test_bounds_are_inclusive(self) -> None:
        """Both ends of the range are accepted."""
        assert is_valid_dimension("2", "width") is True
        assert is_valid_dimension("20", "height") is True

    def test_valid_value(self) -> None:
        assert is_valid_dimension("3", "width") is True

    def test_unknown_axis_is_fatal(self) -> None:
        """An axis without a constraint raises instead of returning False."""
        with pytest.raises(UnknownAxisError) as exc_info:
            is_valid_dimension("5", "length")
        assert exc_info.value.error_type == "unknown_axis"
        assert exc_info.value.axis == "length"

    def test_reports_axis_value_and_range(self, scripted_console) -> None:
        """A rejection explains the axis, the offending value and the range."""
        console = scripted_console()
        is_valid_dimension("25", "height", console)

        text = " ".join(console.lines(Severity.ERROR))
        assert '"25"' in text
        assert "height" in text
        assert "between 2 and 20" in text

    def test_reports_missing_value(self, scripted_console) -> None:
        console = scripted_console()
        is_valid_dimension("", "width", console)
        assert console.lines(Severity.ERROR) == [
            "Must provide a width, a round number between 2 and 20."
        ]

    def test_valid_value_reports_nothing(self, scripted_console) -> None:
        console = scripted_console()
        is_valid_dimension("10", "width", console)
        assert console.reports == []

    @pytest.mark.parametrize("value", ["", "abc", "3.5", "1", "21", "2", "20"])
    def test_reporter_does_not_change_outcome(self, value: str, scripted_console) -> None:
        """Results are identical with no reporter, a null one or a recording one."""
        expected = is_valid_dimension(value, "width")
        assert is_valid_dimension(value, "width", NullReporter()) is expected
        assert is_valid_dimension(value, "width", scripted_console()) is expected


class TestValidatePosition:
    """Tests for validate_position."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_value(self, value: object) -> None:
        assert validate_position(value, 5, "x") is False

    @pytest.mark.parametrize("value", ["abc", "3.5", "-1", "6"])
    def test_invalid_values(self, value: str) -> None:
        assert validate_position(value, 5, "x") is False

    @pytest.mark.parametrize("value", ["0", "3", "5"])
    def test_valid_values(self, value: str) -> None:
        """Zero and the room size itself are valid positions."""
        assert validate_position(value, 5, "x") is True

    def test_unknown_axis_is_accepted(self) -> None:
        """The axis only labels diagnostics, so any name is accepted."""
        assert validate_position("1", 5, "z") is True

    def test_reports_axis_and_range(self, scripted_console) -> None:
        console = scripted_console()
        validate_position("6", 5, "y", console)

        text = " ".join(console.lines(Severity.ERROR))
        assert '"6"' in text
        assert "y-axis" in text
        assert "between 0 and 5" in text

    def test_reports_range_for_missing_value(self, scripted_console) -> None:
        console = scripted_console()
        validate_position("", 7, "x", console)
        assert console.lines(Severity.ERROR) == [
            "Must provide a starting position on the x-axis between 0 and 7."
        ]


class TestValidateOrientation:
    """Tests for validate_orientation."""

    @pytest.mark.parametrize("value", [None, "", "A", "NE", "north"])
    def test_invalid(self, value: object) -> None:
        assert validate_orientation(value) is False

    @pytest.mark.parametrize("value", ["N", "E", "S", "W", "n", "e", "s", "w", " w "])
    def test_valid_case_insensitive(self, value: str) -> None:
        assert validate_orientation(value) is True

    def test_reports_offending_value(self, scripted_console) -> None:
        console = scripted_console()
        validate_orientation("A", console)
        assert console.lines(Severity.ERROR) == ['"A" is not a valid orientation.']


class TestParseConfirmation:
    """Tests for parse_confirmation."""

    @pytest.mark.parametrize("value", ["Y", "y", " y ", "Y\t"])
    def test_yes(self, value: str) -> None:
        assert parse_confirmation(value) is True

    @pytest.mark.parametrize("value", ["N", "n", " N "])
    def test_no(self, value: str) -> None:
        assert parse_confirmation(value) is False

    @pytest.mark.parametrize("value", ["", "yes", "no", "X", None])
    def test_anything_else(self, value: object) -> None:
        """No default: anything but Y or N is unanswered."""
        assert parse_confirmation(value) is None
