"""Validators for raw operator input.

Each validator returns a bool and never raises for bad input. Diagnostics
are sent to an optional reporter; passing none (or a reporter that drops
everything) gives the same result.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from .errors import UnknownAxisError
from .value_objects import CONFIRM_INPUT, ROOM_CONSTRAINTS, Orientation, Severity

if TYPE_CHECKING:
    from robot_room.contracts import Reporter

logger = logging.getLogger(__name__)

# Optional sign followed by digits only; "3.0" is rejected.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_integer(value: Any) -> int | None:
    """Parse a whole number from raw input.

    Args:
        value: A string such as "12" or an int.

    Returns:
        The integer, or None if value is not a whole number.

    Examples:
        >>> parse_integer(" 7 ")
        7
        >>> parse_integer("3.0") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    return None


def _emit(reporter: "Reporter | None", lines: list[str] | str) -> None:
    if reporter is not None:
        reporter.report(lines, Severity.ERROR)


def is_valid_dimension(value: Any, axis: str, reporter: "Reporter | None" = None) -> bool:
    """Validate a room dimension for the given axis.

    Args:
        value: Raw input, must be a whole number within the axis range.
        axis: Name of the axis; must exist in ROOM_CONSTRAINTS.
        reporter: Optional channel for the rejection explanation.

    Returns:
        True if value is a whole number within the axis constraint.

    Raises:
        UnknownAxisError: If axis has no constraint. This is a programming
            defect and must not be treated as bad input.
    """
    constraint = ROOM_CONSTRAINTS.get(axis)
    if constraint is None:
        raise UnknownAxisError(axis)

    if _is_missing(value):
        logger.debug(f"Rejected {axis}: no value given")
        _emit(reporter, f"Must provide a {axis}, a round number {constraint.describe()}.")
        return False

    number = parse_integer(value)
    if number is None or not constraint.contains(number):
        logger.debug(f"Rejected {axis}: {value!r}")
        _emit(
            reporter,
            [
                f'"{value}" is not a valid {axis},',
                f"must be a round number {constraint.describe()}.",
            ],
        )
        return False
    return True


def validate_position(
    value: Any, maximum: int, axis: str, reporter: "Reporter | None" = None
) -> bool:
    """Validate a starting coordinate on one axis.

    Args:
        value: Raw input, must be a whole number between 0 and maximum.
        maximum: Inclusive upper bound, the room size on this axis.
        axis: Axis label used only in the diagnostic text.
        reporter: Optional channel for the rejection explanation.

    Returns:
        True if value is a whole number within [0, maximum].
    """
    if _is_missing(value):
        logger.debug(f"Rejected {axis} position: no value given")
        _emit(
            reporter,
            f"Must provide a starting position on the {axis}-axis between 0 and {maximum}.",
        )
        return False

    number = parse_integer(value)
    if number is None or not 0 <= number <= maximum:
        logger.debug(f"Rejected {axis} position: {value!r}")
        _emit(
            reporter,
            [
                f'"{value}" is not a valid starting position on the {axis}-axis',
                f"must be a round number between 0 and {maximum}",
            ],
        )
        return False
    return True


def validate_orientation(value: Any, reporter: "Reporter | None" = None) -> bool:
    """Validate an orientation symbol, case-insensitively."""
    if _is_missing(value) or not isinstance(value, str):
        _emit(reporter, "Must provide an orientation (N / E / S / W).")
        return False

    if value.strip().upper() not in Orientation.symbols():
        logger.debug(f"Rejected orientation: {value!r}")
        _emit(reporter, f'"{value}" is not a valid orientation.')
        return False
    return True


def parse_confirmation(value: str | None) -> bool | None:
    """Map a Y / N answer to a bool; anything else gives None."""
    if value is None:
        return None
    return CONFIRM_INPUT.get(value.strip().upper())
