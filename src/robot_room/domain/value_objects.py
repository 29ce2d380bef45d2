"""Value objects and constants for the room and robot domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class DimensionConstraint:
    """Inclusive (min, max) bound for one room axis."""

    min: int
    max: int

    def __post_init__(self) -> None:
        if not 2 <= self.min <= self.max <= 20:
            raise ValueError("Dimension constraint must satisfy 2 <= min <= max <= 20")

    def contains(self, value: int) -> bool:
        """Check whether value lies within the inclusive range."""
        return self.min <= value <= self.max

    def describe(self) -> str:
        return f"between {self.min} and {self.max}"


MIN_WIDTH = 2
MIN_HEIGHT = 2
MAX_WIDTH = 20
MAX_HEIGHT = 20

# Keyed by axis name; any other axis name is a programming defect.
ROOM_CONSTRAINTS: dict[str, DimensionConstraint] = {
    "width": DimensionConstraint(min=MIN_WIDTH, max=MAX_WIDTH),
    "height": DimensionConstraint(min=MIN_HEIGHT, max=MAX_HEIGHT),
}

CONFIRM_INPUT: dict[str, bool] = {
    "Y": True,
    "N": False,
}


class Orientation(str, Enum):
    """Compass direction the robot faces.

    Clockwise order is N -> E -> S -> W -> N. Turning left walks the same
    cycle backwards.
    """

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def right(self) -> "Orientation":
        """Return the orientation one step clockwise."""
        members = list(Orientation)
        return members[(members.index(self) + 1) % len(members)]

    def left(self) -> "Orientation":
        """Return the orientation one step counter-clockwise."""
        members = list(Orientation)
        return members[(members.index(self) - 1) % len(members)]

    @property
    def step(self) -> tuple[int, int]:
        """Unit (dx, dy) for one move forward; y grows to the north."""
        return _STEPS[self]

    @classmethod
    def symbols(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


_STEPS: dict[Orientation, tuple[int, int]] = {
    Orientation.NORTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, -1),
    Orientation.WEST: (-1, 0),
}


class Command(str, Enum):
    """Single-character robot commands."""

    LEFT = "L"
    RIGHT = "R"
    FORWARD = "F"


class Severity(str, Enum):
    """How a reported message should be presented to the operator."""

    DEFAULT = "default"
    MESSAGE = "message"
    SUCCESS = "success"
    ERROR = "error"
