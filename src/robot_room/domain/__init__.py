"""Domain layer - room, robot and input validation."""

from .entities import Robot, Room
from .errors import (
    MoveOutOfBoundsError,
    RobotPlacementError,
    RobotRoomError,
    RoomDimensionError,
    UnknownAxisError,
)
from .validation import (
    is_valid_dimension,
    parse_confirmation,
    parse_integer,
    validate_orientation,
    validate_position,
)
from .value_objects import (
    CONFIRM_INPUT,
    ROOM_CONSTRAINTS,
    Command,
    DimensionConstraint,
    Orientation,
    Severity,
)

__all__ = [
    "CONFIRM_INPUT",
    "Command",
    "DimensionConstraint",
    "MoveOutOfBoundsError",
    "Orientation",
    "ROOM_CONSTRAINTS",
    "Robot",
    "RobotPlacementError",
    "RobotRoomError",
    "Room",
    "RoomDimensionError",
    "Severity",
    "UnknownAxisError",
    "is_valid_dimension",
    "parse_confirmation",
    "parse_integer",
    "validate_orientation",
    "validate_position",
]
