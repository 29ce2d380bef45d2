"""Fatal errors raised by the room and robot domain.

Bad user input is never raised: it is reported and re-prompted by the setup
flow. The exceptions below signal invariant violations that abort the
current operation.
"""

from __future__ import annotations


class RobotRoomError(Exception):
    """Base class for unrecoverable domain errors.

    Attributes:
        message: Human-readable description of the failure
        error_type: Category of the failure, distinct per fault kind
    """

    error_type = "unknown"

    def __init__(self, message: str, error_type: str | None = None) -> None:
        self.message = message
        if error_type is not None:
            self.error_type = error_type
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnknownAxisError(RobotRoomError):
    """A dimension was validated against an axis with no constraint."""

    error_type = "unknown_axis"

    def __init__(self, axis: str) -> None:
        self.axis = axis
        super().__init__(f"Invalid dimension '{axis}', exiting the program.")


class RoomDimensionError(RobotRoomError):
    """Room built with a width or height outside its constraint."""

    error_type = "out_of_range"


class RobotPlacementError(RobotRoomError):
    """Robot could not be constructed.

    error_type is one of "invalid_room", "out_of_bounds" or
    "invalid_orientation".
    """

    INVALID_ROOM = "invalid_room"
    OUT_OF_BOUNDS = "out_of_bounds"
    INVALID_ORIENTATION = "invalid_orientation"


class MoveOutOfBoundsError(RobotRoomError):
    """Moving forward would leave the room; the robot did not move."""

    error_type = "move_out_of_bounds"

    def __init__(self, target: tuple[int, int]) -> None:
        self.target = target
        super().__init__("Robot moved out of bounds!")
