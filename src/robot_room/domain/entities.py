"""Domain entities: the room and the robot moving inside it."""

import logging
from dataclasses import dataclass

from robot_room.contracts.protocols import RoomLike

from .errors import MoveOutOfBoundsError, RobotPlacementError, RoomDimensionError
from .value_objects import ROOM_CONSTRAINTS, Command, Orientation

logger = logging.getLogger(__name__)


def _is_whole_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Room:
    """Rectangular room the robot is bounded by.

    Attributes:
        width: Size along the x-axis, within ROOM_CONSTRAINTS["width"].
        height: Size along the y-axis, within ROOM_CONSTRAINTS["height"].
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        for axis, value in (("width", self.width), ("height", self.height)):
            constraint = ROOM_CONSTRAINTS[axis]
            if not _is_whole_number(value) or not constraint.contains(value):
                raise RoomDimensionError(
                    f"Room {axis} must be a whole number {constraint.describe()}, "
                    f"got {value!r}"
                )

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies within the room; both edges are inclusive."""
        return 0 <= x <= self.width and 0 <= y <= self.height


class Robot:
    """A robot placed in a room, facing one compass direction.

    Position, orientation and room are read-only; the robot only changes
    through execute_command (or the turn and move methods it dispatches to).
    A move that would leave the room raises MoveOutOfBoundsError and leaves
    the robot where it was.

    Attributes:
        x: Position on the x-axis, 0 to room.width inclusive.
        y: Position on the y-axis, 0 to room.height inclusive.
        orientation: Direction the robot faces.
        room: Room bounding the robot, fixed at construction.
    """

    def __init__(
        self, x: int, y: int, orientation: Orientation | str, room: RoomLike
    ) -> None:
        if not isinstance(room, RoomLike):
            raise RobotPlacementError(
                "Invalid Room, robot cannot be placed, exiting the program.",
                RobotPlacementError.INVALID_ROOM,
            )
        if not _is_whole_number(x) or not _is_whole_number(y):
            raise RobotPlacementError(
                f"Robot position must be whole numbers, got ({x!r}, {y!r}), "
                "exiting the program.",
                RobotPlacementError.OUT_OF_BOUNDS,
            )
        if not room.is_valid_position(x, y):
            raise RobotPlacementError(
                "Robot is being placed out of bounds, exiting the program.",
                RobotPlacementError.OUT_OF_BOUNDS,
            )
        if orientation not in Orientation.symbols():
            raise RobotPlacementError(
                "Invalid orientation for Robot, exiting the program.",
                RobotPlacementError.INVALID_ORIENTATION,
            )
        self._room = room
        self._x = x
        self._y = y
        self._orientation = Orientation(orientation)

    def __repr__(self) -> str:
        return f"Robot(x={self._x}, y={self._y}, orientation={self._orientation.value!r})"

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def room(self) -> RoomLike:
        return self._room

    def execute_command(self, command: str) -> None:
        """Run a single-character command.

        L turns left, R turns right and F moves forward. Anything else is
        ignored.

        Raises:
            MoveOutOfBoundsError: If F would take the robot out of the room.
        """
        if command == Command.LEFT.value:
            self.turn_left()
        elif command == Command.RIGHT.value:
            self.turn_right()
        elif command == Command.FORWARD.value:
            self.move_forward()
        else:
            logger.debug(f"Ignoring unrecognised command {command!r}")

    def turn_left(self) -> None:
        self._orientation = self._orientation.left()

    def turn_right(self) -> None:
        self._orientation = self._orientation.right()

    def move_forward(self) -> None:
        """Advance one cell in the facing direction."""
        dx, dy = self._orientation.step
        target = (self._x + dx, self._y + dy)
        if not self._room.is_valid_position(*target):
            logger.debug(f"Rejected move from ({self._x}, {self._y}) to {target}")
            raise MoveOutOfBoundsError(target)
        self._x, self._y = target

    def report(self) -> str:
        """Return the current state as "x y orientation"."""
        return f"{self._x} {self._y} {self._orientation.value}"
