"""Interactive setup of the room and the robot.

The flow asks for the room dimensions, then for the robot's starting
position and orientation. Bad input is reported and re-prompted; only the
failing field is asked for again. When confirmation mode is on, the
operator reviews each result and may decline it, which restarts that step
from the combined prompt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from robot_room.domain import (
    Orientation,
    Robot,
    Room,
    Severity,
    is_valid_dimension,
    parse_confirmation,
    validate_orientation,
    validate_position,
)

if TYPE_CHECKING:
    from robot_room.contracts import Console

logger = logging.getLogger(__name__)

ROOM_PROMPT = "Enter room dimensions (width height): "
ROBOT_PROMPT = "Enter starting position and orientation (x y orientation): "
ORIENTATION_PROMPT = "Please provide a valid orientation (N / E / S / W): "
CONFIRMATION_MODE_PROMPT = (
    "Would you like to confirm before moving forward when setting up "
    "the Room and the Robot? (Y / N): "
)


@dataclass(frozen=True)
class SetupResult:
    """A confirmed room and the robot placed inside it."""

    room: Room
    robot: Robot


def _split_tokens(line: str, count: int) -> list[str | None]:
    """Split a line on whitespace, padding missing tokens with None."""
    tokens: list[str | None] = list(line.split())[:count]
    return tokens + [None] * (count - len(tokens))


def ask_confirmation(console: "Console", question: str, retry_hint: str) -> bool:
    """Ask a Y / N question until the answer is exactly Y or N.

    Args:
        console: Where to ask and where to report rejected answers.
        question: Prompt repeated until answered.
        retry_hint: Explanation reported after each rejected answer.

    Returns:
        True for Y, False for N (case-insensitive, surrounding spaces ignored).
    """
    while True:
        answer = parse_confirmation(console.request_line(question))
        if answer is not None:
            return answer
        console.report(retry_hint, Severity.ERROR)


def ask_confirmation_mode(console: "Console") -> bool:
    """Ask whether setup should pause for confirmation."""
    return ask_confirmation(
        console,
        CONFIRMATION_MODE_PROMPT,
        "Please enter Y or N to confirm or decline.",
    )


class SetupFlow:
    """Acquire a validated room and robot from an operator.

    Attributes:
        console: Input port and reporter for the operator.
        confirm: Whether each step waits for a Y / N review.
    """

    def __init__(self, console: "Console", confirm: bool = True) -> None:
        self.console = console
        self.confirm = confirm

    def run(self) -> SetupResult:
        """Acquire the room, then the robot inside it."""
        room = self.acquire_room()
        robot = self.acquire_robot(room)
        logger.info(f"Setup complete: room {room.width}x{room.height}, robot {robot.report()}")
        return SetupResult(room=room, robot=robot)

    def acquire_room(self) -> Room:
        """Prompt for room dimensions until a valid pair is accepted."""
        while True:
            width, height = _split_tokens(self.console.request_line(ROOM_PROMPT), 2)
            width = self._acquire_dimension(width, "width")
            height = self._acquire_dimension(height, "height")

            if not self.confirm or self._confirm_room(width, height):
                logger.debug(f"Room accepted: {width}x{height}")
                return Room(width=width, height=height)
            logger.debug(f"Room {width}x{height} declined, starting over")

    def acquire_robot(self, room: Room) -> Robot:
        """Prompt for the robot's start until a valid placement is accepted."""
        while True:
            x, y, orientation = _split_tokens(self.console.request_line(ROBOT_PROMPT), 3)
            x = self._acquire_position(x, room.width, "x")
            y = self._acquire_position(y, room.height, "y")
            facing = self._acquire_orientation(orientation)

            if not self.confirm or self._confirm_robot(x, y, facing):
                logger.debug(f"Robot accepted: {x} {y} {facing.value}")
                return Robot(x=x, y=y, orientation=facing, room=room)
            logger.debug(f"Robot {x} {y} {facing.value} declined, starting over")

    def _acquire_dimension(self, value: str | None, axis: str) -> int:
        while not is_valid_dimension(value, axis, self.console):
            value = self.console.request_line(f"Enter {axis}: ")
        return int(value.strip())

    def _acquire_position(self, value: str | None, maximum: int, axis: str) -> int:
        while not validate_position(value, maximum, axis, self.console):
            value = self.console.request_line(
                f"Enter starting position on the {axis}-axis between 0 and {maximum}: "
            )
        return int(value.strip())

    def _acquire_orientation(self, value: str | None) -> Orientation:
        while not validate_orientation(value, self.console):
            value = self.console.request_line(ORIENTATION_PROMPT)
        return Orientation(value.strip().upper())

    def _confirm_room(self, width: int, height: int) -> bool:
        self.console.report(f"Width: {width}, Height: {height}", Severity.SUCCESS)
        return ask_confirmation(
            self.console,
            "Confirm room dimensions (Y / N): ",
            "Please enter Y or N to confirm or decline room dimensions.",
        )

    def _confirm_robot(self, x: int, y: int, facing: Orientation) -> bool:
        self.console.report(
            [
                "Robot Position and Orientation",
                f"x: {x}, y: {y}, Orientation: {facing.value}",
            ],
            Severity.SUCCESS,
        )
        return ask_confirmation(
            self.console,
            "Confirm robot position and orientation (Y / N): ",
            "Please enter Y or N to confirm or decline robot position and orientation.",
        )
