"""Text formatters for banners, summaries and room diagrams."""

from __future__ import annotations

from typing import TYPE_CHECKING

from robot_room.domain import ROOM_CONSTRAINTS, DimensionConstraint, Orientation

if TYPE_CHECKING:
    from robot_room.application import SetupResult
    from robot_room.domain import Robot

ROBOT_GLYPHS: dict[Orientation, str] = {
    Orientation.NORTH: "^",
    Orientation.EAST: ">",
    Orientation.SOUTH: "v",
    Orientation.WEST: "<",
}


def format_welcome(
    constraints: dict[str, DimensionConstraint] = ROOM_CONSTRAINTS,
) -> list[str]:
    """Build the start-up banner listing the room constraints."""
    lines = [
        "Welcome to Robot Programming!",
        "In this program we will create a room and set up a robot that can be "
        "navigated through the created space.",
        "Begin by specifying the dimensions of the room.",
        "",
        "Please note the following constraints of the room:",
    ]
    for axis, constraint in constraints.items():
        lines.append(f"{axis.capitalize()}: Min: {constraint.min}, Max: {constraint.max}")
    return lines


def format_summary(result: "SetupResult") -> list[str]:
    """Build the summary shown once the room and robot are confirmed."""
    robot = result.robot
    return [
        "Room and Robot Confirmed",
        "",
        "Room dimensions",
        f"Room width: {result.room.width}",
        f"Room height: {result.room.height}",
        "",
        "Robot position",
        f"Robot x: {robot.x}",
        f"Robot y: {robot.y}",
        f"Robot facing: {robot.orientation.value}",
    ]


class RoomDiagramFormatter:
    """Formats an ASCII diagram of the room with the robot in it.

    Every cell of the inclusive bounds is drawn, so a 5x5 room has 6 columns
    and 6 rows. North is at the top.
    """

    def __init__(self, empty: str = ".") -> None:
        self._empty = empty

    def format(self, robot: "Robot") -> str:
        room = robot.room
        border = "+" + "-" * (2 * (room.width + 1) + 1) + "+"
        lines = [border]
        for y in range(room.height, -1, -1):
            cells = [
                ROBOT_GLYPHS[robot.orientation] if (x, y) == (robot.x, robot.y) else self._empty
                for x in range(room.width + 1)
            ]
            lines.append("| " + " ".join(cells) + " |")
        lines.append(border)
        lines.append(f"Robot: {robot.report()}")
        return "\n".join(lines)
