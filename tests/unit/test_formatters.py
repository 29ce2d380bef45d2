"""Unit tests for text formatters and the typer console."""

from robot_room.application import SetupResult
from robot_room.domain import Robot, Room, Severity
from robot_room.infrastructure import (
    RoomDiagramFormatter,
    TyperConsole,
    format_summary,
    format_welcome,
)


class TestFormatWelcome:
    """Tests for format_welcome."""

    def test_lists_constraints(self) -> None:
        lines = format_welcome()
        assert lines[0] == "Welcome to Robot Programming!"
        assert "Width: Min: 2, Max: 20" in lines
        assert "Height: Min: 2, Max: 20" in lines


class TestFormatSummary:
    """Tests for format_summary."""

    def test_summary_contents(self, room: Room, robot: Robot) -> None:
        lines = format_summary(SetupResult(room=room, robot=robot))
        assert lines[0] == "Room and Robot Confirmed"
        assert "Room width: 5" in lines
        assert "Room height: 5" in lines
        assert "Robot x: 1" in lines
        assert "Robot y: 2" in lines
        assert "Robot facing: N" in lines


class TestRoomDiagramFormatter:
    """Tests for RoomDiagramFormatter."""

    def test_grid_covers_inclusive_bounds(self) -> None:
        robot = Robot(x=0, y=0, orientation="E", room=Room(width=2, height=3))
        lines = RoomDiagramFormatter().format(robot).splitlines()

        assert lines[0] == "+-------+"
        # 4 rows for y = 3..0, north first
        assert lines[1:5] == [
            "| . . . |",
            "| . . . |",
            "| . . . |",
            "| > . . |",
        ]
        assert lines[5] == lines[0]
        assert lines[-1] == "Robot: 0 0 E"

    def test_glyph_follows_orientation(self) -> None:
        robot = Robot(x=2, y=2, orientation="S", room=Room(width=2, height=2))
        diagram = RoomDiagramFormatter(empty="_").format(robot)
        assert diagram.splitlines()[1] == "| _ _ v |"


class TestTyperConsole:
    """Tests for TyperConsole.report."""

    def test_report_lines_without_colour(self, capsys) -> None:
        console = TyperConsole(colour=False, clear_screen=False)
        console.report(["first", "second"], Severity.MESSAGE)

        out = capsys.readouterr().out
        assert out == "\nfirst\nsecond\n"

    def test_errors_go_to_stderr(self, capsys) -> None:
        console = TyperConsole(colour=False, clear_screen=False)
        console.report("bad input", Severity.ERROR)

        captured = capsys.readouterr()
        assert "bad input" in captured.err
        assert "bad input" not in captured.out
