"""Command session: drive a placed robot with lines of commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from robot_room.domain import Command, Severity

if TYPE_CHECKING:
    from robot_room.contracts import Console, Reporter
    from robot_room.domain import Robot

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "Enter commands (L / R / F), or Q to quit: "
QUIT_WORD = "Q"

_KNOWN_COMMANDS = frozenset(command.value for command in Command)


class CommandSession:
    """Feeds operator command lines to a robot, one character at a time.

    A move out of the room raises MoveOutOfBoundsError and stops the line;
    commands before it stay applied.
    """

    def __init__(self, robot: "Robot", reporter: "Reporter | None" = None) -> None:
        self.robot = robot
        self.reporter = reporter

    def run_line(self, line: str) -> str:
        """Execute every command in line and return the robot's report."""
        commands = line.strip().upper()
        ignored = sorted(
            {char for char in commands if char not in _KNOWN_COMMANDS and not char.isspace()}
        )
        if ignored and self.reporter is not None:
            self.reporter.report(
                f"Ignoring unrecognised commands: {', '.join(ignored)}", Severity.MESSAGE
            )

        for command in commands:
            self.robot.execute_command(command)
        logger.debug(f"Ran {commands!r}, robot now at {self.robot.report()}")
        return self.robot.report()

    def loop(self, console: "Console", quit_word: str = QUIT_WORD) -> str:
        """Prompt for command lines until the operator quits.

        Returns:
            The robot's final report.
        """
        while True:
            line = console.request_line(COMMAND_PROMPT)
            if not line.strip():
                continue
            if line.strip().upper() == quit_word.upper():
                return self.robot.report()
            console.report(self.run_line(line), Severity.SUCCESS)
