"""Pytest configuration and shared fixtures for robot room tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from robot_room.domain import Orientation, Robot, Room, Severity


class ScriptedConsole:
    """Console double that answers prompts from a fixed script.

    Records every prompt asked and every message reported so tests can
    assert on the conversation.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.reports: list[tuple[list[str], Severity]] = []

    def request_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise AssertionError(f"No scripted answer left for prompt {prompt!r}")
        return self._answers.pop(0)

    def report(
        self,
        message: str | list[str],
        severity: Severity = Severity.DEFAULT,
        clear: bool = False,
    ) -> None:
        lines = [message] if isinstance(message, str) else list(message)
        self.reports.append((lines, severity))

    @property
    def remaining(self) -> list[str]:
        return list(self._answers)

    def lines(self, severity: Severity | None = None) -> list[str]:
        """All reported lines, optionally filtered by severity."""
        return [
            line
            for lines, sev in self.reports
            if severity is None or sev == severity
            for line in lines
        ]


@pytest.fixture
def scripted_console() -> Callable[..., ScriptedConsole]:
    """Factory fixture: scripted_console("5 5", "Y") builds a ScriptedConsole."""

    def _make(*answers: str) -> ScriptedConsole:
        return ScriptedConsole(answers)

    return _make


@pytest.fixture
def room() -> Room:
    """A 5x5 room."""
    return Room(width=5, height=5)


@pytest.fixture
def robot(room: Room) -> Robot:
    """A robot at (1, 2) facing north in a 5x5 room."""
    return Robot(x=1, y=2, orientation=Orientation.NORTH, room=room)
