"""Protocols for dependency injection.

The setup flow and command session depend on these contracts rather than
on a concrete console, so tests can drive them with scripted doubles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from robot_room.domain.value_objects import Severity


@runtime_checkable
class RoomLike(Protocol):
    """Capability contract a robot needs from the room it is placed in.

    Any value exposing width, height and is_valid_position satisfies it;
    the concrete Room class is not required.

    Example:
        ```python
        class Arena:
            width = 4
            height = 4

            def is_valid_position(self, x: int, y: int) -> bool:
                return 0 <= x <= self.width and 0 <= y <= self.height
        ```
    """

    width: int
    height: int

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies within the inclusive bounds."""
        ...


class InputPort(Protocol):
    """Requests one line of text from a human operator."""

    def request_line(self, prompt: str) -> str:
        """Block until the operator answers the prompt.

        Args:
            prompt: Question shown to the operator.

        Returns:
            The raw line entered, without the trailing newline.
        """
        ...


class Reporter(Protocol):
    """Fire-and-forget channel for human-facing diagnostics.

    Validation outcomes never depend on what an implementation does; a
    reporter that discards everything is valid.
    """

    def report(
        self, message: str | list[str], severity: Severity = ..., clear: bool = False
    ) -> None:
        """Show one message, or one line per list entry.

        Args:
            message: Text to show.
            severity: Presentation level (default, message, success, error).
            clear: Whether to clear the screen first.
        """
        ...


class Console(InputPort, Reporter, Protocol):
    """An input port that can also report back to the operator."""


class NullReporter:
    """Reporter that discards every message."""

    def report(
        self, message: str | list[str], severity: Severity | None = None, clear: bool = False
    ) -> None:
        return None
