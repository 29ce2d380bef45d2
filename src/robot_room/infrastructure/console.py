"""Typer-backed console implementing the input port and reporter."""

from __future__ import annotations

import typer

from robot_room.domain import Severity

SEVERITY_COLOURS: dict[Severity, str] = {
    Severity.ERROR: typer.colors.RED,
    Severity.SUCCESS: typer.colors.GREEN,
    Severity.DEFAULT: typer.colors.WHITE,
    Severity.MESSAGE: typer.colors.CYAN,
}


class TyperConsole:
    """Reads operator lines with typer.prompt and reports with typer.secho.

    End of input surfaces as typer.Abort from request_line; ending the
    process is left to the caller.
    """

    def __init__(self, colour: bool = True, clear_screen: bool = True) -> None:
        """Initialize console.

        Args:
            colour: Whether to colour messages by severity.
            clear_screen: Whether clear requests actually clear the terminal.
        """
        self._colour = colour
        self._clear_screen = clear_screen

    def request_line(self, prompt: str) -> str:
        return typer.prompt(prompt, default="", show_default=False, prompt_suffix="")

    def report(
        self,
        message: str | list[str],
        severity: Severity = Severity.DEFAULT,
        clear: bool = False,
    ) -> None:
        """Print a blank spacer line, then each message line in its colour."""
        typer.echo()
        if clear and self._clear_screen:
            typer.clear()

        lines = [message] if isinstance(message, str) else list(message)
        err = severity == Severity.ERROR
        for line in lines:
            if self._colour:
                typer.secho(line, fg=SEVERITY_COLOURS[Severity(severity)], err=err)
            else:
                typer.echo(line, err=err)
