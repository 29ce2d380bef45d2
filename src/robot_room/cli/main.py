"""Typer CLI for the robot room exercise."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from robot_room.application import (
    CommandSession,
    SetupFlow,
    ask_confirmation_mode,
)
from robot_room.application.config import (
    ConfigError,
    SessionConfig,
    load_config,
    merge_config_with_cli,
)
from robot_room.cli.commands import config_command, display_config_error
from robot_room.domain import Robot, RobotRoomError, Room, Severity
from robot_room.infrastructure import (
    RoomDiagramFormatter,
    TyperConsole,
    format_summary,
    format_welcome,
)

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_session_config(config_file: Path | None) -> SessionConfig:
    if config_file is None:
        return SessionConfig()
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)


app = typer.Typer(
    name="robot-room",
    help="Set up a room, place a robot in it and drive it around.",
)

# Register config command
app.command(name="config")(config_command)


@app.command()
def run(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON session configuration"),
    ] = None,
    confirm: Annotated[
        bool | None,
        typer.Option(
            "--confirm/--no-confirm",
            help="Review the room and robot before committing them (asked at start-up if omitted)",
        ),
    ] = None,
    commands: Annotated[
        bool | None,
        typer.Option("--commands/--no-commands", help="Drive the robot once setup completes"),
    ] = None,
    clear: Annotated[
        bool | None,
        typer.Option("--clear/--no-clear", help="Clear the screen before banners"),
    ] = None,
    colour: Annotated[
        bool | None,
        typer.Option("--colour/--no-colour", help="Colour messages by severity"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """Interactively set up a room and robot, then drive the robot.

    Commands are L (turn left), R (turn right) and F (move forward); enter
    Q to quit. Driving the robot out of the room ends the program.
    """
    _setup_logging(verbose)
    config = merge_config_with_cli(
        _load_session_config(config_file),
        confirm=confirm,
        command_loop=commands,
        clear_screen=clear,
        colour=colour,
    )
    console = TyperConsole(colour=config.colour, clear_screen=config.clear_screen)

    console.report(format_welcome(), Severity.MESSAGE, clear=True)
    confirm_mode = config.confirm
    if confirm_mode is None:
        confirm_mode = ask_confirmation_mode(console)

    try:
        result = SetupFlow(console, confirm=confirm_mode).run()
        console.report(format_summary(result), Severity.MESSAGE, clear=True)

        if config.command_loop:
            final = CommandSession(result.robot, console).loop(console)
            console.report(f"Final position: {final}", Severity.SUCCESS)
    except RobotRoomError as e:
        logger.warning(f"Session ended by {e.error_type}: {e.message}")
        console.report(e.message, Severity.ERROR)
        raise typer.Exit(code=1)


@app.command()
def check(
    width: Annotated[int, typer.Argument(help="Room width")],
    height: Annotated[int, typer.Argument(help="Room height")],
    x: Annotated[int, typer.Argument(help="Robot start on the x-axis")],
    y: Annotated[int, typer.Argument(help="Robot start on the y-axis")],
    orientation: Annotated[str, typer.Argument(help="Robot facing: N, E, S or W")],
    commands: Annotated[str, typer.Argument(help="Commands to run, e.g. LFFR")] = "",
    diagram: Annotated[
        bool,
        typer.Option("--diagram/--no-diagram", help="Show an ASCII diagram of the room"),
    ] = True,
) -> None:
    """Run a command string without prompts and print the final position."""
    try:
        robot = Robot(x=x, y=y, orientation=orientation.upper(), room=Room(width, height))
        report = CommandSession(robot).run_line(commands)
    except RobotRoomError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(report)
    if diagram:
        typer.echo()
        typer.echo(RoomDiagramFormatter().format(robot))


if __name__ == "__main__":
    app()
