"""Config command for checking session configuration files.

Loads a JSON session configuration, reports any errors and prints the
resolved settings.

Exit codes:
    0 - Configuration is valid
    1 - Configuration could not be loaded
"""

from pathlib import Path
from typing import Annotated

import typer

from robot_room.application.config import ConfigError, SessionConfig, load_config


def config_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON session configuration to check"),
    ],
) -> None:
    """Check a session configuration file and show the resolved settings.

    Example:
        robot-room config session.json
    """
    typer.echo(f"Checking {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    _display_settings(config)
    typer.echo("Configuration is valid.")


def display_config_error(error: ConfigError) -> None:
    """Display a configuration loading error with its details."""
    typer.echo("Errors:", err=True)
    if error.error_type == ConfigError.JSON_PARSE:
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            typer.echo(f"    Line {line}, Column {column}: {detail.get('message')}", err=True)
    elif error.error_type == ConfigError.VALIDATION:
        for detail in error.details:
            typer.echo(f"  {detail['setting']}: {detail['message']}", err=True)
            if detail.get("value") is not None:
                typer.echo(f"    Value: {detail['value']!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_settings(config: SessionConfig) -> None:
    confirm = "ask at start-up" if config.confirm is None else ("on" if config.confirm else "off")
    typer.echo()
    typer.echo("Settings:")
    typer.echo(f"  Schema version: {config.schema_version}")
    typer.echo(f"  Confirmation mode: {confirm}")
    typer.echo(f"  Command loop: {'on' if config.command_loop else 'off'}")
    typer.echo(f"  Clear screen: {'on' if config.clear_screen else 'off'}")
    typer.echo(f"  Colour: {'on' if config.colour else 'off'}")
    typer.echo()
