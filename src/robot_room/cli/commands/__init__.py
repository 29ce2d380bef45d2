"""CLI command implementations for the robot-room application.

This package contains subcommands for the robot-room CLI, including:
- config: Check a session configuration file
"""

from robot_room.cli.commands.config import config_command, display_config_error

__all__ = ["config_command", "display_config_error"]
