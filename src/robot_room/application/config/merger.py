"""Merge CLI options over a loaded configuration.

Precedence is CLI args > config values > defaults. Only options the user
actually passed (not None) override the configuration.
"""

from robot_room.application.config.schema import SessionConfig


def merge_config_with_cli(
    config: SessionConfig,
    *,
    confirm: bool | None = None,
    command_loop: bool | None = None,
    clear_screen: bool | None = None,
    colour: bool | None = None,
) -> SessionConfig:
    """Return a new SessionConfig with the given CLI overrides applied.

    Example:
        >>> merged = merge_config_with_cli(SessionConfig(), confirm=False)
        >>> merged.confirm
        False
    """
    overrides = {
        "confirm": confirm,
        "command_loop": command_loop,
        "clear_screen": clear_screen,
        "colour": colour,
    }
    data = config.model_dump()
    data.update({key: value for key, value in overrides.items() if value is not None})
    return SessionConfig.model_validate(data)
