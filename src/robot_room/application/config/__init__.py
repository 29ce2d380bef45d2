"""Session configuration loading and CLI merging.

Public API:
    - SessionConfig: Root configuration model
    - SUPPORTED_VERSIONS: Accepted schema versions
    - load_config: Load configuration from a JSON file
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - ConfigError: Exception for configuration errors

Example:
    >>> from pathlib import Path
    >>> from robot_room.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("session.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from robot_room.application.config.loader import ConfigError, load_config
from robot_room.application.config.merger import merge_config_with_cli
from robot_room.application.config.schema import SUPPORTED_VERSIONS, SessionConfig

__all__ = [
    "ConfigError",
    "SUPPORTED_VERSIONS",
    "SessionConfig",
    "load_config",
    "merge_config_with_cli",
]
