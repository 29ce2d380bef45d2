"""Reads a session settings file into a SessionConfig.

A session file is a single JSON object of settings. Every way it can be
unusable (missing, unreadable, not JSON, or holding bad settings) ends in
a ConfigError whose error_type names what went wrong.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from robot_room.application.config.schema import SessionConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A session settings file could not be used.

    Attributes:
        message: Human-readable summary
        error_type: One of the kind constants below
        path: The settings file
        details: For json_parse, the syntax error position; for validation,
            one entry per rejected setting with its name, reason and value
    """

    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    FILE_READ_ERROR = "file_read_error"
    JSON_PARSE = "json_parse"
    VALIDATION = "validation"

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _read_settings_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}", ConfigError.FILE_NOT_FOUND, path)
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            ConfigError.PERMISSION_DENIED,
            path,
        )
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}", ConfigError.FILE_READ_ERROR, path)


def _rejected_settings(error: ValidationError) -> list[dict[str, Any]]:
    # Settings are flat, so the first location segment is the setting name.
    return [
        {
            "setting": str(err["loc"][0]) if err["loc"] else "<file>",
            "message": err["msg"],
            "value": err.get("input"),
        }
        for err in error.errors()
    ]


def load_config(path: Path) -> SessionConfig:
    """Load session settings from a JSON file.

    Args:
        path: The settings file, e.g. {"confirm": false, "colour": false}

    Returns:
        The validated settings; anything the file leaves out keeps its default.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or holds
            settings the schema rejects.
    """
    text = _read_settings_text(path)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"{path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}",
            ConfigError.JSON_PARSE,
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    try:
        config = SessionConfig.model_validate(data)
    except ValidationError as e:
        rejected = _rejected_settings(e)
        names = ", ".join(item["setting"] for item in rejected)
        raise ConfigError(
            f"Invalid settings in {path}: {names}",
            ConfigError.VALIDATION,
            path,
            rejected,
        )

    logger.debug(f"Loaded session settings from {path}")
    return config
