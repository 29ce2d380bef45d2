"""Session configuration schema.

Settings for one interactive run. Every field has a default, so an empty
JSON object is a valid configuration.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Version 1.0: confirmation mode, command loop and console presentation
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class SessionConfig(BaseModel):
    """Configuration for an interactive robot room session.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        confirm: Ask the operator to confirm the room and robot before
            committing them. None means ask at start-up.
        command_loop: Drive the robot with commands once setup completes.
        clear_screen: Clear the console before banners and summaries.
        colour: Colour reported messages by severity.

    Example:
        >>> config = SessionConfig(confirm=False, command_loop=False)
        >>> config.clear_screen
        True
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    confirm: bool | None = Field(
        default=None, description="Confirmation mode (None asks at start-up)"
    )
    command_loop: bool = Field(default=True, description="Run the command loop")
    clear_screen: bool = Field(default=True, description="Clear before banners")
    colour: bool = Field(default=True, description="Colour messages by severity")

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        major = v.split(".")[0]
        supported_majors = {version.split(".")[0] for version in SUPPORTED_VERSIONS}
        if major in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
