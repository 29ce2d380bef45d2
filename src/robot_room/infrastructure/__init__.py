"""Infrastructure layer - console I/O and formatters."""

from .console import SEVERITY_COLOURS, TyperConsole
from .formatters import (
    ROBOT_GLYPHS,
    RoomDiagramFormatter,
    format_summary,
    format_welcome,
)

__all__ = [
    "ROBOT_GLYPHS",
    "RoomDiagramFormatter",
    "SEVERITY_COLOURS",
    "TyperConsole",
    "format_summary",
    "format_welcome",
]
