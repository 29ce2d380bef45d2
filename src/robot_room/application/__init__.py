"""Application layer - interactive setup and command sessions."""

from .session import CommandSession
from .setup import SetupFlow, SetupResult, ask_confirmation, ask_confirmation_mode

__all__ = [
    "CommandSession",
    "SetupFlow",
    "SetupResult",
    "ask_confirmation",
    "ask_confirmation_mode",
]
