"""Contracts module - protocols shared across layers.

By depending on these protocols rather than on the typer console, the
application layer stays testable with scripted input.
"""

from .protocols import (
    Console as Console,
    InputPort as InputPort,
    NullReporter as NullReporter,
    Reporter as Reporter,
    RoomLike as RoomLike,
)
