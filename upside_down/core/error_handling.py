"""
Recoverable game errors.

Nothing in the engine is fatal: using an item that is missing or cannot be
used, or casting without enough mana, produces a GameError value that the
caller shows to the player while the game state stays untouched.
"""

from dataclasses import dataclass, field
from typing import Any

from catchery import log_warning

from .constants import NiceEnum


class ErrorKind(NiceEnum):
    """Enumeration of the recoverable failures of the engine."""

    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    ITEM_NOT_USABLE = "ITEM_NOT_USABLE"
    UNKNOWN_POTION = "UNKNOWN_POTION"
    INSUFFICIENT_MANA = "INSUFFICIENT_MANA"


@dataclass(frozen=True)
class GameError:
    """Represents a recoverable game error with its kind and context."""

    kind: ErrorKind
    message: str
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


def report_error(
    kind: ErrorKind,
    message: str,
    context: dict[str, Any] | None = None,
) -> GameError:
    """
    Builds a GameError and logs it as a warning.

    Args:
        kind (ErrorKind): The kind of failure.
        message (str): The message to show to the player.
        context (dict[str, Any] | None): Optional context for the log.

    Returns:
        GameError: The error, to be returned to the caller.

    """
    error = GameError(kind=kind, message=message, context=context or {})
    log_warning(message, {"kind": str(kind), **error.context})
    return error


class InvalidSelection(ValueError):
    """Raised when a menu index is out of range. The input layer re-prompts."""
