"""
Core system module for the Upside Down RPG.

This module contains the fundamental components used by the rest of the game,
including game constants, the dice, recoverable errors and display utilities.
"""

from .constants import (
    BattleAction,
    BattleState,
    CharacterType,
    EnemyTier,
    EventType,
    HeroRole,
    ItemType,
    NarrativeCue,
)
from .dice import Dice
from .error_handling import ErrorKind, GameError, report_error
from .utils import Singleton, ccapture, cprint, crule, make_bar

__all__ = [
    # Import from constants.py
    "BattleAction",
    "BattleState",
    "CharacterType",
    "EnemyTier",
    "EventType",
    "HeroRole",
    "ItemType",
    "NarrativeCue",
    # Import from dice.py
    "Dice",
    # Import from error_handling.py
    "ErrorKind",
    "GameError",
    "report_error",
    # Import from utils.py
    "Singleton",
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
