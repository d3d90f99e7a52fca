"""
Character system module for the Upside Down RPG.

This module handles the combatants of the game: the shared Character
capability, the Player with its hero class, inventory and special moves, and
the single-battle Enemy.
"""

from .character_class import HeroClass
from .character_display import CharacterDisplay
from .enemy import Enemy
from .enemy_template import EnemyTemplate
from .inventory import Inventory
from .main import Character
from .player import Player, new_player
from .special_moves import SPECIAL_MOVES

__all__ = [
    # Import from character_class.py
    "HeroClass",
    # Import from character_display.py
    "CharacterDisplay",
    # Import from enemy.py
    "Enemy",
    # Import from enemy_template.py
    "EnemyTemplate",
    # Import from inventory.py
    "Inventory",
    # Import from main.py
    "Character",
    # Import from player.py
    "Player",
    "new_player",
    # Import from special_moves.py
    "SPECIAL_MOVES",
]
