"""
Items module for the Upside Down RPG.

This module defines the immutable item values carried in a player's inventory.
"""

from .item import Item, cursed_sword, healing_potion, mana_potion

__all__ = [
    "Item",
    "cursed_sword",
    "healing_potion",
    "mana_potion",
]
