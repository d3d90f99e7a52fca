"""
Inventory module for the game.

Handles the items and the gold owned by the player, and the use of potions.
"""

from typing import TYPE_CHECKING, Any

from catchery import log_debug

from upside_down.core.constants import HEALING_POTION, MANA_POTION
from upside_down.core.error_handling import ErrorKind, GameError, report_error
from upside_down.items import Item

if TYPE_CHECKING:
    from .player import Player


class Inventory:
    """
    Manages the ordered list of items and the gold of a player.

    Items keep their insertion order, which is also the display order, and
    items sharing a name are distinct entries.

    Attributes:
        owner (Any):
            The Player instance this inventory belongs to.
        gold (int):
            The gold carried. It is never clamped, and can go negative.

    """

    owner: Any
    gold: int

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.gold = 0
        self._items: list[Item] = []

    @property
    def items(self) -> tuple[Item, ...]:
        """The items, in display order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def has_item(self, name: str) -> bool:
        return any(item.name == name for item in self._items)

    def count(self, name: str) -> int:
        return sum(1 for item in self._items if item.name == name)

    def remove_item(self, name: str) -> Item | None:
        """
        Removes the first item with the given name.

        Args:
            name (str): The exact name of the item.

        Returns:
            Item | None: The removed item, or None if there is none.

        """
        for index, item in enumerate(self._items):
            if item.name == name:
                return self._items.pop(index)
        return None

    def take_item(self, index: int) -> Item:
        """
        Removes the item at the given position.

        Args:
            index (int): The 0-based position, in display order.

        Returns:
            Item: The removed item.

        Raises:
            IndexError: If there is no item at that position.

        """
        return self._items.pop(index)

    def use_item(self, name: str, player: "Player") -> GameError | None:
        """
        Uses the first item with the given name on the player.

        Args:
            name (str):
                The exact name of the item.
            player (Player):
                The player receiving the effect.

        Returns:
            GameError | None:
                None on success, the reason of the failure otherwise.

        """
        item = self.remove_item(name)
        if item is None:
            return report_error(
                ErrorKind.ITEM_NOT_FOUND,
                f"You don't have '{name}'.",
                {"item": name},
            )
        return self.apply_item(item, player)

    def apply_item(self, item: Item, player: "Player") -> GameError | None:
        """
        Applies an item already taken out of the inventory.

        Healing potions restore health and mana potions restore mana. Any
        other item is put back (at the end of the inventory) and an error is
        returned, so the inventory size never changes on failure.

        Args:
            item (Item):
                The item, as removed from the inventory.
            player (Player):
                The player receiving the effect.

        Returns:
            GameError | None:
                None on success, the reason of the failure otherwise.

        """
        if item.is_potion:
            if item.name == HEALING_POTION:
                healed = player.heal(item.effect)
                log_debug(
                    f"{player.name} drinks {item.name}",
                    {"effect": item.effect, "healed": healed},
                )
                return None
            if item.name == MANA_POTION:
                restored = player.restore_mana(item.effect)
                log_debug(
                    f"{player.name} drinks {item.name}",
                    {"effect": item.effect, "restored": restored},
                )
                return None
            self.add_item(item)
            return report_error(
                ErrorKind.UNKNOWN_POTION,
                "Unknown potion type.",
                {"item": item.name},
            )
        self.add_item(item)
        return report_error(
            ErrorKind.ITEM_NOT_USABLE,
            f"Can't use '{item.name}' right now.",
            {"item": item.name, "type": item.type},
        )
