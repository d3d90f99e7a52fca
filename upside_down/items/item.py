"""
Item module for the game.

Defines the immutable Item value and the factories for the items the engine
hands out as loot.
"""

from pydantic import BaseModel, ConfigDict, Field

from upside_down.core.constants import (
    CURSED_SWORD,
    HEALING_POTION,
    LOOT_POTION_EFFECT,
    MANA_POTION,
    ItemType,
)


class Item(BaseModel):
    """
    An immutable inventory entry. Two items with the same name are still two
    distinct entries of the inventory.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the item (e.g., 'healing_potion').",
    )
    type: str = Field(
        description="The category of the item: 'potion', 'weapon', 'armor', ...",
    )
    effect: int = Field(
        default=0,
        description="The magnitude of the effect (healing amount, attack bonus, etc.).",
    )

    def model_post_init(self, _: object) -> None:
        """Validates fields after model initialization."""
        if not self.name:
            raise ValueError("name must be a non-empty string")
        if not self.type:
            raise ValueError("type must be a non-empty string")

    @property
    def is_potion(self) -> bool:
        return self.type == ItemType.POTION.value

    def __str__(self) -> str:
        if self.is_potion:
            return f"{self.name} ({self.effect})"
        return self.name


def healing_potion(effect: int = LOOT_POTION_EFFECT) -> Item:
    """Returns a healing potion that restores `effect` health."""
    return Item(name=HEALING_POTION, type=ItemType.POTION.value, effect=effect)


def mana_potion(effect: int = LOOT_POTION_EFFECT) -> Item:
    """Returns a mana potion that restores `effect` mana."""
    return Item(name=MANA_POTION, type=ItemType.POTION.value, effect=effect)


def cursed_sword() -> Item:
    """
    Returns the cursed sword found in the story events.

    The +5 attack bonus is only recorded on the item: there is no equipment
    step, so it never reaches the player's stats.
    """
    return Item(name=CURSED_SWORD, type=ItemType.WEAPON.value, effect=5)
