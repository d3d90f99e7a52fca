"""
Player module for the game.

Defines the Player, the hero that persists across the whole run, and the
factory that builds one from its hero class.
"""

from typing import TYPE_CHECKING

from catchery import log_debug

from upside_down.combat.damage import SpecialMoveResult
from upside_down.core.constants import MAX_RAGE, CharacterType, HeroRole
from upside_down.core.dice import Dice

from .character_class import HeroClass
from .inventory import Inventory
from .main import Character
from .special_moves import SPECIAL_MOVES

if TYPE_CHECKING:
    from upside_down.core.content import ContentRepository


class Player(Character):
    """
    The hero controlled by the user.

    Attributes:
        hero_class (HeroClass):
            The class the hero was built from.
        mana (int):
            The current mana, in [0, max_mana].
        max_mana (int):
            The maximum mana.
        rage (int):
            The current rage, in [0, 100].
        inventory (Inventory):
            The items and gold owned by the hero.

    """

    def __init__(self, hero_class: HeroClass) -> None:
        super().__init__(
            CharacterType.PLAYER,
            hero_class.name,
            hero_class.max_health,
            hero_class.attack,
            hero_class.defense,
        )
        self.hero_class = hero_class
        self.max_mana = hero_class.max_mana
        self.mana = hero_class.max_mana
        self.rage = hero_class.starting_rage
        self.inventory = Inventory(owner=self)
        for item in hero_class.starting_items:
            self.inventory.add_item(item)
        self.inventory.add_gold(hero_class.starting_gold)

    @property
    def role(self) -> HeroRole:
        return self.hero_class.role

    @property
    def special_name(self) -> str:
        return self.hero_class.special_name

    @property
    def post_special_stun_chance(self) -> int:
        """Percent chance that the special move stuns the enemy (0 if none)."""
        return self.hero_class.post_special_stun_chance

    def restore_mana(self, amount: int = 10) -> int:
        """
        Restores mana, up to max_mana.

        Returns:
            int: The mana actually restored.

        """
        before = self.mana
        self.mana = min(self.max_mana, self.mana + max(0, amount))
        return self.mana - before

    def spend_mana(self, cost: int) -> None:
        self.mana = max(0, self.mana - cost)

    def add_rage(self, amount: int) -> int:
        """
        Adds rage, up to 100.

        Returns:
            int: The rage actually gained.

        """
        before = self.rage
        self.rage = min(MAX_RAGE, self.rage + amount)
        return self.rage - before

    def reset_rage(self) -> None:
        self.rage = 0

    def special_move(self, target: Character, dice: Dice) -> SpecialMoveResult:
        """
        Performs the special move of the hero's role.

        Args:
            target (Character): The character being attacked.
            dice (Dice): The random source.

        Returns:
            SpecialMoveResult: What the move did.

        """
        result = SPECIAL_MOVES[self.role](self, target, dice)
        log_debug(
            f"{self.name} uses {result.name}",
            {
                "target": target.name,
                "damage": result.damage,
                "insufficient_mana": result.insufficient_mana,
            },
        )
        return result


def new_player(
    choice: int | HeroRole | str,
    repository: "ContentRepository | None" = None,
) -> Player:
    """
    Builds a fresh player from a hero class.

    Args:
        choice (int | HeroRole | str):
            The menu number, the role, or the name of the hero class.
        repository (ContentRepository | None):
            Where to look the class up. Defaults to the shared repository.

    Returns:
        Player:
            The new hero. Unknown choices fall back to the first class of
            the roster (the Wizard).

    """
    from upside_down.core.content import ContentRepository

    repository = repository or ContentRepository()
    hero_class: HeroClass | None
    if isinstance(choice, HeroRole):
        hero_class = repository.get_hero_class_by_role(choice)
    elif isinstance(choice, int):
        hero_class = repository.get_hero_class_by_id(choice)
    else:
        hero_class = repository.get_hero_class(choice)
    if hero_class is None:
        hero_class = next(iter(repository.heroes.values()))
        log_debug(
            f"Unknown hero class choice, defaulting to {hero_class.name}",
            {"choice": choice},
        )
    return Player(hero_class)
