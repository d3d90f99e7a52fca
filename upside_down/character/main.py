"""
Character module for the game.

Defines the Character class, the capability shared by everything that can
fight: taking damage, healing, dying and striking with a d20.
"""

from abc import ABC, abstractmethod

from catchery import log_debug

from upside_down.combat.damage import (
    SpecialMoveResult,
    StrikeResult,
    land_strike,
    raw_damage,
)
from upside_down.core.constants import CharacterType
from upside_down.core.dice import Dice

from .character_display import CharacterDisplay


class Character(ABC):
    """
    Represents a combatant: a player or an enemy.

    Attributes:
        char_type (CharacterType):
            Whether the character is the player or an enemy.
        max_health (int):
            The maximum health, fixed at creation.
        attack (int):
            The attack stat, fixed at creation.
        defense (int):
            The defense stat, fixed at creation.

    """

    char_type: CharacterType
    max_health: int
    attack: int
    defense: int

    def __init__(
        self,
        char_type: CharacterType,
        name: str,
        max_health: int,
        attack: int,
        defense: int,
    ) -> None:
        if not name:
            raise ValueError("name must be a non-empty string")
        if max_health <= 0:
            raise ValueError("max_health must be positive")
        self.char_type = char_type
        self._name = name
        self.max_health = max_health
        self.attack = attack
        self.defense = defense
        self._health = max_health
        self.display = CharacterDisplay(owner=self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def colored_name(self) -> str:
        """
        Returns the character's name with color coding based on character type.
        """
        return self.char_type.colorize(self.name)

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self._health = max(0, min(self.max_health, value))

    def is_alive(self) -> bool:
        """
        Checks if the character is alive (health > 0).

        Returns:
            bool:
                True if the character is alive, False otherwise

        """
        return self._health > 0

    def take_damage(self, amount: int) -> int:
        """
        Applies damage to the character, reduced by its defense.

        Args:
            amount:
                The damage before mitigation. Negative amounts deal nothing.

        Returns:
            int:
                The health actually lost.

        """
        mitigated = max(0, amount - self.defense)
        before = self._health
        self._health = max(0, self._health - mitigated)
        lost = before - self._health
        log_debug(
            f"{self.name} takes {lost} damage "
            f"(raw: {amount}, mitigated: {mitigated}, remaining: {self._health})"
        )
        return lost

    def heal(self, amount: int) -> int:
        """
        Increases the character's health by the given amount, up to max_health.

        Args:
            amount:
                The amount of healing to apply. Negative amounts heal nothing.

        Returns:
            int:
                The actual amount healed

        """
        before = self._health
        self._health = min(self.max_health, self._health + max(0, amount))
        return self._health - before

    def attack_move(self, target: "Character", dice: Dice) -> StrikeResult:
        """
        Performs the basic attack: a d20 plus attack against the target's
        defense, handed to the target's own mitigation.

        Args:
            target (Character): The character being attacked.
            dice (Dice): The random source.

        Returns:
            StrikeResult: The blow landed.

        """
        roll = dice.roll(20)
        return land_strike(target, roll, raw_damage(roll, self.attack, target.defense))

    @abstractmethod
    def special_move(self, target: "Character", dice: Dice) -> SpecialMoveResult:
        """Performs the character's special move against the target."""

    def get_status_line(self, show_numbers: bool = True, show_bars: bool = False) -> str:
        return self.display.get_status_line(
            show_numbers=show_numbers,
            show_bars=show_bars,
        )

    def __str__(self) -> str:
        return self.colored_name

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name='{self.name}', "
            f"health={self._health}/{self.max_health})"
        )
