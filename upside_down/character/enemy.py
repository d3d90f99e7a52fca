"""
Enemy module for the game.

Defines the monsters of the Upside Down. Enemies only live for one battle.
"""

from upside_down.combat.damage import SpecialMoveResult, StrikeResult, land_strike, raw_damage
from upside_down.core.constants import (
    ENEMY_PSYCHIC_CHANCE,
    ENEMY_PSYCHIC_DAMAGE,
    CharacterType,
    EnemyTier,
)
from upside_down.core.dice import Dice

from .enemy_template import EnemyTemplate
from .main import Character


class Enemy(Character):
    """
    A monster spawned for a single battle.

    Attributes:
        tier (EnemyTier):
            How dangerous the enemy is.
        is_boss (bool):
            Whether the enemy is a boss. It only changes the escape odds and
            the rewards, never the combat math.

    """

    def __init__(
        self,
        name: str,
        max_health: int,
        attack: int,
        defense: int,
        tier: EnemyTier = EnemyTier.WEAK,
        is_boss: bool = False,
    ) -> None:
        super().__init__(CharacterType.ENEMY, name, max_health, attack, defense)
        self.tier = tier
        self.is_boss = is_boss

    @classmethod
    def from_template(cls, template: EnemyTemplate) -> "Enemy":
        """Spawns a fresh, full-health enemy from its stat block."""
        return cls(
            name=template.name,
            max_health=template.max_health,
            attack=template.attack,
            defense=template.defense,
            tier=template.tier,
            is_boss=template.is_boss,
        )

    def attack_move(self, target: Character, dice: Dice) -> StrikeResult:
        """
        The basic attack, with a 30% chance of +15 psychic damage.

        Args:
            target (Character): The character being attacked.
            dice (Dice): The random source.

        Returns:
            StrikeResult: The blow landed, with the psychic bonus if any.

        """
        roll = dice.roll(20)
        base = raw_damage(roll, self.attack, target.defense)
        psychic = ENEMY_PSYCHIC_DAMAGE if dice.chance(ENEMY_PSYCHIC_CHANCE) else 0
        return land_strike(target, roll, base + psychic, bonus=psychic)

    def special_move(self, target: Character, dice: Dice) -> SpecialMoveResult:
        """Enemies have no special move."""
        return SpecialMoveResult(name="")
