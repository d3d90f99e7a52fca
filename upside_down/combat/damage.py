"""
Damage module for the game.

Handles the damage formulas shared by every attack: the raw damage of a d20
strike, and its application to the target through its own mitigation.
"""

from typing import Any

from pydantic import BaseModel, Field


class StrikeResult(BaseModel):
    """The outcome of a single blow landed on a target."""

    roll: int = Field(
        description="The d20 rolled for the strike (0 if no die was rolled).",
    )
    raw: int = Field(
        description="The damage handed to the target, before its mitigation.",
    )
    dealt: int = Field(
        description="The health the target actually lost.",
    )
    bonus: int = Field(
        default=0,
        description="Flat damage added on top of the roll (e.g., psychic energy).",
    )
    critical: bool = Field(
        default=False,
        description="Whether the strike was a critical hit.",
    )


class SpecialMoveResult(BaseModel):
    """The outcome of a special move."""

    name: str = Field(
        description="The display name of the special move.",
    )
    strikes: list[StrikeResult] = Field(
        default_factory=list,
        description="The blows landed by the move, in order.",
    )
    insufficient_mana: bool = Field(
        default=False,
        description="True when the move fizzled for lack of mana.",
    )
    mana_spent: int = Field(default=0)
    rage_gained: int = Field(default=0)
    inspiration: int = Field(
        default=0,
        description="Bonus damage from missing health (Battle Song).",
    )

    @property
    def damage(self) -> int:
        """Total health removed from the target."""
        return sum(strike.dealt for strike in self.strikes)

    @property
    def critical(self) -> bool:
        return any(strike.critical for strike in self.strikes)


def raw_damage(roll: int, attack: int, defense: int, bonus: int = 0) -> int:
    """
    Computes the raw damage of a strike.

    Args:
        roll (int): The d20 roll.
        attack (int): The attacker's attack stat.
        defense (int): The target's defense stat.
        bonus (int): Extra flat attack, added before the defense.

    Returns:
        int: max(0, roll + attack + bonus - defense).

    """
    return max(0, roll + attack + bonus - defense)


def land_strike(
    target: Any,
    roll: int,
    raw: int,
    bonus: int = 0,
    critical: bool = False,
) -> StrikeResult:
    """
    Hands the raw damage to the target, which applies its own mitigation.

    Args:
        target (Any):
            The Character receiving the blow.
        roll (int):
            The die rolled for the blow.
        raw (int):
            The damage before the target's mitigation.
        bonus (int):
            Flat damage already included in raw, kept for reporting.
        critical (bool):
            Whether the blow is a critical hit.

    Returns:
        StrikeResult:
            The blow, with the health actually removed.

    """
    from upside_down.character.main import Character

    assert isinstance(target, Character), "Target must be a Character"

    dealt = target.take_damage(raw)
    return StrikeResult(
        roll=roll,
        raw=raw,
        dealt=dealt,
        bonus=bonus,
        critical=critical,
    )
