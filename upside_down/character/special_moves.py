"""
Special moves of the hero roles.

Each role maps to one move function. Every move computes the raw damage of
its blows and hands it to the target's take_damage, so the target's defense
always applies.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from upside_down.combat.damage import SpecialMoveResult, land_strike, raw_damage
from upside_down.core.constants import HeroRole
from upside_down.core.dice import Dice

if TYPE_CHECKING:
    from .main import Character
    from .player import Player

SpecialMove = Callable[["Player", "Character", Dice], SpecialMoveResult]

ELEMENTAL_FURY_COST = 30
ELEMENTAL_FURY_BONUS = 10
HOLY_STRIKE_CRIT_CHANCE = 25
BATTLE_SONG_RAGE = 15


def arcane_shield(player: "Player", target: "Character", dice: Dice) -> SpecialMoveResult:
    """Tank: one strike at 1.5x damage, truncated."""
    roll = dice.roll(20)
    # Multiply the non-negative raw damage by 3/2 with integer division.
    raw = raw_damage(roll, player.attack, target.defense) * 3 // 2
    return SpecialMoveResult(
        name=player.special_name,
        strikes=[land_strike(target, roll, raw)],
    )


def elemental_fury(player: "Player", target: "Character", dice: Dice) -> SpecialMoveResult:
    """Burst: a +10 strike that costs 30 mana. Fizzles without enough mana."""
    if player.mana < ELEMENTAL_FURY_COST:
        return SpecialMoveResult(name=player.special_name, insufficient_mana=True)
    player.spend_mana(ELEMENTAL_FURY_COST)
    roll = dice.roll(20)
    raw = raw_damage(roll, player.attack, target.defense, bonus=ELEMENTAL_FURY_BONUS)
    return SpecialMoveResult(
        name=player.special_name,
        strikes=[land_strike(target, roll, raw, bonus=ELEMENTAL_FURY_BONUS)],
        mana_spent=ELEMENTAL_FURY_COST,
    )


def holy_strike(player: "Player", target: "Character", dice: Dice) -> SpecialMoveResult:
    """Crit: one strike with a 25% chance of dealing 2.5x damage, truncated."""
    roll = dice.roll(20)
    critical = dice.chance(HOLY_STRIKE_CRIT_CHANCE)
    raw = raw_damage(roll, player.attack, target.defense)
    if critical:
        raw = raw * 5 // 2
    return SpecialMoveResult(
        name=player.special_name,
        strikes=[land_strike(target, roll, raw, critical=critical)],
    )


def battle_song(player: "Player", target: "Character", dice: Dice) -> SpecialMoveResult:
    """Support: +1 damage per 10 missing health, then gain 15 rage."""
    inspiration = (player.max_health - player.health) // 10
    roll = dice.roll(20)
    raw = raw_damage(roll, player.attack, target.defense, bonus=inspiration)
    strike = land_strike(target, roll, raw, bonus=inspiration)
    gained = player.add_rage(BATTLE_SONG_RAGE)
    return SpecialMoveResult(
        name=player.special_name,
        strikes=[strike],
        rage_gained=gained,
        inspiration=inspiration,
    )


def rapid_strike(player: "Player", target: "Character", dice: Dice) -> SpecialMoveResult:
    """Speed: two strikes; the second one is skipped if the first one kills."""
    roll = dice.roll(20)
    strikes = [land_strike(target, roll, raw_damage(roll, player.attack, target.defense))]
    if target.is_alive():
        roll = dice.roll(20)
        strikes.append(
            land_strike(target, roll, raw_damage(roll, player.attack, target.defense))
        )
    return SpecialMoveResult(name=player.special_name, strikes=strikes)


SPECIAL_MOVES: dict[HeroRole, SpecialMove] = {
    HeroRole.TANK: arcane_shield,
    HeroRole.BURST: elemental_fury,
    HeroRole.CRIT: holy_strike,
    HeroRole.SUPPORT: battle_song,
    HeroRole.SPEED: rapid_strike,
}
