"""
Tests for the special move of every hero role.
"""

from conftest import ScriptedDice

from upside_down.character.enemy import Enemy


def test_arcane_shield_deals_one_and_a_half(wizard, dummy):
    """(10 + 20) * 3 // 2 against a target without defense."""
    result = wizard.special_move(dummy, ScriptedDice([10]))
    assert result.name == "Arcane Shield"
    assert result.damage == 45
    assert dummy.health == 55


def test_arcane_shield_truncates(wizard, dummy):
    result = wizard.special_move(dummy, ScriptedDice([1]))
    assert result.strikes[0].raw == 31


def test_elemental_fury_spends_mana(sorcerer, dummy):
    result = sorcerer.special_move(dummy, ScriptedDice([10]))
    assert result.strikes[0].raw == 45
    assert result.mana_spent == 30
    assert sorcerer.mana == 70
    assert dummy.health == 55


def test_elemental_fury_without_mana(sorcerer, dummy):
    """The move fizzles: no roll, no damage, no mana spent."""
    sorcerer.mana = 20
    dice = ScriptedDice()
    result = sorcerer.special_move(dummy, dice)
    assert result.insufficient_mana
    assert result.damage == 0
    assert sorcerer.mana == 20
    assert dummy.health == 100
    assert dice.sides == []


def test_elemental_fury_with_exact_mana(sorcerer, dummy):
    sorcerer.mana = 30
    result = sorcerer.special_move(dummy, ScriptedDice([1]))
    assert not result.insufficient_mana
    assert sorcerer.mana == 0


def test_holy_strike_critical(knight, dummy):
    """(10 + 22) * 5 // 2 on a critical hit."""
    result = knight.special_move(dummy, ScriptedDice([10, 25]))
    assert result.critical
    assert result.damage == 80
    assert dummy.health == 20


def test_holy_strike_normal(knight, dummy):
    result = knight.special_move(dummy, ScriptedDice([10, 26]))
    assert not result.critical
    assert result.damage == 32


def test_battle_song_inspiration(bard, dummy):
    """One point of bonus damage per ten missing health, then fifteen rage."""
    bard.health = 100
    result = bard.special_move(dummy, ScriptedDice([10]))
    assert result.inspiration == 4
    assert result.damage == 42
    assert result.rage_gained == 15
    assert bard.rage == 35


def test_battle_song_rage_is_capped(bard, dummy):
    bard.rage = 95
    result = bard.special_move(dummy, ScriptedDice([10]))
    assert result.inspiration == 0
    assert result.rage_gained == 5
    assert bard.rage == 100


def test_rapid_strike_hits_twice(zoomer, dummy):
    result = zoomer.special_move(dummy, ScriptedDice([10, 5]))
    assert [strike.dealt for strike in result.strikes] == [34, 29]
    assert dummy.health == 37


def test_rapid_strike_stops_on_kill(zoomer):
    """The second strike is not rolled once the target is dead."""
    target = Enemy("Frail", max_health=30, attack=0, defense=0)
    dice = ScriptedDice([10])
    result = zoomer.special_move(target, dice)
    assert len(result.strikes) == 1
    assert not target.is_alive()
    assert dice.sides == [20]


def test_special_moves_respect_defense(wizard):
    target = Enemy("Armored", max_health=100, attack=0, defense=10)
    result = wizard.special_move(target, ScriptedDice([10]))
    # (10 + 20 - 10) * 3 // 2 = 30, minus the defense again on impact.
    assert result.strikes[0].raw == 30
    assert result.damage == 20
