"""
Tests for the battle: player actions, the enemy reply, stuns, escapes and
the end of the battle.
"""

import pytest
from conftest import ScriptedDice, ScriptedInterface

from upside_down.character.enemy import Enemy
from upside_down.combat.battle import Battle
from upside_down.core.constants import (
    HEALING_POTION,
    MANA_POTION,
    BattleAction,
    BattleState,
    EnemyTier,
    NarrativeCue,
)
from upside_down.core.dice import Dice
from upside_down.core.error_handling import ErrorKind, InvalidSelection
from upside_down.items import healing_potion


@pytest.fixture
def frail() -> Enemy:
    return Enemy("Frail", max_health=10, attack=10, defense=0)


@pytest.fixture
def brute() -> Enemy:
    return Enemy("Brute", max_health=200, attack=30, defense=0)


def test_victory_rewards(zoomer, frail, run_state):
    """Gold is d20+10 and the hero recovers a fifth of max health."""
    zoomer.health = 50
    battle = Battle(zoomer, frail, ScriptedDice([20, 5, 100]), run_state)
    result = battle.resolve_player_action(BattleAction.ATTACK)
    assert result.state == BattleState.VICTORY
    assert result.rewards.gold == 15
    assert result.rewards.healed == 20
    assert result.damage_dealt == 10
    assert result.rewards.potion is None
    assert zoomer.health == 70
    assert zoomer.inventory.gold == 50
    assert battle.rounds == 1
    assert NarrativeCue.VICTORY in result.cues
    assert not run_state.boss_defeated


def test_victory_potion_drop(zoomer, frail, run_state):
    battle = Battle(zoomer, frail, ScriptedDice([20, 5, 40]), run_state)
    result = battle.resolve_player_action(BattleAction.ATTACK)
    assert result.rewards.potion.name == HEALING_POTION
    assert zoomer.inventory.count(HEALING_POTION) == 3
    assert NarrativeCue.POTION_DROP in result.cues


def test_boss_victory_ends_the_run(zoomer, run_state):
    boss = Enemy("Boss", max_health=10, attack=0, defense=0, tier=EnemyTier.BOSS, is_boss=True)
    dice = ScriptedDice([20, 5])
    battle = Battle(zoomer, boss, dice, run_state)
    result = battle.resolve_player_action(BattleAction.ATTACK)
    assert result.rewards.gold == 105
    assert result.rewards.potion is None
    assert run_state.boss_defeated
    assert dice.rolls == []


def test_stunned_enemy_skips_its_turn(wizard, run_state):
    enemy = Enemy("Target", max_health=200, attack=10, defense=0)
    battle = Battle(wizard, enemy, ScriptedDice([10, 1]), run_state)
    result = battle.resolve_player_action(BattleAction.SPECIAL)
    assert enemy.health == 155
    assert NarrativeCue.STUNNED in result.cues
    assert NarrativeCue.STUN_SKIP in result.cues
    assert result.enemy_strike is None
    assert not battle.enemy_stunned
    assert result.state == BattleState.PLAYER_TURN


def test_stun_lasts_one_turn(wizard, run_state):
    enemy = Enemy("Target", max_health=200, attack=10, defense=0)
    battle = Battle(wizard, enemy, ScriptedDice([10, 1, 10, 10, 100]), run_state)
    battle.resolve_player_action(BattleAction.SPECIAL)
    result = battle.resolve_player_action(BattleAction.ATTACK)
    assert result.enemy_strike is not None
    assert battle.rounds == 2


def test_stun_rolled_even_when_enemy_dies(wizard, frail, run_state):
    battle = Battle(wizard, frail, ScriptedDice([10, 1, 5, 100]), run_state)
    result = battle.resolve_player_action(BattleAction.SPECIAL)
    assert NarrativeCue.STUNNED in result.cues
    assert result.state == BattleState.VICTORY


def test_missed_stun(wizard, brute, run_state):
    battle = Battle(wizard, brute, ScriptedDice([10, 26, 10, 100]), run_state)
    result = battle.resolve_player_action(BattleAction.SPECIAL)
    assert NarrativeCue.STUNNED not in result.cues
    assert result.enemy_strike.dealt == 10


def test_insufficient_mana_still_costs_the_turn(sorcerer, brute, run_state):
    sorcerer.mana = 20
    battle = Battle(sorcerer, brute, ScriptedDice([1, 100]), run_state)
    result = battle.resolve_player_action(BattleAction.SPECIAL)
    assert result.error_kind == ErrorKind.INSUFFICIENT_MANA
    assert result.error == "Not enough mana! (20 left)"
    assert result.consumed_turn
    assert result.enemy_strike is not None
    assert brute.health == 200


def test_use_item_consumes_the_turn(wizard, dummy, run_state):
    wizard.health = 50
    battle = Battle(wizard, dummy, ScriptedDice([1, 100]), run_state)
    result = battle.resolve_player_action(BattleAction.ITEM, 1)
    assert result.item_used.name == HEALING_POTION
    assert result.enemy_strike.dealt == 0
    assert wizard.health == 80
    assert wizard.inventory.count(HEALING_POTION) == 1


def test_cancel_item_keeps_the_turn(wizard, dummy, run_state):
    battle = Battle(wizard, dummy, ScriptedDice(), run_state)
    result = battle.resolve_player_action(BattleAction.ITEM, 0)
    assert not result.consumed_turn
    assert NarrativeCue.ITEM_CANCELLED in result.cues
    assert len(wizard.inventory) == 2
    assert battle.rounds == 0


def test_empty_inventory_keeps_the_turn(wizard, dummy, run_state):
    while wizard.inventory.remove_item(HEALING_POTION):
        pass
    battle = Battle(wizard, dummy, ScriptedDice(), run_state)
    result = battle.resolve_player_action(BattleAction.ITEM, 1)
    assert not result.consumed_turn
    assert NarrativeCue.INVENTORY_EMPTY in result.cues


def test_out_of_range_item(wizard, dummy, run_state):
    battle = Battle(wizard, dummy, ScriptedDice(), run_state)
    with pytest.raises(InvalidSelection):
        battle.resolve_player_action(BattleAction.ITEM, 5)
    with pytest.raises(ValueError):
        battle.resolve_player_action(BattleAction.ITEM, -1)
    assert battle.history == []


def test_inspect_is_free(wizard, dummy, run_state):
    battle = Battle(wizard, dummy, ScriptedDice(), run_state)
    result = battle.resolve_player_action(BattleAction.INSPECT)
    assert not result.consumed_turn
    assert NarrativeCue.INSPECT in result.cues
    assert battle.rounds == 0


def test_failed_escape(wizard, run_state):
    """A failed escape costs a free hit, and the enemy still takes its turn."""
    enemy = Enemy("Chaser", max_health=100, attack=30, defense=0)
    battle = Battle(wizard, enemy, ScriptedDice([71, 10, 100, 10, 100]), run_state)
    result = battle.resolve_player_action(BattleAction.RUN)
    assert not result.escaped
    assert NarrativeCue.ESCAPE_FAILED in result.cues
    assert result.free_attack.dealt == 10
    assert result.enemy_strike.dealt == 10
    assert result.damage_taken == 20
    assert wizard.health == 100
    assert result.state == BattleState.PLAYER_TURN


def test_successful_escape(wizard, dummy, run_state):
    battle = Battle(wizard, dummy, ScriptedDice([70]), run_state)
    result = battle.resolve_player_action(BattleAction.RUN)
    assert result.escaped
    assert result.state == BattleState.FLED
    assert result.rewards is None


def test_escaping_a_boss_is_harder(wizard, run_state):
    boss = Enemy("Boss", max_health=100, attack=0, defense=0, is_boss=True)
    battle = Battle(wizard, boss, ScriptedDice([21, 1, 100, 1, 100, 20]), run_state)
    assert not battle.resolve_player_action(BattleAction.RUN).escaped
    assert battle.resolve_player_action(BattleAction.RUN).escaped


@pytest.mark.parametrize("is_boss, expected", [(False, 0.70), (True, 0.20)])
def test_escape_frequency(wizard, run_state, is_boss, expected):
    dice = Dice(seed=1234)
    escapes = 0
    for _ in range(10000):
        wizard.health = wizard.max_health
        enemy = Enemy("Runner", max_health=100, attack=0, defense=0, is_boss=is_boss)
        battle = Battle(wizard, enemy, dice, run_state)
        escapes += battle.resolve_player_action(BattleAction.RUN).escaped
    assert abs(escapes / 10000 - expected) <= 0.02


def test_defeat(wizard, brute, run_state):
    wizard.health = 1
    battle = Battle(wizard, brute, ScriptedDice([1, 10, 100]), run_state)
    result = battle.resolve_player_action(BattleAction.ATTACK)
    assert result.state == BattleState.DEFEAT
    assert NarrativeCue.DEFEAT in result.cues
    with pytest.raises(RuntimeError):
        battle.resolve_player_action(BattleAction.ATTACK)


def test_run_until_victory(zoomer, frail, run_state):
    interface = ScriptedInterface(actions=[BattleAction.INSPECT, BattleAction.ATTACK])
    battle = Battle(zoomer, frail, ScriptedDice([20, 5, 100]), run_state)
    report = battle.run(interface)
    assert report.outcome == BattleState.VICTORY
    assert report.rounds == 1
    assert len(report.actions) == 2
    assert len(interface.results) == 2
    assert report.rewards.gold == 15


def test_run_asks_again_after_invalid_item(zoomer, frail, run_state):
    interface = ScriptedInterface(
        actions=[BattleAction.ITEM, BattleAction.ATTACK],
        items=[9],
    )
    battle = Battle(zoomer, frail, ScriptedDice([20, 5, 100]), run_state)
    report = battle.run(interface)
    assert report.outcome == BattleState.VICTORY
    assert [r.action for r in interface.results] == [BattleAction.ATTACK]
    assert len(zoomer.inventory) == 2


def test_item_used_is_the_one_chosen(sorcerer, dummy, run_state):
    """With two potions of the same name, the selected one is consumed."""
    sorcerer.inventory.add_item(healing_potion(30))
    sorcerer.health = 10
    battle = Battle(sorcerer, dummy, ScriptedDice([1, 100]), run_state)
    result = battle.resolve_player_action(BattleAction.ITEM, 3)
    assert result.item_used.effect == 30
    assert sorcerer.health == 40
    assert [(item.name, item.effect) for item in sorcerer.inventory.items] == [
        (HEALING_POTION, 20),
        (MANA_POTION, 30),
    ]


def test_intro_cues_are_kept(zoomer, frail, run_state):
    battle = Battle(
        zoomer,
        frail,
        ScriptedDice(),
        run_state,
        intro_cues=[NarrativeCue.ENEMY_WEAK, NarrativeCue.BATTLE_START],
    )
    assert battle.intro_cues == [NarrativeCue.ENEMY_WEAK, NarrativeCue.BATTLE_START]
