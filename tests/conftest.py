"""
Shared fixtures: a dice that replays fixed rolls, and a player interface
that replays fixed answers.
"""

from collections.abc import Iterable, Sequence

import pytest

from upside_down.character.enemy import Enemy
from upside_down.character.player import Player, new_player
from upside_down.core.constants import BattleAction, HeroRole, NarrativeCue
from upside_down.core.content import ContentRepository
from upside_down.core.dice import Dice
from upside_down.items import Item
from upside_down.run_state import RunState


class ScriptedDice(Dice):
    """A Dice whose rolls are given in advance, in order."""

    def __init__(self, rolls: Iterable[int] = ()) -> None:
        super().__init__(seed=0)
        self.rolls = list(rolls)
        self.sides: list[int] = []

    def roll(self, sides: int) -> int:
        assert self.rolls, f"Unexpected d{sides} roll"
        self.sides.append(sides)
        return self.rolls.pop(0)


class ScriptedInterface:
    """A PlayerInterface answering with pre-recorded choices."""

    def __init__(
        self,
        actions: Iterable[BattleAction] = (),
        items: Iterable[int] = (),
        answers: Iterable[bool] = (),
    ) -> None:
        self.actions = list(actions)
        self.items = list(items)
        self.answers = list(answers)
        self.questions: list[NarrativeCue] = []
        self.intros: list[list[NarrativeCue]] = []
        self.results: list = []

    def choose_battle_action(self, battle) -> BattleAction:
        assert self.actions, "Unexpected battle action request"
        if not battle.history:
            self.intros.append(list(battle.intro_cues))
        return self.actions.pop(0)

    def choose_item(self, items: Sequence[Item]) -> int:
        assert self.items, "Unexpected item request"
        return self.items.pop(0)

    def confirm(self, cue: NarrativeCue) -> bool:
        assert self.answers, f"Unexpected question: {cue}"
        self.questions.append(cue)
        return self.answers.pop(0)

    def show_action_result(self, battle, result) -> None:
        self.results.append(result)


@pytest.fixture
def repository() -> ContentRepository:
    return ContentRepository()


@pytest.fixture
def wizard(repository) -> Player:
    return new_player(HeroRole.TANK, repository)


@pytest.fixture
def sorcerer(repository) -> Player:
    return new_player(HeroRole.BURST, repository)


@pytest.fixture
def knight(repository) -> Player:
    return new_player(HeroRole.CRIT, repository)


@pytest.fixture
def bard(repository) -> Player:
    return new_player(HeroRole.SUPPORT, repository)


@pytest.fixture
def zoomer(repository) -> Player:
    return new_player(HeroRole.SPEED, repository)


@pytest.fixture
def dummy() -> Enemy:
    """A sturdy enemy with no defense and a weak attack."""
    return Enemy("Dummy", max_health=100, attack=10, defense=0)


@pytest.fixture
def run_state() -> RunState:
    return RunState()
