"""
Battle module for the game.

Runs one battle between the player and an enemy: the player's menu action,
the stun mechanic, escapes, victory rewards and the enemy's reply.
"""

from catchery import log_debug
from pydantic import BaseModel, Field

from upside_down.character.enemy import Enemy
from upside_down.character.player import Player
from upside_down.core.constants import (
    ESCAPE_CHANCE_BOSS,
    ESCAPE_CHANCE_NORMAL,
    VICTORY_GOLD_BOSS,
    VICTORY_GOLD_NORMAL,
    VICTORY_HEAL_DIVISOR,
    VICTORY_POTION_CHANCE,
    BattleAction,
    BattleState,
    NarrativeCue,
)
from upside_down.core.dice import Dice
from upside_down.core.error_handling import ErrorKind, InvalidSelection
from upside_down.interfaces import PlayerInterface
from upside_down.items import Item, healing_potion
from upside_down.run_state import RunState

from .damage import SpecialMoveResult, StrikeResult


class Rewards(BaseModel):
    """The spoils of a victory."""

    gold: int = Field(description="Gold looted.")
    heal_amount: int = Field(description="Health restored, before the max_health cap.")
    healed: int = Field(description="Health actually restored.")
    potion: Item | None = Field(default=None, description="Dropped potion, if any.")


class ActionResult(BaseModel):
    """Everything that happened because of one player action."""

    action: BattleAction
    consumed_turn: bool = Field(
        default=True,
        description="False when the action gave the menu back to the player.",
    )
    player_strike: StrikeResult | None = None
    special: SpecialMoveResult | None = None
    item_used: Item | None = None
    error: str | None = Field(
        default=None,
        description="The reason an item could not be used.",
    )
    error_kind: ErrorKind | None = None
    escaped: bool = False
    free_attack: StrikeResult | None = Field(
        default=None,
        description="The blow taken after a failed escape.",
    )
    enemy_strike: StrikeResult | None = None
    rewards: Rewards | None = None
    cues: list[NarrativeCue] = Field(default_factory=list)
    state: BattleState = BattleState.PLAYER_TURN

    @property
    def damage_dealt(self) -> int:
        """Health removed from the enemy by the player this action."""
        if self.player_strike:
            return self.player_strike.dealt
        if self.special:
            return self.special.damage
        return 0

    @property
    def damage_taken(self) -> int:
        """Health removed from the player by the enemy this action."""
        taken = self.enemy_strike.dealt if self.enemy_strike else 0
        if self.free_attack:
            taken += self.free_attack.dealt
        return taken


class BattleReport(BaseModel):
    """Summary of a finished battle."""

    enemy_name: str
    is_boss: bool
    outcome: BattleState
    rounds: int = Field(description="Number of turn-consuming player actions.")
    actions: list[ActionResult] = Field(default_factory=list)
    rewards: Rewards | None = None


class Battle:
    """
    A battle between the player and one enemy.

    Attributes:
        player (Player):
            The hero.
        enemy (Enemy):
            The enemy, discarded once the battle ends.
        dice (Dice):
            The random source shared by every roll of the battle.
        run_state (RunState):
            The run progress; a boss victory marks it.
        state (BattleState):
            PLAYER_TURN until the battle reaches VICTORY, DEFEAT or FLED.
        enemy_stunned (bool):
            Whether the enemy forfeits its next turn.
        intro_cues (list[NarrativeCue]):
            How the enemy was announced, narrated before the first action.

    """

    def __init__(
        self,
        player: Player,
        enemy: Enemy,
        dice: Dice,
        run_state: RunState,
        intro_cues: list[NarrativeCue] | None = None,
    ) -> None:
        self.player = player
        self.enemy = enemy
        self.dice = dice
        self.run_state = run_state
        self.state = BattleState.PLAYER_TURN
        self.enemy_stunned = False
        self.rounds = 0
        self.history: list[ActionResult] = []
        self.rewards: Rewards | None = None
        self.intro_cues = list(intro_cues or [])

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal

    def resolve_player_action(
        self,
        action: BattleAction,
        item_index: int | None = None,
    ) -> ActionResult:
        """
        Resolves one player action, then the enemy's reply if the battle is
        still on.

        Args:
            action (BattleAction):
                The action chosen from the battle menu.
            item_index (int | None):
                For ITEM, the 1-based index of the item; None or 0 cancels.

        Returns:
            ActionResult:
                What happened, and the state of the battle afterwards.

        Raises:
            RuntimeError: If the battle is already over.
            InvalidSelection: If item_index is out of range.

        """
        if self.is_over:
            raise RuntimeError(f"The battle is over ({self.state}).")

        result = ActionResult(action=action)

        if action == BattleAction.ATTACK:
            result.player_strike = self.player.attack_move(self.enemy, self.dice)
        elif action == BattleAction.SPECIAL:
            self._special(result)
        elif action == BattleAction.ITEM:
            self._use_item(result, item_index)
        elif action == BattleAction.RUN:
            self._run_away(result)
        else:
            result.consumed_turn = False
            result.cues.append(NarrativeCue.INSPECT)

        if result.consumed_turn and not self.is_over:
            self.rounds += 1
            if not self.enemy.is_alive():
                self._victory(result)
            else:
                self._enemy_turn(result)

        result.state = self.state
        self.history.append(result)
        log_debug(
            f"{self.player.name} chose {action}",
            {
                "enemy": self.enemy.name,
                "enemy_hp": self.enemy.health,
                "player_hp": self.player.health,
                "state": str(self.state),
            },
        )
        return result

    def run(self, interface: PlayerInterface) -> BattleReport:
        """
        Runs the battle to completion, asking the interface for every
        decision.

        Args:
            interface (PlayerInterface):
                Provides the player's choices and renders the results.

        Returns:
            BattleReport:
                The summary of the battle.

        """
        while not self.is_over:
            action = interface.choose_battle_action(self)
            item_index = None
            if action == BattleAction.ITEM and len(self.player.inventory):
                item_index = interface.choose_item(self.player.inventory.items)
            try:
                result = self.resolve_player_action(action, item_index)
            except InvalidSelection as e:
                log_debug(str(e), {"item_index": item_index})
                continue
            interface.show_action_result(self, result)
        return self.report()

    def report(self) -> BattleReport:
        return BattleReport(
            enemy_name=self.enemy.name,
            is_boss=self.enemy.is_boss,
            outcome=self.state,
            rounds=self.rounds,
            actions=list(self.history),
            rewards=self.rewards,
        )

    # ============================================================================
    # PLAYER ACTIONS
    # ============================================================================

    def _special(self, result: ActionResult) -> None:
        special = self.player.special_move(self.enemy, self.dice)
        result.special = special
        if special.insufficient_mana:
            result.error = f"Not enough mana! ({self.player.mana} left)"
            result.error_kind = ErrorKind.INSUFFICIENT_MANA
            result.cues.append(NarrativeCue.INSUFFICIENT_MANA)
        if special.critical:
            result.cues.append(NarrativeCue.CRITICAL_HIT)
        # The stun is rolled by the battle, even if the enemy is already dead.
        stun_chance = self.player.post_special_stun_chance
        if stun_chance and self.dice.chance(stun_chance):
            self.enemy_stunned = True
            result.cues.append(NarrativeCue.STUNNED)

    def _use_item(self, result: ActionResult, item_index: int | None) -> None:
        inventory = self.player.inventory
        if not len(inventory):
            result.consumed_turn = False
            result.cues.append(NarrativeCue.INVENTORY_EMPTY)
            return
        if not item_index:
            result.consumed_turn = False
            result.cues.append(NarrativeCue.ITEM_CANCELLED)
            return
        if not 1 <= item_index <= len(inventory):
            raise InvalidSelection(
                f"Choose between 0 and {len(inventory)}, not {item_index}."
            )
        item = inventory.take_item(item_index - 1)
        error = inventory.apply_item(item, self.player)
        if error:
            result.error = error.message
            result.error_kind = error.kind
        else:
            result.item_used = item

    def _run_away(self, result: ActionResult) -> None:
        rate = ESCAPE_CHANCE_BOSS if self.enemy.is_boss else ESCAPE_CHANCE_NORMAL
        if self.dice.chance(rate):
            result.escaped = True
            result.cues.append(NarrativeCue.ESCAPED)
            self.state = BattleState.FLED
            return
        result.cues.append(NarrativeCue.ESCAPE_FAILED)
        result.free_attack = self.enemy.attack_move(self.player, self.dice)
        if result.free_attack.bonus:
            result.cues.append(NarrativeCue.PSYCHIC_BLAST)
        if not self.player.is_alive():
            self._defeat(result)

    # ============================================================================
    # OUTCOMES
    # ============================================================================

    def _victory(self, result: ActionResult) -> None:
        inventory = self.player.inventory
        gold = self.dice.roll(20) + (
            VICTORY_GOLD_BOSS if self.enemy.is_boss else VICTORY_GOLD_NORMAL
        )
        inventory.add_gold(gold)
        heal_amount = max(1, self.player.max_health // VICTORY_HEAL_DIVISOR)
        healed = self.player.heal(heal_amount)
        potion = None
        if not self.enemy.is_boss and self.dice.chance(VICTORY_POTION_CHANCE):
            potion = healing_potion()
            inventory.add_item(potion)
            result.cues.append(NarrativeCue.POTION_DROP)
        if self.enemy.is_boss:
            self.run_state.boss_defeated = True
        self.rewards = Rewards(
            gold=gold,
            heal_amount=heal_amount,
            healed=healed,
            potion=potion,
        )
        result.rewards = self.rewards
        result.cues.append(NarrativeCue.VICTORY)
        self.state = BattleState.VICTORY

    def _defeat(self, result: ActionResult) -> None:
        result.cues.append(NarrativeCue.DEFEAT)
        self.state = BattleState.DEFEAT

    def _enemy_turn(self, result: ActionResult) -> None:
        if self.enemy_stunned:
            self.enemy_stunned = False
            result.cues.append(NarrativeCue.STUN_SKIP)
            return
        result.enemy_strike = self.enemy.attack_move(self.player, self.dice)
        if result.enemy_strike.bonus:
            result.cues.append(NarrativeCue.PSYCHIC_BLAST)
        if not self.player.is_alive():
            self._defeat(result)
