"""
Encounter generator for the game.

Every turn rolls a d100 against fixed bands to pick the event: battle,
treasure, healing fountain, trap or story. Once the run is long enough the
boss preempts the roll altogether.
"""

from catchery import log_debug

from upside_down.character.enemy import Enemy
from upside_down.character.player import Player
from upside_down.combat.battle import Battle
from upside_down.core.constants import (
    EVENT_BATTLE_MAX,
    EVENT_HEAL_MAX,
    EVENT_TRAP_MAX,
    EVENT_TREASURE_MAX,
    HEALING_POTION,
    SPAWN_MEDIUM_MAX,
    SPAWN_STRONG_MAX,
    SPAWN_WEAK_MAX,
    EnemyTier,
    EventType,
    NarrativeCue,
)
from upside_down.core.content import ContentRepository
from upside_down.core.dice import Dice
from upside_down.interfaces import PlayerInterface
from upside_down.items import cursed_sword, healing_potion, mana_potion
from upside_down.run_state import RunState

from .outcomes import EventOutcome

TREASURE_POTION_CHANCE = 50
TREASURE_MANA_POTION_CHANCE = 20
FOUNTAIN_HEAL_PERCENT = 40
FOUNTAIN_MANA = 20
TRAVELER_GOLD = 25
TRAVELER_PENALTY = 10
WOLF_GOLD = 15
SHRINE_COST = 10
SHRINE_HEAL = 20
SHRINE_MANA = 20

_SPAWN_CUES = {
    EnemyTier.WEAK: NarrativeCue.ENEMY_WEAK,
    EnemyTier.MEDIUM: NarrativeCue.ENEMY_MEDIUM,
    EnemyTier.STRONG: NarrativeCue.ENEMY_STRONG,
    EnemyTier.BOSS: NarrativeCue.BOSS_EARLY,
}


class EncounterGenerator:
    """
    Generates and applies the random event of each turn.

    Attributes:
        dice (Dice):
            The random source.
        repository (ContentRepository):
            Where the enemy roster comes from.

    """

    def __init__(
        self,
        dice: Dice,
        repository: ContentRepository | None = None,
    ) -> None:
        self.dice = dice
        self.repository = repository or ContentRepository()

    def generate_event(
        self,
        run_state: RunState,
        player: Player,
        interface: PlayerInterface,
    ) -> EventOutcome:
        """
        Advances the run by one turn and plays its event.

        Args:
            run_state (RunState):
                The run progress. Its turn counter is incremented.
            player (Player):
                The hero.
            interface (PlayerInterface):
                Answers the questions of battles and story events.

        Returns:
            EventOutcome:
                The event and the net change it caused.

        """
        run_state.turns += 1

        gold_before = player.inventory.gold
        health_before = player.health
        mana_before = player.mana

        if run_state.boss_due:
            boss = Enemy.from_template(self.repository.get_boss())
            outcome = self.battle(run_state, player, boss, interface, NarrativeCue.BOSS_EMERGES)
        else:
            roll = self.dice.roll(100)
            if roll <= EVENT_BATTLE_MAX:
                enemy, cue = self.spawn_enemy()
                outcome = self.battle(run_state, player, enemy, interface, cue)
            elif roll <= EVENT_TREASURE_MAX:
                outcome = self.treasure_room(run_state, player)
            elif roll <= EVENT_HEAL_MAX:
                outcome = self.healing_fountain(run_state, player)
            elif roll <= EVENT_TRAP_MAX:
                outcome = self.trap(run_state, player)
            else:
                outcome = self.story(run_state, player, interface)

        outcome.gold_delta = player.inventory.gold - gold_before
        outcome.health_delta = player.health - health_before
        outcome.mana_delta = player.mana - mana_before
        log_debug(
            f"Turn {run_state.turns}: {outcome.event_type}",
            {
                "cues": [str(c) for c in outcome.cues],
                "gold": outcome.gold_delta,
                "health": outcome.health_delta,
            },
        )
        return outcome

    def spawn_enemy(self) -> tuple[Enemy, NarrativeCue]:
        """
        Picks the enemy of a battle with a d100: weak, medium, strong, and a
        small chance of meeting the boss early.

        Returns:
            tuple[Enemy, NarrativeCue]:
                A fresh enemy, and the cue announcing it.

        """
        roll = self.dice.roll(100)
        if roll <= SPAWN_WEAK_MAX:
            tier = EnemyTier.WEAK
        elif roll <= SPAWN_MEDIUM_MAX:
            tier = EnemyTier.MEDIUM
        elif roll <= SPAWN_STRONG_MAX:
            tier = EnemyTier.STRONG
        else:
            tier = EnemyTier.BOSS
        template = self.repository.get_enemy_by_tier(tier)
        return Enemy.from_template(template), _SPAWN_CUES[tier]

    def battle(
        self,
        run_state: RunState,
        player: Player,
        enemy: Enemy,
        interface: PlayerInterface,
        announcement: NarrativeCue,
    ) -> EventOutcome:
        """Runs a full battle against the enemy, announced by the given cue."""
        cues = [announcement, NarrativeCue.BATTLE_START]
        battle = Battle(player, enemy, self.dice, run_state, intro_cues=cues)
        report = battle.run(interface)
        outcome = EventOutcome(
            turn=run_state.turns,
            event_type=EventType.BATTLE,
            cues=list(cues),
            battle=report,
        )
        if report.rewards and report.rewards.potion:
            outcome.items_gained.append(report.rewards.potion)
        return outcome

    def treasure_room(self, run_state: RunState, player: Player) -> EventOutcome:
        """d30+20 gold, 50% a healing potion, and independently 20% a mana potion."""
        inventory = player.inventory
        outcome = EventOutcome(
            turn=run_state.turns,
            event_type=EventType.TREASURE,
            cues=[NarrativeCue.TREASURE_FOUND],
        )
        inventory.add_gold(self.dice.roll(30) + 20)
        if self.dice.chance(TREASURE_POTION_CHANCE):
            potion = healing_potion()
            inventory.add_item(potion)
            outcome.items_gained.append(potion)
        if self.dice.chance(TREASURE_MANA_POTION_CHANCE):
            potion = mana_potion()
            inventory.add_item(potion)
            outcome.items_gained.append(potion)
        return outcome

    def healing_fountain(self, run_state: RunState, player: Player) -> EventOutcome:
        """Heals 40% of max health plus a d10, and restores 20 mana."""
        player.heal(player.max_health * FOUNTAIN_HEAL_PERCENT // 100 + self.dice.roll(10))
        player.restore_mana(FOUNTAIN_MANA)
        return EventOutcome(
            turn=run_state.turns,
            event_type=EventType.HEAL,
            cues=[NarrativeCue.FOUNTAIN],
        )

    def trap(self, run_state: RunState, player: Player) -> EventOutcome:
        """
        A d20 decides the trap: dodged on 1-5, d10+5 damage on 6-15, d20+15
        damage otherwise. Defense applies to the trap damage.
        """
        roll = self.dice.roll(20)
        if roll <= 5:
            cue = NarrativeCue.TRAP_DODGED
        elif roll <= 15:
            cue = NarrativeCue.TRAP_HIT
            player.take_damage(self.dice.roll(10) + 5)
        else:
            cue = NarrativeCue.TRAP_HEAVY
            player.take_damage(self.dice.roll(20) + 15)
        return EventOutcome(
            turn=run_state.turns,
            event_type=EventType.TRAP,
            cues=[cue],
        )

    def story(
        self,
        run_state: RunState,
        player: Player,
        interface: PlayerInterface,
    ) -> EventOutcome:
        """
        A d4 picks one of four story branches, each asking the player a
        yes/no question.
        """
        inventory = player.inventory
        outcome = EventOutcome(turn=run_state.turns, event_type=EventType.STORY)
        branch = self.dice.roll(4)

        if branch == 1:
            outcome.cues.append(NarrativeCue.TRAVELER)
            if interface.confirm(NarrativeCue.TRAVELER):
                potion = healing_potion()
                inventory.add_gold(TRAVELER_GOLD)
                inventory.add_item(potion)
                outcome.items_gained.append(potion)
                outcome.cues.append(NarrativeCue.TRAVELER_HELPED)
            else:
                # Gold is allowed to go negative here.
                inventory.add_gold(-TRAVELER_PENALTY)
                outcome.cues.append(NarrativeCue.TRAVELER_REFUSED)

        elif branch == 2:
            if not inventory.has_item(HEALING_POTION):
                outcome.cues.append(NarrativeCue.NOTHING_HAPPENS)
            else:
                outcome.cues.append(NarrativeCue.WOUNDED_WOLF)
                if interface.confirm(NarrativeCue.WOUNDED_WOLF):
                    error = inventory.use_item(HEALING_POTION, player)
                    if error:
                        outcome.error = error.message
                    inventory.add_gold(WOLF_GOLD)
                    outcome.cues.append(NarrativeCue.WOLF_HEALED)

        elif branch == 3:
            if inventory.gold < SHRINE_COST:
                outcome.cues.append(NarrativeCue.NOTHING_HAPPENS)
            else:
                outcome.cues.append(NarrativeCue.SHRINE)
                if interface.confirm(NarrativeCue.SHRINE):
                    inventory.add_gold(-SHRINE_COST)
                    player.heal(SHRINE_HEAL)
                    player.restore_mana(SHRINE_MANA)
                    outcome.cues.append(NarrativeCue.SHRINE_BLESSING)

        else:
            outcome.cues.append(NarrativeCue.CURSED_SWORD)
            if interface.confirm(NarrativeCue.CURSED_SWORD):
                sword = cursed_sword()
                inventory.add_item(sword)
                outcome.items_gained.append(sword)
                outcome.cues.append(NarrativeCue.CURSED_SWORD_TAKEN)

        return outcome


def generate_event(
    run_state: RunState,
    player: Player,
    interface: PlayerInterface,
    dice: Dice | None = None,
) -> EventOutcome:
    """
    Plays one turn of the run with a throwaway generator.

    Args:
        run_state (RunState): The run progress.
        player (Player): The hero.
        interface (PlayerInterface): Answers the player's decisions.
        dice (Dice | None): The random source. Defaults to a fresh one.

    Returns:
        EventOutcome: The event and the net change it caused.

    """
    return EncounterGenerator(dice or Dice()).generate_event(run_state, player, interface)
