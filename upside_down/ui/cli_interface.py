"""
User interface module for the game.

Provides the console implementation of the PlayerInterface: rich tables for
the menus, prompt_toolkit for the input, and the storyteller's prose for
every narrative cue raised by the engine.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from prompt_toolkit import ANSI, PromptSession
from rich.table import Table

from upside_down.character.character_class import HeroClass
from upside_down.core.constants import BattleAction, NarrativeCue
from upside_down.core.utils import ccapture, cprint
from upside_down.items import Item

if TYPE_CHECKING:
    from upside_down.combat.battle import ActionResult, Battle
    from upside_down.encounters.outcomes import EventOutcome

STORYTELLER: dict[NarrativeCue, str] = {
    NarrativeCue.ENEMY_WEAK: "A creature stirs in the shadows...",
    NarrativeCue.ENEMY_MEDIUM: "You hear growling in the distance...",
    NarrativeCue.ENEMY_STRONG: "An eerie presence fills the air...",
    NarrativeCue.BOSS_EARLY: "Impossible! The Mind Flayer appears early!",
    NarrativeCue.BOSS_EMERGES: "The air grows cold... The Upside Down tears open... "
    "THE MIND FLAYER EMERGES!",
    NarrativeCue.BATTLE_START: "Steel yourself! Battle is upon you!",
    NarrativeCue.STUNNED: "🎯 The enemy is STUNNED!",
    NarrativeCue.STUN_SKIP: "😵 The enemy is stunned and skips its turn!",
    NarrativeCue.PSYCHIC_BLAST: "⚡ The enemy unleashes psychic energy!",
    NarrativeCue.CRITICAL_HIT: "💥 CRITICAL HIT!",
    NarrativeCue.INSUFFICIENT_MANA: "❌ Not enough mana!",
    NarrativeCue.ESCAPED: "🏃 Escaped!",
    NarrativeCue.ESCAPE_FAILED: "❌ Escape failed!",
    NarrativeCue.VICTORY: "🎉 Victory is yours! Well fought, hero!",
    NarrativeCue.POTION_DROP: "🧪 Found a Healing Potion!",
    NarrativeCue.DEFEAT: "💀 You have fallen...",
    NarrativeCue.TREASURE_FOUND: "💎 Ah! Fortune smiles upon you: a treasure room!",
    NarrativeCue.FOUNTAIN: "⛲ A sacred fountain! Rest and recover...",
    NarrativeCue.TRAP_DODGED: "⚠️  Trap triggered! ✅ Dodged!",
    NarrativeCue.TRAP_HIT: "⚠️  Trap triggered! OUCH!",
    NarrativeCue.TRAP_HEAVY: "⚠️  Trap triggered! 💥 Heavy damage!",
    NarrativeCue.TRAVELER: "👴 An old traveler asks for your help.",
    NarrativeCue.TRAVELER_HELPED: "📦 The traveler rewards you with a chest!",
    NarrativeCue.TRAVELER_REFUSED: "💸 The traveler curses you, and your purse feels lighter.",
    NarrativeCue.WOUNDED_WOLF: "🐺 A wounded wolf lies on the path.",
    NarrativeCue.WOLF_HEALED: "🐾 The wolf blesses you!",
    NarrativeCue.SHRINE: "🔮 A shrine asks for an offering of 10 gold.",
    NarrativeCue.SHRINE_BLESSING: "✨ Blessed: +20 HP, +20 Mana!",
    NarrativeCue.CURSED_SWORD: "⚔️  A cursed sword (+5 ATK) lies on the ground.",
    NarrativeCue.CURSED_SWORD_TAKEN: "⚡ You pick up the cursed sword. "
    "Without a way to equip it, it stays in your bag.",
    NarrativeCue.NOTHING_HAPPENS: "The path is quiet.",
    NarrativeCue.INVENTORY_EMPTY: "🎒 Inventory empty.",
    NarrativeCue.ITEM_CANCELLED: "You put your bag away.",
}

QUESTIONS: dict[NarrativeCue, str] = {
    NarrativeCue.TRAVELER: "Help the traveler?",
    NarrativeCue.WOUNDED_WOLF: "Heal the wolf with a potion?",
    NarrativeCue.SHRINE: "Sacrifice 10 gold?",
    NarrativeCue.CURSED_SWORD: "Take the sword?",
}

BATTLE_MENU: list[tuple[BattleAction, str]] = [
    (BattleAction.ATTACK, "Attack"),
    (BattleAction.SPECIAL, "Special"),
    (BattleAction.ITEM, "Item"),
    (BattleAction.RUN, "Run"),
    (BattleAction.INSPECT, "Inspect"),
]


class PlayerInterface:
    """
    Command-line interface for the player.

    Provides Rich table-based menus and prompt_toolkit input with numeric
    shortcuts.
    """

    def __init__(self) -> None:
        # One session keeps history.
        self.session: PromptSession = PromptSession(erase_when_done=True)

    # ============================================================================
    # ENGINE CALLBACKS
    # ============================================================================

    def choose_battle_action(self, battle: "Battle") -> BattleAction:
        """Choose what to do on the player's turn.

        Args:
            battle (Battle): The ongoing battle.

        Returns:
            BattleAction: The chosen action.

        """
        if not battle.history:
            self.show_battle_start(battle)
        cprint("\n[bold]--- Your Turn ---[/]")
        cprint(battle.player.get_status_line(show_bars=True))
        cprint(battle.enemy.get_status_line(show_bars=True))
        table = Table(title="Actions", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Action", style="bold")
        for i, (_, label) in enumerate(BATTLE_MENU, 1):
            if label == "Special":
                label = f"Special: {battle.player.special_name}"
            table.add_row(str(i), label)
        index = self.choose_number(table, "Choose > ", 1, len(BATTLE_MENU))
        action = BATTLE_MENU[index - 1][0]
        if action == BattleAction.INSPECT:
            cprint(f"\n── {battle.enemy.name} ──")
            cprint(battle.enemy.display.get_stat_block())
            self.pause("(Press Enter to continue)")
        return action

    def choose_item(self, items: Sequence[Item]) -> int:
        """Choose an item to use, 0 to cancel.

        Args:
            items (Sequence[Item]): The inventory, in display order.

        Returns:
            int: The 1-based index of the item, or 0 to cancel.

        """
        table = Table(title="Inventory", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Item", style="bold")
        for i, item in enumerate(items, 1):
            table.add_row(str(i), str(item))
        table.add_row()
        table.add_row("0", "Cancel")
        return self.choose_number(table, "Select > ", 0, len(items))

    def confirm(self, cue: NarrativeCue) -> bool:
        return self.ask_yes_no(QUESTIONS.get(cue, "Accept?"))

    def show_action_result(self, battle: "Battle", result: "ActionResult") -> None:
        """Render the outcome of one player action and the enemy's reply."""
        if result.player_strike:
            cprint(f"👊 You hit for {result.player_strike.dealt} damage!")
        if result.special and not result.special.insufficient_mana:
            special = result.special
            hits = " + ".join(str(s.dealt) for s in special.strikes)
            line = (
                f"{battle.player.role.emoji} {battle.player.name} used "
                f"{battle.player.role.colorize(special.name.upper())}! Dealt {hits} damage"
            )
            if special.inspiration:
                line += f" (+{special.inspiration} from inspiration)"
            cprint(line + "!")
        if result.item_used:
            cprint(f"🧪 You used {result.item_used.name} ({result.item_used.effect}).")
        if result.error:
            cprint(f"⚠️  {result.error}", style="yellow")
        if result.free_attack:
            cprint(f"💥 Took {result.free_attack.dealt} damage while fleeing!")
        if result.enemy_strike:
            cprint(f"💢 {battle.enemy.name} hits you for {result.enemy_strike.dealt} damage!")
        self.narrate(
            [c for c in result.cues if c not in (NarrativeCue.INSPECT, NarrativeCue.INSUFFICIENT_MANA)]
        )
        if result.rewards:
            rewards = result.rewards
            cprint(f"💰 Looted {rewards.gold} gold.")
            cprint(f"✨ Restored {rewards.healed} HP after battle.")

    # ============================================================================
    # GAME LOOP HELPERS
    # ============================================================================

    def choose_hero_class(self, heroes: Sequence[HeroClass]) -> int:
        """Show the class selection menu and return the chosen class id."""
        table = Table(title="Choose your hero", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Hero", style="bold")
        table.add_column("Role")
        table.add_column("HP", justify="right")
        table.add_column("ATK", justify="right")
        table.add_column("DEF", justify="right")
        for hero in heroes:
            table.add_row(
                str(hero.class_id),
                hero.name,
                f"{hero.role.colorize(hero.description or hero.role.display_name)}",
                str(hero.max_health),
                str(hero.attack),
                str(hero.defense),
            )
        ids = [hero.class_id for hero in heroes]
        return self.choose_number(table, "Your choice > ", min(ids), max(ids))

    def show_outcome(self, outcome: "EventOutcome") -> None:
        """Render the event of a turn (battles are rendered as they happen)."""
        cprint(f"{outcome.event_type.emoji} [bold]{outcome.event_type.display_name}[/]")
        if outcome.battle:
            report = outcome.battle
            cprint(
                f"[{report.outcome.color}]Battle against {report.enemy_name}: "
                f"{report.outcome.display_name}[/]"
            )
            return
        self.narrate(outcome.cues)
        if outcome.error:
            cprint(f"⚠️  {outcome.error}", style="yellow")
        if outcome.gold_delta:
            cprint(f"💰 Gold {outcome.gold_delta:+d}")
        if outcome.health_delta:
            cprint(f"❤️  HP {outcome.health_delta:+d}")
        if outcome.mana_delta:
            cprint(f"💧 Mana {outcome.mana_delta:+d}")
        for item in outcome.items_gained:
            cprint(f"🎒 Got {item}")

    def show_battle_start(self, battle: "Battle") -> None:
        self.narrate(battle.intro_cues)
        cprint(f"\n BATTLE: {battle.player.name} vs {battle.enemy.name}")
        cprint(battle.enemy.display.get_stat_block())

    def narrate(self, cues: Sequence[NarrativeCue]) -> None:
        for cue in cues:
            text = STORYTELLER.get(cue)
            if text:
                cprint(f"📖 [italic]{text}[/]")

    def choose_number(self, table: Table, question: str, low: int, high: int) -> int:
        """Show the table and keep asking until a number in [low, high] is typed."""
        prompt = "\n" + ccapture(table) + "\n" + question
        while True:
            answer = self.session.prompt(ANSI(prompt))
            choice = self.get_digit_choice(answer)
            if low <= choice <= high:
                return choice

    def ask_yes_no(self, question: str) -> bool:
        while True:
            answer = self.session.prompt(f"{question} (y/n): ").strip().lower()
            if answer.startswith("y"):
                return True
            if answer.startswith("n"):
                return False

    def pause(self, message: str = "Press Enter to continue...") -> None:
        self.session.prompt(message)

    @staticmethod
    def get_digit_choice(answer: str) -> int:
        """
        Convert a numeric string input to its integer value.

        Args:
            answer (str): User input string to parse.

        Returns:
            int: The integer value, or -1 if invalid input.

        """
        answer = answer.strip() if isinstance(answer, str) else ""
        if answer.isdigit():
            return int(answer)
        return -1
