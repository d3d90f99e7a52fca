"""
Main entry point for the Upside Down RPG.

Sets up logging, loads the content repository, then runs the game loop: the
main menu, the hero selection, one turn after the other until the hero dies
or the Mind Flayer falls, and the offer to play again.

The game supports:
- Five hero classes, each with its own special move
- Random events: battles, treasure rooms, healing fountains, traps, stories
- A final boss forced after twenty turns
"""

import argparse
import logging

from rich.table import Table

from upside_down.character.player import Player, new_player
from upside_down.core.content import ContentRepository
from upside_down.core.dice import Dice
from upside_down.core.logging import setup_logging
from upside_down.core.utils import cprint, crule
from upside_down.encounters.generator import EncounterGenerator
from upside_down.run_state import RunState
from upside_down.ui.cli_interface import PlayerInterface


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="upside-down",
        description="Stranger Things: The Upside Down, a text-based RPG.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the dice, to replay the same run.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every roll and every engine decision.",
    )
    return parser.parse_args(argv)


def play_run(
    player: Player,
    generator: EncounterGenerator,
    interface: PlayerInterface,
    run_state: RunState,
) -> RunState:
    """
    Plays turns until the hero dies or the boss is defeated.

    Args:
        player (Player): The hero.
        generator (EncounterGenerator): Generates the event of every turn.
        interface (PlayerInterface): The console interface.
        run_state (RunState): The run progress, reset before the first turn.

    Returns:
        RunState: The final state of the run.

    """
    run_state.reset()
    cprint("\n📖 [italic]And so, your tale begins in the Upside Down...[/]")
    while player.is_alive() and not run_state.boss_defeated:
        crule(f"Turn {run_state.turns + 1}", style="cyan")
        cprint(player.get_status_line(show_bars=True))
        cprint(f"💰 Gold: {player.inventory.gold}")
        interface.pause()
        outcome = generator.generate_event(run_state, player, interface)
        interface.show_outcome(outcome)

    if run_state.boss_defeated:
        crule("VICTORY - YOU DEFEATED THE MIND FLAYER!", style="bold green")
        cprint("Hawkins is safe! The Upside Down is sealed!")
    else:
        crule("GAME OVER - The Upside Down consumed you.", style="bold red")
    return run_state


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)

    crule("🎮 STRANGER THINGS: The Upside Down RPG", style="bold green")

    repository = ContentRepository()
    dice = Dice(args.seed)
    generator = EncounterGenerator(dice, repository)
    interface = PlayerInterface()
    run_state = RunState()

    menu = Table(title="Main Menu", pad_edge=False)
    menu.add_column("#", style="cyan")
    menu.add_column("Option", style="bold")
    menu.add_row("1", "Start Game")
    menu.add_row("2", "Exit")

    try:
        while True:
            if interface.choose_number(menu, "Choose an option > ", 1, 2) == 2:
                break
            class_id = interface.choose_hero_class(list(repository.heroes.values()))
            player = new_player(class_id, repository)
            cprint(f"\n🌟 You are {player.role.colorize(player.name)}!")
            cprint(player.get_status_line(show_bars=True))
            cprint(f"Starting gold: {player.inventory.gold}")
            play_run(player, generator, interface, run_state)
            if not interface.ask_yes_no("\nPlay again?"):
                break
    except (KeyboardInterrupt, EOFError):
        cprint("")
    cprint("👋 Farewell, hero!")


if __name__ == "__main__":
    main()
