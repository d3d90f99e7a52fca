"""
The seam between the engine and whoever drives it.

The engine never reads input nor prints: it asks a PlayerInterface for the
player's decisions and hands it the results to render. The command-line
interface implements it with prompt_toolkit and rich; the tests implement it
with scripted answers.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from upside_down.core.constants import BattleAction, NarrativeCue
from upside_down.items import Item

if TYPE_CHECKING:
    from upside_down.combat.battle import ActionResult, Battle


class PlayerInterface(Protocol):

    def choose_battle_action(self, battle: "Battle") -> BattleAction:
        """Choose what to do on the player's turn.

        Args:
            battle (Battle): The ongoing battle.

        Returns:
            BattleAction: The chosen action.
        """
        ...

    def choose_item(self, items: Sequence[Item]) -> int:
        """Choose an item to use.

        Args:
            items (Sequence[Item]): The inventory, in display order.

        Returns:
            int: The 1-based index of the item, or 0 to cancel.
        """
        ...

    def confirm(self, cue: NarrativeCue) -> bool:
        """Answer a yes/no question raised by a story event.

        Args:
            cue (NarrativeCue): The story beat asking the question.

        Returns:
            bool: True to accept.
        """
        ...

    def show_action_result(self, battle: "Battle", result: "ActionResult") -> None:
        """Render the outcome of one player action and the enemy's reply."""
        ...
