"""
Character display module for the game.

Provides the status lines used by the user interface: health and mana bars,
rage, and the stat block shown by the inspect option.
"""

from typing import Any

from upside_down.core.utils import make_bar


class CharacterDisplay:
    """
    Handles display and formatting for Character objects.

    Attributes:
        owner (Any):
            The Character instance that this display is associated with.

    """

    def __init__(self, owner: Any) -> None:
        self.owner = owner

    def get_status_line(
        self,
        show_numbers: bool = True,
        show_bars: bool = False,
    ) -> str:
        """
        Get a formatted status line for the character with health, mana and rage.

        Args:
            show_numbers (bool): Whether to show numerical values for stats. Defaults to True.
            show_bars (bool): Whether to show bar representations for stats. Defaults to False.

        Returns:
            str: A formatted string representing the character's status line.

        """
        owner = self.owner
        name_width = min(max(len(owner.name), 8), 16)
        status = f"{owner.char_type.emoji} [bold]{owner.name:<{name_width}}[/] "
        if getattr(owner, "is_boss", False):
            status += "[bold red]BOSS[/] "

        status += self._pool("HP", owner.health, owner.max_health, "green", show_numbers, show_bars)

        max_mana = getattr(owner, "max_mana", 0)
        if max_mana > 0:
            status += self._pool("MP", owner.mana, max_mana, "blue", show_numbers, show_bars)

        rage = getattr(owner, "rage", None)
        if rage is not None:
            status += f"| [red]Rage:{rage:>3}/100[/] "

        return status

    def get_stat_block(self) -> str:
        """
        Get the one-line stat block shown when inspecting a character.

        Returns:
            str: Name, health, attack and defense of the character.

        """
        owner = self.owner
        return (
            f"[bold]{owner.name}[/] | HP: {owner.health}/{owner.max_health} "
            f"| ATK: {owner.attack} | DEF: {owner.defense}"
        )

    @staticmethod
    def _pool(
        label: str,
        current: int,
        maximum: int,
        color: str,
        show_numbers: bool,
        show_bars: bool,
    ) -> str:
        bar = make_bar(current, maximum, color=color, length=8) if show_bars else ""
        if show_bars and not show_numbers:
            return f"| [{color}]{label}:[/]{bar} "
        return f"| [{color}]{label}:{current:>3}/{maximum}[/]{bar} "
