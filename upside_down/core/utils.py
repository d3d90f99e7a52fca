"""
Utilities module for the game.

Every line the game shows goes through one shared rich console: plain
markup, horizontal rules, and tables captured to ANSI for the prompts. Also
holds the singleton metaclass and the bar renderer of the status lines.
"""

from __future__ import annotations

from typing import Any, Generic

from rich.console import Console
from rich.rule import Rule
from typing_extensions import TypeVar

_console = Console(markup=True, width=120, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """Print rich markup on the game console."""
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Print a horizontal rule, e.g. a turn separator or a game-over banner.

    Args:
        *args: The title of the rule, passed to rich's Rule.
        **kwargs: Rule options such as style or characters.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Render a renderable (typically a menu table) to an ANSI string, so that
    prompt_toolkit can show it as part of a prompt.

    Args:
        content (Any): The rich renderable or markup string.

    Returns:
        str: The ANSI-escaped text, without a trailing newline.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


_T = TypeVar("_T")


class Singleton(type, Generic[_T]):
    """Metaclass handing back the first instance of the class on every call."""

    _instances: dict[Singleton[_T], _T] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> _T:
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Draws a resource pool (health, mana) as a bar of filled and empty cells.

    Args:
        current (int): The amount left in the pool.
        maximum (int): The size of the pool. A pool of size 0 draws empty.
        length (int): The number of cells. Defaults to 10.
        color (str): The rich color of the filled cells. Defaults to "white".

    Returns:
        str: The bar, as rich markup.

    """
    filled = 0
    if maximum > 0:
        filled = min(length, max(0, current) * length // maximum)
    bar = f"[{color}]" + "▮" * filled
    if filled < length:
        bar += "[dim white]" + "▯" * (length - filled) + "[/]"
    return bar + "[/]"
