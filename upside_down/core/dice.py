"""
Dice module for the game.

Provides the random source used by every other component: a uniform die roll
and a percent chance that is built on top of the very same roll.
"""

import random
from logging import debug


class Dice:
    """
    A stateful random source.

    Every instance owns its own generator, seeded from the system entropy
    source unless an explicit seed is given.

    Attributes:
        seed (int | None):
            The seed used to initialize the generator, if any.

    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def roll(self, sides: int) -> int:
        """
        Rolls a die with the given number of sides.

        Args:
            sides (int):
                The number of sides of the die (e.g., 20 for a d20).

        Returns:
            int:
                A value in [1, sides]. Dice with one side or less always
                return 1.

        """
        if sides <= 1:
            return 1
        value = self._rng.randint(1, sides)
        debug(f"Rolled d{sides}: {value}")
        return value

    def chance(self, percent: int) -> bool:
        """
        Checks whether an event with the given percent probability happens.

        Args:
            percent (int):
                The probability of the event, in percent.

        Returns:
            bool:
                True if a d100 roll is lower than or equal to percent.

        """
        return self.roll(100) <= percent
