"""
Run state for the game.

The turn counter and the boss flag of one playthrough. It is passed
explicitly to the encounter generator and to the battles.
"""

from pydantic import BaseModel, Field

from upside_down.core.constants import BOSS_TURN_THRESHOLD


class RunState(BaseModel):
    """The progress of one playthrough."""

    turns: int = Field(
        default=0,
        ge=0,
        description="Number of events generated so far.",
    )
    boss_defeated: bool = Field(
        default=False,
        description="Whether the final boss has been defeated. Ends the run.",
    )

    @property
    def boss_due(self) -> bool:
        """True once the boss must be forced on the next event."""
        return self.turns >= BOSS_TURN_THRESHOLD and not self.boss_defeated

    def reset(self) -> None:
        """Prepares the state for a new playthrough."""
        self.turns = 0
        self.boss_defeated = False
