from pydantic import BaseModel, Field

from upside_down.combat.battle import BattleReport
from upside_down.core.constants import EventType, NarrativeCue
from upside_down.items import Item


class EventOutcome(BaseModel):
    """
    What one turn of the run did to the player. Narrative beats are abstract
    cues, the prose is up to the user interface.
    """

    turn: int = Field(description="The turn number of the event.")
    event_type: EventType
    cues: list[NarrativeCue] = Field(default_factory=list)
    gold_delta: int = Field(default=0, description="Net change of gold.")
    health_delta: int = Field(default=0, description="Net change of health.")
    mana_delta: int = Field(default=0, description="Net change of mana.")
    items_gained: list[Item] = Field(default_factory=list)
    error: str | None = Field(
        default=None,
        description="A recoverable failure raised during the event.",
    )
    battle: BattleReport | None = None
