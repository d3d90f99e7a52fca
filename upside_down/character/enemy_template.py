from pydantic import BaseModel, Field

from upside_down.core.constants import EnemyTier


class EnemyTemplate(BaseModel):
    """The stat block from which fresh enemies are spawned."""

    name: str = Field(description="The name of the enemy.")
    tier: EnemyTier = Field(description="How dangerous the enemy is.")
    max_health: int = Field(gt=0, description="The maximum health.")
    attack: int = Field(ge=0, description="The attack stat.")
    defense: int = Field(ge=0, description="The defense stat.")
    is_boss: bool = Field(
        default=False,
        description="Whether the enemy is a boss (rewards and escape odds).",
    )
