from pydantic import BaseModel, Field

from upside_down.core.constants import DEFAULT_MAX_MANA, MAX_RAGE, HeroRole
from upside_down.items import Item


class HeroClass(BaseModel):
    """
    Represents a playable hero class: its base stats, its starting kit and the
    role that selects its special move.
    """

    class_id: int = Field(
        description="The menu number used to pick this class.",
    )
    name: str = Field(
        description="The name of the hero class.",
    )
    role: HeroRole = Field(
        description="The role of the class, which selects its special move.",
    )
    description: str = Field(
        default="",
        description="A short description shown in the class selection menu.",
    )
    special_name: str = Field(
        default="Special",
        description="The display name of the special move.",
    )
    max_health: int = Field(gt=0, description="The maximum health.")
    attack: int = Field(ge=0, description="The attack stat.")
    defense: int = Field(ge=0, description="The defense stat.")
    max_mana: int = Field(
        default=DEFAULT_MAX_MANA,
        ge=0,
        description="The maximum mana.",
    )
    starting_rage: int = Field(
        default=0,
        ge=0,
        le=MAX_RAGE,
        description="The rage the hero starts the run with.",
    )
    starting_gold: int = Field(
        default=0,
        description="The gold the hero starts the run with.",
    )
    starting_items: list[Item] = Field(
        default_factory=list,
        description="The items the hero starts the run with, in order.",
    )
    post_special_stun_chance: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Percent chance, rolled by the battle after the special "
        "move, to stun the enemy for its next turn.",
    )

    def __hash__(self) -> int:
        return hash(self.name)
