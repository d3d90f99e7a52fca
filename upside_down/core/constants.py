"""
Constants and enumerations for the game.

Defines the hero roles, enemy tiers, event types, battle actions and states,
plus the tuning constants that drive encounters, escapes and rewards.
"""

from enum import Enum

# === Encounters ===

# Upper bounds of the d100 bands used to pick the event of the turn.
EVENT_BATTLE_MAX = 40
EVENT_TREASURE_MAX = 65
EVENT_HEAL_MAX = 80
EVENT_TRAP_MAX = 90

# Upper bounds of the d100 bands used to pick the enemy of a battle.
SPAWN_WEAK_MAX = 40
SPAWN_MEDIUM_MAX = 70
SPAWN_STRONG_MAX = 95

# Once this many events have been generated, the boss is forced.
BOSS_TURN_THRESHOLD = 20

# === Combat ===

ESCAPE_CHANCE_BOSS = 20
ESCAPE_CHANCE_NORMAL = 70

ENEMY_PSYCHIC_CHANCE = 30
ENEMY_PSYCHIC_DAMAGE = 15

VICTORY_GOLD_BOSS = 100
VICTORY_GOLD_NORMAL = 10
VICTORY_HEAL_DIVISOR = 5
VICTORY_POTION_CHANCE = 40

# === Items ===

HEALING_POTION = "healing_potion"
MANA_POTION = "mana_potion"
CURSED_SWORD = "cursed_sword_plus5"
LOOT_POTION_EFFECT = 30

# === Player resources ===

MAX_RAGE = 100
DEFAULT_MAX_MANA = 100


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class CharacterType(NiceEnum):
    """Defines the type of character in the game."""

    PLAYER = "PLAYER"
    ENEMY = "ENEMY"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this character type."""
        return {
            CharacterType.PLAYER: "👤",
            CharacterType.ENEMY: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this character type."""
        return {
            CharacterType.PLAYER: "bold blue",
            CharacterType.ENEMY: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies character type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class HeroRole(NiceEnum):
    """Defines the closed set of hero roles, each with its own special move."""

    TANK = "TANK"
    BURST = "BURST"
    CRIT = "CRIT"
    SUPPORT = "SUPPORT"
    SPEED = "SPEED"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this role's special move."""
        return {
            HeroRole.TANK: "🔮",
            HeroRole.BURST: "🔥",
            HeroRole.CRIT: "⚔️",
            HeroRole.SUPPORT: "🎵",
            HeroRole.SPEED: "⚡",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this role."""
        return {
            HeroRole.TANK: "bold cyan",
            HeroRole.BURST: "bold red",
            HeroRole.CRIT: "bold yellow",
            HeroRole.SUPPORT: "bold magenta",
            HeroRole.SPEED: "bold green",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies role color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class EnemyTier(NiceEnum):
    """Defines how dangerous an enemy is."""

    WEAK = "WEAK"
    MEDIUM = "MEDIUM"
    STRONG = "STRONG"
    BOSS = "BOSS"


class ItemType(NiceEnum):
    """Defines the categories of items. Only potions can be used."""

    POTION = "potion"
    WEAPON = "weapon"
    ARMOR = "armor"


class EventType(NiceEnum):
    """Defines the random event that occurs on a turn."""

    BATTLE = "BATTLE"
    TREASURE = "TREASURE"
    HEAL = "HEAL"
    TRAP = "TRAP"
    STORY = "STORY"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this event type."""
        return {
            EventType.BATTLE: ":crossed_swords:",
            EventType.TREASURE: "💎",
            EventType.HEAL: "⛲",
            EventType.TRAP: "⚠️",
            EventType.STORY: "📖",
        }.get(self, "❔")


class BattleAction(NiceEnum):
    """Defines the options available to the player on their turn."""

    ATTACK = "ATTACK"
    SPECIAL = "SPECIAL"
    ITEM = "ITEM"
    RUN = "RUN"
    INSPECT = "INSPECT"


class BattleState(NiceEnum):
    """Defines the states of a battle."""

    PLAYER_TURN = "PLAYER_TURN"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"
    FLED = "FLED"

    @property
    def is_terminal(self) -> bool:
        return self != BattleState.PLAYER_TURN

    @property
    def color(self) -> str:
        """Returns the color string associated with this battle state."""
        return {
            BattleState.VICTORY: "bold green",
            BattleState.DEFEAT: "bold red",
            BattleState.FLED: "bold yellow",
        }.get(self, "white")


class NarrativeCue(NiceEnum):
    """
    Abstract narrative beats emitted by the engine. The user interface decides
    how to turn each of them into prose.
    """

    # Enemy spawns.
    ENEMY_WEAK = "ENEMY_WEAK"
    ENEMY_MEDIUM = "ENEMY_MEDIUM"
    ENEMY_STRONG = "ENEMY_STRONG"
    BOSS_EARLY = "BOSS_EARLY"
    BOSS_EMERGES = "BOSS_EMERGES"
    # Battle.
    BATTLE_START = "BATTLE_START"
    STUNNED = "STUNNED"
    STUN_SKIP = "STUN_SKIP"
    PSYCHIC_BLAST = "PSYCHIC_BLAST"
    CRITICAL_HIT = "CRITICAL_HIT"
    INSUFFICIENT_MANA = "INSUFFICIENT_MANA"
    ESCAPED = "ESCAPED"
    ESCAPE_FAILED = "ESCAPE_FAILED"
    VICTORY = "VICTORY"
    POTION_DROP = "POTION_DROP"
    DEFEAT = "DEFEAT"
    # Treasure, fountain and trap.
    TREASURE_FOUND = "TREASURE_FOUND"
    FOUNTAIN = "FOUNTAIN"
    TRAP_DODGED = "TRAP_DODGED"
    TRAP_HIT = "TRAP_HIT"
    TRAP_HEAVY = "TRAP_HEAVY"
    # Story branches.
    TRAVELER = "TRAVELER"
    TRAVELER_HELPED = "TRAVELER_HELPED"
    TRAVELER_REFUSED = "TRAVELER_REFUSED"
    WOUNDED_WOLF = "WOUNDED_WOLF"
    WOLF_HEALED = "WOLF_HEALED"
    SHRINE = "SHRINE"
    SHRINE_BLESSING = "SHRINE_BLESSING"
    CURSED_SWORD = "CURSED_SWORD"
    CURSED_SWORD_TAKEN = "CURSED_SWORD_TAKEN"
    NOTHING_HAPPENS = "NOTHING_HAPPENS"
    # Battle menu.
    INVENTORY_EMPTY = "INVENTORY_EMPTY"
    ITEM_CANCELLED = "ITEM_CANCELLED"
    INSPECT = "INSPECT"
