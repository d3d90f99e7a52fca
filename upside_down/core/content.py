"""
Content repository for the game.

Loads the hero classes and the enemy roster from the JSON files bundled with
the package, and gives fast by-name (and by-menu-number) access to them.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_critical, log_debug, log_warning

from upside_down.character.character_class import HeroClass
from upside_down.character.enemy_template import EnemyTemplate
from upside_down.core.constants import EnemyTier, HeroRole
from upside_down.core.utils import Singleton

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ContentRepository(metaclass=Singleton):
    """
    One-stop registry for every game asset that needs fast by-name access.

    Attributes:
        heroes (dict[str, HeroClass]):
            The playable hero classes, by name, in menu order.
        enemies (dict[str, EnemyTemplate]):
            The enemy roster, by name.

    """

    heroes: dict[str, HeroClass]
    enemies: dict[str, EnemyTemplate]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing data files to load. The first
                instantiation falls back to the bundled data directory.

        """
        if data_dir:
            self.reload(data_dir)
        elif not hasattr(self, "loaded"):
            self.reload(DEFAULT_DATA_DIR)

    def reload(self, root: Path) -> None:
        """
        (Re)load all JSON assets from disk.

        Args:
            root (Path):
                The directory containing data files to load.

        """
        self.heroes = _load_json_file(
            root / "heroes.json",
            self._load_heroes,
            "hero classes",
        )
        self.enemies = _load_json_file(
            root / "enemies.json",
            self._load_enemies,
            "enemies",
        )
        self.loaded = True

    def get_hero_class(self, name: str) -> HeroClass | None:
        """Get a hero class by name, or None if not found."""
        hero_class = self.heroes.get(name)
        if hero_class is None:
            log_warning(
                f"Hero class '{name}' not found in ContentRepository.",
                {"name": name, "available": list(self.heroes.keys())},
            )
        return hero_class

    def get_hero_class_by_id(self, class_id: int) -> HeroClass | None:
        """Get a hero class by its menu number, or None if not found."""
        for hero_class in self.heroes.values():
            if hero_class.class_id == class_id:
                return hero_class
        return None

    def get_hero_class_by_role(self, role: HeroRole) -> HeroClass | None:
        """Get the hero class playing the given role, or None if not found."""
        for hero_class in self.heroes.values():
            if hero_class.role == role:
                return hero_class
        return None

    def get_enemy(self, name: str) -> EnemyTemplate | None:
        """Get an enemy template by name, or None if not found."""
        return self.enemies.get(name)

    def get_enemy_by_tier(self, tier: EnemyTier) -> EnemyTemplate:
        """
        Get the enemy template of the given tier.

        Raises:
            KeyError: If the roster has no enemy of that tier.

        """
        for template in self.enemies.values():
            if template.tier == tier:
                return template
        raise KeyError(f"No enemy of tier {tier} in the roster.")

    def get_boss(self) -> EnemyTemplate:
        """Get the final boss template."""
        return self.get_enemy_by_tier(EnemyTier.BOSS)

    @staticmethod
    def _load_heroes(data: list[dict]) -> dict[str, HeroClass]:
        """
        Load hero classes from JSON data.

        Args:
            data (list[dict]): List of hero class data dictionaries.

        Returns:
            dict[str, HeroClass]: Dictionary mapping class names to HeroClass objects.

        Raises:
            ValueError: If duplicate class names or menu numbers are found.

        """
        heroes: dict[str, HeroClass] = {}
        for hero_data in data:
            hero_class = HeroClass(**hero_data)
            if hero_class.name in heroes:
                raise ValueError(f"Duplicate hero class name: {hero_class.name}")
            if any(h.class_id == hero_class.class_id for h in heroes.values()):
                raise ValueError(f"Duplicate hero class id: {hero_class.class_id}")
            heroes[hero_class.name] = hero_class
        return dict(sorted(heroes.items(), key=lambda kv: kv[1].class_id))

    @staticmethod
    def _load_enemies(data: list[dict]) -> dict[str, EnemyTemplate]:
        """
        Load enemy templates from JSON data.

        Args:
            data (list[dict]): List of enemy data dictionaries.

        Returns:
            dict[str, EnemyTemplate]: Dictionary mapping names to EnemyTemplate objects.

        Raises:
            ValueError: If duplicate names are found, or a tier is missing.

        """
        enemies: dict[str, EnemyTemplate] = {}
        for enemy_data in data:
            template = EnemyTemplate(**enemy_data)
            if template.name in enemies:
                raise ValueError(f"Duplicate enemy name: {template.name}")
            enemies[template.name] = template
        missing = set(EnemyTier) - {t.tier for t in enemies.values()}
        if missing:
            raise ValueError(
                f"Enemy roster is missing tiers: {sorted(str(t) for t in missing)}"
            )
        return enemies


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """Helper to load and validate JSON files"""
    try:
        log_debug(
            f"Loading {description} using {loader_func.__name__}...",
            {"file": str(filepath)},
        )
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        log_critical(
            f"Failed to load {description}",
            {"file": str(filepath), "error": str(e)},
        )
        raise ValueError(f"File {filepath} raised an error: {e}") from e
