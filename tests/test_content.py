"""
Tests for the content repository and the bundled rosters.
"""

import json

import pytest

from upside_down.core.constants import EnemyTier, HeroRole
from upside_down.core.content import ContentRepository, _load_json_file


def test_repository_is_shared():
    assert ContentRepository() is ContentRepository()


def test_heroes_in_menu_order(repository):
    assert list(repository.heroes) == ["Wizard", "Sorcerer", "Knight", "Bard", "Zoomer"]
    assert [h.class_id for h in repository.heroes.values()] == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "name, role, stats",
    [
        ("Wizard", HeroRole.TANK, (120, 20, 15)),
        ("Sorcerer", HeroRole.BURST, (80, 25, 8)),
        ("Knight", HeroRole.CRIT, (90, 22, 10)),
        ("Bard", HeroRole.SUPPORT, (140, 28, 12)),
        ("Zoomer", HeroRole.SPEED, (100, 24, 9)),
    ],
)
def test_hero_stats(repository, name, role, stats):
    hero = repository.get_hero_class(name)
    assert hero.role == role
    assert (hero.max_health, hero.attack, hero.defense) == stats


def test_only_the_wizard_stuns(repository):
    stunners = [h.name for h in repository.heroes.values() if h.post_special_stun_chance]
    assert stunners == ["Wizard"]


def test_enemy_roster(repository):
    assert repository.get_enemy_by_tier(EnemyTier.WEAK).name == "Demobat"
    assert repository.get_enemy_by_tier(EnemyTier.MEDIUM).name == "Demodog"
    assert repository.get_enemy_by_tier(EnemyTier.STRONG).name == "Flayed One"
    boss = repository.get_boss()
    assert boss.name == "Mind Flayer"
    assert boss.is_boss
    assert (boss.max_health, boss.attack, boss.defense) == (250, 35, 18)


def test_unknown_lookups(repository):
    assert repository.get_hero_class("Necromancer") is None
    assert repository.get_hero_class_by_id(0) is None
    assert repository.get_enemy("Vecna") is None


def test_duplicate_heroes_rejected():
    hero = {
        "class_id": 1,
        "name": "Wizard",
        "role": "TANK",
        "max_health": 10,
        "attack": 1,
        "defense": 1,
    }
    with pytest.raises(ValueError):
        ContentRepository._load_heroes([hero, dict(hero, class_id=2)])
    with pytest.raises(ValueError):
        ContentRepository._load_heroes([hero, dict(hero, name="Warlock")])


def test_enemy_roster_needs_every_tier():
    with pytest.raises(ValueError):
        ContentRepository._load_enemies(
            [{"name": "Demobat", "tier": "WEAK", "max_health": 25, "attack": 12, "defense": 4}]
        )


def test_missing_file(tmp_path):
    with pytest.raises(ValueError):
        _load_json_file(tmp_path / "heroes.json", ContentRepository._load_heroes, "heroes")


def test_malformed_file(tmp_path):
    path = tmp_path / "heroes.json"
    path.write_text(json.dumps({"name": "Wizard"}), encoding="utf-8")
    with pytest.raises(ValueError):
        _load_json_file(path, ContentRepository._load_heroes, "heroes")
