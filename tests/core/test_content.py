"""
Tests for loading creatures from JSON files.
"""

import json
from pathlib import Path

import pytest

from skirmish.combat.creature import Creature
from skirmish.core.constants import CharacterType
from skirmish.core.content import creature_from_dict, load_creatures
from skirmish.core.error_handling import ContentError

BUNDLED_ROSTER = Path(__file__).parents[2] / "skirmish" / "data" / "roster.json"


def write_roster(tmp_path, data):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(data))
    return path


def test_count_repeats_an_entry(tmp_path):
    path = write_roster(
        tmp_path,
        [
            {"id": "player", "name": "Hero", "hp": 20, "speed": 4},
            {"name": "Goblin", "hp": 8, "speed": 2, "count": 3},
        ],
    )
    creatures = load_creatures(path)
    assert [c.name for c in creatures] == ["Hero", "Goblin", "Goblin", "Goblin"]
    assert creatures[0].char_type == CharacterType.PLAYER
    # Copies are distinct objects.
    assert creatures[1] is not creatures[2]
    assert creatures[1] != creatures[2]


def test_invalid_entries_are_skipped(tmp_path):
    path = write_roster(
        tmp_path,
        [
            {"id": "player", "name": "Hero", "hp": 20},
            {"name": "Nameless"},
            "not an entry",
            {"name": "", "hp": 3},
        ],
    )
    assert [c.name for c in load_creatures(path)] == ["Hero"]


@pytest.mark.parametrize("content", ["{oops", "{}", "[]"])
def test_malformed_files_raise(tmp_path, content):
    path = tmp_path / "roster.json"
    path.write_text(content)
    with pytest.raises(ContentError):
        load_creatures(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ContentError):
        load_creatures(tmp_path / "missing.json")


def test_bundled_roster_loads():
    creatures = load_creatures(BUNDLED_ROSTER)
    assert sum(c.char_type == CharacterType.PLAYER for c in creatures) == 1
    assert len(creatures) == 4


def test_creature_defaults_and_attack():
    creature = creature_from_dict({"name": "Bat", "hp": 4})
    assert creature is not None
    assert creature.hp_max == 4
    target = Creature(name="Wall", hp=10, defence=5)
    # Every hit deals at least one point.
    assert creature.attack(target) == 1
    assert target.hp == 9
    strong = Creature(name="Ogre", hp=10, strength=8)
    assert strong.attack(target) == 3
    assert target.hp == 6
    assert target.is_alive()
