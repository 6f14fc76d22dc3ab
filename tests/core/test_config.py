"""
Tests for the battle configuration.
"""

import json

import pytest

from skirmish.core.config import BattleConfig, load_config
from skirmish.core.constants import PLAYER_ID, SpeedOrder
from skirmish.core.error_handling import ContentError


def test_defaults():
    config = BattleConfig()
    assert config.player_id == PLAYER_ID
    assert config.speed_order == SpeedOrder.ASCENDING
    assert config.max_rounds is None
    assert config.menu_options == ["Attack", "Defend"]


def test_menu_needs_two_options():
    with pytest.raises(ValueError):
        BattleConfig(menu_options=["Attack"])


def test_max_rounds_must_be_positive():
    with pytest.raises(ValueError):
        BattleConfig(max_rounds=0)


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"speed_order": "descending", "max_rounds": 5}))
    config = load_config(path)
    assert config.speed_order == SpeedOrder.DESCENDING
    assert config.max_rounds == 5


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"max_rounds": -1}'])
def test_load_invalid_config(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    with pytest.raises(ContentError):
        load_config(path)


def test_load_missing_config(tmp_path):
    with pytest.raises(ContentError):
        load_config(tmp_path / "missing.json")
