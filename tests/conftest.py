"""
Shared fixtures for the battle engine tests.
"""

import pytest

from skirmish.combat.creature import Creature
from skirmish.core.constants import PLAYER_ID
from skirmish.ui.output import RecordingSink


class ScriptedChoices:
    """Choice provider that answers from a fixed list of selections."""

    def __init__(self, *selections: int) -> None:
        self.selections = list(selections)
        self.asked: list[tuple[str, list[str]]] = []

    def __call__(self, prompt: str, options: list[str]) -> int:
        self.asked.append((prompt, list(options)))
        if not self.selections:
            raise AssertionError(f"Unexpected prompt: {prompt} {options}")
        return self.selections.pop(0)


@pytest.fixture
def scripted():
    return ScriptedChoices


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_player():
    def _make(name="Player", hp=20, speed=5, strength=10, defence=0):
        return Creature(
            id=PLAYER_ID,
            name=name,
            hp=hp,
            speed=speed,
            strength=strength,
            defence=defence,
        )

    return _make


@pytest.fixture
def make_enemy():
    def _make(name="Goblin", hp=10, speed=3, strength=1, defence=0):
        return Creature(
            name=name,
            hp=hp,
            speed=speed,
            strength=strength,
            defence=defence,
        )

    return _make
