"""
Tests for the selection of each combatant's action.
"""

import pytest

from skirmish.combat.roster import Roster
from skirmish.combat.selector import ActionSelector
from skirmish.core.config import BattleConfig
from skirmish.core.constants import ActionKind
from skirmish.core.error_handling import MissingPlayerError


@pytest.fixture
def roster(make_player, make_enemy):
    return Roster([make_player(), make_enemy("Goblin"), make_enemy("Slime")])


def test_player_attack_maps_target_index(roster, scripted):
    choices = scripted(1, 2)
    action = ActionSelector(roster, BattleConfig(), choices).select(0)
    assert action.kind == ActionKind.ATTACK
    assert action.source == 0
    assert action.target == 2
    assert choices.asked == [
        ("What will you do?", ["Attack", "Defend"]),
        ("Who?", ["Goblin", "Slime"]),
    ]


def test_player_defend_has_no_target(roster, scripted):
    choices = scripted(2)
    action = ActionSelector(roster, BattleConfig(), choices).select(0)
    assert action.kind == ActionKind.DEFEND
    assert action.target is None
    assert len(choices.asked) == 1


def test_unmapped_selection_is_treated_as_attack(roster, scripted):
    action = ActionSelector(roster, BattleConfig(), scripted(7, 1)).select(0)
    assert action.kind == ActionKind.ATTACK
    assert action.target == 1


def test_target_list_is_rebuilt_each_time(roster, scripted):
    choices = scripted(1, 1, 1, 1)
    selector = ActionSelector(roster, BattleConfig(), choices)
    selector.select(0)
    roster.remove(1)
    action = selector.select(0)
    assert action.target == 2
    assert choices.asked[-1] == ("Who?", ["Slime"])


def test_out_of_range_target_falls_back_to_first(roster, scripted):
    action = ActionSelector(roster, BattleConfig(), scripted(1, 9)).select(0)
    assert action.target == 1


def test_custom_prompts_are_used(roster, scripted):
    config = BattleConfig(
        menu_prompt="Your move?",
        menu_options=["Strike", "Guard"],
        target_prompt="Whom?",
    )
    choices = scripted(1, 1)
    ActionSelector(roster, config, choices).select(0)
    assert choices.asked[0] == ("Your move?", ["Strike", "Guard"])
    assert choices.asked[1][0] == "Whom?"


def test_npc_always_attacks_player(make_enemy, make_player, scripted):
    player = make_player()
    roster = Roster([make_enemy(), make_enemy(), player])
    selector = ActionSelector(roster, BattleConfig(), scripted())
    for handle in (0, 1):
        action = selector.select(handle)
        assert action.kind == ActionKind.ATTACK
        assert roster.get(action.target) is player


def test_npc_without_player_raises(roster, scripted):
    roster.remove(0)
    with pytest.raises(MissingPlayerError):
        ActionSelector(roster, BattleConfig(), scripted()).select(1)
