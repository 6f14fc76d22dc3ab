"""
Tests for the command-line entry point.
"""

import json

from skirmish import main as cli
from skirmish.main import DEFAULT_ROSTER, main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.roster == DEFAULT_ROSTER
    assert args.config is None
    assert not args.verbose


def test_main_plays_a_battle(tmp_path, monkeypatch, scripted):
    roster = tmp_path / "roster.json"
    roster.write_text(
        json.dumps(
            [
                {"id": "player", "name": "Hero", "hp": 20, "speed": 5, "strength": 50},
                {"name": "Goblin", "hp": 10, "speed": 3, "count": 2},
            ]
        )
    )
    choices = scripted(1, 1, 1, 1)
    monkeypatch.setattr(cli, "cli_choice", choices)
    assert main(["--roster", str(roster)]) == 0
    # Two rounds, one goblin slain in each.
    assert [options for _, options in choices.asked] == [
        ["Attack", "Defend"],
        ["Goblin (0)", "Goblin (1)"],
        ["Attack", "Defend"],
        ["Goblin (1)"],
    ]


def test_main_reports_bad_roster(tmp_path):
    roster = tmp_path / "roster.json"
    roster.write_text("[]")
    assert main(["--roster", str(roster)]) == 1


def test_main_rejects_roster_without_player(tmp_path):
    roster = tmp_path / "roster.json"
    roster.write_text(json.dumps([{"name": "Goblin", "hp": 3}]))
    assert main(["--roster", str(roster)]) == 1


def test_main_prints_names_with_markup_literally(tmp_path, monkeypatch, scripted):
    roster = tmp_path / "roster.json"
    roster.write_text(
        json.dumps(
            [
                {"id": "player", "name": "[bold]Hero", "hp": 20, "speed": 5, "strength": 50},
                {"name": "Goblin [/]", "hp": 10, "speed": 3},
            ]
        )
    )
    choices = scripted(1, 1)
    monkeypatch.setattr(cli, "cli_choice", choices)
    assert main(["--roster", str(roster)]) == 0
    assert choices.asked[-1] == ("Who?", ["Goblin [/]"])


def test_main_uses_configured_player_id(tmp_path, monkeypatch, scripted):
    roster = tmp_path / "roster.json"
    roster.write_text(
        json.dumps(
            [
                {"id": "hero", "name": "Hero", "hp": 20, "speed": 5, "strength": 50},
                {"name": "Goblin", "hp": 10, "speed": 3},
            ]
        )
    )
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"player_id": "hero"}))
    choices = scripted(1, 1)
    monkeypatch.setattr(cli, "cli_choice", choices)
    assert main(["--roster", str(roster), "--config", str(config)]) == 0
    assert choices.asked[1] == ("Who?", ["Goblin"])


def test_main_reports_bad_config(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"max_rounds": 0}))
    assert main(["--config", str(config)]) == 1
