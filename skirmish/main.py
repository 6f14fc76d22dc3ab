"""
Main entry point for the Skirmish battle engine.

Loads the participants of an encounter from a JSON file, then lets the
player fight it out from the terminal, one round at a time.
"""

import argparse
import logging
from pathlib import Path

from catchery import log_error
from rich.markup import escape
from rich.table import Table

from skirmish.combat.battle import Battle
from skirmish.core.config import BattleConfig, load_config
from skirmish.core.constants import BattleOutcome
from skirmish.core.content import load_creatures
from skirmish.core.error_handling import GameException
from skirmish.core.logging import setup_logging
from skirmish.core.utils import cprint, crule, make_bar
from skirmish.ui.output import ConsoleSink
from skirmish.ui.prompt import cli_choice

# Roster shipped with the package.
DEFAULT_ROSTER = Path(__file__).parent / "data" / "roster.json"


def print_roster(battle: Battle) -> None:
    """Prints the participants of the encounter as a table."""
    table = Table(title="Combatants", pad_edge=False)
    table.add_column("", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("HP", justify="right")
    table.add_column("Speed", justify="right")
    table.add_column("Str", justify="right")
    table.add_column("Def", justify="right")
    # Arena positions are the handles.
    for handle, creature in enumerate(battle.roster.members):
        char_type = battle.roster.char_type(handle)
        table.add_row(
            char_type.emoji,
            char_type.colorize(escape(creature.name)),
            f"{creature.hp:>3}/{getattr(creature, 'hp_max', creature.hp):<3}",
            str(creature.speed),
            str(getattr(creature, "strength", "-")),
            str(getattr(creature, "defence", "-")),
        )
    cprint(table)


def print_final_report(battle: Battle) -> None:
    """Prints the survivors, the fallen and the outcome of the battle."""
    crule("📊  Final Battle Report", style="bold blue")
    for creature in battle.roster:
        bar = make_bar(creature.hp, getattr(creature, "hp_max", creature.hp), color="green")
        name = escape(f"{creature.name:<16}")
        cprint(f"    {name} {bar} {max(creature.hp, 0)} HP", highlight=False)
    defeated = battle.roster.defeated()
    if defeated:
        cprint(
            f"[bold magenta]Defeated ({len(defeated)}):[/] "
            + escape(", ".join(d.name for d in defeated))
        )
    outcome = battle.outcome
    messages = {
        BattleOutcome.VICTORY: "All enemies defeated! You are victorious!",
        BattleOutcome.DEFEAT: "You have been defeated!",
        BattleOutcome.STALEMATE: f"No winner after {battle.round_number} rounds.",
    }
    cprint(f"[{outcome.color}]{messages.get(outcome, str(outcome))}[/]")
    cprint("")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="skirmish",
        description="Fight a turn-based encounter from the terminal.",
    )
    parser.add_argument(
        "--roster",
        type=Path,
        default=DEFAULT_ROSTER,
        help="JSON file listing the combatants (default: the bundled roster)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with the battle configuration",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show debug messages",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config) if args.config else BattleConfig()
        creatures = load_creatures(args.roster)
        battle = Battle(creatures, cli_choice, ConsoleSink(), config)
    except GameException as e:
        log_error(f"Cannot start the battle: {e.message}", e.context)
        return 1

    crule(":crossed_swords:  Combat Started", style="bold green")
    print_roster(battle)
    try:
        while not battle.is_over():
            crule(f"⏱ Round {battle.round_number + 1}", style="cyan")
            battle.next_round()
        print_final_report(battle)
        crule(":crossed_swords:  Combat Finished", style="bold green")
    except (KeyboardInterrupt, EOFError):
        cprint("")
        crule(":crossed_swords:  Combat Interrupted", style="bold red")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
