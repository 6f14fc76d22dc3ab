"""
Constants and enumerations for the battle engine.

Defines the identity of the player-controlled combatant, the default prompt
texts, and enumerations for character types, action kinds, turn ordering and
battle states.
"""

from enum import Enum

# Identity that distinguishes the player-controlled combatant from all others.
PLAYER_ID = "player"

# Default identity given to AI-controlled combatants.
CREATURE_ID = "creature"

# Texts of the two prompts shown to the player every round.
DEFAULT_MENU_PROMPT = "What will you do?"
DEFAULT_MENU_OPTIONS = ["Attack", "Defend"]
DEFAULT_TARGET_PROMPT = "Who?"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class CharacterType(NiceEnum):
    """Defines who controls a combatant."""

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

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies character type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class ActionKind(NiceEnum):
    """Defines what a combatant intends to do during a round."""

    ATTACK = "ATTACK"
    DEFEND = "DEFEND"


class SpeedOrder(NiceEnum):
    """Direction in which the roster is sorted by speed before each round."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class BattleState(NiceEnum):
    """States of the encounter state machine."""

    IN_PROGRESS = "IN_PROGRESS"
    CONCLUDED = "CONCLUDED"


class BattleOutcome(NiceEnum):
    """How an encounter ended, from the point of view of the player."""

    UNDECIDED = "UNDECIDED"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"
    STALEMATE = "STALEMATE"

    @property
    def color(self) -> str:
        """Returns the color string associated with this outcome."""
        return {
            BattleOutcome.VICTORY: "bold green",
            BattleOutcome.DEFEAT: "bold red",
            BattleOutcome.STALEMATE: "bold yellow",
        }.get(self, "dim white")
