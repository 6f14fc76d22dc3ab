"""
Exception hierarchy for the battle engine.

Anomalies that are expected during a round (stale actions, vacuous removals,
unmapped menu selections) are absorbed where they happen and never raised.
The exceptions below signal broken preconditions: a roster that cannot form
an encounter, a lookup that the encounter invariants rule out, or content
files that cannot be read.
"""

from typing import Any


class GameException(Exception):
    """Base class for every error raised by the battle engine."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """
        Args:
            message (str): Human readable description of the error.
            context (dict[str, Any] | None): Optional values that help diagnose it.

        """
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class RosterError(GameException):
    """The roster given to a battle does not contain exactly one player."""


class MissingPlayerError(GameException):
    """An AI combatant looked for the player, but the player is not in the roster."""


class ContentError(GameException, ValueError):
    """A roster or configuration file could not be loaded."""
