"""
Capabilities the battle engine consumes from its collaborators.

The engine never depends on a concrete stat model, input device or output
stream: it talks to combatants, choice providers and output sinks through
the protocols below.
"""

from typing import Protocol


class Combatant(Protocol):
    """A participant in a battle with health and speed attributes."""

    id: str
    name: str
    hp: int
    speed: int

    def attack(self, target: "Combatant") -> int:
        """Attacks the target, lowering its hp.

        Args:
            target (Combatant): The combatant being attacked.

        Returns:
            int: The amount of damage dealt.

        """
        ...


class ChoiceProvider(Protocol):
    """Synchronous source of menu selections."""

    def __call__(self, prompt: str, options: list[str]) -> int:
        """Blocks until a selection is made.

        Args:
            prompt (str): The question to show.
            options (list[str]): The labels of the options, in display order.

        Returns:
            int: The 1-based index of the chosen option.

        """
        ...


class OutputSink(Protocol):
    """Receives the human-readable result lines of an encounter."""

    def emit(self, line: str) -> None: ...
