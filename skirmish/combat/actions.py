"""
Actions module for the battle engine.

Defines the action a combatant chooses for the current round and the FIFO
queue that holds one action per combatant until the round is resolved.
"""

from collections import deque
from collections.abc import Iterator

from pydantic import BaseModel, Field

from skirmish.core.constants import ActionKind


class Action(BaseModel):
    """A single combatant's intended effect for the current round."""

    kind: ActionKind = Field(description="What the source intends to do.")
    source: int = Field(description="Handle of the acting combatant.")
    target: int | None = Field(
        default=None,
        description="Handle of the combatant being acted upon (None when defending).",
    )

    def model_post_init(self, _: object) -> None:
        """Validates fields after model initialization."""
        if self.kind == ActionKind.ATTACK and self.target is None:
            raise ValueError("An attack action requires a target")
        if self.kind == ActionKind.DEFEND and self.target is not None:
            raise ValueError("A defend action carries no target")

    @classmethod
    def attack(cls, source: int, target: int) -> "Action":
        return cls(kind=ActionKind.ATTACK, source=source, target=target)

    @classmethod
    def defend(cls, source: int) -> "Action":
        return cls(kind=ActionKind.DEFEND, source=source)


class ActionQueue:
    """Strict first-in-first-out buffer of the actions of a round."""

    def __init__(self) -> None:
        self._actions: deque[Action] = deque()

    def __len__(self) -> int:
        return len(self._actions)

    def __bool__(self) -> bool:
        return bool(self._actions)

    def push(self, action: Action) -> None:
        """Adds an action at the back of the queue."""
        self._actions.append(action)

    def pop(self) -> Action:
        """Removes and returns the action at the front of the queue.

        Raises:
            IndexError: If the queue is empty.

        """
        return self._actions.popleft()

    def drain(self) -> Iterator[Action]:
        """Yields the actions in order, removing each one as it is taken."""
        while self._actions:
            yield self._actions.popleft()
