"""
Resolution of the actions queued during a round.

The resolver drains the action queue in order, checks that the participants
of each action are still in the roster, applies its effect and reports the
outcome through the output sink.
"""

from catchery import log_debug

from skirmish.combat.actions import Action, ActionQueue
from skirmish.combat.roster import Handle, Roster
from skirmish.core.constants import ActionKind
from skirmish.interfaces import OutputSink


class CombatResolver:
    """Applies queued actions to the roster and reports the results."""

    def __init__(self, roster: Roster, sink: OutputSink) -> None:
        self.roster = roster
        self.sink = sink

    def resolve(self, queue: ActionQueue) -> int:
        """
        Resolves every action in the queue, leaving it empty.

        Args:
            queue (ActionQueue): The actions of the round, in acting order.

        Returns:
            int: The number of actions that were applied.

        """
        applied = 0
        for action in queue.drain():
            if self.resolve_action(action):
                applied += 1
        return applied

    def resolve_action(self, action: Action) -> bool:
        """
        Resolves a single action.

        Args:
            action (Action): The action to resolve.

        Returns:
            bool: True if the action was applied, False if it was skipped.

        """
        if action.kind == ActionKind.ATTACK:
            return self._resolve_attack(action)
        if action.kind == ActionKind.DEFEND:
            self.sink.emit(f"{self.roster.get(action.source).name} defends!")
            return True
        return False

    def kill(self, handle: Handle) -> bool:
        """
        Removes a defeated combatant from the roster and reports it.

        Args:
            handle (Handle): The combatant to remove.

        Returns:
            bool: True if the combatant was removed, False if it was already gone.

        """
        removed = self.roster.remove(handle)
        if removed is None:
            return False
        self.sink.emit(f"{removed.name} is slain!")
        return True

    def _resolve_attack(self, action: Action) -> bool:
        # Either participant may have been slain earlier in this round.
        if action.source not in self.roster or action.target not in self.roster:
            log_debug(
                "Skipping attack with a participant no longer in the roster",
                {
                    "source": self.roster.get(action.source).name,
                    "target": self.roster.get(action.target).name,
                    "context": "attack_resolution",
                },
            )
            return False
        source = self.roster.get(action.source)
        target = self.roster.get(action.target)
        damage = source.attack(target)
        self.sink.emit(f"{source.name} attacks {target.name} for {damage} damage!")
        if target.hp <= 0:
            self.kill(action.target)
        return True
