"""
Battle orchestration.

A Battle ties the roster, the action selector and the resolver into the
round loop of a single encounter, and decides when the encounter is over.
"""

from collections.abc import Iterable

from catchery import log_debug

from skirmish.combat.actions import ActionQueue
from skirmish.combat.resolver import CombatResolver
from skirmish.combat.roster import Roster, disambiguate_names
from skirmish.combat.selector import ActionSelector
from skirmish.core.config import BattleConfig
from skirmish.core.constants import BattleOutcome, BattleState, SpeedOrder
from skirmish.core.error_handling import RosterError
from skirmish.interfaces import ChoiceProvider, Combatant, OutputSink
from skirmish.ui.output import ConsoleSink


class Battle:
    """Manages the flow of a single encounter.

    Each round the roster is sorted by speed, every live combatant chooses
    an action, and the actions are resolved in that order. The end of the
    encounter is only checked between rounds, so a round always completes.
    """

    def __init__(
        self,
        combatants: Iterable[Combatant],
        provider: ChoiceProvider | None = None,
        sink: OutputSink | None = None,
        config: BattleConfig | None = None,
    ) -> None:
        """Initialize the Battle and make the combatant names unique.

        Args:
            combatants (Iterable[Combatant]): The participants, exactly one of
                which must be the player.
            provider (ChoiceProvider | None): Source of the player's selections.
                Defaults to the interactive terminal prompt.
            sink (OutputSink | None): Receiver of the result lines. Defaults
                to the console.
            config (BattleConfig | None): Encounter parameters.

        Raises:
            RosterError: If the roster does not contain exactly one player.

        """
        self.config: BattleConfig = config or BattleConfig()
        combatants = list(combatants)
        players = [c for c in combatants if c.id == self.config.player_id]
        if len(players) != 1:
            raise RosterError(
                f"A battle needs exactly one player, found {len(players)}",
                {"player_id": self.config.player_id, "combatants": len(combatants)},
            )

        disambiguate_names(combatants, self.config.player_id)

        self.roster: Roster = Roster(combatants, self.config.player_id)
        self.sink: OutputSink = sink or ConsoleSink()
        self.selector: ActionSelector = ActionSelector(self.roster, self.config, provider)
        self.resolver: CombatResolver = CombatResolver(self.roster, self.sink)

        # Number of rounds played so far.
        self.round_number: int = 0

    @property
    def state(self) -> BattleState:
        return BattleState.CONCLUDED if self.is_over() else BattleState.IN_PROGRESS

    @property
    def outcome(self) -> BattleOutcome:
        """Returns how the encounter ended, or UNDECIDED while it runs."""
        if self.roster.find_player() is None:
            return BattleOutcome.DEFEAT
        if len(self.roster) <= 1:
            return BattleOutcome.VICTORY
        if self.is_over():
            return BattleOutcome.STALEMATE
        return BattleOutcome.UNDECIDED

    def is_over(self) -> bool:
        """Determines if the encounter has ended.

        Returns:
            bool: True if at most one combatant is left, the player has been
                removed, or the round limit has been reached.

        """
        if len(self.roster) <= 1:
            return True
        if self.roster.find_player() is None:
            return True
        max_rounds = self.config.max_rounds
        return max_rounds is not None and self.round_number >= max_rounds

    def run(self) -> BattleOutcome:
        """Plays rounds until the encounter is over.

        Returns:
            BattleOutcome: How the encounter ended.

        """
        while not self.is_over():
            self.next_round()
        log_debug(
            f"Battle concluded after {self.round_number} rounds: {self.outcome}",
            {"rounds": self.round_number, "survivors": len(self.roster)},
        )
        return self.outcome

    def next_round(self) -> int:
        """Plays a single round: schedule, collect, resolve.

        Returns:
            int: The number of actions applied, 0 if the battle is already over.

        """
        if self.is_over():
            log_debug("Battle is over, no round to play.")
            return 0
        self.schedule()
        queue = self.collect_actions()
        applied = self.resolver.resolve(queue)
        self.round_number += 1
        return applied

    def schedule(self) -> None:
        """Sorts the roster by speed to decide the acting order."""
        self.roster.sort_by_speed(
            descending=self.config.speed_order == SpeedOrder.DESCENDING
        )

    def collect_actions(self) -> ActionQueue:
        """Asks every live combatant for its action, in roster order.

        Returns:
            ActionQueue: One action per live combatant.

        """
        queue = ActionQueue()
        for handle in self.roster.handles():
            queue.push(self.selector.select(handle))
        return queue
