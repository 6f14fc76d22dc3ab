"""
Action selection for the combatants of a round.

The player chooses through two prompts (what to do, then whom to attack);
every other combatant follows a fixed policy and attacks the player.
"""

from catchery import log_debug, log_warning

from skirmish.combat.actions import Action
from skirmish.combat.roster import Handle, Roster
from skirmish.core.config import BattleConfig
from skirmish.core.error_handling import MissingPlayerError
from skirmish.interfaces import ChoiceProvider
from skirmish.ui.prompt import ChoicePrompt

# Entries of the main menu.
ATTACK_CHOICE = 1
DEFEND_CHOICE = 2


class ActionSelector:
    """Produces the intended action of each live combatant."""

    def __init__(
        self,
        roster: Roster,
        config: BattleConfig,
        provider: ChoiceProvider | None = None,
    ) -> None:
        """
        Args:
            roster (Roster): The live roster of the encounter.
            config (BattleConfig): The prompt texts and player identity.
            provider (ChoiceProvider | None): Where the player's selections
                come from. Defaults to the interactive terminal prompt.

        """
        self.roster = roster
        self.config = config
        self.provider = provider
        self.menu = ChoicePrompt(config.menu_prompt, config.menu_options, provider)

    def select(self, handle: Handle) -> Action:
        """Returns the action of the combatant behind the handle."""
        if self.roster.is_player(handle):
            return self.ask_player(handle)
        return self.choose_npc_action(handle)

    def ask_player(self, handle: Handle) -> Action:
        """
        Asks the player what to do, and whom to attack when attacking.

        Any selection other than Defend is treated as Attack.

        Args:
            handle (Handle): The handle of the player.

        Returns:
            Action: The player's action.

        """
        if self.menu.activate() == DEFEND_CHOICE:
            return Action.defend(handle)
        target = self.ask_player_target()
        if target is None:
            log_debug(
                "No target available for the player, defending instead",
                {"player": self.roster.get(handle).name, "context": "target_selection"},
            )
            return Action.defend(handle)
        return Action.attack(handle, target)

    def ask_player_target(self) -> Handle | None:
        """
        Asks the player to pick one of the live opponents.

        The list is rebuilt every time, since earlier actions may have
        removed combatants.

        Returns:
            Handle | None: The chosen opponent, or None if there is none.

        """
        targets = self.roster.opponents()
        if not targets:
            return None
        selection = ChoicePrompt(self.config.target_prompt, [], self.provider)
        for target in targets:
            selection.add_choice(self.roster.get(target).name)
        index = selection.activate()
        if not 1 <= index <= len(targets):
            log_warning(
                f"Target selection {index} out of range, using the first target",
                {"selection": index, "targets": len(targets), "context": "target_selection"},
            )
            index = 1
        return targets[index - 1]

    def choose_npc_action(self, handle: Handle) -> Action:
        """
        Picks the action of an AI-controlled combatant: attack the player.

        Args:
            handle (Handle): The handle of the combatant.

        Raises:
            MissingPlayerError: If the player is not in the roster.

        Returns:
            Action: An attack against the player.

        """
        player = self.roster.find_player()
        if player is None:
            raise MissingPlayerError(
                f"{self.roster.get(handle).name} has no player to attack",
                {"actor": self.roster.get(handle).name},
            )
        return Action.attack(handle, player)
