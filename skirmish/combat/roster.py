"""
Roster module for the battle engine.

The roster owns the collection of live combatants of an encounter. It keeps
every combatant in an arena and refers to them through integer handles, so
that membership and removal are keyed on identity rather than on display
names, and removing a combatant is O(1).
"""

from collections import Counter
from collections.abc import Iterable, Iterator

from catchery import log_debug

from skirmish.core.constants import PLAYER_ID, CharacterType
from skirmish.interfaces import Combatant

Handle = int


def disambiguate_names(combatants: Iterable[Combatant], player_id: str = PLAYER_ID) -> None:
    """
    Ensure duplicate combatant names are unique by appending a counter.

    Only non-player combatants are counted when looking for collisions, but
    the rewrite pass covers the whole list, so a player whose name matches a
    colliding name is suffixed as well. Names occurring once are unchanged.
    A suffix already carried by another combatant is skipped.

    Args:
        combatants (Iterable[Combatant]): Combatants to rename, in roster order.
        player_id (str): Identity of the player-controlled combatant.

    Example:
        Input: ["Goblin", "Goblin", "Slime"]
        Output: ["Goblin (0)", "Goblin (1)", "Slime"]

    """
    combatants = list(combatants)
    # Count how many times each base name appears among the non-players.
    name_counts = Counter(c.name for c in combatants if c.id != player_id)
    # Next suffix to try for each base name.
    seen: Counter[str] = Counter()
    taken = {c.name for c in combatants}
    for combatant in combatants:
        base = combatant.name
        if name_counts[base] > 1:
            index = seen[base]
            # Skip suffixes that another combatant already carries.
            while f"{base} ({index})" in taken:
                index += 1
            combatant.name = f"{base} ({index})"
            taken.add(combatant.name)
            seen[base] = index + 1


class Roster:
    """The ordered collection of live combatants of an encounter.

    Attributes:
        player_id (str):
            Identity of the player-controlled combatant.

    """

    def __init__(self, combatants: Iterable[Combatant], player_id: str = PLAYER_ID) -> None:
        """
        Args:
            combatants (Iterable[Combatant]): Combatants in insertion order.
            player_id (str): Identity of the player-controlled combatant.

        """
        self.player_id: str = player_id
        # Every combatant that ever took part in the encounter.
        self._arena: list[Combatant] = list(combatants)
        # Live handles; dict keys keep their order and allow O(1) removal.
        self._live: dict[Handle, None] = dict.fromkeys(range(len(self._arena)))

    def __len__(self) -> int:
        return len(self._live)

    def __contains__(self, handle: object) -> bool:
        return handle in self._live

    def __iter__(self) -> Iterator[Combatant]:
        return (self._arena[handle] for handle in self._live)

    def handles(self) -> list[Handle]:
        """Returns a snapshot of the live handles, in roster order."""
        return list(self._live)

    def get(self, handle: Handle) -> Combatant:
        """Returns the combatant behind a handle, whether it is alive or not."""
        return self._arena[handle]

    def handle_of(self, combatant: Combatant) -> Handle | None:
        """Returns the live handle of a combatant, compared by identity."""
        for handle in self._live:
            if self._arena[handle] is combatant:
                return handle
        return None

    @property
    def members(self) -> list[Combatant]:
        """Returns every combatant that took part in the encounter."""
        return list(self._arena)

    def is_player(self, handle: Handle) -> bool:
        return self._arena[handle].id == self.player_id

    def char_type(self, handle: Handle) -> CharacterType:
        """Returns who controls the combatant behind a handle."""
        return CharacterType.PLAYER if self.is_player(handle) else CharacterType.ENEMY

    def find_player(self) -> Handle | None:
        """Returns the handle of the live player-controlled combatant, if any."""
        for handle in self._live:
            if self.is_player(handle):
                return handle
        return None

    def opponents(self) -> list[Handle]:
        """Returns the live non-player handles, in roster order."""
        return [handle for handle in self._live if not self.is_player(handle)]

    def defeated(self) -> list[Combatant]:
        """Returns the combatants removed from the roster, in insertion order."""
        return [c for h, c in enumerate(self._arena) if h not in self._live]

    def sort_by_speed(self, descending: bool = False) -> None:
        """
        Re-orders the live combatants by speed.

        The sort is stable: combatants with the same speed keep the order
        they had in the previous arrangement.

        Args:
            descending (bool): Put the fastest combatants first. Defaults to False.

        """
        ordered = sorted(
            self._live,
            key=lambda handle: self._arena[handle].speed,
            reverse=descending,
        )
        # sorted() with reverse=True is still stable for equal keys.
        self._live = dict.fromkeys(ordered)

    def remove(self, handle: Handle) -> Combatant | None:
        """
        Removes a combatant from the live roster.

        Removing a combatant that is no longer in the roster does nothing.

        Args:
            handle (Handle): The handle of the combatant to remove.

        Returns:
            Combatant | None: The removed combatant, or None if it was absent.

        """
        if handle not in self._live:
            log_debug(
                "Ignoring removal of a combatant that is not in the roster",
                {"handle": handle, "context": "roster_removal"},
            )
            return None
        del self._live[handle]
        return self._arena[handle]
