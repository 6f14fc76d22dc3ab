"""
Creature module for the battle engine.

Defines the stat model used by the command-line game: a creature with
health, speed, strength and defence, whose attack deals a flat amount of
damage reduced by the target's defence.
"""

from typing import Any

from pydantic import BaseModel, Field

from skirmish.core.constants import CREATURE_ID, PLAYER_ID, CharacterType


class Creature(BaseModel):
    """A combatant backed by a handful of integer stats.

    Attributes:
        id (str):
            Identity of the creature, equal to PLAYER_ID for the player.
        name (str):
            Display name, rewritten by the battle when names collide.
        hp (int):
            Current health; the creature is defeated at zero or below.
        hp_max (int):
            Maximum health, used for display. Defaults to the starting hp.
        speed (int):
            Determines the order in which creatures act.
        strength (int):
            Raw damage of an attack.
        defence (int):
            Damage subtracted from every attack received.

    """

    id: str = Field(
        default=CREATURE_ID,
        description="Identity of the creature.",
    )
    name: str = Field(description="Display name of the creature.")
    hp: int = Field(description="Current health of the creature.")
    hp_max: int = Field(
        default=0,
        description="Maximum health of the creature (0: same as the starting hp).",
    )
    speed: int = Field(default=0, description="Speed of the creature.")
    strength: int = Field(default=1, ge=0, description="Raw damage of an attack.")
    defence: int = Field(default=0, ge=0, description="Damage absorbed per hit.")

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.name:
            raise ValueError("name must be a non-empty string")
        if self.hp_max <= 0:
            self.hp_max = max(self.hp, 1)

    # Creatures are compared by identity inside the roster, never by value.
    __hash__ = object.__hash__

    def __eq__(self, other: object) -> bool:
        return self is other

    @property
    def char_type(self) -> CharacterType:
        """Returns who controls this creature."""
        return CharacterType.PLAYER if self.id == PLAYER_ID else CharacterType.ENEMY

    def is_alive(self) -> bool:
        """
        Checks if the creature is alive (hp > 0).

        Returns:
            bool: True if the creature is alive, False otherwise.

        """
        return self.hp > 0

    def attack(self, target: Any) -> int:
        """
        Attacks the target, lowering its health.

        Every hit deals at least one point of damage, so that an encounter
        always makes progress.

        Args:
            target (Any): The combatant being attacked.

        Returns:
            int: The amount of damage dealt.

        """
        damage = max(1, self.strength - getattr(target, "defence", 0))
        target.hp -= damage
        return damage
