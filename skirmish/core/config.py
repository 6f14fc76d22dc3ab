"""
Battle configuration.

Holds the tunable parameters of an encounter: who the player is, the
direction of the speed ordering, an optional round limit, and the texts of
the player's prompts. Configurations can be loaded from a JSON object.
"""

import json
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field, ValidationError

from skirmish.core.constants import (
    DEFAULT_MENU_OPTIONS,
    DEFAULT_MENU_PROMPT,
    DEFAULT_TARGET_PROMPT,
    PLAYER_ID,
    SpeedOrder,
)
from skirmish.core.error_handling import ContentError


class BattleConfig(BaseModel):
    """Parameters that shape a single encounter."""

    player_id: str = Field(
        default=PLAYER_ID,
        description="Identity of the player-controlled combatant.",
    )
    speed_order: SpeedOrder = Field(
        default=SpeedOrder.ASCENDING,
        description="Direction of the stable speed sort done before each round.",
    )
    max_rounds: int | None = Field(
        default=None,
        ge=1,
        description="Rounds after which the encounter stops undecided (None: no limit).",
    )
    menu_prompt: str = Field(
        default=DEFAULT_MENU_PROMPT,
        description="Question shown above the Attack/Defend menu.",
    )
    menu_options: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MENU_OPTIONS),
        description="Labels of the attack and defend entries, in this order.",
    )
    target_prompt: str = Field(
        default=DEFAULT_TARGET_PROMPT,
        description="Question shown above the list of targets.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.player_id:
            raise ValueError("player_id must be a non-empty string")
        if len(self.menu_options) != 2:
            raise ValueError("menu_options must contain exactly two labels")


def load_config(file_path: Path) -> BattleConfig:
    """
    Loads a battle configuration from a JSON file.

    Args:
        file_path (Path): The path to the JSON file containing a single object.

    Raises:
        ContentError: If the file is missing, is not valid JSON, or does not
            describe a valid configuration.

    Returns:
        BattleConfig: The loaded configuration.

    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        return BattleConfig.model_validate(data)
    except (FileNotFoundError, json.JSONDecodeError, ValidationError, ValueError) as e:
        log_warning(
            f"Failed to load configuration from {file_path}: {e}",
            {"file_path": str(file_path), "context": "config_loading"},
        )
        raise ContentError(
            f"File {file_path} raised an error: {e}",
            {"file_path": str(file_path)},
        ) from e
