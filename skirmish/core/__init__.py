"""
Core system module for the Skirmish battle engine.

This module contains the fundamental components shared by the rest of the
package: constants, configuration, content loading, errors and console
utilities.
"""

from .config import BattleConfig, load_config
from .constants import (
    PLAYER_ID,
    ActionKind,
    BattleOutcome,
    BattleState,
    CharacterType,
    SpeedOrder,
)
from .error_handling import (
    ContentError,
    GameException,
    MissingPlayerError,
    RosterError,
)
from .utils import ccapture, cprint, crule, make_bar

__all__ = [
    # Import from config.py
    "BattleConfig",
    "load_config",
    # Import from constants.py
    "PLAYER_ID",
    "ActionKind",
    "BattleOutcome",
    "BattleState",
    "CharacterType",
    "SpeedOrder",
    # Import from error_handling.py
    "ContentError",
    "GameException",
    "MissingPlayerError",
    "RosterError",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
