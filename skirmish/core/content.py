"""
Content loading for the battle engine.

Reads the participants of an encounter from a JSON list of creature
descriptions. An entry may carry a "count" field to add several copies of
the same creature, which the battle then tells apart by renaming them.
"""

import json
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import ValidationError

from skirmish.combat.creature import Creature
from skirmish.core.error_handling import ContentError


def creature_from_dict(data: dict[str, Any]) -> Creature | None:
    """
    Builds a creature from its JSON description.

    Args:
        data (dict[str, Any]): The creature fields; "count" is ignored here.

    Returns:
        Creature | None: The creature, or None if the description is invalid.

    """
    fields = {key: value for key, value in data.items() if key != "count"}
    try:
        return Creature.model_validate(fields)
    except (ValidationError, ValueError) as e:
        log_warning(
            f"Skipping invalid creature entry: {e}",
            {"entry": fields.get("name", "<unnamed>"), "context": "creature_loading"},
        )
        return None


def load_creatures(file_path: Path) -> list[Creature]:
    """
    Loads the participants of an encounter from a JSON file.

    Args:
        file_path (Path):
            The path to the JSON file containing a list of creatures.

    Raises:
        ContentError: If the file is missing, is not valid JSON, or does not
            contain a non-empty list.

    Returns:
        list[Creature]: The creatures, in file order, copies included.

    """
    try:
        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {file_path}, got {type(data).__name__}")
        if not data:
            raise ValueError(f"Empty data list in {file_path}")
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ContentError(
            f"File {file_path} raised an error: {e}",
            {"file_path": str(file_path)},
        ) from e

    creatures: list[Creature] = []
    for entry in data:
        if not isinstance(entry, dict):
            log_warning(
                f"Skipping creature entry of type {type(entry).__name__}",
                {"file_path": str(file_path), "context": "creature_loading"},
            )
            continue
        count = entry.get("count", 1)
        if not isinstance(count, int) or count < 1:
            log_warning(
                f"Invalid count {count!r}, using 1",
                {"entry": entry.get("name", "<unnamed>"), "context": "creature_loading"},
            )
            count = 1
        for _ in range(count):
            creature = creature_from_dict(entry)
            if creature is not None:
                creatures.append(creature)
    return creatures
