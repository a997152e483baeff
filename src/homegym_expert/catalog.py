"""
Exercise catalog loading.
The packaged JSON catalog is read once per path and shared read-only between runs.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import SETTINGS
from .models import Exercise, MuscleGroup

DEFAULT_CATALOG = Path(__file__).parent / "data" / "exercises.json"


def _read_records(path: Path) -> list[Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Catalog {path} must contain a JSON list")
    return data


def parse_catalog(records: list[Any]) -> tuple[Exercise, ...]:
    """Validate raw records, skipping (and logging) the ones that do not parse."""
    exercises: list[Exercise] = []
    seen: set[str] = set()
    for raw in records:
        try:
            exercise = Exercise.model_validate(raw)
        except ValidationError as e:
            ident = raw.get("id") if isinstance(raw, dict) else raw
            logging.error("Skipping invalid catalog record %r: %s", ident, e)
            continue
        if exercise.id in seen:
            logging.warning("Skipping duplicate catalog id %s", exercise.id)
            continue
        seen.add(exercise.id)
        exercises.append(exercise)
    return tuple(exercises)


@lru_cache(maxsize=4)
def _load(path: Path) -> tuple[Exercise, ...]:
    # Read errors propagate so that failed loads are not cached.
    records = _read_records(path)
    exercises = parse_catalog(records)
    logging.info("Loaded %d exercises from %s", len(exercises), path)
    return exercises


def load_catalog(path: str | Path | None = None) -> tuple[Exercise, ...]:
    """
    Load the exercise catalog in file order.

    Falls back to ``SETTINGS.CATALOG_PATH`` and then to the packaged catalog.
    A catalog that cannot be read yields an empty tuple.
    """
    target = Path(path or SETTINGS.CATALOG_PATH or DEFAULT_CATALOG).resolve()
    try:
        return _load(target)
    except (OSError, ValueError) as e:
        logging.error("Failed to load exercise catalog %s: %s", target, e)
        return ()


def by_muscle_group(
    exercises: tuple[Exercise, ...] | list[Exercise], group: MuscleGroup
) -> list[Exercise]:
    return [e for e in exercises if e.muscle_group is group]
