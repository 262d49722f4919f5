"""Routines - named, ordered exercise templates kept in the local store."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from liftlog.client.storage import KeyValueStore
from liftlog.core.constants import MAX_EXERCISES_PER_ROUTINE
from liftlog.services.validation import (
    normalize_exercise_name,
    require_exercise_name,
    sanitize_exercise_name,
)

ROUTINES_STORAGE_KEY = "gym-tracker-routines-v1"


class Routine(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    exercises: tuple[str, ...] = ()


def build_routine(name: str, exercises: Iterable[str]) -> Routine:
    """Sanitized routine: blank names dropped, duplicates (by normalized
    name) removed keeping first occurrence, capped at 20 exercises."""
    routine_name = require_exercise_name(name, "routine name is required")
    seen: set[str] = set()
    order: list[str] = []
    for raw in exercises:
        exercise = sanitize_exercise_name(raw)
        norm = exercise.lower()
        if not exercise or norm in seen:
            continue
        seen.add(norm)
        order.append(exercise)
    return Routine(name=routine_name, exercises=tuple(order[:MAX_EXERCISES_PER_ROUTINE]))


def load_routines(store: KeyValueStore) -> list[Routine]:
    raw = store.load(ROUTINES_STORAGE_KEY)
    if not isinstance(raw, list):
        return []
    routines = []
    for item in raw:
        if not isinstance(item, dict) or not sanitize_exercise_name(item.get("name")):
            continue
        exercises = item.get("exercises")
        routines.append(
            build_routine(item["name"], exercises if isinstance(exercises, list) else [])
        )
    return routines


def _save_all(store: KeyValueStore, routines: list[Routine]) -> None:
    store.save(
        ROUTINES_STORAGE_KEY,
        [{"name": r.name, "exercises": list(r.exercises)} for r in routines],
    )


def save_routine(store: KeyValueStore, routine: Routine) -> list[Routine]:
    """Insert or replace (matched by normalized name). Returns the new list."""
    key = normalize_exercise_name(routine.name)
    routines = [r for r in load_routines(store) if normalize_exercise_name(r.name) != key]
    routines.append(routine)
    _save_all(store, routines)
    return routines


def delete_routine(store: KeyValueStore, name: str) -> list[Routine]:
    key = normalize_exercise_name(name)
    routines = [r for r in load_routines(store) if normalize_exercise_name(r.name) != key]
    _save_all(store, routines)
    return routines
