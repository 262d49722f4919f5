"""Unsent workout draft (exercise, date, raw set inputs) kept across restarts."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict

from liftlog.client.storage import KeyValueStore

DRAFT_STORAGE_KEY = "gym-tracker-draft-v1"

_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


class DraftSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    reps: str = ""
    weight: str = ""


class Draft(BaseModel):
    """Form contents as typed; nothing here has been validated yet."""

    model_config = ConfigDict(frozen=True)

    exercise_name: str = ""
    workout_date: str = ""
    sets: tuple[DraftSet, ...] = ()


def _field(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def save_draft(store: KeyValueStore, draft: Draft) -> None:
    store.save(
        DRAFT_STORAGE_KEY,
        {
            "exerciseName": draft.exercise_name.strip(),
            "workoutDate": draft.workout_date,
            "sets": [{"reps": s.reps.strip(), "weight": s.weight.strip()} for s in draft.sets],
        },
    )


def restore_draft(store: KeyValueStore) -> Draft | None:
    """
    Rebuild a draft from the store. Fields are trimmed, a workoutDate that
    does not look like YYYY-MM-DD is dropped, and malformed data gives None.
    """
    raw = store.load(DRAFT_STORAGE_KEY)
    if not isinstance(raw, dict):
        return None

    workout_date = _field(raw.get("workoutDate"))
    raw_sets = raw.get("sets")
    sets: tuple[DraftSet, ...] = ()
    if isinstance(raw_sets, list):
        sets = tuple(
            DraftSet(reps=_field(s.get("reps")), weight=_field(s.get("weight")))
            for s in raw_sets
            if isinstance(s, dict)
        )
    return Draft(
        exercise_name=_field(raw.get("exerciseName")),
        workout_date=workout_date if _DATE_RE.match(workout_date) else "",
        sets=sets,
    )


def clear_draft(store: KeyValueStore) -> None:
    store.clear(DRAFT_STORAGE_KEY)
