"""Immutable client view state and the pure functions that move it forward."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict

from liftlog.client.drafts import DraftSet
from liftlog.core.constants import QUICK_PICK_COUNT
from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.workout import HistorySummary, SetEntry, WorkoutEntryRead
from liftlog.services.metrics import summarize_history
from liftlog.services.validation import normalize_sets, sanitize_exercise_name


class ViewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercises: tuple[ExerciseRead, ...] = ()
    selected_exercise: str = ""
    latest: WorkoutEntryRead | None = None
    history: tuple[WorkoutEntryRead, ...] = ()


def with_exercises(state: ViewState, exercises: Iterable[ExerciseRead]) -> ViewState:
    return state.model_copy(update={"exercises": tuple(exercises)})


def select_exercise(state: ViewState, name: str) -> ViewState:
    """Switch exercise; a blank name clears the per-exercise data."""
    exercise = sanitize_exercise_name(name)
    if not exercise:
        return state.model_copy(update={"selected_exercise": "", "latest": None, "history": ()})
    return state.model_copy(update={"selected_exercise": exercise})


def with_exercise_data(
    state: ViewState,
    latest: WorkoutEntryRead | None,
    history: Sequence[WorkoutEntryRead],
) -> ViewState:
    return state.model_copy(update={"latest": latest, "history": tuple(history)})


def quick_picks(state: ViewState, count: int = QUICK_PICK_COUNT) -> list[str]:
    """Most recently used exercise names."""
    recent = sorted(state.exercises, key=lambda e: e.updated_at, reverse=True)
    return [e.exercise_name for e in recent[:count]]


def format_weight(value: float) -> str:
    """Two decimals, with a trailing '.00' dropped (100 -> '100', 102.5 -> '102.50')."""
    text = f"{value:.2f}"
    return text[:-3] if text.endswith(".00") else text


def _raw_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def reusable_sets(state: ViewState) -> tuple[DraftSet, ...]:
    """Last session's sets as form rows, or () when there is nothing to reuse."""
    if state.latest is None:
        return ()
    return tuple(DraftSet(reps=str(s.reps), weight=_raw_number(s.weight)) for s in state.latest.sets)


# ── Set rows ─────────────────────────────────────────────────────────────

BLANK_ROW = DraftSet()


def reset_set_rows(rows: Sequence[DraftSet] = ()) -> tuple[DraftSet, ...]:
    """Replace the form rows; an empty list falls back to one blank row."""
    return tuple(rows) or (BLANK_ROW,)


def add_set_row(rows: Sequence[DraftSet], row: DraftSet = BLANK_ROW) -> tuple[DraftSet, ...]:
    return (*rows, row)


def copy_last_set(rows: Sequence[DraftSet]) -> tuple[DraftSet, ...]:
    """Append a copy of the last row, or a blank row when there are none."""
    return add_set_row(rows, rows[-1] if rows else BLANK_ROW)


def remove_set_row(rows: Sequence[DraftSet], index: int) -> tuple[DraftSet, ...]:
    """Drop the row at `index`; removing the only row leaves one blank row."""
    return reset_set_rows([row for i, row in enumerate(rows) if i != index])


def history_stats(state: ViewState) -> HistorySummary | None:
    return summarize_history([item.derived for item in state.history])


def collect_sets(rows: Sequence[DraftSet]) -> tuple[SetEntry, ...]:
    """Client-side validation of form rows, same rules as the server."""
    return normalize_sets([{"reps": row.reps, "weight": row.weight} for row in rows])
