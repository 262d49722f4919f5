"""Workout entry, set and derived metric schemas (camelCase on the wire)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API shapes: snake_case in Python, camelCase in JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SetEntry(CamelModel):
    """One validated set. Immutable once built by the validation engine."""

    model_config = ConfigDict(frozen=True)

    set_number: int
    reps: int
    weight: float


class DerivedMetrics(CamelModel):
    """Top set and Epley estimate, computed once when the entry is created."""

    model_config = ConfigDict(frozen=True)

    top_set_weight: float
    top_set_reps: int
    # to_camel would emit "est1Rm"
    est1rm: float = Field(alias="est1rm")


class WorkoutCreate(CamelModel):
    """Raw POST body. Fields stay untyped so the validation engine owns every
    message (and every failure is a 400, not a schema error)."""

    exercise_name: Any = None
    workout_date: Any = None
    sets: Any = None


class WorkoutEntryRead(CamelModel):
    owner_id: str
    exercise_name: str
    exercise_norm: str
    workout_date: str
    created_at: int
    sets: list[SetEntry] = []
    derived: DerivedMetrics


class WorkoutEntryResponse(CamelModel):
    item: WorkoutEntryRead | None = None


class WorkoutHistoryResponse(CamelModel):
    items: list[WorkoutEntryRead] = []


class HistorySummary(CamelModel):
    """Stats over a newest-first history list."""

    sessions: int
    best_top_set_weight: float
    latest_top_set_weight: float
    latest_est1rm: float = Field(alias="latestEst1rm")
    best_est1rm: float = Field(alias="bestEst1rm")


class HistorySummaryResponse(CamelModel):
    item: HistorySummary | None = None
