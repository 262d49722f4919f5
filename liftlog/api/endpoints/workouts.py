"""Workout logging and history endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.config import get_settings
from liftlog.core.deps import get_exercise_norm, get_owner_id
from liftlog.db.session import get_db
from liftlog.schemas.workout import (
    HistorySummaryResponse,
    WorkoutCreate,
    WorkoutEntryResponse,
    WorkoutHistoryResponse,
)
from liftlog.services import workout_log
from liftlog.services.metrics import summarize_history
from liftlog.services.validation import parse_limit

router = APIRouter()


def _history_limit(limit: str | None) -> int:
    settings = get_settings()
    return parse_limit(
        limit,
        default=settings.history_default_limit,
        maximum=settings.history_max_limit,
    )


@router.post("", response_model=WorkoutEntryResponse, status_code=201)
async def create_workout(
    payload: WorkoutCreate | None = None,
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    """Log one exercise session. Derived metrics are computed here, once."""
    payload = payload or WorkoutCreate()
    item = await workout_log.create_workout(
        db,
        owner_id,
        exercise_name=payload.exercise_name,
        workout_date=payload.workout_date,
        sets=payload.sets,
    )
    return WorkoutEntryResponse(item=item)


@router.get("/latest", response_model=WorkoutEntryResponse)
async def latest_workout(
    exercise_norm: str = Depends(get_exercise_norm),
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    """Most recent entry for the exercise, or null."""
    item = await workout_log.get_latest_workout(db, owner_id, exercise_norm)
    return WorkoutEntryResponse(item=item)


@router.get("/summary", response_model=HistorySummaryResponse)
async def workout_summary(
    exercise_norm: str = Depends(get_exercise_norm),
    limit: str | None = None,
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    """Best/latest top set and est1rm over the recent history (null when empty)."""
    items = await workout_log.query_workouts(db, owner_id, exercise_norm, _history_limit(limit))
    return HistorySummaryResponse(item=summarize_history([i.derived for i in items]))


@router.get("", response_model=WorkoutHistoryResponse)
async def workout_history(
    exercise_norm: str = Depends(get_exercise_norm),
    limit: str | None = None,
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    """History for one exercise, newest first (limit defaults to 50, clamped to 1..200)."""
    items = await workout_log.query_workouts(db, owner_id, exercise_norm, _history_limit(limit))
    return WorkoutHistoryResponse(items=items)
