"""Workout log use-cases: create an entry, read the catalog and history.

Storage contract: put-by-key plus a range query over the
(owner_id, exercise_norm) partition in descending (workout_date, created_at)
order with a result limit.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from liftlog.core.constants import DEFAULT_HISTORY_LIMIT
from liftlog.models.exercise import ExerciseCatalogEntry
from liftlog.models.workout import WorkoutEntry, WorkoutSet
from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.workout import DerivedMetrics, SetEntry, WorkoutEntryRead
from liftlog.services.metrics import compute_derived
from liftlog.services.validation import (
    normalize_exercise_name,
    normalize_sets,
    normalize_workout_date,
    require_exercise_name,
)

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def to_read(entry: WorkoutEntry) -> WorkoutEntryRead:
    """Build the API shape from an entry whose sets are already loaded."""
    return WorkoutEntryRead(
        owner_id=entry.owner_id,
        exercise_name=entry.exercise_name,
        exercise_norm=entry.exercise_norm,
        workout_date=entry.workout_date,
        created_at=entry.created_at,
        sets=[
            SetEntry(set_number=s.set_number, reps=s.reps, weight=float(s.weight))
            for s in sorted(entry.sets, key=lambda s: s.set_number)
        ],
        derived=DerivedMetrics(
            top_set_weight=float(entry.top_set_weight),
            top_set_reps=entry.top_set_reps,
            est1rm=float(entry.est1rm),
        ),
    )


async def upsert_catalog_entry(
    db: AsyncSession,
    owner_id: str,
    exercise_name: str,
    exercise_norm: str,
    updated_at: int,
) -> ExerciseCatalogEntry:
    """Create or overwrite the owner's catalog row for this exercise."""
    result = await db.execute(
        select(ExerciseCatalogEntry).where(
            ExerciseCatalogEntry.owner_id == owner_id,
            ExerciseCatalogEntry.exercise_norm == exercise_norm,
        )
    )
    row = result.scalar_one_or_none()
    if row is None:
        row = ExerciseCatalogEntry(
            owner_id=owner_id,
            exercise_norm=exercise_norm,
            exercise_name=exercise_name,
            updated_at=updated_at,
        )
        db.add(row)
    else:
        row.exercise_name = exercise_name
        row.updated_at = updated_at
    return row


async def create_workout(
    db: AsyncSession,
    owner_id: str,
    exercise_name: Any,
    workout_date: Any,
    sets: Any,
    created_at: int | None = None,
    today: str | None = None,
) -> WorkoutEntryRead:
    """
    Validate raw input, compute derived metrics once, store the entry with its
    sets and bump the exercise catalog. Raises ValidationError on bad input.
    """
    name = require_exercise_name(exercise_name)
    exercise_norm = normalize_exercise_name(name)
    date_str = normalize_workout_date(workout_date, today=today)
    validated = normalize_sets(sets)
    derived = compute_derived(validated)
    created_at = created_at if created_at is not None else now_ms()

    entry = WorkoutEntry(
        owner_id=owner_id,
        exercise_name=name,
        exercise_norm=exercise_norm,
        workout_date=date_str,
        created_at=created_at,
        top_set_weight=derived.top_set_weight,
        top_set_reps=derived.top_set_reps,
        est1rm=derived.est1rm,
        sets=[
            WorkoutSet(set_number=s.set_number, reps=s.reps, weight=s.weight)
            for s in validated
        ],
    )
    db.add(entry)
    await upsert_catalog_entry(db, owner_id, name, exercise_norm, created_at)
    await db.flush()

    logger.info(
        "Logged %s on %s: %d sets, top %sx%s, est1rm %s",
        exercise_norm,
        date_str,
        len(validated),
        derived.top_set_weight,
        derived.top_set_reps,
        derived.est1rm,
    )
    # Sets were assigned in memory, so no lazy load happens here
    return to_read(entry)


async def list_exercises(db: AsyncSession, owner_id: str) -> list[ExerciseRead]:
    """Owner's catalog, most recently used first."""
    result = await db.execute(
        select(ExerciseCatalogEntry)
        .where(ExerciseCatalogEntry.owner_id == owner_id)
        .order_by(ExerciseCatalogEntry.updated_at.desc())
    )
    return [
        ExerciseRead(
            exercise_name=row.exercise_name,
            exercise_norm=row.exercise_norm,
            updated_at=row.updated_at,
        )
        for row in result.scalars().all()
    ]


async def query_workouts(
    db: AsyncSession,
    owner_id: str,
    exercise_norm: str,
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> list[WorkoutEntryRead]:
    """Entries for one exercise, newest first, at most `limit` of them."""
    result = await db.execute(
        select(WorkoutEntry)
        .where(
            WorkoutEntry.owner_id == owner_id,
            WorkoutEntry.exercise_norm == exercise_norm,
        )
        .options(selectinload(WorkoutEntry.sets))
        .order_by(
            WorkoutEntry.workout_date.desc(),
            WorkoutEntry.created_at.desc(),
            WorkoutEntry.id.desc(),
        )
        .limit(limit)
    )
    return [to_read(entry) for entry in result.scalars().all()]


async def get_latest_workout(
    db: AsyncSession, owner_id: str, exercise_norm: str
) -> WorkoutEntryRead | None:
    items = await query_workouts(db, owner_id, exercise_norm, limit=1)
    return items[0] if items else None
