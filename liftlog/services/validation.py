"""Validation and normalization of exercise names, workout dates and set lists.

Everything here is pure: the HTTP layer calls it before persisting, and the
client package calls it again to validate a form before submitting. Failures
raise ValidationError with a human-readable message (rendered as a 400).
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from liftlog.core.constants import (
    DEFAULT_HISTORY_LIMIT,
    MAX_HISTORY_LIMIT,
    MAX_REPS,
    MAX_SETS_PER_WORKOUT,
    MAX_WEIGHT,
    MIN_HISTORY_LIMIT,
    MIN_REPS,
    MIN_SETS_PER_WORKOUT,
    MIN_WEIGHT,
)
from liftlog.core.errors import ValidationError
from liftlog.schemas.workout import SetEntry
from liftlog.services.metrics import round2

_WHITESPACE_RE = re.compile(r"\s+")
_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


# ── Exercise names ───────────────────────────────────────────────────────

def sanitize_exercise_name(name: Any) -> str:
    """Trim and collapse internal whitespace. Non-strings sanitize to ''."""
    if not isinstance(name, str):
        return ""
    return _WHITESPACE_RE.sub(" ", name.strip())


def normalize_exercise_name(name: Any) -> str:
    """Lookup key for all per-exercise storage and queries."""
    return sanitize_exercise_name(name).lower()


def require_exercise_name(name: Any, message: str = "exerciseName is required") -> str:
    sanitized = sanitize_exercise_name(name)
    if not sanitized:
        raise ValidationError(message)
    return sanitized


# ── Dates ────────────────────────────────────────────────────────────────

def utc_today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def normalize_workout_date(value: Any, today: str | None = None) -> str:
    """
    Absent or empty -> today's UTC date. Otherwise the value must look like
    YYYY-MM-DD and be a real calendar date; it is returned unchanged.
    """
    if value is None or value == "":
        return today or utc_today()
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationError("workoutDate must be in YYYY-MM-DD format")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValidationError("workoutDate is invalid") from None
    return value


# ── Sets ─────────────────────────────────────────────────────────────────

def _to_number(value: Any) -> float | None:
    """Coerce numeric-like input (int, float, numeric string) to float."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    # Digit separators ("1_000") are not numbers on the wire
    if isinstance(value, str) and value.strip() and "_" not in value:
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def normalize_sets(sets: Any) -> tuple[SetEntry, ...]:
    """
    Validate a raw set list (1..20 entries of {reps, weight}) and return
    numbered, immutable SetEntry values with weights rounded to 2 decimals.
    Errors cite the 1-based set index.
    """
    if not isinstance(sets, (list, tuple)) or not (
        MIN_SETS_PER_WORKOUT <= len(sets) <= MAX_SETS_PER_WORKOUT
    ):
        raise ValidationError(
            f"sets must contain between {MIN_SETS_PER_WORKOUT} and {MAX_SETS_PER_WORKOUT} entries"
        )

    out: list[SetEntry] = []
    for index, entry in enumerate(sets, start=1):
        reps = _to_number(_field(entry, "reps"))
        weight = _to_number(_field(entry, "weight"))

        if reps is None or not reps.is_integer() or not (MIN_REPS <= reps <= MAX_REPS):
            raise ValidationError(
                f"set {index}: reps must be an integer between {MIN_REPS} and {MAX_REPS}"
            )
        if weight is None or not math.isfinite(weight) or not (MIN_WEIGHT <= weight <= MAX_WEIGHT):
            raise ValidationError(
                f"set {index}: weight must be a number between {MIN_WEIGHT} and {MAX_WEIGHT}"
            )

        out.append(SetEntry(set_number=index, reps=int(reps), weight=round2(weight)))
    return tuple(out)


# ── Query parameters ─────────────────────────────────────────────────────

def parse_limit(
    raw: Any,
    default: int = DEFAULT_HISTORY_LIMIT,
    minimum: int = MIN_HISTORY_LIMIT,
    maximum: int = MAX_HISTORY_LIMIT,
) -> int:
    """Leading-integer parse of a limit query value, clamped to [minimum, maximum]."""
    if raw is None:
        return default
    match = _LEADING_INT_RE.match(str(raw))
    if not match:
        return default
    return max(minimum, min(maximum, int(match.group(1))))
