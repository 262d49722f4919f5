"""Request dependencies shared by endpoints."""

from fastapi import Query

from liftlog.core.config import get_settings
from liftlog.services.validation import normalize_exercise_name, require_exercise_name


def get_owner_id() -> str:
    """Single configured owner until auth exists."""
    return get_settings().owner_id


def get_exercise_norm(exercise: str | None = Query(None)) -> str:
    """Normalized `exercise` query parameter; 400 when missing or blank."""
    name = require_exercise_name(exercise, "exercise query parameter is required")
    return normalize_exercise_name(name)
