"""ORM models - import all so Base.metadata is complete for migrations."""

from liftlog.models.exercise import ExerciseCatalogEntry
from liftlog.models.workout import WorkoutEntry, WorkoutSet

__all__ = [
    "ExerciseCatalogEntry",
    "WorkoutEntry",
    "WorkoutSet",
]
