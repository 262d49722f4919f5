"""Exercise catalog schemas."""

from liftlog.schemas.workout import CamelModel


class ExerciseRead(CamelModel):
    exercise_name: str
    exercise_norm: str
    updated_at: int


class ExerciseListResponse(CamelModel):
    items: list[ExerciseRead] = []
