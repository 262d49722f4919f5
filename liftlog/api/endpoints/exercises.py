"""Exercise catalog endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from liftlog.core.deps import get_owner_id
from liftlog.db.session import get_db
from liftlog.schemas.exercise import ExerciseListResponse
from liftlog.services import workout_log

router = APIRouter()


@router.get("", response_model=ExerciseListResponse)
async def list_exercises(
    owner_id: str = Depends(get_owner_id),
    db: AsyncSession = Depends(get_db),
):
    """Logged exercises, most recently used first."""
    return ExerciseListResponse(items=await workout_log.list_exercises(db, owner_id))
