"""
FastAPI dependencies shared by the routers.
"""
from datetime import tzinfo
from typing import List, Optional

from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from workout_tracker.core.config import settings
from workout_tracker.core.database import get_db
from workout_tracker.core.exceptions import StorageError
from workout_tracker.core.logging import get_logger
from workout_tracker.services.storage import SqlBlobStore
from workout_tracker.services.workouts import WorkoutRecord, WorkoutStore
from workout_tracker.services.workouts.formatting import resolve_timezone

logger = get_logger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load workouts."
SAVE_FAILED_MESSAGE = "Failed to save workout. Please try again."
DELETE_FAILED_MESSAGE = "Failed to delete workout."
NOT_FOUND_MESSAGE = "Workout not found"


def get_workout_store(db: AsyncSession = Depends(get_db)) -> WorkoutStore:
    """Workout store backed by the request's database session."""
    return WorkoutStore(SqlBlobStore(db), key=settings.WORKOUTS_STORAGE_KEY)


def get_display_timezone() -> Optional[tzinfo]:
    """Timezone used for day buckets and date display."""
    return resolve_timezone(settings.TIMEZONE)


async def load_workouts(store: WorkoutStore) -> List[WorkoutRecord]:
    """Load the collection, turning storage failures into a 500 notice."""
    try:
        return await store.load()
    except StorageError as e:
        logger.error("Failed to load workouts", error=str(e))
        raise HTTPException(status_code=500, detail=LOAD_FAILED_MESSAGE)
