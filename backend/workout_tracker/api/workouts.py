"""
Workouts API endpoints.
"""
import time
from datetime import tzinfo
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from workout_tracker.api.deps import (
    DELETE_FAILED_MESSAGE,
    LOAD_FAILED_MESSAGE,
    NOT_FOUND_MESSAGE,
    SAVE_FAILED_MESSAGE,
    get_display_timezone,
    get_workout_store,
    load_workouts,
)
from workout_tracker.api.schemas import WorkoutInput, WorkoutResponse
from workout_tracker.core.exceptions import StorageError, WorkoutNotFoundError
from workout_tracker.core.logging import get_logger
from workout_tracker.services.workouts import (
    DEFAULT_SORT,
    WORKOUT_TYPES,
    WorkoutRecord,
    WorkoutStore,
    sort_workouts,
)

logger = get_logger(__name__)
router = APIRouter()


@router.get("", response_model=list[WorkoutResponse])
async def list_workouts(
    sort: str = Query(DEFAULT_SORT.value, description="Sort criterion"),
    store: WorkoutStore = Depends(get_workout_store),
    tz: Optional[tzinfo] = Depends(get_display_timezone),
):
    """
    Get all workouts in display order.

    Unknown sort values leave the stored order untouched.
    """
    workouts = await load_workouts(store)
    ordered = sort_workouts(workouts, sort)

    return [WorkoutResponse.from_record(w, tz) for w in ordered]


@router.get("/types", response_model=list[str])
async def list_workout_types():
    """Workout types offered by the form."""
    return WORKOUT_TYPES


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(
    workout_id: str,
    store: WorkoutStore = Depends(get_workout_store),
    tz: Optional[tzinfo] = Depends(get_display_timezone),
):
    """
    Get a specific workout by ID.
    """
    try:
        workout = await store.get(workout_id)
    except WorkoutNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    except StorageError as e:
        logger.error("Failed to load workout", workout_id=workout_id, error=str(e))
        raise HTTPException(status_code=500, detail=LOAD_FAILED_MESSAGE)

    return WorkoutResponse.from_record(workout, tz)


@router.post("", response_model=WorkoutResponse)
async def create_workout(
    request: WorkoutInput,
    store: WorkoutStore = Depends(get_workout_store),
    tz: Optional[tzinfo] = Depends(get_display_timezone),
):
    """
    Log a new workout.
    """
    record = WorkoutRecord(
        workout_type=request.workoutType,
        duration=request.duration,
        distance=request.distance,
        date=request.date if request.date is not None else int(time.time()),
    )

    try:
        await store.add(record)
    except StorageError as e:
        logger.error("Failed to save workout", error=str(e))
        raise HTTPException(status_code=500, detail=SAVE_FAILED_MESSAGE)

    return WorkoutResponse.from_record(record, tz)


@router.put("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: str,
    request: WorkoutInput,
    store: WorkoutStore = Depends(get_workout_store),
    tz: Optional[tzinfo] = Depends(get_display_timezone),
):
    """
    Update a workout. Its id and list position are kept.
    """
    try:
        updated = await store.update(
            workout_id,
            workout_type=request.workoutType,
            duration=request.duration,
            distance=request.distance,
            date=request.date,
        )
    except WorkoutNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    except StorageError as e:
        logger.error("Failed to update workout", workout_id=workout_id, error=str(e))
        raise HTTPException(status_code=500, detail=SAVE_FAILED_MESSAGE)

    return WorkoutResponse.from_record(updated, tz)


@router.delete("/{workout_id}")
async def delete_workout(
    workout_id: str,
    store: WorkoutStore = Depends(get_workout_store),
):
    """
    Delete a workout.
    """
    try:
        await store.delete(workout_id)
    except WorkoutNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    except StorageError as e:
        logger.error("Failed to delete workout", workout_id=workout_id, error=str(e))
        raise HTTPException(status_code=500, detail=DELETE_FAILED_MESSAGE)

    return {"message": "Workout deleted"}
