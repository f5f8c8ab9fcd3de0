"""
Request/Response schemas shared by the API routers.
"""
import math
from datetime import tzinfo
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from workout_tracker.services.workouts.formatting import (
    format_item_duration,
    format_workout_date,
)
from workout_tracker.services.workouts.records import MAX_EPOCH, WorkoutRecord

TYPE_MESSAGE = "Please enter a workout type."
DURATION_MESSAGE = "Please enter a duration"
DISTANCE_MESSAGE = "Please enter a distance 0 or greater"


def _number_or_none(value: Any) -> Optional[float]:
    """Parse a form value as a number; blank, non-numeric and non-finite give None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


# ========================================
# Request Schemas
# ========================================

class WorkoutInput(BaseModel):
    """
    Fields of the add/edit workout form.

    Duration is either given directly in minutes or as hours + minutes.
    """
    # Missing type and distance still run their validators, so the form
    # messages are reported instead of a generic "Field required".
    workoutType: Optional[str] = Field(
        None, validate_default=True, description="Workout type, e.g. Running"
    )
    duration: Optional[int] = Field(None, description="Duration in minutes")
    durationHours: Optional[int] = Field(None, description="Duration hours part")
    durationMinutes: Optional[int] = Field(None, description="Duration minutes part")
    distance: Optional[float] = Field(
        None, validate_default=True, description="Distance in miles"
    )
    date: Optional[int] = Field(
        None,
        ge=0,
        le=MAX_EPOCH,
        description="Unix epoch seconds; defaults to now on create",
    )

    @field_validator("workoutType", mode="before")
    @classmethod
    def check_workout_type(cls, value: Any) -> str:
        if value is None or not str(value).strip():
            raise ValueError(TYPE_MESSAGE)
        return str(value)

    @field_validator("duration", mode="before")
    @classmethod
    def check_duration(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        number = _number_or_none(value)
        if number is None or number <= 0 or int(number) <= 0:
            raise ValueError(DURATION_MESSAGE)
        return int(number)

    @field_validator("durationHours", "durationMinutes", mode="before")
    @classmethod
    def check_duration_part(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        number = _number_or_none(value)
        if number is None or number < 0 or number != int(number):
            raise ValueError(DURATION_MESSAGE)
        return int(number)

    @field_validator("distance", mode="before")
    @classmethod
    def check_distance(cls, value: Any) -> float:
        number = _number_or_none(value)
        if number is None or number < 0:
            raise ValueError(DISTANCE_MESSAGE)
        return number

    @model_validator(mode="after")
    def combine_duration(self) -> "WorkoutInput":
        if self.duration is None:
            if self.durationHours is None and self.durationMinutes is None:
                raise ValueError(DURATION_MESSAGE)
            total = (self.durationHours or 0) * 60 + (self.durationMinutes or 0)
            if total <= 0:
                raise ValueError(DURATION_MESSAGE)
            self.duration = total
        return self


# ========================================
# Response Schemas
# ========================================

class WorkoutDisplay(BaseModel):
    """Pre-formatted strings for a workout list item."""
    duration: str
    date: str


class WorkoutResponse(BaseModel):
    """Workout response."""
    id: str
    workoutType: str
    duration: int
    distance: float
    date: int
    display: WorkoutDisplay

    @classmethod
    def from_record(cls, record: WorkoutRecord, tz: Optional[tzinfo] = None) -> "WorkoutResponse":
        return cls(
            id=record.id,
            workoutType=record.workout_type,
            duration=record.duration,
            distance=record.distance,
            date=record.date,
            display=WorkoutDisplay(
                duration=format_item_duration(record.duration),
                date=format_workout_date(record.date, tz),
            ),
        )


class SummaryResponse(BaseModel):
    """Totals over all workouts."""
    totalCount: int
    totalDurationMinutes: int
    totalDistanceMiles: float
    formattedDuration: str


class TypeSlice(BaseModel):
    """One pie chart slice."""
    name: str
    count: int
    color: str
    legendFontColor: str
    legendFontSize: int


class DayTotalResponse(BaseModel):
    """Minutes exercised on one day."""
    label: str
    date: str  # ISO date
    totalMinutes: int


class DurationChartResponse(BaseModel):
    """Bar chart payload plus the per-day rows it was built from."""
    labels: list[str]
    datasets: list[dict[str, list[int]]]
    days: list[DayTotalResponse]
