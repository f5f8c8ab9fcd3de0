"""
Stats API endpoints - totals and chart data over all workouts.
"""
from datetime import tzinfo
from typing import Optional

from fastapi import APIRouter, Depends, Query

from workout_tracker.api.deps import get_display_timezone, get_workout_store, load_workouts
from workout_tracker.api.schemas import (
    DayTotalResponse,
    DurationChartResponse,
    SummaryResponse,
    TypeSlice,
)
from workout_tracker.core.config import settings
from workout_tracker.services.workouts import (
    WorkoutStore,
    count_by_type,
    duration_by_day,
    summarize,
)
from workout_tracker.services.workouts.charts import duration_chart_data, type_chart_data
from workout_tracker.services.workouts.formatting import format_duration

router = APIRouter()


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    store: WorkoutStore = Depends(get_workout_store),
):
    """
    Workout count, total duration and total distance.
    """
    summary = summarize(await load_workouts(store))

    return SummaryResponse(
        totalCount=summary.total_count,
        totalDurationMinutes=summary.total_duration_minutes,
        totalDistanceMiles=summary.total_distance_miles,
        formattedDuration=format_duration(summary.total_duration_minutes),
    )


@router.get("/types", response_model=list[TypeSlice])
async def get_type_breakdown(
    store: WorkoutStore = Depends(get_workout_store),
):
    """
    Pie chart slices: number of workouts per type.
    """
    counts = count_by_type(await load_workouts(store))
    return type_chart_data(counts)


@router.get("/durations", response_model=DurationChartResponse)
async def get_duration_chart(
    days: Optional[int] = Query(None, ge=1, le=366, description="Number of recent days"),
    store: WorkoutStore = Depends(get_workout_store),
    tz: Optional[tzinfo] = Depends(get_display_timezone),
):
    """
    Bar chart data: total minutes per day for the most recent days.
    """
    max_days = days if days is not None else settings.RECENT_DAYS
    day_totals = duration_by_day(await load_workouts(store), max_days, tz)

    chart = duration_chart_data(day_totals)
    return DurationChartResponse(
        labels=chart["labels"],
        datasets=chart["datasets"],
        days=[
            DayTotalResponse(
                label=d.label,
                date=d.day.isoformat(),
                totalMinutes=d.total_minutes,
            )
            for d in day_totals
        ],
    )
