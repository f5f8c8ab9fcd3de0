"""
Aggregator - summary totals and chart breakdowns over workout records.

All functions are pure: they never mutate their input and tolerate
malformed numeric fields by coercing them with the record parsing policy.
"""
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from workout_tracker.services.workouts.formatting import format_day_label, local_datetime
from workout_tracker.services.workouts.records import (
    WorkoutRecord,
    coerce_distance,
    coerce_duration,
)


@dataclass(frozen=True)
class Summary:
    """Aggregate totals over a set of workouts."""
    total_count: int = 0
    total_duration_minutes: int = 0
    total_distance_miles: float = 0.0

    def __add__(self, other: "Summary") -> "Summary":
        return Summary(
            total_count=self.total_count + other.total_count,
            total_duration_minutes=self.total_duration_minutes + other.total_duration_minutes,
            total_distance_miles=self.total_distance_miles + other.total_distance_miles,
        )


class DayTotal(NamedTuple):
    """Total minutes exercised on one calendar day."""
    label: str
    total_minutes: int
    day: date


def summarize(records: Sequence[WorkoutRecord]) -> Summary:
    """Count, total duration and total distance of the records."""
    return Summary(
        total_count=len(records),
        total_duration_minutes=sum(coerce_duration(w.duration) for w in records),
        total_distance_miles=sum((coerce_distance(w.distance) for w in records), 0.0),
    )


def count_by_type(records: Sequence[WorkoutRecord]) -> Dict[str, int]:
    """
    Number of workouts per workout type.

    Keys keep first-occurrence order. Type strings are used as-is, so
    'Running' and 'running ' are separate buckets.
    """
    counts: Dict[str, int] = {}
    for workout in records:
        counts[workout.workout_type] = counts.get(workout.workout_type, 0) + 1
    return counts


def _countable_minutes(value: Any) -> Optional[int]:
    """Duration as whole minutes if it is a non-negative number, else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value < 0:
        return None
    return int(value)


def duration_by_day(
    records: Sequence[WorkoutRecord],
    max_days: int,
    tz: Optional[tzinfo] = None,
) -> List[DayTotal]:
    """
    Total minutes per calendar day for the most recent days.

    Days are the local calendar day of each workout's date in ``tz`` (host
    local time if None). Only non-negative numeric durations contribute.
    The ``max_days`` most recent days are returned oldest first.
    """
    if max_days <= 0:
        return []

    totals: Dict[date, int] = defaultdict(int)
    for workout in sorted(records, key=lambda w: w.date):
        minutes = _countable_minutes(workout.duration)
        if minutes is None:
            continue
        totals[local_datetime(workout.date, tz).date()] += minutes

    recent_days = sorted(totals, reverse=True)[:max_days]

    return [
        DayTotal(label=format_day_label(day), total_minutes=totals[day], day=day)
        for day in sorted(recent_days)
    ]
