"""
Workouts module - workout records, ordering and statistics.

This module provides:
- WorkoutRecord and the parsing policy for stored data
- Sorter for display ordering
- Aggregator for summary totals and chart breakdowns
- WorkoutStore for loading and saving the collection
"""
from workout_tracker.services.workouts.records import (
    WORKOUT_TYPES,
    WorkoutRecord,
    parse_record,
    parse_records,
)
from workout_tracker.services.workouts.sorter import (
    DEFAULT_SORT,
    SortCriterion,
    sort_workouts,
)
from workout_tracker.services.workouts.aggregator import (
    DayTotal,
    Summary,
    count_by_type,
    duration_by_day,
    summarize,
)
from workout_tracker.services.workouts.store import WorkoutStore

__all__ = [
    # Records
    "WORKOUT_TYPES",
    "WorkoutRecord",
    "parse_record",
    "parse_records",
    # Sorter
    "DEFAULT_SORT",
    "SortCriterion",
    "sort_workouts",
    # Aggregator
    "DayTotal",
    "Summary",
    "count_by_type",
    "duration_by_day",
    "summarize",
    # Store
    "WorkoutStore",
]
