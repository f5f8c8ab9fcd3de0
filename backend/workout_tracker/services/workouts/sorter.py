"""
Display ordering for workout lists.
"""
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from workout_tracker.services.workouts.records import WorkoutRecord


class SortCriterion(str, Enum):
    """Orderings offered by the workout list."""
    DATE_DESCENDING = "dateDescending"
    DATE_ASCENDING = "dateAscending"
    DISTANCE_LONGEST = "distanceLongest"
    DISTANCE_SHORTEST = "distanceShortest"


DEFAULT_SORT = SortCriterion.DATE_DESCENDING

# criterion -> (key, descending)
_ORDERINGS: Dict[SortCriterion, Tuple[Callable[[WorkoutRecord], float], bool]] = {
    SortCriterion.DATE_DESCENDING: (lambda w: w.date, True),
    SortCriterion.DATE_ASCENDING: (lambda w: w.date, False),
    SortCriterion.DISTANCE_LONGEST: (lambda w: w.distance, True),
    SortCriterion.DISTANCE_SHORTEST: (lambda w: w.distance, False),
}


def resolve_criterion(value: Union[SortCriterion, str, None]) -> Optional[SortCriterion]:
    """Map a raw criterion value to a SortCriterion, or None if unrecognized."""
    if isinstance(value, SortCriterion):
        return value
    try:
        return SortCriterion(value)
    except ValueError:
        return None


def sort_workouts(
    records: Sequence[WorkoutRecord],
    criterion: Union[SortCriterion, str, None],
) -> List[WorkoutRecord]:
    """
    Return a new list of records ordered by the criterion.

    The sort is stable for every criterion, descending ones included: records
    with equal keys keep their input order. An unrecognized criterion returns
    the records in their stored order.
    """
    resolved = resolve_criterion(criterion)
    if resolved is None:
        return list(records)

    key, descending = _ORDERINGS[resolved]
    # sorted(reverse=True) preserves the input order of equal keys
    return sorted(records, key=key, reverse=descending)
