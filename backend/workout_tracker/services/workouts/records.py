"""
Workout record structure and parsing of stored workout data.

Stored data may come from older app versions or be partially corrupt, so all
conversion from raw dicts happens here under one fallback policy:

- distance: number or numeric string -> float; anything else -> 0.0
- duration: number or numeric string -> int (truncated); anything else -> 0
- workout_type: str(); missing -> ""
- date: number or numeric string -> int epoch seconds within [0, MAX_EPOCH];
  anything else skips the record
- id: str(); missing -> freshly generated UUID4
"""
import math
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional

from workout_tracker.core.logging import get_logger

logger = get_logger(__name__)


# Options offered by the workout form; not enforced as a closed set
WORKOUT_TYPES = [
    "Running",
    "Cycling",
    "Weight Lifting",
    "Yoga",
    "Swimming",
    "HIIT",
    "Walking",
    "Dancing",
    "Pilates",
    "Boxing",
]

# Latest timestamp that still converts to a datetime in every UTC offset
# (9999-12-31T00:00:00Z)
MAX_EPOCH = 253402214400


def new_workout_id() -> str:
    """Generate a unique workout identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class WorkoutRecord:
    """One logged exercise session."""
    workout_type: str
    duration: int  # minutes
    distance: float  # miles
    date: int  # Unix epoch seconds
    id: str = field(default_factory=new_workout_id)

    def with_changes(self, **changes: Any) -> "WorkoutRecord":
        """Return a copy with the given fields replaced. The id is never changed."""
        changes.pop("id", None)
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted JSON shape."""
        return {
            "id": self.id,
            "workout_type": self.workout_type,
            "duration": self.duration,
            "distance": self.distance,
            "date": self.date,
        }


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def coerce_distance(value: Any) -> float:
    """Parse a stored distance, falling back to 0.0."""
    number = _as_float(value)
    return number if number is not None else 0.0


def coerce_duration(value: Any) -> int:
    """Parse a stored duration in minutes, falling back to 0."""
    number = _as_float(value)
    return int(number) if number is not None else 0


def parse_epoch(value: Any) -> Optional[int]:
    """Parse a stored epoch-seconds timestamp, or None if unusable."""
    number = _as_float(value)
    if number is None or not 0 <= number <= MAX_EPOCH:
        return None
    return int(number)


def parse_record(raw: Dict[str, Any]) -> WorkoutRecord:
    """
    Build a WorkoutRecord from a stored dict.

    Raises:
        ValueError: if the entry is not a dict or has no usable date
    """
    if not isinstance(raw, dict):
        raise ValueError(f"expected an object, got {type(raw).__name__}")

    date = parse_epoch(raw.get("date"))
    if date is None:
        raise ValueError(f"invalid or missing date: {raw.get('date')!r}")

    workout_type = raw.get("workout_type")
    record_id = raw.get("id")

    return WorkoutRecord(
        id=str(record_id) if record_id else new_workout_id(),
        workout_type="" if workout_type is None else str(workout_type),
        duration=coerce_duration(raw.get("duration")),
        distance=coerce_distance(raw.get("distance")),
        date=date,
    )


def parse_records(
    entries: Iterable[Any],
    rejected: Optional[List[Any]] = None,
) -> List[WorkoutRecord]:
    """
    Parse stored entries, skipping those that cannot be placed in time.
    Each skipped entry is logged with its index and, if a list is given,
    appended unchanged to `rejected`.
    """
    records = []
    skipped = 0
    for idx, entry in enumerate(entries):
        try:
            records.append(parse_record(entry))
        except ValueError as e:
            skipped += 1
            if rejected is not None:
                rejected.append(entry)
            logger.warning("Skipping invalid stored workout", index=idx, error=str(e))

    if skipped:
        logger.warning("Skipped invalid stored workouts", skipped=skipped, loaded=len(records))

    return records
