"""
Custom exception classes.

Services raise these; the API layer maps them to HTTP responses.
"""
from typing import Optional


class WorkoutTrackerError(Exception):
    """Base class for all application errors."""
    pass


class WorkoutNotFoundError(WorkoutTrackerError, LookupError):
    """No workout with the requested id exists in the collection."""

    def __init__(self, workout_id: str):
        super().__init__(f"Workout not found: {workout_id}")
        self.workout_id = workout_id


class StorageError(WorkoutTrackerError):
    """Reading or writing the persisted workout blob failed."""

    def __init__(self, operation: str, key: str, detail: Optional[str] = None):
        message = f"Storage {operation} failed for key '{key}'"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.operation = operation
        self.key = key


class CorruptStorageError(StorageError):
    """The stored value exists but is not a JSON array of workouts."""

    def __init__(self, key: str, reason: str):
        super().__init__("read", key, f"stored value is not a workout list ({reason})")
        self.reason = reason
