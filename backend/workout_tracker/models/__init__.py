from workout_tracker.models.blob import KeyValueBlob

__all__ = [
    "KeyValueBlob",
]
