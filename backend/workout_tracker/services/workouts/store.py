"""
Workout Store - load/save boundary for the workout collection.

The whole collection is one JSON array stored under a single key of an
injected blob store. Every mutation loads the list, changes it in memory
and rewrites the full array. Stored entries that cannot be parsed are left
out of the records but written back unchanged, so a mutation never erases
them.
"""
import json
from typing import Any, List, Optional, Tuple

from workout_tracker.core.exceptions import (
    CorruptStorageError,
    StorageError,
    WorkoutNotFoundError,
)
from workout_tracker.core.logging import get_logger, log_storage_error
from workout_tracker.services.storage.blob import BlobStore
from workout_tracker.services.workouts.records import WorkoutRecord, parse_records

logger = get_logger(__name__)

DEFAULT_KEY = "workouts"


class WorkoutStore:
    """
    CRUD over the persisted workout list.

    Usage:
        store = WorkoutStore(SqlBlobStore(db))
        workout = await store.add(WorkoutRecord(...))
        workouts = await store.load()
    """

    def __init__(self, blob_store: BlobStore, key: str = DEFAULT_KEY):
        self.blob_store = blob_store
        self.key = key

    async def load(self) -> List[WorkoutRecord]:
        """
        Load all workouts in stored order.

        Returns:
            Parsed records; an empty list if nothing has been stored yet

        Raises:
            CorruptStorageError: stored value is not a JSON array
            StorageError: the blob store failed
        """
        records, _ = await self._read()
        return records

    async def save(self, records: List[WorkoutRecord]) -> None:
        """Rewrite the whole stored collection."""
        await self._write(records, [])

    async def get(self, workout_id: str) -> WorkoutRecord:
        """Get one workout by id."""
        records = await self.load()
        return records[self._index_of(records, workout_id)]

    async def add(self, record: WorkoutRecord) -> WorkoutRecord:
        """Append a workout to the collection."""
        records, unparsed = await self._read()
        records.append(record)
        await self._write(records, unparsed)

        logger.info("Workout created", workout_id=record.id, workout_type=record.workout_type)
        return record

    async def update(
        self,
        workout_id: str,
        workout_type: str,
        duration: int,
        distance: float,
        date: Optional[int] = None,
    ) -> WorkoutRecord:
        """
        Replace a workout's fields in place.

        The id and the position in the collection are kept. A date of None
        keeps the existing date.
        """
        records, unparsed = await self._read()
        index = self._index_of(records, workout_id)

        current = records[index]
        updated = current.with_changes(
            workout_type=workout_type,
            duration=duration,
            distance=distance,
            date=current.date if date is None else date,
        )
        records[index] = updated
        await self._write(records, unparsed)

        logger.info("Workout updated", workout_id=workout_id)
        return updated

    async def delete(self, workout_id: str) -> WorkoutRecord:
        """Remove a workout from the collection and return it."""
        records, unparsed = await self._read()
        removed = records.pop(self._index_of(records, workout_id))
        await self._write(records, unparsed)

        logger.info("Workout deleted", workout_id=workout_id)
        return removed

    async def _read(self) -> Tuple[List[WorkoutRecord], List[Any]]:
        """Parsed records plus the raw entries that could not be parsed."""
        try:
            raw = await self.blob_store.get(self.key)
        except Exception as e:
            log_storage_error(logger, "read", e, key=self.key)
            raise StorageError("read", self.key, str(e)) from e

        if raw is None:
            return [], []

        try:
            entries = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptStorageError(self.key, f"invalid JSON: {e}") from e

        if not isinstance(entries, list):
            raise CorruptStorageError(self.key, f"expected a list, got {type(entries).__name__}")

        unparsed: List[Any] = []
        records = parse_records(entries, rejected=unparsed)
        logger.debug("Loaded workouts", key=self.key, count=len(records))

        # Entries written before ids existed get one on parse; persist them
        # so the same id resolves on the next request.
        legacy = sum(1 for e in entries if isinstance(e, dict) and not e.get("id"))
        if legacy:
            logger.info("Assigning ids to legacy workouts", key=self.key, count=legacy)
            await self._write(records, unparsed)

        return records, unparsed

    async def _write(self, records: List[WorkoutRecord], unparsed: List[Any]) -> None:
        # Unparseable entries are kept verbatim after the records
        payload = json.dumps([r.to_dict() for r in records] + unparsed)

        try:
            await self.blob_store.set(self.key, payload)
        except Exception as e:
            log_storage_error(logger, "write", e, key=self.key)
            raise StorageError("write", self.key, str(e)) from e

        logger.debug("Saved workouts", key=self.key, count=len(records), unparsed=len(unparsed))

    @staticmethod
    def _index_of(records: List[WorkoutRecord], workout_id: str) -> int:
        for index, record in enumerate(records):
            if record.id == workout_id:
                return index
        raise WorkoutNotFoundError(workout_id)
