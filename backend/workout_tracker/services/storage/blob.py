"""
Blob Store - key-value storage of serialized strings.

The workout collection is persisted as one string under one key, so the
only capability callers need is get/set of a string by key.
"""
from typing import Dict, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from workout_tracker.models.blob import KeyValueBlob
from workout_tracker.core.logging import get_logger

logger = get_logger(__name__)


class BlobStore(Protocol):
    """Get/set of a string value by key."""

    async def get(self, key: str) -> Optional[str]:
        ...

    async def set(self, key: str, value: str) -> None:
        ...


class SqlBlobStore:
    """
    Database-backed blob store.

    One row per key in the kv_store table. Writes are flushed to the
    session; the session owner commits.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, key: str) -> Optional[str]:
        """
        Get the value stored under a key.

        Returns:
            The stored string, or None if the key has never been written
        """
        blob = await self.db.get(KeyValueBlob, key)
        return blob.value if blob else None

    async def set(self, key: str, value: str) -> None:
        """Create or overwrite the value stored under a key."""
        blob = await self.db.get(KeyValueBlob, key)

        if blob:
            blob.value = value
        else:
            self.db.add(KeyValueBlob(key=key, value=value))

        await self.db.flush()

        logger.debug("Stored blob", key=key, size=len(value), created=blob is None)


class MemoryBlobStore:
    """In-process blob store. Contents are lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
