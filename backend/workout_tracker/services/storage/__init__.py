"""
Storage module - key-value blob stores backing the workout collection.
"""
from workout_tracker.services.storage.blob import BlobStore, MemoryBlobStore, SqlBlobStore

__all__ = [
    "BlobStore",
    "MemoryBlobStore",
    "SqlBlobStore",
]
