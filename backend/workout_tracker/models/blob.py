"""
Key-value blob database model.
Each row holds one serialized value (e.g. the whole workout list) under a key.
"""
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from workout_tracker.core.database import Base


class KeyValueBlob(Base):
    """String value stored under a unique key."""

    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(
        String(255),
        primary_key=True
    )
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )
