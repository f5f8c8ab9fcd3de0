"""
Application configuration.
All values loaded from environment variables or a local .env file.
"""
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database (local device storage by default)
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/workouts.db"
    SQL_ECHO: bool = False

    # Key under which the serialized workout list is stored
    WORKOUTS_STORAGE_KEY: str = "workouts"

    # Stats
    RECENT_DAYS: int = 5
    # IANA timezone used to bucket workouts into calendar days.
    # None means the host's local timezone.
    TIMEZONE: Optional[str] = None

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:8081", "http://127.0.0.1:8081"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console

    @field_validator("TIMEZONE")
    @classmethod
    def check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Invalid timezone '{value}'. Use IANA timezone identifiers.")
        return value

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
