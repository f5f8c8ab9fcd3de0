"""
Pytest configuration and fixtures

API tests run against an in-memory blob store; nothing touches the
database file configured for the application.
"""
import json
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from workout_tracker.api.deps import get_display_timezone, get_workout_store
from workout_tracker.main import app
from workout_tracker.services.storage import MemoryBlobStore
from workout_tracker.services.workouts import WorkoutStore

from fixtures.workout_fixtures import SWIMMING_DATE, WALKING_DATE, make_workout

UTC = ZoneInfo("UTC")


@pytest.fixture
def sample_workouts():
    """Swimming (newer) and Walking (older), in stored order."""
    return [
        make_workout("Swimming", duration=32, distance=1, date=SWIMMING_DATE, id="swim-1"),
        make_workout("Walking", duration=60, distance=2.5, date=WALKING_DATE, id="walk-1"),
    ]


@pytest.fixture
def blob_store():
    return MemoryBlobStore()


@pytest.fixture
def workout_store(blob_store):
    return WorkoutStore(blob_store)


@pytest.fixture
def seed_blob(blob_store):
    """Write raw entries into the blob store under the workouts key."""
    def _seed(entries, key: str = "workouts"):
        blob_store._data[key] = json.dumps(entries)
    return _seed


@pytest.fixture
def client(workout_store):
    """Test client with the workout store swapped for an in-memory one."""
    app.dependency_overrides[get_workout_store] = lambda: workout_store
    app.dependency_overrides[get_display_timezone] = lambda: UTC
    yield TestClient(app)
    app.dependency_overrides.pop(get_workout_store, None)
    app.dependency_overrides.pop(get_display_timezone, None)
