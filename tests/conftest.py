"""
Pytest fixtures for Mood Tracker tests.
"""
import sys
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the project root is on sys.path so tests can import the server package.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from server.mood_api.config import Settings  # noqa: E402
from server.mood_api.main import create_app  # noqa: E402
from server.mood_api.services.mood_service import MoodService  # noqa: E402
from server.mood_api.store import InMemoryMoodStore, JsonFileMoodStore  # noqa: E402


# A Wednesday; the calendar week around it runs 2024-12-08 (Sun) to 2024-12-14 (Sat).
FIXED_TODAY = date(2024, 12, 11)

SAMPLE_RECORD = {"overall": 1, "home": 2, "work": -1, "health": 0, "sleep": 1, "social": 2}


def make_record(value: int = 0, **overrides) -> dict:
    """Build a complete record with every dimension at value."""
    record = {dim_id: value for dim_id in SAMPLE_RECORD}
    record.update(overrides)
    return record


@pytest.fixture
def sample_record():
    return dict(SAMPLE_RECORD)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "db.json"


@pytest.fixture
def file_store(db_path):
    return JsonFileMoodStore(db_path)


@pytest.fixture
def memory_store():
    return InMemoryMoodStore()


@pytest.fixture
def service(memory_store):
    return MoodService(memory_store, today=lambda: FIXED_TODAY)


@pytest.fixture
def settings(tmp_path: Path):
    return Settings(data_path=str(tmp_path / "data"))


@pytest.fixture
def client(settings, file_store):
    """TestClient over a file-backed app whose clock is pinned to FIXED_TODAY."""
    app = create_app(settings=settings, store=file_store, today=lambda: FIXED_TODAY)
    with TestClient(app) as test_client:
        yield test_client
