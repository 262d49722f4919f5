"""
Shared test configuration.

Points the app at a throwaway SQLite file before anything imports the
settings, and hands out a TestClient per test with a fresh database.
"""

import itertools
import os
import tempfile
from pathlib import Path

import pytest

_DB_FILE = Path(tempfile.mkdtemp(prefix="liftlog-tests-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_FILE}"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["OWNER_ID"] = "tester"

from fastapi.testclient import TestClient  # noqa: E402

from liftlog.main import app  # noqa: E402
from liftlog.services import workout_log  # noqa: E402


@pytest.fixture
def clock(monkeypatch):
    """Strictly increasing created_at values (epoch ms)."""
    ticks = itertools.count(1_700_000_000_000, 1000)
    monkeypatch.setattr(workout_log, "now_ms", lambda: next(ticks))
    return ticks


@pytest.fixture
def client(clock):
    # Engine is disposed on lifespan shutdown, so the file can go between tests
    _DB_FILE.unlink(missing_ok=True)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def log_workout(client):
    """POST /workouts and return the created item."""

    def _log(exercise_name, sets, workout_date=None):
        body = {"exerciseName": exercise_name, "sets": sets}
        if workout_date is not None:
            body["workoutDate"] = workout_date
        resp = client.post("/workouts", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()["item"]

    return _log
