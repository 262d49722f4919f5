"""HTTP client for the workout API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.workout import HistorySummary, WorkoutEntryRead

log = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response; message is the server's `error` text when present."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """Thin wrapper over httpx. Pass `http` to reuse a client (e.g. a TestClient)."""

    def __init__(self, base_url: str = "", http: httpx.Client | None = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self.http = http or httpx.Client(timeout=timeout)

    def _request(self, method: str, path: str, **kwargs: Any) -> dict:
        resp = self.http.request(method, f"{self.base_url}{path}", **kwargs)
        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not resp.is_success:
            message = data.get("error") if isinstance(data, dict) else None
            log.debug("%s %s failed with %s", method, path, resp.status_code)
            raise ApiError(message or f"Request failed: {resp.status_code}", resp.status_code)
        return data if isinstance(data, dict) else {}

    def list_exercises(self) -> list[ExerciseRead]:
        data = self._request("GET", "/exercises")
        return [ExerciseRead.model_validate(i) for i in data.get("items") or []]

    def latest_workout(self, exercise: str) -> WorkoutEntryRead | None:
        data = self._request("GET", "/workouts/latest", params={"exercise": exercise})
        item = data.get("item")
        return WorkoutEntryRead.model_validate(item) if item else None

    def workout_history(self, exercise: str, limit: int = 50) -> list[WorkoutEntryRead]:
        data = self._request("GET", "/workouts", params={"exercise": exercise, "limit": limit})
        return [WorkoutEntryRead.model_validate(i) for i in data.get("items") or []]

    def workout_summary(self, exercise: str, limit: int = 50) -> HistorySummary | None:
        data = self._request("GET", "/workouts/summary", params={"exercise": exercise, "limit": limit})
        item = data.get("item")
        return HistorySummary.model_validate(item) if item else None

    def log_workout(
        self,
        exercise_name: str,
        sets: list[dict[str, Any]],
        workout_date: str | None = None,
    ) -> WorkoutEntryRead:
        body: dict[str, Any] = {"exerciseName": exercise_name, "sets": sets}
        if workout_date:
            body["workoutDate"] = workout_date
        data = self._request("POST", "/workouts", json=body)
        return WorkoutEntryRead.model_validate(data["item"])

    def close(self) -> None:
        """Close the underlying client only if this instance created it."""
        if self._owns_http:
            self.http.close()
