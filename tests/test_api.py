"""
HTTP contract tests against a temporary SQLite database.

Covers: create workout (shape, derived metrics, validation -> 400), exercise
catalog recency, latest/history queries, summary, and error mapping.
"""

from datetime import datetime, timezone

from fastapi.testclient import TestClient

from liftlog.main import app
from liftlog.services import workout_log


# ─── POST /workouts ──────────────────────────────────────────


def test_create_workout_returns_entry_with_derived_metrics(client):
    resp = client.post(
        "/workouts",
        json={
            "exerciseName": "  Bench   Press ",
            "workoutDate": "2024-03-01",
            "sets": [{"reps": 5, "weight": 100}, {"reps": 3, "weight": 100}],
        },
    )
    assert resp.status_code == 201
    item = resp.json()["item"]
    assert item["ownerId"] == "tester"
    assert item["exerciseName"] == "Bench Press"
    assert item["exerciseNorm"] == "bench press"
    assert item["workoutDate"] == "2024-03-01"
    assert isinstance(item["createdAt"], int)
    assert item["sets"] == [
        {"setNumber": 1, "reps": 5, "weight": 100.0},
        {"setNumber": 2, "reps": 3, "weight": 100.0},
    ]
    assert item["derived"] == {"topSetWeight": 100.0, "topSetReps": 5, "est1rm": 116.67}


def test_create_workout_defaults_date_to_utc_today(log_workout):
    item = log_workout("Squat", [{"reps": 5, "weight": 140}])
    assert item["workoutDate"] == datetime.now(timezone.utc).date().isoformat()


def test_create_workout_coerces_numeric_strings_and_rounds(log_workout):
    item = log_workout("Row", [{"reps": "8", "weight": "60.125"}], "2024-03-01")
    assert item["sets"] == [{"setNumber": 1, "reps": 8, "weight": 60.13}]


def test_reps_out_of_range_is_400_with_set_index(client):
    resp = client.post(
        "/workouts",
        json={"exerciseName": "Squat", "sets": [{"reps": 5, "weight": 100}, {"reps": 201, "weight": 100}]},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "set 2: reps must be an integer between 1 and 200"}


def test_blank_exercise_name_is_400(client):
    resp = client.post("/workouts", json={"exerciseName": "   ", "sets": [{"reps": 5, "weight": 100}]})
    assert resp.status_code == 400
    assert resp.json() == {"error": "exerciseName is required"}


def test_invalid_calendar_date_is_400(client):
    resp = client.post(
        "/workouts",
        json={"exerciseName": "Squat", "workoutDate": "2024-13-40", "sets": [{"reps": 5, "weight": 100}]},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "workoutDate is invalid"}


def test_twenty_one_sets_is_400(client):
    resp = client.post(
        "/workouts",
        json={"exerciseName": "Squat", "sets": [{"reps": 5, "weight": 100}] * 21},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "sets must contain between 1 and 20 entries"}


def test_missing_body_is_treated_as_empty(client):
    resp = client.post("/workouts")
    assert resp.status_code == 400
    assert resp.json() == {"error": "exerciseName is required"}


def test_malformed_json_is_400(client):
    resp = client.post("/workouts", content="{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Request body must be valid JSON"}


def test_oversized_number_is_400(client):
    resp = client.post("/workouts", json={"exerciseName": "Squat", "sets": [{"reps": 5, "weight": 10**400}]})
    assert resp.status_code == 400
    assert resp.json() == {"error": "set 1: weight must be a number between 0 and 2000"}


def test_failed_create_stores_nothing(client):
    client.post("/workouts", json={"exerciseName": "Squat", "sets": [{"reps": 0, "weight": 100}]})
    assert client.get("/exercises").json() == {"items": []}
    assert client.get("/workouts", params={"exercise": "squat"}).json() == {"items": []}


# ─── GET /exercises ──────────────────────────────────────────


def test_exercise_catalog_is_upserted_and_sorted_by_recency(client, log_workout):
    log_workout("Bench  Press", [{"reps": 5, "weight": 100}], "2024-03-01")
    log_workout("Squat", [{"reps": 5, "weight": 140}], "2024-03-01")
    log_workout("BENCH PRESS", [{"reps": 5, "weight": 102.5}], "2024-03-03")

    items = client.get("/exercises").json()["items"]
    assert [i["exerciseNorm"] for i in items] == ["bench press", "squat"]
    assert items[0]["exerciseName"] == "BENCH PRESS"
    assert items[0]["updatedAt"] > items[1]["updatedAt"]


def test_exercise_catalog_empty(client):
    assert client.get("/exercises").json() == {"items": []}


# ─── GET /workouts/latest ────────────────────────────────────


def test_latest_workout(client, log_workout):
    log_workout("Deadlift", [{"reps": 5, "weight": 180}], "2024-03-01")
    log_workout("Deadlift", [{"reps": 3, "weight": 190}], "2024-03-08")
    log_workout("Deadlift", [{"reps": 8, "weight": 150}], "2024-03-05")

    item = client.get("/workouts/latest", params={"exercise": "  deadLIFT "}).json()["item"]
    assert item["workoutDate"] == "2024-03-08"
    assert item["derived"]["topSetWeight"] == 190.0


def test_latest_workout_unknown_exercise_is_null(client):
    resp = client.get("/workouts/latest", params={"exercise": "Curl"})
    assert resp.status_code == 200
    assert resp.json() == {"item": None}


def test_latest_requires_exercise(client):
    for params in ({}, {"exercise": "   "}):
        resp = client.get("/workouts/latest", params=params)
        assert resp.status_code == 400
        assert resp.json() == {"error": "exercise query parameter is required"}


# ─── GET /workouts ───────────────────────────────────────────


def test_history_newest_first(client, log_workout):
    log_workout("OHP", [{"reps": 5, "weight": 50}], "2024-01-01")
    log_workout("OHP", [{"reps": 5, "weight": 55}], "2024-01-03")
    log_workout("OHP", [{"reps": 5, "weight": 52.5}], "2024-01-02")
    log_workout("Squat", [{"reps": 5, "weight": 140}], "2024-01-04")

    items = client.get("/workouts", params={"exercise": "ohp"}).json()["items"]
    assert [i["workoutDate"] for i in items] == ["2024-01-03", "2024-01-02", "2024-01-01"]
    assert {i["exerciseNorm"] for i in items} == {"ohp"}


def test_history_same_date_newest_created_first(client, log_workout):
    first = log_workout("OHP", [{"reps": 5, "weight": 50}], "2024-01-01")
    second = log_workout("OHP", [{"reps": 5, "weight": 50}], "2024-01-01")

    items = client.get("/workouts", params={"exercise": "ohp"}).json()["items"]
    assert [i["createdAt"] for i in items] == [second["createdAt"], first["createdAt"]]


def test_history_limit_is_clamped(client, log_workout):
    for day in range(1, 5):
        log_workout("OHP", [{"reps": 5, "weight": 50}], f"2024-01-0{day}")

    def dates(limit):
        resp = client.get("/workouts", params={"exercise": "ohp", "limit": limit})
        return [i["workoutDate"] for i in resp.json()["items"]]

    assert dates("2") == ["2024-01-04", "2024-01-03"]
    assert dates("0") == ["2024-01-04"]
    assert len(dates("abc")) == 4
    assert len(dates("1000")) == 4


def test_history_requires_exercise(client):
    resp = client.get("/workouts")
    assert resp.status_code == 400
    assert resp.json() == {"error": "exercise query parameter is required"}


# ─── GET /workouts/summary ───────────────────────────────────


def test_summary(client, log_workout):
    log_workout("Bench", [{"reps": 1, "weight": 110}], "2024-01-01")
    log_workout("Bench", [{"reps": 5, "weight": 100}, {"reps": 3, "weight": 100}], "2024-01-02")

    item = client.get("/workouts/summary", params={"exercise": "bench"}).json()["item"]
    assert item == {
        "sessions": 2,
        "bestTopSetWeight": 110.0,
        "latestTopSetWeight": 100.0,
        "latestEst1rm": 116.67,
        "bestEst1rm": 116.67,
    }


def test_summary_without_history_is_null(client):
    assert client.get("/workouts/summary", params={"exercise": "bench"}).json() == {"item": None}


# ─── Plumbing ────────────────────────────────────────────────


def test_unknown_route_is_404(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


def test_wrong_method_on_known_path_is_404(client):
    for resp in (client.delete("/workouts"), client.put("/exercises", json={})):
        assert resp.status_code == 404
        assert resp.json() == {"error": "Not found"}


def test_cors_allows_any_origin(client):
    resp = client.get("/exercises", headers={"Origin": "https://lifts.example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/health/ready").json() == {"status": "ok", "database": "connected"}


def test_unexpected_error_is_generic_500(clock, monkeypatch):
    async def boom(db, owner_id):
        raise RuntimeError("database password is hunter2")

    monkeypatch.setattr(workout_log, "list_exercises", boom)
    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/exercises")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
