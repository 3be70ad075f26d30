import uuid
from types import SimpleNamespace
from fastapi.testclient import TestClient
from liftlog.main import app
from liftlog.db import SessionLocal
from liftlog.repositories.workout_log_repo import WorkoutLogRepository, latest_per_set_number
from liftlog.routers.workouts import parse_id_list
import pytest

client = TestClient(app)

def make_exercise():
    r = client.post("/api/exercises", json={"name": f"Ex {uuid.uuid4().hex[:8]}", "instructions": "x"})
    assert r.status_code == 201, r.text
    return r.json()["id"]

def log_sets(performed_at, sets):
    r = client.post("/api/workouts", json={"performedAt": performed_at, "sets": sets})
    assert r.status_code == 201, r.text
    return r.json()["id"]

def row(exercise_id, set_number, weight, reps):
    return SimpleNamespace(exercise_id=exercise_id, set_number=set_number, weight=weight, reps=reps)


# --- latest_per_set_number (pure fold) ---

def test_fold_keeps_first_seen_per_set_number():
    rows = [row(1, 1, 100, 8), row(1, 2, 100, 6), row(1, 1, 95, 8)]
    assert latest_per_set_number(rows) == {
        1: [
            {"weight": 100.0, "reps": 8, "set_number": 1},
            {"weight": 100.0, "reps": 6, "set_number": 2},
        ]
    }

def test_fold_sorts_by_set_number_and_groups_per_exercise():
    rows = [row(2, 3, 40, 10), row(1, 2, 50, 5), row(2, 1, 45, 9), row(1, 1, 55, 4)]
    result = latest_per_set_number(rows)
    assert [s["set_number"] for s in result[1]] == [1, 2]
    assert [s["set_number"] for s in result[2]] == [1, 3]

def test_fold_null_weight_becomes_zero():
    assert latest_per_set_number([row(7, 1, None, 12)]) == {7: [{"weight": 0.0, "reps": 12, "set_number": 1}]}

def test_fold_empty():
    assert latest_per_set_number([]) == {}


# --- parse_id_list ---

def test_parse_id_list():
    assert parse_id_list(None) == []
    assert parse_id_list("") == []
    assert parse_id_list("3, 1,,3") == [3, 1, 3]
    with pytest.raises(ValueError):
        parse_id_list("1,two")


# --- endpoint ---

def test_most_recent_per_set_number_wins():
    ex = make_exercise()
    log_sets("2024-01-01T10:00:00", [{"exerciseId": ex, "setNumber": 1, "weight": 95, "reps": 8}])
    log_sets("2024-01-08T10:00:00", [
        {"exerciseId": ex, "setNumber": 1, "weight": 100, "reps": 8},
        {"exerciseId": ex, "setNumber": 2, "weight": 100, "reps": 6},
    ])
    r = client.get("/api/workouts/last-weights", params={"exerciseIds": str(ex)})
    assert r.status_code == 200
    assert r.json() == {
        str(ex): [
            {"weight": 100.0, "reps": 8, "setNumber": 1},
            {"weight": 100.0, "reps": 6, "setNumber": 2},
        ]
    }

def test_recency_follows_performed_at_not_entry_order():
    ex = make_exercise()
    log_sets("2024-03-10T10:00:00", [{"exerciseId": ex, "setNumber": 1, "weight": 80, "reps": 5}])
    # back-filled older session entered afterwards
    log_sets("2024-03-01T10:00:00", [{"exerciseId": ex, "setNumber": 1, "weight": 70, "reps": 5}])
    body = client.get("/api/workouts/last-weights", params={"exerciseIds": str(ex)}).json()
    assert body[str(ex)] == [{"weight": 80.0, "reps": 5, "setNumber": 1}]

def test_multiple_exercises_and_missing_history():
    a, b, never = make_exercise(), make_exercise(), make_exercise()
    log_sets("2024-02-01T10:00:00", [
        {"exerciseId": a, "setNumber": 1, "weight": 20, "reps": 10},
        {"exerciseId": b, "setNumber": 1, "reps": 15},
    ])
    body = client.get("/api/workouts/last-weights", params={"exerciseIds": f"{a},{b},{never}"}).json()
    assert body[str(a)] == [{"weight": 20.0, "reps": 10, "setNumber": 1}]
    assert body[str(b)] == [{"weight": 0.0, "reps": 15, "setNumber": 1}]
    assert str(never) not in body

def test_empty_request_returns_empty_mapping():
    assert client.get("/api/workouts/last-weights").json() == {}
    assert client.get("/api/workouts/last-weights", params={"exerciseIds": ""}).json() == {}

def test_non_numeric_ids_rejected():
    r = client.get("/api/workouts/last-weights", params={"exerciseIds": "1,abc"})
    assert r.status_code == 400

def test_window_bounds_candidates_per_exercise():
    ex = make_exercise()
    log_sets("2023-01-01T10:00:00", [{"exerciseId": ex, "setNumber": 2, "weight": 50, "reps": 5}])
    for day in range(2, 5):
        log_sets(f"2023-01-0{day}T10:00:00", [{"exerciseId": ex, "setNumber": 1, "weight": 60, "reps": 5}])

    with SessionLocal() as db:
        repo = WorkoutLogRepository(db)
        assert [s["set_number"] for s in repo.last_weights([ex], window=3)[ex]] == [1]
        assert [s["set_number"] for s in repo.last_weights([ex], window=4)[ex]] == [1, 2]
        assert repo.last_weights([]) == {}
