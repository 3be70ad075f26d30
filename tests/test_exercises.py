import uuid
from fastapi.testclient import TestClient
from liftlog.main import app

client = TestClient(app)

def uniq(prefix="Ex"): return f"{prefix} {uuid.uuid4().hex[:8]}"

def make_exercise(name=None, **extra):
    body = {"name": name or uniq(), "instructions": "Do it slowly.", **extra}
    r = client.post("/api/exercises", json=body)
    assert r.status_code == 201, r.text
    return r.json()

def test_create_and_get_roundtrip():
    ex = make_exercise(gifUrl="https://example.com/bench.gif")
    assert ex["usesWeight"] is True
    assert ex["gifUrl"] == "https://example.com/bench.gif"
    assert ex["createdAt"] and ex["updatedAt"]

    r = client.get(f"/api/exercises/{ex['id']}")
    assert r.status_code == 200
    assert r.json()["name"] == ex["name"]

def test_bodyweight_flag_and_empty_gif_url():
    ex = make_exercise(usesWeight=False, gifUrl="")
    assert ex["usesWeight"] is False
    assert ex["gifUrl"] is None

def test_duplicate_name_rejected():
    name = uniq("Dup")
    make_exercise(name)
    r = client.post("/api/exercises", json={"name": name, "instructions": "again"})
    assert r.status_code == 400
    assert "already exists" in r.json()["detail"]

def test_missing_instructions_is_400_with_error_text():
    r = client.post("/api/exercises", json={"name": uniq()})
    assert r.status_code == 400
    body = r.json()
    assert "instructions" in body["error"]
    assert body["detail"]

def test_blank_name_and_bad_url_rejected():
    assert client.post("/api/exercises", json={"name": "   ", "instructions": "x"}).status_code == 400
    r = client.post("/api/exercises", json={"name": uniq(), "instructions": "x", "gifUrl": "not a url"})
    assert r.status_code == 400
    assert "gifUrl" in r.json()["error"]

def test_list_ordered_by_name():
    tag = uuid.uuid4().hex[:6]
    make_exercise(f"zz {tag}")
    make_exercise(f"aa {tag}")
    names = [e["name"] for e in client.get("/api/exercises").json()]
    assert names == sorted(names)
    assert names.index(f"aa {tag}") < names.index(f"zz {tag}")

def test_partial_update_keeps_other_fields():
    ex = make_exercise(gifUrl="https://example.com/a.gif")
    r = client.put(f"/api/exercises/{ex['id']}", json={"instructions": "New cues"})
    assert r.status_code == 200
    body = r.json()
    assert body["instructions"] == "New cues"
    assert body["name"] == ex["name"]
    assert body["gifUrl"] == "https://example.com/a.gif"
    assert body["usesWeight"] is True

def test_update_rejects_explicit_null_name():
    ex = make_exercise()
    r = client.put(f"/api/exercises/{ex['id']}", json={"name": None})
    assert r.status_code == 400

def test_update_to_existing_name_rejected():
    a = make_exercise()
    b = make_exercise()
    r = client.put(f"/api/exercises/{b['id']}", json={"name": a["name"]})
    assert r.status_code == 400
    assert "already exists" in r.json()["detail"]

def test_missing_exercise_404():
    assert client.get("/api/exercises/999999").status_code == 404
    assert client.put("/api/exercises/999999", json={"name": uniq()}).status_code == 404
    assert client.delete("/api/exercises/999999").status_code == 404

def test_delete():
    ex = make_exercise()
    r = client.delete(f"/api/exercises/{ex['id']}")
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert client.get(f"/api/exercises/{ex['id']}").status_code == 404

def test_unhandled_error_is_generic_500(monkeypatch):
    from liftlog.repositories.exercise_repo import ExerciseRepository
    def boom(self): raise RuntimeError("connection string with secrets")
    monkeypatch.setattr(ExerciseRepository, "list", boom)

    c = TestClient(app, raise_server_exceptions=False)
    r = c.get("/api/exercises")
    assert r.status_code == 500
    assert r.json() == {"detail": "Internal server error"}
    assert "secrets" not in r.text
