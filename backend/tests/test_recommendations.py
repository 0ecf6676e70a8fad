from fastapi.testclient import TestClient
from app.main import app
from app.db import SessionLocal
from app.repositories.user_repo import UserRepository
from app.schemas.enums import UserRole
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"
def uniq(): return f"{uuid.uuid4().hex[:10]}@ex.com"

def token(role=None):
    email = uniq()
    r = client.post("/auth/register", json={"email": email, "name": "R", "password": PWD})
    if role is not None:
        db = SessionLocal()
        UserRepository(db).set_role(r.json()["id"], role=role)
        db.close()
    t = client.post("/auth/login", json={"email": email, "password": PWD}).json()["access_token"]
    return r.json()["id"], {"Authorization": f"Bearer {t}"}

_, COACH = token(UserRole.coach)

def make_exercise(**kw):
    body = {"name": f"Squat {uuid.uuid4().hex[:6]}", "movement_pattern": "squat", "is_compound": True}
    body.update(kw)
    return client.post("/exercises", headers=COACH, json=body).json()["id"]

def recommend(h, exercise_id, **params):
    r = client.get(f"/exercises/{exercise_id}/recommendation", headers=h, params=params)
    assert r.status_code == 200, r.text
    return r.json()

def test_no_history_no_profile():
    _, h = token()
    body = recommend(h, make_exercise())
    rec = body["recommendation"]
    assert rec["recommended_kg"] is None
    assert rec["confidence"] == "none"
    assert rec["trend"] == "insufficient_data"
    assert body["display"] == "--"

def test_starting_weight_from_profile():
    _, h = token()
    assert client.get("/profile", headers=h).status_code == 404
    r = client.put("/profile", headers=h, json={"gender": "male", "experience_level": "beginner", "weight_kg": 80})
    assert r.status_code == 200, r.text
    body = recommend(h, make_exercise())
    assert body["recommendation"]["recommended_kg"] == 32.5
    assert body["recommendation"]["confidence"] == "low"
    assert body["display"] == "32.5 kg"

def test_progression_after_easy_session():
    _, h = token()
    ex = make_exercise()
    client.post("/logs", headers=h, json={
        "exercise_id": ex, "sets_completed": 3, "reps_completed": "5", "weight_kg": 100, "rpe": 7,
    })
    body = recommend(h, ex)
    assert body["recommendation"]["recommended_kg"] == 105
    assert body["recommendation"]["confidence"] == "high"
    assert body["recommendation"]["last_weight_kg"] == 100
    assert recommend(h, ex, unit="lbs")["display"] == "231.5 lbs"

def test_profile_unit_drives_display():
    _, h = token()
    client.put("/profile", headers=h, json={"weight_unit": "lbs"})
    ex = make_exercise()
    client.post("/logs", headers=h, json={
        "exercise_id": ex, "sets_completed": 3, "reps_completed": "5", "weight_kg": 100, "rpe": 8,
    })
    assert recommend(h, ex)["display"] == "220.5 lbs"
    assert recommend(h, ex, unit="kg")["display"] == "100 kg"

def test_bodyweight_exercise():
    _, h = token()
    body = recommend(h, make_exercise(movement_pattern="push", is_bodyweight=True))
    assert body["recommendation"]["reasoning"] == "Focus on reps and form"
    assert body["recommendation"]["confidence"] == "high"

def test_prescribed_intensity():
    _, h = token()
    ex, other = make_exercise(), make_exercise()
    client.post("/logs", headers=h, json={
        "exercise_id": ex, "sets_completed": 3, "reps_completed": "5", "weight_kg": 100, "rpe": 8,
    })
    program = client.post("/programs", headers=COACH, json={
        "name": "Strength", "split_style": "full_body", "periodization": "linear",
        "duration_weeks": 4, "sessions_per_week": 3,
    }).json()
    item = client.post(f"/programs/{program['id']}/slots/w1d1/exercises", headers=COACH,
                       json={"exercise_id": ex, "sets": 5, "reps": "5", "intensity_pct": 80}).json()

    body = recommend(h, ex, program_exercise_id=item["id"])
    assert body["recommendation"]["estimated_1rm"] == 117
    assert body["recommendation"]["recommended_kg"] == 93.5

    r = client.get(f"/exercises/{other}/recommendation", headers=h, params={"program_exercise_id": item["id"]})
    assert r.status_code == 404

def test_unknown_exercise_404():
    _, h = token()
    assert client.get("/exercises/999999/recommendation", headers=h).status_code == 404

def test_coach_views_client_recommendation():
    client_id, h = token()
    ex = make_exercise()
    client.post("/logs", headers=h, json={
        "exercise_id": ex, "sets_completed": 3, "reps_completed": "5", "weight_kg": 100, "rpe": 10,
    })
    body = recommend(COACH, ex, user_id=client_id)
    assert body["user_id"] == client_id
    assert body["recommendation"]["recommended_kg"] == 95

    _, stranger = token()
    r = client.get(f"/exercises/{ex}/recommendation", headers=stranger, params={"user_id": client_id})
    assert r.status_code == 403
