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
    r = client.post("/auth/register", json={"email": email, "name": "P", "password": PWD})
    if role is not None:
        db = SessionLocal()
        UserRepository(db).set_role(r.json()["id"], role=role)
        db.close()
    t = client.post("/auth/login", json={"email": email, "password": PWD}).json()["access_token"]
    return {"Authorization": f"Bearer {t}"}

COACH = token(UserRole.coach)
CLIENT = token()

def create_program(**kw):
    body = {"name": "Hypertrophy Block", "split_style": "upper_lower", "periodization": "linear",
            "duration_weeks": 6, "sessions_per_week": 4}
    body.update(kw)
    return client.post("/programs", headers=COACH, json=body)

def test_create_program_builds_slots():
    r = create_program()
    assert r.status_code == 201, r.text
    program = r.json()
    assert program["slot_count"] == 24

    slots = client.get(f"/programs/{program['id']}/slots", headers=CLIENT).json()
    assert len(slots) == 24
    first = slots[0]
    assert (first["slot_id"], first["label"], first["phase"]) == ("w1d1", "Upper Body A", "Accumulation")
    assert [s["day_of_week"] for s in slots[:4]] == [1, 2, 4, 5]
    assert {s["phase"] for s in slots if s["week_number"] == 6} == {"Deload"}

def test_preferred_days():
    program = create_program(sessions_per_week=3, preferred_days=[2, 4, 6]).json()
    slots = client.get(f"/programs/{program['id']}/slots", headers=CLIENT).json()
    assert [s["slot_id"] for s in slots[:3]] == ["w1d2", "w1d4", "w1d6"]

def test_invalid_program_rejected():
    assert create_program(sessions_per_week=8).status_code == 422
    assert create_program(duration_weeks=0).status_code == 422
    assert create_program(split_style="bro_split").status_code == 422
    assert create_program(preferred_days=[0, 3]).status_code == 422

def test_clients_cannot_create_programs():
    r = client.post("/programs", headers=CLIENT, json={
        "name": "Mine", "duration_weeks": 4, "sessions_per_week": 3,
    })
    assert r.status_code == 403

def test_get_program():
    program = create_program(split_style="push_pull_legs", periodization="block").json()
    r = client.get(f"/programs/{program['id']}", headers=CLIENT)
    assert r.status_code == 200
    assert r.json()["periodization"] == "block"
    assert client.get("/programs/999999", headers=CLIENT).status_code == 404
    assert client.get("/programs/999999/slots", headers=CLIENT).status_code == 404

def test_slot_exercises():
    program = create_program().json()
    ex = client.post("/exercises", headers=COACH, json={"name": f"Row {uuid.uuid4().hex[:6]}",
                                                        "movement_pattern": "pull"}).json()
    url = f"/programs/{program['id']}/slots/w1d1/exercises"
    r = client.post(url, headers=COACH, json={"exercise_id": ex["id"], "order_index": 1, "sets": 4, "reps": "8-12"})
    assert r.status_code == 201, r.text
    assert r.json()["slot_id"] == "w1d1"
    assert [x["reps"] for x in client.get(url, headers=CLIENT).json()] == ["8-12"]

    assert client.post(url, headers=CLIENT, json={"exercise_id": ex["id"]}).status_code == 403
    missing_slot = f"/programs/{program['id']}/slots/w9d9/exercises"
    assert client.post(missing_slot, headers=COACH, json={"exercise_id": ex["id"]}).status_code == 404
    assert client.get(missing_slot, headers=CLIENT).status_code == 404
    assert client.post(url, headers=COACH, json={"exercise_id": 999999}).status_code == 404
    assert client.post(url, headers=COACH, json={"exercise_id": ex["id"], "intensity_pct": 120}).status_code == 422

def test_repeated_preferred_days_rejected():
    r = create_program(sessions_per_week=3, preferred_days=[1, 1, 3])
    assert r.status_code == 422
    assert "repeat" in r.text

def test_client_profile_days_feed_the_plan():
    email = uniq()
    client_id = client.post("/auth/register", json={"email": email, "name": "C", "password": PWD}).json()["id"]
    tok = client.post("/auth/login", json={"email": email, "password": PWD}).json()["access_token"]
    client.put("/profile", headers={"Authorization": f"Bearer {tok}"}, json={"preferred_days": [2, 4, 7]})

    program = create_program(sessions_per_week=3, client_id=client_id).json()
    slots = client.get(f"/programs/{program['id']}/slots", headers=CLIENT).json()
    assert [s["day_of_week"] for s in slots[:3]] == [2, 4, 7]

    # explicit days win over the profile
    program = create_program(sessions_per_week=3, client_id=client_id, preferred_days=[1, 3, 5]).json()
    slots = client.get(f"/programs/{program['id']}/slots", headers=CLIENT).json()
    assert [s["day_of_week"] for s in slots[:3]] == [1, 3, 5]

    assert create_program(client_id=999999).status_code == 404
