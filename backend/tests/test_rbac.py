from fastapi.testclient import TestClient
from app.main import app
from app.db import SessionLocal
from app.repositories.user_repo import UserRepository
from app.schemas.enums import UserRole
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"
def uniq(prefix="u"): return f"{prefix}-{uuid.uuid4().hex[:8]}@ex.com"

def make_user(email=None, role=None):
    email = email or uniq()
    r = client.post("/auth/register", json={"email": email, "name": "U", "password": PWD})
    assert r.status_code == 201, r.text
    user_id = r.json()["id"]
    if role is not None:
        # promote via repo (no admin bootstrap endpoint)
        db = SessionLocal()
        UserRepository(db).set_role(user_id, role=role)
        db.close()
    # re-login after promotion so the token's role claim is current
    tok = client.post("/auth/login", json={"email": email, "password": PWD}).json()["access_token"]
    return user_id, {"Authorization": f"Bearer {tok}"}

def test_list_users_forbidden_for_client():
    _, h = make_user()
    r = client.get("/users", headers=h)
    assert r.status_code == 403, r.text
    assert r.json()["detail"] == "Insufficient role"

def test_list_users_for_staff_filters_by_role():
    coach_id, h = make_user(uniq("coach"), UserRole.coach)
    r = client.get("/users", headers=h, params={"role": "coach", "limit": 200})
    assert r.status_code == 200
    body = r.json()
    assert body and all(u["role"] == "coach" for u in body)
    assert coach_id in {u["id"] for u in body}

def test_owner_or_staff_can_read_user():
    owner_id, owner_h = make_user()
    _, other_h = make_user()
    _, coach_h = make_user(uniq("coach"), UserRole.coach)

    assert client.get(f"/users/{owner_id}", headers=owner_h).status_code == 200
    assert client.get(f"/users/{owner_id}", headers=other_h).status_code == 403
    assert client.get(f"/users/{owner_id}", headers=coach_h).status_code == 200
    assert client.get("/users/999999", headers=coach_h).status_code == 404

def test_admin_creates_and_promotes():
    _, admin_h = make_user(uniq("admin"), UserRole.admin)
    email = uniq("new")
    r = client.post("/users", headers=admin_h, json={"email": email, "name": "New Coach", "role": "coach"})
    assert r.status_code == 201, r.text
    new_id = r.json()["id"]
    assert r.json()["role"] == "coach"

    # staff-created accounts cannot log in until a password is set
    assert client.post("/auth/login", json={"email": email, "password": PWD}).status_code == 401

    r = client.patch(f"/users/{new_id}/role", headers=admin_h, json={"role": "admin"})
    assert r.status_code == 200
    assert r.json()["role"] == "admin"
    assert client.patch("/users/999999/role", headers=admin_h, json={"role": "admin"}).status_code == 404

def test_coach_cannot_change_roles():
    _, coach_h = make_user(uniq("coach"), UserRole.coach)
    target_id, _ = make_user()
    r = client.patch(f"/users/{target_id}/role", headers=coach_h, json={"role": "admin"})
    assert r.status_code == 403

def test_duplicate_email_create_rejected():
    dup_email = uniq("dupe")
    make_user(dup_email)
    _, admin_h = make_user(uniq("admin"), UserRole.admin)
    r = client.post("/users", headers=admin_h, json={"email": dup_email, "name": "Another"})
    assert r.status_code == 400, r.text
    assert "already" in r.json()["detail"].lower()

def test_client_cannot_act_for_another_client():
    victim_id, _ = make_user()
    _, h = make_user()
    assert client.get("/logs", headers=h, params={"user_id": victim_id}).status_code == 403
    assert client.get("/achievements", headers=h, params={"user_id": victim_id}).status_code == 403
    assert client.get("/profile", headers=h, params={"user_id": victim_id}).status_code == 403

def test_coach_can_act_for_a_client():
    client_id, _ = make_user()
    _, coach_h = make_user(uniq("coach"), UserRole.coach)
    r = client.put("/profile", headers=coach_h, params={"user_id": client_id},
                   json={"weight_kg": 70, "experience_level": "beginner"})
    assert r.status_code == 200, r.text
    assert r.json()["user_id"] == client_id
    assert client.get("/logs", headers=coach_h, params={"user_id": client_id}).json() == []

def test_expired_token_rejected(monkeypatch):
    _, h = make_user()

    # Patch the exact symbol used in the guard
    from jose.exceptions import ExpiredSignatureError
    def fake_decode(_): raise ExpiredSignatureError()

    # deps.auth imports decode_token at import-time
    import app.deps.auth as deps_auth
    monkeypatch.setattr(deps_auth, "decode_token", fake_decode)

    r = client.get("/logs", headers=h)
    assert r.status_code == 401, r.text
    assert r.json()["detail"] == "Token expired"
