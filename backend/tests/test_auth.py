from datetime import datetime, timedelta, timezone

from jose import jwt

from app.config import settings
from app.services.auth_service import ALGORITHM, create_access_token
from tests.conftest import ADMIN_EMAIL, EDITOR_EMAIL, TEST_PASSWORD, auth_headers


def test_login_success(client, seed_users):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": TEST_PASSWORD})
    assert resp.status_code == 200
    data = resp.json()
    assert data["access_token"]
    assert data["token_type"] == "bearer"
    assert data["user"]["email"] == ADMIN_EMAIL
    assert data["user"]["role"] == "admin"


def test_login_email_is_case_insensitive(client, seed_users):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL.upper(), "password": TEST_PASSWORD})
    assert resp.status_code == 200


def test_login_wrong_password(client, seed_users):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    assert resp.status_code == 401


def test_login_inactive_user(client, db, seed_users):
    seed_users["editor"].is_active = False
    db.commit()
    resp = client.post("/api/auth/login", json={"email": EDITOR_EMAIL, "password": TEST_PASSWORD})
    assert resp.status_code == 401


def test_get_me(client, seed_users):
    headers = auth_headers(client, EDITOR_EMAIL)
    resp = client.get("/api/auth/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == EDITOR_EMAIL


def test_me_rejects_garbage_token(client, seed_users):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_me_rejects_token_of_unknown_user(client, seed_users):
    token = create_access_token(9999)
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_admin_routes_require_auth(client, seed_users):
    assert client.get("/api/admin/hero-slides").status_code == 401
    assert client.put("/api/admin/singletons/site-settings", json={}).status_code == 401
    assert client.get("/api/admin/dashboard").status_code == 401


def test_change_password(client, seed_users):
    headers = auth_headers(client, EDITOR_EMAIL)
    resp = client.put(
        "/api/auth/password",
        json={"current_password": TEST_PASSWORD, "new_password": "brand-new-pass"},
        headers=headers,
    )
    assert resp.status_code == 200

    old = client.post("/api/auth/login", json={"email": EDITOR_EMAIL, "password": TEST_PASSWORD})
    assert old.status_code == 401
    new = client.post("/api/auth/login", json={"email": EDITOR_EMAIL, "password": "brand-new-pass"})
    assert new.status_code == 200


def test_change_password_rejects_wrong_current(client, seed_users):
    headers = auth_headers(client, EDITOR_EMAIL)
    resp = client.put(
        "/api/auth/password",
        json={"current_password": "wrong", "new_password": "brand-new-pass"},
        headers=headers,
    )
    assert resp.status_code == 400


def test_logout(client, seed_users):
    resp = client.post("/api/auth/logout", headers=auth_headers(client))
    assert resp.status_code == 200


def test_expired_token_is_rejected(client, seed_users):
    payload = {"sub": str(seed_users["admin"].user_id), "exp": datetime.now(timezone.utc) - timedelta(minutes=1)}
    token = jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert "expired" in resp.json()["detail"]


def test_missing_token_asks_for_bearer(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"
