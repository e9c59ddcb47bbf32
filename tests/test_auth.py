from datetime import timedelta

import jwt

from freelancer_platform.core.config import settings
from freelancer_platform.core.security import create_access_token
from freelancer_platform.models import User

SIGNUP = {
    "email": "Jane@Example.com",
    "password": "pa55word",
    "fullName": "Jane Doe",
    "role": "freelancer",
}


def test_signup_returns_token_and_user(client, db_session):
    resp = client.post("/api/auth/signup", json=SIGNUP)
    assert resp.status_code == 201
    body = resp.json()
    assert body["token"]
    assert body["user"]["email"] == "jane@example.com"
    assert body["user"]["fullName"] == "Jane Doe"
    assert body["user"]["role"] == "freelancer"
    assert "hashed_password" not in body["user"]

    stored = db_session.query(User).filter(User.email == "jane@example.com").one()
    assert stored.hashed_password != "pa55word"


def test_signup_defaults_to_client_role(client):
    resp = client.post(
        "/api/auth/signup",
        json={"email": "c@example.com", "password": "x", "fullName": "C"},
    )
    assert resp.status_code == 201
    assert resp.json()["user"]["role"] == "client"


def test_duplicate_signup_is_rejected(client, db_session):
    assert client.post("/api/auth/signup", json=SIGNUP).status_code == 201

    resp = client.post("/api/auth/signup", json={**SIGNUP, "email": "jane@example.com"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "User already exists"
    assert db_session.query(User).filter(User.email == "jane@example.com").count() == 1


def test_signup_rejects_unknown_role(client):
    resp = client.post("/api/auth/signup", json={**SIGNUP, "role": "superuser"})
    assert resp.status_code == 400


def test_signup_rejects_admin_role_by_default(client, db_session):
    resp = client.post("/api/auth/signup", json={**SIGNUP, "role": "admin"})
    assert resp.status_code == 400
    assert db_session.query(User).count() == 0


def test_signup_admin_role_when_enabled(client, monkeypatch):
    monkeypatch.setattr(settings, "ALLOW_ADMIN_SIGNUP", True)
    resp = client.post("/api/auth/signup", json={**SIGNUP, "role": "admin"})
    assert resp.status_code == 201
    assert resp.json()["user"]["role"] == "admin"


def test_signup_requires_fields(client):
    resp = client.post("/api/auth/signup", json={"email": "x@example.com", "password": "pw"})
    assert resp.status_code == 422


def test_signup_rejects_bad_email(client):
    resp = client.post("/api/auth/signup", json={**SIGNUP, "email": "not-an-email"})
    assert resp.status_code == 422


def test_signin_token_embeds_stored_role(client, db_session):
    client.post("/api/auth/signup", json=SIGNUP)

    resp = client.post("/api/auth/signin", json={"email": "jane@example.com", "password": "pa55word"})
    assert resp.status_code == 200
    body = resp.json()

    stored = db_session.query(User).filter(User.email == "jane@example.com").one()
    payload = jwt.decode(body["token"], settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert payload["role"] == stored.role
    assert payload["email"] == stored.email
    assert payload["sub"] == str(stored.id)
    assert body["user"]["id"] == stored.id


def test_signin_email_is_case_insensitive(client):
    client.post("/api/auth/signup", json=SIGNUP)
    resp = client.post("/api/auth/signin", json={"email": "JANE@example.com", "password": "pa55word"})
    assert resp.status_code == 200


def test_signin_wrong_password(client):
    client.post("/api/auth/signup", json=SIGNUP)
    resp = client.post("/api/auth/signin", json={"email": "jane@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid credentials"


def test_signin_unknown_email(client):
    resp = client.post("/api/auth/signin", json={"email": "ghost@example.com", "password": "x"})
    assert resp.status_code == 401


def test_me_returns_current_user(client, client_user, client_headers):
    resp = client.get("/api/auth/me", headers=client_headers)
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["id"] == client_user.id
    assert user["email"] == "client@example.com"
    assert user["role"] == "client"


def test_me_without_token(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401


def test_me_with_garbage_token(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


def test_me_with_expired_token(client, client_user):
    token = create_access_token({"sub": str(client_user.id)}, expires_delta=timedelta(minutes=-1))
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_me_for_deleted_user(client, db_session, client_user, client_headers):
    db_session.delete(client_user)
    db_session.commit()
    resp = client.get("/api/auth/me", headers=client_headers)
    assert resp.status_code == 401


def test_signout(client, client_headers):
    resp = client.post("/api/auth/signout", headers=client_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logged out successfully"}


def test_signout_requires_token(client):
    assert client.post("/api/auth/signout").status_code == 401


def test_signup_race_on_same_email_returns_400(client, db_session, monkeypatch):
    from freelancer_platform.api.v1 import auth

    assert client.post("/api/auth/signup", json=SIGNUP).status_code == 201

    # Simulate a concurrent signup that passed the existence check first
    monkeypatch.setattr(auth, "get_user_by_email", lambda db, email: None)
    resp = client.post("/api/auth/signup", json=SIGNUP)

    assert resp.status_code == 400
    assert resp.json()["detail"] == "User already exists"
    assert db_session.query(User).filter(User.email == "jane@example.com").count() == 1
