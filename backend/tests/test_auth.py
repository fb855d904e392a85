from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from conftest import STRONG_PASSWORD
from skill_bridge.services.auth import create_access_token, verify_auth_token


def test_register_creates_incomplete_profile(client, register):
    account = register("NewStudent", email="New@Example.com", display_name="Asha")
    assert account["payload"]["user_id"] == "newstudent"
    assert account["payload"]["profile_completed"] is False

    me = client.get("/auth/me", headers=account["headers"]).json()
    assert me == {
        "user_id": "newstudent",
        "email": "new@example.com",
        "display_name": "Asha",
        "profile_completed": False,
    }


def test_register_rejects_weak_password_and_duplicates(client, register):
    response = client.post("/auth/register", json={"username": "student1", "password": "short"})
    assert response.status_code == 400

    register("student1")
    response = client.post("/auth/register", json={"username": "Student1", "password": STRONG_PASSWORD})
    assert response.status_code == 409


def test_login_and_refresh_rotation(client, register):
    register("student1")
    response = client.post("/api/auth/login", json={"username": "student1", "password": STRONG_PASSWORD})
    assert response.status_code == 200
    refresh_token = response.json()["refresh_token"]

    refreshed = client.post("/api/auth/refresh", json={"refresh_token": refresh_token})
    assert refreshed.status_code == 200
    assert refreshed.json()["user_id"] == "student1"

    reused = client.post("/api/auth/refresh", json={"refresh_token": refresh_token})
    assert reused.status_code == 401


def test_logout_revokes_refresh_session(client, register):
    account = register("student1")
    refresh_token = account["payload"]["refresh_token"]
    response = client.post("/auth/logout", json={"refresh_token": refresh_token})
    assert response.json() == {"ok": True, "message": "Signed out."}
    assert client.post("/auth/refresh", json={"refresh_token": refresh_token}).status_code == 401


def test_login_failures_are_rate_limited(client, register, monkeypatch):
    from skill_bridge.core.ratelimit import auth_login_rate_limiter

    monkeypatch.setattr(auth_login_rate_limiter, "limit", 2)
    register("student1")
    bad = {"username": "student1", "password": "Wrong!Pass1"}
    assert client.post("/auth/login", json=bad).status_code == 401
    assert client.post("/auth/login", json=bad).status_code == 401
    assert client.post("/auth/login", json=bad).status_code == 429


def test_successful_login_clears_failed_attempts(client, register, monkeypatch):
    from skill_bridge.core.ratelimit import auth_login_rate_limiter

    monkeypatch.setattr(auth_login_rate_limiter, "limit", 2)
    register("student1")
    bad = {"username": "student1", "password": "Wrong!Pass1"}
    good = {"username": "student1", "password": STRONG_PASSWORD}
    assert client.post("/auth/login", json=bad).status_code == 401
    assert client.post("/auth/login", json=good).status_code == 200
    assert client.post("/auth/login", json=bad).status_code == 401
    assert client.post("/auth/login", json=bad).status_code == 401
    assert client.post("/auth/login", json=bad).status_code == 429


def test_protected_routes_need_a_valid_token(client):
    assert client.get("/auth/me").json()["detail"] == "Missing X-Auth-Token header"
    response = client.get("/auth/me", headers={"X-Auth-Token": "garbage"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired auth token"


def test_access_tokens_round_trip():
    token = create_access_token("student1")
    assert verify_auth_token(token) == "student1"
    payload, signature = token.split(".", 1)
    assert verify_auth_token(f"{payload}.{signature[:-2]}xx") is None
