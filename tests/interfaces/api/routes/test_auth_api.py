"""HTTP tests for registration, login and the current-user endpoint."""

from __future__ import annotations

import pytest


@pytest.fixture()
def registered(client, diocese_example):
    response = client.post(
        "/api/auth/register",
        json={
            "name": "Anna",
            "email": "anna@parish.org",
            "password": "Sup3rSecret",
            "church_id": 5,
        },
    )
    assert response.status_code == 201
    return response.json()


def test_register_creates_member_and_returns_token(registered):
    assert registered["success"] is True
    assert registered["token_type"] == "bearer"
    assert registered["token"]
    assert registered["user"]["role"] == "MEMBER"
    assert registered["user"]["church_name"] == "Church 5"


def test_register_requires_church(client, diocese_example):
    payload = {"name": "Ben", "email": "ben@parish.org", "password": "Sup3rSecret"}

    missing = client.post("/api/auth/register", json=payload)
    unknown = client.post("/api/auth/register", json={**payload, "church_id": 999})

    assert missing.status_code == 400
    assert missing.json()["error"] == "Church selection is required"
    assert unknown.status_code == 400
    assert unknown.json()["error"] == "Selected church does not exist"


def test_login_with_correct_password(client, registered):
    response = client.post(
        "/api/auth/login", json={"email": "anna@parish.org", "password": "Sup3rSecret"}
    )

    assert response.status_code == 200
    assert response.json()["user"]["id"] == registered["user"]["id"]


@pytest.mark.parametrize(
    ("email", "password"),
    [
        ("anna@parish.org", "wrong-password"),
        ("nobody@parish.org", "Sup3rSecret"),
        ("user1@example.com", "anything"),
    ],
)
def test_login_failures_share_one_message(client, registered, email, password):
    response = client.post("/api/auth/login", json={"email": email, "password": password})

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid credentials"}


def test_login_refused_for_inactive_user(client, registered):
    client.patch(f"/api/users/{registered['user']['id']}/toggle-status")

    response = client.post(
        "/api/auth/login", json={"email": "anna@parish.org", "password": "Sup3rSecret"}
    )

    assert response.status_code == 401


def test_me_uses_bearer_token(client, registered):
    response = client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {registered['token']}"}
    )

    assert response.status_code == 200
    assert response.json()["data"]["email"] == "anna@parish.org"


def test_me_rejects_bad_or_missing_token(client, registered):
    bad = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    missing = client.get("/api/auth/me")

    assert bad.status_code == 401
    assert bad.json() == {"success": False, "error": "Invalid token"}
    assert missing.status_code == 401
    assert missing.json()["success"] is False


def test_logout_and_reset_password(client, registered):
    logout = client.post("/api/auth/logout")
    known = client.post("/api/auth/reset-password", json={"email": "anna@parish.org"})
    unknown = client.post("/api/auth/reset-password", json={"email": "x@parish.org"})

    assert logout.json() == {"success": True, "message": "Logged out successfully"}
    assert known.json() == unknown.json() == {
        "success": True,
        "message": "If an account exists, a reset link will be sent",
    }
