"""HTTP tests for churches, users and the health check."""

from __future__ import annotations

from app.infrastructure.security import verify_password
from app.infrastructure.models import UserModel


def test_health_reports_database_ok(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Database connection OK"}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_church_lifecycle(client, diocese_example):
    created = client.post(
        "/api/churches",
        json={"forane_id": 11, "name": "St. Thomas Church", "phone": "0484-123456"},
    )
    assert created.status_code == 201
    church = created.json()["data"]
    assert church["forane_name"] == "Forane 11"
    assert church["diocese_name"] == "Diocese 2"

    updated = client.put(
        f"/api/churches/{church['id']}", json={"address": "Market Road"}
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["address"] == "Market Road"
    assert updated.json()["data"]["name"] == "St. Thomas Church"

    names = [item["name"] for item in client.get("/api/churches").json()["data"]]
    assert names == sorted(names)
    assert "St. Thomas Church" in names

    deleted = client.delete(f"/api/churches/{church['id']}")
    assert deleted.status_code == 200
    missing = client.get(f"/api/churches/{church['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"success": False, "error": "Church not found"}


def test_church_requires_existing_forane(client, diocese_example):
    response = client.post("/api/churches", json={"forane_id": 999, "name": "Nowhere"})

    assert response.status_code == 404
    assert response.json()["error"] == "Forane not found"


def test_register_user_hashes_password(client, diocese_example, db_session):
    response = client.post(
        "/api/users",
        json={
            "name": "Fr. Joseph",
            "email": "joseph@parish.org",
            "password": "Sup3rSecret",
            "role_id": 2,
            "church_id": 8,
            "ordination_date": "2001-04-20",
        },
    )

    assert response.status_code == 201
    user = response.json()["data"]
    assert user["role"] == "PRIEST"
    assert user["church_name"] == "Church 8"
    assert user["ordination_date"] == "2001-04-20"
    assert "password" not in user and "password_hash" not in user

    stored = db_session.get(UserModel, user["id"])
    assert stored.password_hash != "Sup3rSecret"
    assert verify_password("Sup3rSecret", stored.password_hash)


def test_register_user_rejects_duplicate_email(client, diocese_example):
    response = client.post(
        "/api/users",
        json={
            "name": "Duplicate",
            "email": "user1@example.com",
            "password": "Sup3rSecret",
            "role_id": 3,
        },
    )

    assert response.status_code == 400
    assert response.json()["error"] == "User with this email already exists"


def test_update_user_moves_church(client, diocese_example):
    response = client.put("/api/users/1", json={"church_id": 8, "phone": "9876543210"})

    assert response.status_code == 200
    user = response.json()["data"]
    assert user["church_id"] == 8
    assert user["phone"] == "9876543210"
    assert client.get("/api/users/1").json()["data"]["church_name"] == "Church 8"


def test_toggle_status_changes_all_audience(client, diocese_example):
    response = client.patch("/api/users/60/toggle-status")
    assert response.status_code == 200
    assert response.json()["data"]["is_active"] is True

    created = client.post(
        "/api/notifications",
        json={"sender_id": 50, "target_type": "ALL", "message": "Everyone"},
    )
    assert created.json()["recipients_count"] == 6


def test_missing_user_is_not_found(client, diocese_example):
    assert client.get("/api/users/999").status_code == 404
    assert client.delete("/api/users/999").json() == {
        "success": False,
        "error": "User not found",
    }


def test_user_with_notifications_cannot_be_deleted(client, diocese_example):
    client.post(
        "/api/notifications",
        json={"sender_id": 50, "target_type": "USER", "target_id": 3, "message": "Hi"},
    )

    response = client.delete("/api/users/3")

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "User has related records and cannot be deleted; deactivate it instead",
    }
    assert client.get("/api/users/3").status_code == 200


def test_unreferenced_user_can_be_deleted(client, diocese_example):
    assert client.delete("/api/users/1").status_code == 200
    assert client.get("/api/users/1").status_code == 404


def test_openapi_documents_error_envelope(client):
    schema = client.get("/openapi.json").json()

    responses = schema["paths"]["/api/bookings"]["get"]["responses"]
    assert responses["404"]["content"]["application/json"]["schema"] == {
        "$ref": "#/components/schemas/ErrorResponse"
    }
