"""HTTP tests for bookings."""

from __future__ import annotations

import pytest


@pytest.fixture()
def with_service(diocese_example):
    return diocese_example.service(70, church_id=5, amount_paise=1500)


def test_create_and_read_booking(client, with_service):
    created = client.post(
        "/api/bookings",
        json={
            "service_id": 70,
            "parishioner_id": 1,
            "church_id": 5,
            "amount_paise": 1500,
            "priest_id": 2,
        },
    )

    assert created.status_code == 201
    booking = created.json()["data"]
    assert booking["status"] == "PENDING"
    assert booking["service_name"] == "Service 70"
    assert booking["parishioner_name"] == "User 1"
    assert booking["priest_name"] == "User 2"
    assert booking["amount_rupees"] == 15.0

    fetched = client.get(f"/api/bookings/{booking['id']}").json()["data"]
    assert fetched == booking
    assert [b["id"] for b in client.get("/api/bookings").json()["data"]] == [booking["id"]]


def test_missing_fields_are_rejected(client, with_service):
    response = client.post("/api/bookings", json={"service_id": 70, "church_id": 5})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Missing required fields"}


def test_service_must_belong_to_the_church(client, with_service):
    response = client.post(
        "/api/bookings",
        json={"service_id": 70, "parishioner_id": 3, "church_id": 6, "amount_paise": 1500},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Service is not offered by this church"


def test_assigned_priest_must_hold_priest_role(client, with_service):
    response = client.post(
        "/api/bookings",
        json={
            "service_id": 70,
            "parishioner_id": 1,
            "church_id": 5,
            "amount_paise": 1500,
            "priest_id": 3,
        },
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Assigned user is not a priest"


def test_status_update(client, with_service):
    with_service.booking(
        80, service_id=70, parishioner_id=1, church_id=5, amount_paise=1500
    )

    response = client.patch("/api/bookings/80/status", json={"status": "confirmed"})

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "CONFIRMED"


def test_invalid_status_is_rejected(client, with_service):
    with_service.booking(
        80, service_id=70, parishioner_id=1, church_id=5, amount_paise=1500
    )

    response = client.patch("/api/bookings/80/status", json={"status": "ARCHIVED"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid status"}
    assert client.get("/api/bookings/80").json()["data"]["status"] == "PENDING"


def test_status_update_for_missing_booking(client, with_service):
    response = client.patch("/api/bookings/999/status", json={"status": "CANCELLED"})

    assert response.status_code == 404
    assert response.json()["error"] == "Booking not found"
