"""HTTP tests for the notification endpoints."""

from __future__ import annotations

import pytest


@pytest.fixture()
def seeded(diocese_example):
    return diocese_example


def _create(client, **overrides):
    payload = {
        "sender_id": 50,
        "target_type": "DIOCESE",
        "target_id": 2,
        "message": "Diocesan assembly on Sunday",
    }
    payload.update(overrides)
    return client.post("/api/notifications", json=payload)


def test_create_returns_envelope_with_recipient_count(client, seeded):
    response = _create(client)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Notification created successfully"
    assert body["recipients_count"] == 4
    assert isinstance(body["notification_id"], int)


def test_create_for_empty_audience_succeeds(client, seeded):
    response = _create(client, target_type="FORANE", target_id=404)

    assert response.status_code == 201
    assert response.json()["recipients_count"] == 0


def test_invalid_target_type_is_a_bad_request(client, seeded):
    response = _create(client, target_type="PARISH")

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid target type"}
    assert client.get("/api/notifications").json()["data"] == []


def test_missing_field_is_a_bad_request(client, seeded):
    response = client.post(
        "/api/notifications", json={"sender_id": 50, "target_type": "ALL"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "message" in body["error"]


def test_unknown_sender_is_not_found(client, seeded):
    response = _create(client, sender_id=999)

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Sender not found"}


def test_user_notifications_show_delivery_status(client, seeded):
    notification_id = _create(client).json()["notification_id"]

    response = client.get("/api/notifications/user/3")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    [entry] = body["data"]
    assert entry["notification_id"] == notification_id
    assert entry["message"] == "Diocesan assembly on Sunday"
    assert entry["sender_name"] == "User 50"
    assert entry["target_type"] == "DIOCESE"
    assert entry["delivery_status"] == "PENDING"
    assert entry["attempt_count"] == 0
    assert entry["last_attempt_at"] is None


def test_mark_delivered_twice_counts_both_attempts(client, seeded):
    notification_id = _create(client).json()["notification_id"]
    payload = {"notification_id": notification_id, "user_id": 4}

    first = client.patch("/api/notifications/delivered", json=payload)
    second = client.patch("/api/notifications/delivered", json=payload)

    assert first.status_code == 200
    assert first.json()["message"] == "Marked as delivered"
    assert second.status_code == 200
    data = second.json()["data"]
    assert data["status"] == "SENT"
    assert data["attempt_count"] == 2
    assert data["last_attempt_at"] is not None


def test_mark_delivered_for_non_recipient_is_not_found(client, seeded):
    notification_id = _create(client).json()["notification_id"]

    response = client.patch(
        "/api/notifications/delivered",
        json={"notification_id": notification_id, "user_id": 50},
    )

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Recipient not found"}
    statuses = [
        entry["delivery_status"]
        for entry in client.get("/api/notifications").json()["data"]
    ]
    assert statuses == ["PENDING"] * 4


def test_list_can_be_filtered_by_recipient(client, seeded):
    _create(client)
    _create(client, target_type="PRIEST", target_id=None, message="Clergy meeting")

    everything = client.get("/api/notifications").json()["data"]
    for_priest = client.get("/api/notifications", params={"user_id": 2}).json()["data"]

    assert len(everything) == 6
    assert [entry["message"] for entry in for_priest] == [
        "Clergy meeting",
        "Diocesan assembly on Sunday",
    ]
    assert {entry["recipient_id"] for entry in for_priest} == {2}


def test_unknown_target_user_is_a_storage_error(client, seeded):
    response = _create(client, target_type="USER", target_id=999)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert isinstance(body["error"], str) and body["error"]
