"""HTTP tests for complaints."""

from __future__ import annotations


def test_complaint_lifecycle(client, diocese_example):
    created = client.post(
        "/api/complaints",
        json={"user_id": 3, "title": "Noise", "body": "Speakers too loud"},
    )
    assert created.status_code == 201
    complaint = created.json()["data"]
    assert complaint["status"] == "OPEN"
    assert complaint["complainant"] == "User 3"

    updated = client.put(
        f"/api/complaints/{complaint['id']}/status", json={"status": "in_progress"}
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["status"] == "IN_PROGRESS"

    mine = client.get("/api/complaints/user/3").json()["data"]
    assert [c["id"] for c in mine] == [complaint["id"]]
    assert client.get("/api/complaints/user/1").json()["data"] == []
    assert len(client.get("/api/complaints").json()["data"]) == 1


def test_complaint_needs_existing_user(client, diocese_example):
    response = client.post(
        "/api/complaints", json={"user_id": 999, "title": "Lost", "body": "Nobody"}
    )

    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_blank_body_is_rejected(client, diocese_example):
    response = client.post(
        "/api/complaints", json={"user_id": 3, "title": "Empty", "body": "   "}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "title and body are required"


def test_invalid_complaint_status(client, diocese_example):
    complaint_id = client.post(
        "/api/complaints", json={"user_id": 3, "title": "Noise", "body": "Loud"}
    ).json()["data"]["id"]

    response = client.put(f"/api/complaints/{complaint_id}/status", json={"status": "DONE"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid status"
    assert client.get("/api/complaints/999").status_code == 404
