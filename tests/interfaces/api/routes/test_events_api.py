"""HTTP tests for church and priest events."""

from __future__ import annotations


def _create(client, **overrides):
    payload = {
        "entity_type": "CHURCH",
        "entity_id": 5,
        "title": "Parish feast",
        "start_time": "2026-12-24T23:00:00+05:30",
        "end_time": "2026-12-25T01:00:00+05:30",
    }
    payload.update(overrides)
    return client.post("/api/events", json=payload)


def test_event_lifecycle(client, diocese_example):
    created = _create(client, created_by=50)
    assert created.status_code == 201
    event = created.json()["data"]
    assert event["visibility"] == "PUBLIC"

    updated = client.put(
        f"/api/events/{event['id']}", json={"title": "Christmas vigil", "visibility": "private"}
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["title"] == "Christmas vigil"
    assert updated.json()["data"]["visibility"] == "PRIVATE"

    assert client.delete(f"/api/events/{event['id']}").status_code == 200
    assert client.get(f"/api/events/{event['id']}").json()["error"] == "Event not found"


def test_priest_and_church_calendars(client, diocese_example):
    _create(client, title="Church event")
    _create(
        client,
        entity_type="PRIEST",
        entity_id=2,
        title="Retreat",
        start_time="2026-11-01T09:00:00+05:30",
        end_time=None,
    )

    priest = client.get("/api/events/priest/2").json()["data"]
    church = client.get("/api/events/church/5").json()["data"]
    by_query = client.get("/api/events", params={"priest_id": 2}).json()["data"]

    assert [e["title"] for e in priest] == ["Retreat"]
    assert [e["title"] for e in church] == ["Church event"]
    assert by_query == priest
    assert [e["title"] for e in client.get("/api/events").json()["data"]] == [
        "Retreat",
        "Church event",
    ]


def test_priest_event_requires_a_priest(client, diocese_example):
    response = _create(client, entity_type="PRIEST", entity_id=1)

    assert response.status_code == 400
    assert response.json()["error"] == "User is not a priest"


def test_end_before_start_is_rejected(client, diocese_example):
    response = _create(client, end_time="2026-12-24T20:00:00+05:30")

    assert response.status_code == 400
    assert response.json()["error"] == "end_time cannot be before start_time"


def test_empty_update_is_rejected(client, diocese_example):
    event_id = _create(client).json()["data"]["id"]

    response = client.put(f"/api/events/{event_id}", json={})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No fields to update"}


def test_unknown_entity_type(client, diocese_example):
    response = _create(client, entity_type="FORANE")

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid entity type"
