"""HTTP tests for payment transactions."""

from __future__ import annotations

import pytest


@pytest.fixture()
def booked(diocese_example):
    return diocese_example.service(
        70,
        church_id=5,
        amount_paise=1001,
        splits={"CHURCH": "50", "PRIEST": "30", "DIOCESE": "20"},
    ).booking(80, service_id=70, parishioner_id=1, church_id=5, amount_paise=1001)


def _record(client, **overrides):
    payload = {"church_id": 5, "amount_paise": 1001, "method": "UPI"}
    payload.update(overrides)
    return client.post("/api/transactions", json=payload)


def test_transaction_detail_includes_split_shares(client, booked):
    created = _record(client, booking_id=80, recorded_by=50)
    assert created.status_code == 201
    transaction_id = created.json()["data"]["id"]

    response = client.get(f"/api/transactions/{transaction_id}")

    assert response.status_code == 200
    transaction = response.json()["data"]
    assert transaction["service_name"] == "Service 70"
    assert transaction["parishioner_name"] == "User 1"
    assert transaction["recorded_by_name"] == "User 50"
    assert [
        (share["beneficiary_type"], share["amount_paise"])
        for share in transaction["splits"]
    ] == [("CHURCH", 501), ("PRIEST", 300), ("DIOCESE", 200)]
    assert transaction["splits"][0]["amount_rupees"] == 5.01


def test_transaction_without_booking_has_no_splits(client, booked):
    transaction_id = _record(client, method="CASH").json()["data"]["id"]

    transaction = client.get(f"/api/transactions/{transaction_id}").json()["data"]

    assert transaction["status"] == "PENDING"
    assert transaction["splits"] == []


def test_proof_upload_waits_for_review(client, booked):
    proof = _record(client, method="BANK_TRANSFER", proof_url="https://files/proof.png")
    _record(client, method="RAZORPAY", status="SUCCESS", razorpay_payment_id="pay_1")

    assert proof.json()["data"]["status"] == "PENDING_REVIEW"
    pending = client.get("/api/transactions/pending-reviews").json()["data"]
    assert [t["id"] for t in pending] == [proof.json()["data"]["id"]]

    approved = client.patch(
        f"/api/transactions/{proof.json()['data']['id']}/status",
        json={"status": "SUCCESS"},
    )
    assert approved.status_code == 200
    assert client.get("/api/transactions/pending-reviews").json()["data"] == []


def test_filters_by_church_method_and_status(client, booked):
    _record(client, method="CASH")
    _record(client, church_id=6, method="UPI")

    church_5 = client.get("/api/transactions/church/5").json()["data"]
    assert {t["church_id"] for t in church_5} == {5}

    cash = client.get("/api/transactions", params={"method": "cash"}).json()["data"]
    assert [t["method"] for t in cash] == ["CASH"]

    failed = client.get("/api/transactions", params={"status": "FAILED"}).json()["data"]
    assert failed == []


def test_unknown_method_is_rejected(client, booked):
    response = _record(client, method="CHEQUE")

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid payment method"}


def test_missing_transaction(client, booked):
    assert client.get("/api/transactions/999").json() == {
        "success": False,
        "error": "Transaction not found",
    }
    assert (
        client.patch("/api/transactions/999/status", json={"status": "FAILED"}).status_code
        == 404
    )
