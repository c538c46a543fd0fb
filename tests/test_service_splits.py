"""Tests for service split validation and revenue allocation."""

from __future__ import annotations

from decimal import Decimal

import pytest

from app.application.use_cases.services import create_service, update_service
from app.domain.entities import (
    BeneficiaryType,
    ServiceSplit,
    compute_split_shares,
    validate_splits,
)
from app.domain.exceptions import ValidationError


def _split(kind: str, percentage: str) -> ServiceSplit:
    return ServiceSplit(beneficiary=BeneficiaryType(kind), percentage=Decimal(percentage))


def test_shares_add_up_to_the_amount_paid():
    splits = [_split("CHURCH", "50"), _split("PRIEST", "30"), _split("DIOCESE", "20")]

    shares = compute_split_shares(1001, splits)

    assert [share.amount_paise for share in shares] == [501, 300, 200]
    assert sum(share.amount_paise for share in shares) == 1001


def test_leftover_paise_go_to_the_largest_remainder():
    splits = [
        _split("CHURCH", "33.33"),
        _split("PRIEST", "33.33"),
        _split("FORANE", "33.34"),
    ]

    shares = compute_split_shares(1000, splits)

    assert [share.amount_paise for share in shares] == [333, 333, 334]


def test_partial_splits_leave_the_rest_unallocated():
    shares = compute_split_shares(1000, [_split("PRIEST", "25")])

    assert [share.amount_paise for share in shares] == [250]


def test_no_splits_means_no_shares():
    assert compute_split_shares(500, []) == []


@pytest.mark.parametrize(
    ("splits", "message"),
    [
        (
            [_split("CHURCH", "50"), _split("CHURCH", "10")],
            "Duplicate split for beneficiary CHURCH",
        ),
        ([_split("CHURCH", "0")], "Split percentage must be between 0 and 100"),
        ([_split("CHURCH", "100.5")], "Split percentage must be between 0 and 100"),
        (
            [_split("CHURCH", "60"), _split("PRIEST", "45")],
            "Split percentages cannot exceed 100",
        ),
    ],
)
def test_invalid_split_configurations_are_rejected(splits, message):
    with pytest.raises(ValidationError, match=message):
        validate_splits(splits)


def test_create_service_stores_splits(db_session, diocese_example):
    service = create_service(
        db_session,
        church_id=5,
        name="  Holy Mass  ",
        amount_paise=50_000,
        splits=[("church", 70), ("priest", "30")],
    )

    assert service.name == "Holy Mass"
    assert service.church_name == "Church 5"
    assert [(s.beneficiary, s.percentage) for s in service.splits] == [
        (BeneficiaryType.CHURCH, Decimal("70")),
        (BeneficiaryType.PRIEST, Decimal("30")),
    ]


def test_create_service_rejects_unknown_beneficiary(db_session, diocese_example):
    with pytest.raises(ValidationError, match="Invalid beneficiary type: BISHOP"):
        create_service(
            db_session,
            church_id=5,
            name="Baptism",
            amount_paise=1000,
            splits=[("BISHOP", 10)],
        )


def test_update_service_replaces_the_split_set(db_session, diocese_example):
    diocese_example.service(
        70, church_id=5, amount_paise=1000, splits={"CHURCH": "60", "PRIEST": "40"}
    )

    updated = update_service(db_session, 70, splits=[("PRIEST", 100)])

    assert [(s.beneficiary, s.percentage) for s in updated.splits] == [
        (BeneficiaryType.PRIEST, Decimal("100")),
    ]


def test_update_service_keeps_splits_when_omitted(db_session, diocese_example):
    diocese_example.service(70, church_id=5, amount_paise=1000, splits={"CHURCH": "100"})

    updated = update_service(db_session, 70, amount_paise=2500)

    assert updated.amount_paise == 2500
    assert [s.beneficiary for s in updated.splits] == [BeneficiaryType.CHURCH]
