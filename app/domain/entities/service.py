"""Paid church services and how their revenue is split between beneficiaries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

from app.domain.exceptions import ValidationError

from .choices import Choice

HUNDRED = Decimal(100)


class BeneficiaryType(Choice):
    """Party that receives a percentage of a service's amount."""

    CHURCH = "CHURCH"
    PRIEST = "PRIEST"
    FORANE = "FORANE"
    DIOCESE = "DIOCESE"

    @classmethod
    def invalid(cls, value: object) -> ValidationError:
        return ValidationError(f"Invalid beneficiary type: {value}")


@dataclass
class ServiceSplit:
    beneficiary: BeneficiaryType
    percentage: Decimal


@dataclass
class SplitShare:
    """Amount allocated to one beneficiary for a concrete payment."""

    beneficiary: BeneficiaryType
    percentage: Decimal
    amount_paise: int


@dataclass
class Service:
    """A bookable service (mass intention, baptism, ...) offered by a church."""

    id: int | None
    church_id: int
    name: str
    amount_paise: int
    description: str | None = None
    created_at: datetime | None = None
    church_name: str | None = None
    splits: list[ServiceSplit] = field(default_factory=list)


def validate_splits(splits: Sequence[ServiceSplit]) -> None:
    """Reject duplicate beneficiaries and totals outside ``(0, 100]``."""

    seen: set[BeneficiaryType] = set()
    for split in splits:
        if split.beneficiary in seen:
            raise ValidationError(
                f"Duplicate split for beneficiary {split.beneficiary.value}"
            )
        seen.add(split.beneficiary)
        if split.percentage <= 0 or split.percentage > HUNDRED:
            raise ValidationError("Split percentage must be between 0 and 100")
    if sum((split.percentage for split in splits), Decimal(0)) > HUNDRED:
        raise ValidationError("Split percentages cannot exceed 100")


def compute_split_shares(
    amount_paise: int, splits: Sequence[ServiceSplit]
) -> list[SplitShare]:
    """Allocate ``amount_paise`` across ``splits`` in whole paise.

    Each share is floored, then the paise lost to rounding go one at a time to
    the shares with the largest fractional remainder (earlier splits win
    ties). When the percentages add up to 100 the shares add up to the full
    amount.
    """

    exact = [Decimal(amount_paise) * split.percentage / HUNDRED for split in splits]
    shares = [int(value.to_integral_value(rounding=ROUND_FLOOR)) for value in exact]
    total = int(sum(exact, Decimal(0)).to_integral_value(rounding=ROUND_HALF_UP))
    leftover = total - sum(shares)
    by_remainder = sorted(
        range(len(splits)), key=lambda index: exact[index] - shares[index], reverse=True
    )
    for index in by_remainder[:leftover]:
        shares[index] += 1
    return [
        SplitShare(
            beneficiary=split.beneficiary,
            percentage=split.percentage,
            amount_paise=share,
        )
        for split, share in zip(splits, shares)
    ]


__all__ = [
    "BeneficiaryType",
    "Service",
    "ServiceSplit",
    "SplitShare",
    "compute_split_shares",
    "validate_splits",
]
