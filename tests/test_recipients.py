"""Tests for resolving notification audiences against the hierarchy."""

import pytest

from app.application.use_cases.notifications import resolve_recipients
from app.domain.entities import TargetType
from app.domain.exceptions import InvalidTargetError, ValidationError


def test_diocese_reaches_every_church_of_every_forane(db_session, diocese_example):
    assert resolve_recipients(db_session, TargetType.DIOCESE, 2) == {1, 2, 3, 4}


def test_forane_reaches_its_churches_only(db_session, diocese_example):
    assert resolve_recipients(db_session, TargetType.FORANE, 10) == {1, 2, 3}
    assert resolve_recipients(db_session, TargetType.FORANE, 11) == {4}


def test_church_includes_inactive_members(db_session, diocese_example):
    assert resolve_recipients(db_session, TargetType.CHURCH, 9) == {50, 60}


def test_priest_ignores_target_id(db_session, diocese_example):
    assert resolve_recipients(db_session, TargetType.PRIEST, None) == {2, 4}
    assert resolve_recipients(db_session, TargetType.PRIEST, 8) == {2, 4}


def test_all_skips_inactive_users(db_session, diocese_example):
    assert resolve_recipients(db_session, TargetType.ALL, None) == {1, 2, 3, 4, 50}


def test_user_target_is_not_checked_for_existence(db_session, diocese_example):
    assert resolve_recipients(db_session, TargetType.USER, 999) == {999}


def test_target_type_is_parsed_from_text(db_session, diocese_example):
    assert resolve_recipients(db_session, "church", 5) == {1, 2}


def test_unknown_hierarchy_ids_resolve_to_nobody(db_session, diocese_example):
    assert resolve_recipients(db_session, TargetType.DIOCESE, 404) == set()


@pytest.mark.parametrize("target_type", ["PARISH", "", None, 3])
def test_unknown_target_type_is_rejected(db_session, diocese_example, target_type):
    with pytest.raises(InvalidTargetError) as exc_info:
        resolve_recipients(db_session, target_type, 1)
    assert exc_info.value.message == "Invalid target type"


@pytest.mark.parametrize(
    "target_type",
    [TargetType.USER, TargetType.CHURCH, TargetType.FORANE, TargetType.DIOCESE],
)
def test_scoped_targets_require_target_id(db_session, diocese_example, target_type):
    with pytest.raises(ValidationError):
        resolve_recipients(db_session, target_type, None)
