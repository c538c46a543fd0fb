"""Tests for settings normalization and engine construction."""

import pytest
from pydantic import ValidationError
from sqlalchemy.pool import QueuePool

from app.config import Settings
from app.infrastructure.database import _engine_options, build_engine


def test_api_prefix_is_normalized():
    assert Settings(api_prefix="api/").api_prefix == "/api"
    assert Settings(api_prefix="").api_prefix == ""


def test_pool_settings_reach_the_engine(tmp_path):
    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'pool.db'}",
        db_pool_size=3,
        db_max_overflow=2,
        db_pool_timeout=5,
    )

    engine = build_engine(settings)
    try:
        assert isinstance(engine.pool, QueuePool)
        assert engine.pool.size() == 3
        assert engine.pool._max_overflow == 2
        assert engine.pool.timeout() == 5
    finally:
        engine.dispose()


def test_in_memory_sqlite_skips_pool_sizing():
    options = _engine_options(Settings(database_url="sqlite://"))

    assert "pool_size" not in options
    assert options["connect_args"] == {"check_same_thread": False}


def test_app_timezone_must_be_a_known_zone():
    assert Settings(app_timezone="Europe/Rome").app_timezone == "Europe/Rome"

    with pytest.raises(ValidationError, match="Unknown timezone"):
        Settings(app_timezone="Mars/Olympus")


def test_token_lifetime_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(access_token_expire_minutes=0)
