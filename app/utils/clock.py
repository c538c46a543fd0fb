"""Current time and conversions at the ``DATETIME`` column boundary.

Columns store naive wall-clock time in ``Settings.app_timezone``. Entities and
API payloads carry aware datetimes; repositories convert in both directions
with :func:`ensure_app_naive_datetime` and :func:`ensure_app_timezone`.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from app.config import get_settings


@lru_cache(maxsize=1)
def _app_zone() -> ZoneInfo:
    # Settings has already checked the name against the tz database.
    return ZoneInfo(get_settings().app_timezone)


def now_in_app_timezone() -> datetime:
    return datetime.now(_app_zone())


def now_in_app_naive_datetime() -> datetime:
    """Column default for ``created_at`` style columns."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Read side: naive column values are app-local; aware values are converted."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=_app_zone())
    return value.astimezone(_app_zone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Write side: naive input is taken as app-local and kept as is."""

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(_app_zone()).replace(tzinfo=None)


__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
