"""Helpers for moving event timestamps between the domain and the database."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "UTC"


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone.

    Unknown names from ``APP_TIMEZONE`` fall back to UTC so a typo in the
    environment never prevents the scheduler from computing due windows.
    """

    tz_name = (get_settings().app_timezone or "").strip() or _DEFAULT_TIMEZONE
    try:
        return ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        return ZoneInfo(_DEFAULT_TIMEZONE)


def now_in_app_timezone() -> datetime:
    """Return the current time localized to the configured timezone."""

    return datetime.now(tz=get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Return ``value`` as an aware datetime in the app timezone.

    Naive values are assumed to already be app-local, which is how they are
    stored in the database.
    """

    if value is None:
        return None

    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` localized to the app timezone but without ``tzinfo``."""

    localized = ensure_app_timezone(value)
    if localized is None:
        return None
    return localized.replace(tzinfo=None)


def to_utc(value: datetime | None) -> datetime | None:
    """Return ``value`` as an aware UTC instant.

    Aware datetimes sharing one ``tzinfo`` compare and subtract by wall clock,
    which breaks across DST changes; arithmetic on instants goes through here.
    """

    localized = ensure_app_timezone(value)
    if localized is None:
        return None
    return localized.astimezone(timezone.utc)


def now_in_app_naive_datetime() -> datetime:
    """Return the current localized time as stored in ``DateTime`` columns."""

    return now_in_app_timezone().replace(tzinfo=None)
