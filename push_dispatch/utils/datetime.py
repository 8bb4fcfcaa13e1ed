"""Time handling for the notification store.

Rows keep naive timestamps expressed in the application timezone (UTC unless
``APP_TIMEZONE`` names another zone); everything above the repositories works
with aware values.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from push_dispatch.config import get_settings

logger = logging.getLogger(__name__)

UTC = ZoneInfo("UTC")


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the zone stored timestamps are expressed in."""

    name = (get_settings().app_timezone or "").strip()
    if not name:
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown APP_TIMEZONE %r; storing timestamps in UTC", name)
        return UTC


def app_now() -> datetime:
    return datetime.now(tz=get_app_timezone())


def to_app_time(value: datetime | None) -> datetime | None:
    """Return ``value`` as an aware datetime in the app timezone.

    Naive values are the ones read back from the store and are taken to be
    in the app timezone already.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def to_storage(value: datetime | None) -> datetime | None:
    """Return the naive app-timezone value written to ``DateTime`` columns."""

    localized = to_app_time(value)
    return localized.replace(tzinfo=None) if localized else None


def storage_now() -> datetime:
    """Column default for creation timestamps."""

    return app_now().replace(tzinfo=None)


def start_of_app_day(value: datetime | None = None) -> datetime:
    """Return midnight, app time, of the day containing ``value`` (default now)."""

    localized = to_app_time(value) or app_now()
    return localized.replace(hour=0, minute=0, second=0, microsecond=0)


def retention_cutoff(days: int, now: datetime | None = None) -> datetime:
    """Return the creation time before which processed rows may be deleted."""

    return (to_app_time(now) or app_now()) - timedelta(days=days)
