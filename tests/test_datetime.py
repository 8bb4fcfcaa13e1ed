"""Tests for the store's time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from push_dispatch.utils import datetime as store_time


@pytest.fixture()
def app_timezone(monkeypatch):
    """Point the helpers at a given APP_TIMEZONE value."""

    def configure(name):
        monkeypatch.setattr(
            store_time, "get_settings", lambda: SimpleNamespace(app_timezone=name)
        )
        store_time.get_app_timezone.cache_clear()

    yield configure
    store_time.get_app_timezone.cache_clear()


def test_storage_values_are_naive_app_time(app_timezone):
    app_timezone("Europe/Athens")
    aware = datetime(2026, 1, 10, 22, 30, tzinfo=timezone.utc)

    stored = store_time.to_storage(aware)

    assert stored == datetime(2026, 1, 11, 0, 30)
    assert store_time.to_app_time(stored) == aware


def test_unknown_zone_falls_back_to_utc(app_timezone, caplog):
    app_timezone("Mars/Olympus_Mons")

    with caplog.at_level("WARNING"):
        zone = store_time.get_app_timezone()

    assert zone is store_time.UTC
    assert "Mars/Olympus_Mons" in caplog.text


def test_retention_cutoff_counts_back_from_now(app_timezone):
    app_timezone(None)
    now = datetime(2026, 3, 31, 2, 0, tzinfo=timezone.utc)

    assert store_time.retention_cutoff(30, now) == now - timedelta(days=30)


def test_start_of_app_day_uses_app_zone(app_timezone):
    app_timezone("America/New_York")
    late_evening = datetime(2026, 7, 2, 3, 0, tzinfo=timezone.utc)

    start = store_time.start_of_app_day(late_evening)

    assert (start.year, start.month, start.day, start.hour) == (2026, 7, 1, 0)


def test_missing_values_stay_missing():
    assert store_time.to_storage(None) is None
    assert store_time.to_app_time(None) is None
