"""Utility helpers for reusable functionality."""

from .datetime import (
    app_now,
    get_app_timezone,
    retention_cutoff,
    start_of_app_day,
    storage_now,
    to_app_time,
    to_storage,
)

__all__ = [
    "app_now",
    "get_app_timezone",
    "retention_cutoff",
    "start_of_app_day",
    "storage_now",
    "to_app_time",
    "to_storage",
]
