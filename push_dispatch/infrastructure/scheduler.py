"""APScheduler integration for the daily retention sweep."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import tzinfo
from typing import Any

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

logger = logging.getLogger(__name__)

RETENTION_JOB_ID = "retention-sweep"


def build_retention_scheduler(
    sweep: Callable[[], Any],
    *,
    timezone: tzinfo | str = "UTC",
    hour: int = 2,
    minute: int = 0,
) -> BackgroundScheduler:
    """Return a scheduler running ``sweep`` once a day.

    The scheduler is returned stopped; callers start and shut it down.
    """

    scheduler = BackgroundScheduler(
        timezone=timezone,
        job_defaults={
            "coalesce": True,
            "max_instances": 1,
            "misfire_grace_time": 3600,
        },
    )
    scheduler.add_job(
        sweep,
        trigger=CronTrigger(hour=hour, minute=minute, timezone=timezone),
        id=RETENTION_JOB_ID,
        name="Delete processed push notifications past retention",
        replace_existing=True,
    )
    logger.debug("Retention sweep scheduled daily at %02d:%02d", hour, minute)
    return scheduler


__all__ = ["RETENTION_JOB_ID", "build_retention_scheduler"]
