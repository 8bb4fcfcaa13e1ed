"""Use case for summarizing an administrator's inbox."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from push_dispatch.infrastructure.repositories import NotificationRepository
from push_dispatch.utils import app_now, start_of_app_day


@dataclass
class NotificationStats:
    """Counters shown on the admin dashboard."""

    total: int
    unread: int
    today: int
    last_updated: datetime


def get_notification_stats(
    session: Session, *, admin_uid: str, now: datetime | None = None
) -> NotificationStats:
    """Count all, unread and today's inbox notifications of ``admin_uid``."""

    reference = now or app_now()
    repository = NotificationRepository(session)
    return NotificationStats(
        total=repository.count_for_admin(admin_uid),
        unread=repository.count_for_admin(admin_uid, unread_only=True),
        today=repository.count_for_admin(
            admin_uid, since=start_of_app_day(reference)
        ),
        last_updated=reference,
    )


__all__ = ["NotificationStats", "get_notification_stats"]
