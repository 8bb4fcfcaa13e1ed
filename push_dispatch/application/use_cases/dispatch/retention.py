"""Scheduled deletion of old processed queue entries."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session, sessionmaker

from push_dispatch.infrastructure.repositories import PushNotificationRepository
from push_dispatch.utils import retention_cutoff

logger = logging.getLogger(__name__)

DEFAULT_RETENTION_DAYS = 30
MAX_BATCH_DELETE = 500


class RetentionSweeper:
    """Delete processed records older than the retention window.

    At most ``batch_limit`` records (never more than 500) go per run;
    unprocessed records are kept whatever their age.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        retention_days: int = DEFAULT_RETENTION_DAYS,
        batch_limit: int = MAX_BATCH_DELETE,
    ) -> None:
        self._session_factory = session_factory
        self._retention_days = retention_days
        self._batch_limit = max(1, min(batch_limit, MAX_BATCH_DELETE))

    def cutoff(self, now: datetime | None = None) -> datetime:
        return retention_cutoff(self._retention_days, now)

    def sweep(self, now: datetime | None = None) -> int:
        """Run one sweep and return the number of deleted records."""

        cutoff = self.cutoff(now)
        logger.info("Starting push notification cleanup before %s", cutoff.isoformat())

        session = self._session_factory()
        try:
            deleted = PushNotificationRepository(session).delete_processed_before(
                cutoff, limit=self._batch_limit
            )
        except Exception:
            session.rollback()
            logger.exception("Error in push notification cleanup")
            return 0
        finally:
            session.close()

        if deleted:
            logger.info("Cleaned up %s old push notification records", deleted)
        else:
            logger.info("No old push notifications to clean up")
        return deleted


__all__ = ["DEFAULT_RETENTION_DAYS", "MAX_BATCH_DELETE", "RetentionSweeper"]
