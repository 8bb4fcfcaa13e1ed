"""Persistence helpers for the push notification queue."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from push_dispatch.domain.entities import DEFAULT_PLATFORM, NotificationRecord
from push_dispatch.infrastructure.models import PushNotificationModel
from push_dispatch.utils import app_now, to_app_time, to_storage


class PushNotificationRepository:
    """Provide queue operations for :class:`NotificationRecord` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, record_id: str) -> NotificationRecord | None:
        model = self.session.get(PushNotificationModel, record_id)
        return self._to_entity(model) if model else None

    def create(self, record: NotificationRecord) -> NotificationRecord:
        model = PushNotificationModel()
        if record.id:
            model.id = record.id
        model.target_identity = record.target_identity
        model.title = record.title
        model.body = record.body
        model.type = record.type
        model.data = dict(record.data or {})
        model.priority = record.priority
        model.platform = record.platform or DEFAULT_PLATFORM
        model.created_at = to_storage(record.created_at or app_now())
        model.processed = False
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def claim(self, record_id: str, *, started_at: datetime | None = None) -> bool:
        """Mark ``record_id`` as handed to the gateway.

        Only an unprocessed, unclaimed record can be claimed; returns whether
        this call won it.
        """

        statement = (
            update(PushNotificationModel)
            .where(PushNotificationModel.id == record_id)
            .where(PushNotificationModel.processed.is_(False))
            .where(PushNotificationModel.dispatch_started_at.is_(None))
            .values(dispatch_started_at=to_storage(started_at or app_now()))
            .execution_options(synchronize_session=False)
        )
        outcome = self.session.execute(statement)
        self.session.commit()
        return outcome.rowcount == 1

    def mark_processed(
        self,
        record_id: str,
        *,
        success: bool,
        result: str,
        processed_at: datetime | None = None,
    ) -> bool:
        """Write the terminal fields in one conditional update.

        Returns ``False`` when the record is missing or already processed.
        """

        statement = (
            update(PushNotificationModel)
            .where(PushNotificationModel.id == record_id)
            .where(PushNotificationModel.processed.is_(False))
            .values(
                processed=True,
                processed_at=to_storage(processed_at or app_now()),
                success=success,
                result=result,
            )
            .execution_options(synchronize_session=False)
        )
        outcome = self.session.execute(statement)
        self.session.commit()
        return outcome.rowcount == 1

    def list_pending(self, *, limit: int | None = 100) -> Sequence[NotificationRecord]:
        """Return unprocessed records no handler has claimed yet, oldest first."""

        query = (
            self.session.query(PushNotificationModel)
            .filter(PushNotificationModel.processed.is_(False))
            .filter(PushNotificationModel.dispatch_started_at.is_(None))
            .order_by(PushNotificationModel.created_at.asc(), PushNotificationModel.id.asc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def delete_processed_before(self, cutoff: datetime, *, limit: int) -> int:
        """Delete up to ``limit`` processed entries created before ``cutoff``.

        Selection and deletion share one transaction.
        """

        ids = list(
            self.session.scalars(
                select(PushNotificationModel.id)
                .where(PushNotificationModel.processed.is_(True))
                .where(PushNotificationModel.created_at < to_storage(cutoff))
                .order_by(PushNotificationModel.created_at.asc())
                .limit(limit)
            )
        )
        if not ids:
            self.session.rollback()
            return 0
        self.session.execute(
            delete(PushNotificationModel)
            .where(PushNotificationModel.id.in_(ids))
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return len(ids)

    def count(self, *, processed: bool | None = None) -> int:
        query = self.session.query(PushNotificationModel)
        if processed is not None:
            query = query.filter(PushNotificationModel.processed.is_(processed))
        return query.count()

    @staticmethod
    def _to_entity(model: PushNotificationModel) -> NotificationRecord:
        return NotificationRecord(
            id=model.id,
            target_identity=model.target_identity,
            title=model.title,
            body=model.body,
            type=model.type,
            data=dict(model.data or {}),
            priority=model.priority,
            platform=model.platform or DEFAULT_PLATFORM,
            created_at=to_app_time(model.created_at),
            processed=bool(model.processed),
            processed_at=to_app_time(model.processed_at),
            success=model.success,
            result=model.result,
            dispatch_started_at=to_app_time(model.dispatch_started_at),
        )


__all__ = ["PushNotificationRepository"]
