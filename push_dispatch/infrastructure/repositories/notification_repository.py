"""Persistence helpers for administrator inbox notifications."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from push_dispatch.domain.entities import InboxNotification
from push_dispatch.infrastructure.models import InboxNotificationModel
from push_dispatch.utils import app_now, to_app_time, to_storage


class NotificationRepository:
    """Provide CRUD operations for :class:`InboxNotification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_admin(
        self,
        admin_uid: str,
        *,
        limit: int | None = 50,
    ) -> Sequence[InboxNotification]:
        query = self.session.query(InboxNotificationModel)
        query = query.filter(InboxNotificationModel.admin_uid == admin_uid)
        query = query.order_by(
            InboxNotificationModel.created_at.desc(), InboxNotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: InboxNotification) -> InboxNotification:
        model = InboxNotificationModel()
        model.created_at = to_storage(notification.created_at or app_now())
        model.admin_uid = notification.admin_uid
        model.event_type = notification.event_type
        model.title = notification.title
        model.message = notification.message
        model.payload = notification.payload or {}
        model.read_at = to_storage(notification.read_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def count_for_admin(
        self,
        admin_uid: str,
        *,
        unread_only: bool = False,
        since: datetime | None = None,
    ) -> int:
        query = self.session.query(InboxNotificationModel).filter(
            InboxNotificationModel.admin_uid == admin_uid
        )
        if unread_only:
            query = query.filter(InboxNotificationModel.read_at.is_(None))
        if since is not None:
            query = query.filter(
                InboxNotificationModel.created_at >= to_storage(since)
            )
        return query.count()

    @staticmethod
    def _to_entity(model: InboxNotificationModel) -> InboxNotification:
        return InboxNotification(
            id=model.id,
            admin_uid=model.admin_uid,
            event_type=model.event_type,
            title=model.title,
            message=model.message,
            payload=model.payload or {},
            created_at=to_app_time(model.created_at),
            read_at=to_app_time(model.read_at),
        )


__all__ = ["NotificationRepository"]
