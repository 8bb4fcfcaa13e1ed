"""SQLAlchemy model for the push notification queue."""

from uuid import uuid4

from sqlalchemy import JSON, Boolean, Column, DateTime, Index, String, Text
from sqlalchemy.sql import expression

from push_dispatch.infrastructure.database import Base
from push_dispatch.utils import storage_now


def _new_record_id() -> str:
    return uuid4().hex


class PushNotificationModel(Base):
    """Durable queue entry consumed by the dispatch worker."""

    __tablename__ = "push_notification"
    __table_args__ = (
        Index("ix_push_notification_processed_created", "processed", "created_at"),
    )

    id = Column(String(32), primary_key=True, default=_new_record_id)
    target_identity = Column(String(128), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    type = Column(String(64), nullable=True)
    data = Column(JSON, nullable=False, default=dict)
    priority = Column(String(16), nullable=True)
    platform = Column(String(16), nullable=False, default="web")
    created_at = Column(DateTime(), nullable=False, default=storage_now)
    processed = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    dispatch_started_at = Column(DateTime(), nullable=True)
    processed_at = Column(DateTime(), nullable=True)
    success = Column(Boolean, nullable=True)
    result = Column(Text, nullable=True)


__all__ = ["PushNotificationModel"]
