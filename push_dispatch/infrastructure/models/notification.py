"""SQLAlchemy model for administrator inbox notifications."""

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text

from push_dispatch.infrastructure.database import Base
from push_dispatch.utils import storage_now


class InboxNotificationModel(Base):
    """Database representation for notifications shown in the admin console."""

    __tablename__ = "admin_inbox_notification"

    id = Column(Integer, primary_key=True, index=True)
    admin_uid = Column(String(128), nullable=False, index=True)
    event_type = Column(String(64), nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    payload = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=storage_now)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["InboxNotificationModel"]
