"""Pydantic models describing the push administration payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TestNotificationRequest(BaseModel):
    """Manual notification used to check a device end to end."""

    model_config = ConfigDict(populate_by_name=True)

    target_uid: str | None = Field(default=None, alias="targetUid")
    title: str | None = None
    body: str | None = None
    type: str = "test"

    def missing_fields(self) -> list[str]:
        """Return the camelCase names of the required fields left empty."""

        required = {"targetUid": self.target_uid, "title": self.title, "body": self.body}
        return [name for name, value in required.items() if not (value and value.strip())]


class TestNotificationResponse(BaseModel):
    """Acknowledgement returned once the test notification is queued."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Test notification queued"
    notification_id: str = Field(serialization_alias="notificationId")


class NotificationStatsRead(BaseModel):
    """Inbox counters of an administrator."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    unread: int
    today: int
    last_updated: datetime = Field(serialization_alias="lastUpdated")


class DirectPushRequest(BaseModel):
    """Payload of the minimal single-device endpoint."""

    token: str | None = None
    title: str | None = None
    body: str | None = None

    def is_complete(self) -> bool:
        return all(value and value.strip() for value in (self.token, self.title, self.body))


__all__ = [
    "DirectPushRequest",
    "NotificationStatsRead",
    "TestNotificationRequest",
    "TestNotificationResponse",
]
