from .push import (
    DirectPushRequest,
    NotificationStatsRead,
    TestNotificationRequest,
    TestNotificationResponse,
)

__all__ = [
    "DirectPushRequest",
    "NotificationStatsRead",
    "TestNotificationRequest",
    "TestNotificationResponse",
]
