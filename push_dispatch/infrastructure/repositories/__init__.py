"""Repository implementations for infrastructure layer."""

from .account_repository import AdminAccountRepository, UserAccountRepository
from .group_repository import GroupRepository
from .notification_repository import NotificationRepository
from .push_notification_repository import PushNotificationRepository

__all__ = [
    "AdminAccountRepository",
    "UserAccountRepository",
    "GroupRepository",
    "NotificationRepository",
    "PushNotificationRepository",
]
