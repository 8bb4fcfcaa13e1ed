"""ORM models used by the application infrastructure."""

from .account import AdminAccountModel, UserAccountModel
from .group import GymInfoModel, GymModel
from .notification import InboxNotificationModel
from .push_notification import PushNotificationModel

__all__ = [
    "AdminAccountModel",
    "UserAccountModel",
    "GymInfoModel",
    "GymModel",
    "InboxNotificationModel",
    "PushNotificationModel",
]
