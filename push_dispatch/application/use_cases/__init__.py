"""Aggregate application use cases."""

from .producers import (
    find_admin,
    notify_chat_message,
    notify_new_appointment,
    notify_new_binding_request,
)
from .queue import enqueue_notification
from .stats import NotificationStats, get_notification_stats

__all__ = [
    "enqueue_notification",
    "find_admin",
    "notify_chat_message",
    "notify_new_appointment",
    "notify_new_binding_request",
    "NotificationStats",
    "get_notification_stats",
]
