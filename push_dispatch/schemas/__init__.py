"""Schemas validated at the queue insertion boundary."""

from .notification_request import NotificationRequest

__all__ = ["NotificationRequest"]
