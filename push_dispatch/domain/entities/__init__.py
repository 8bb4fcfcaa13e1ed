"""Domain entities exposed by the application."""

from .account import AdminAccount, Group, UserAccount
from .delivery import (
    DISPATCH_FAILED,
    DISPATCH_NOT_FOUND,
    DISPATCH_SENT,
    DISPATCH_SKIPPED,
    BestEffort,
    DeliveryOutcome,
    DispatchResult,
    TokenResult,
)
from .events import (
    BINDING_TYPE_BIND,
    STATUS_PENDING,
    Appointment,
    BindingRequest,
    ChatMessage,
)
from .envelope import (
    ADDRESSING_MULTI,
    ADDRESSING_SINGLE,
    AndroidSection,
    ApnsSection,
    Envelope,
    HumanSection,
    WebPushSection,
)
from .notification import InboxNotification
from .notification_record import (
    DEFAULT_PLATFORM,
    DEFAULT_TYPE,
    INTERRUPTING_PRIORITIES,
    PRIORITIES,
    PRIORITY_HIGH,
    PRIORITY_NORMAL,
    PRIORITY_URGENT,
    NotificationRecord,
)

__all__ = [
    "AdminAccount",
    "UserAccount",
    "Group",
    "Appointment",
    "BindingRequest",
    "ChatMessage",
    "BINDING_TYPE_BIND",
    "STATUS_PENDING",
    "BestEffort",
    "DeliveryOutcome",
    "DispatchResult",
    "TokenResult",
    "DISPATCH_FAILED",
    "DISPATCH_NOT_FOUND",
    "DISPATCH_SENT",
    "DISPATCH_SKIPPED",
    "ADDRESSING_MULTI",
    "ADDRESSING_SINGLE",
    "AndroidSection",
    "ApnsSection",
    "Envelope",
    "HumanSection",
    "WebPushSection",
    "InboxNotification",
    "NotificationRecord",
    "DEFAULT_PLATFORM",
    "DEFAULT_TYPE",
    "INTERRUPTING_PRIORITIES",
    "PRIORITIES",
    "PRIORITY_HIGH",
    "PRIORITY_NORMAL",
    "PRIORITY_URGENT",
]
