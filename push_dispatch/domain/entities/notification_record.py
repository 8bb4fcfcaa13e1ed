"""Domain entity representing a queued push notification request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

PRIORITY_NORMAL = "normal"
PRIORITY_HIGH = "high"
PRIORITY_URGENT = "urgent"
PRIORITIES = (PRIORITY_NORMAL, PRIORITY_HIGH, PRIORITY_URGENT)
INTERRUPTING_PRIORITIES = frozenset({PRIORITY_HIGH, PRIORITY_URGENT})

DEFAULT_TYPE = "general"
DEFAULT_PLATFORM = "web"


@dataclass
class NotificationRecord:
    """One queue entry awaiting delivery through the push gateway.

    The four terminal fields (``processed``, ``processed_at``, ``success`` and
    ``result``) are only ever written together, once. ``dispatch_started_at`` is
    set just before the gateway call; a claimed record is never sent again,
    even when its terminal fields could not be written.
    """

    id: str | None
    target_identity: str | None
    title: str
    body: str
    type: str | None = None
    data: dict[str, str] = field(default_factory=dict)
    priority: str | None = None
    platform: str = DEFAULT_PLATFORM
    created_at: datetime | None = None
    processed: bool = False
    processed_at: datetime | None = None
    success: bool | None = None
    result: str | None = None
    dispatch_started_at: datetime | None = None

    def is_terminal(self) -> bool:
        """Return ``True`` once the record carries a final outcome."""

        return self.processed

    def is_claimed(self) -> bool:
        return self.dispatch_started_at is not None


__all__ = [
    "NotificationRecord",
    "PRIORITY_NORMAL",
    "PRIORITY_HIGH",
    "PRIORITY_URGENT",
    "PRIORITIES",
    "INTERRUPTING_PRIORITIES",
    "DEFAULT_TYPE",
    "DEFAULT_PLATFORM",
]
