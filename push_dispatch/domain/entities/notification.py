"""Domain entity representing an entry in an administrator's inbox."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class InboxNotification:
    """Information message shown in the admin web console."""

    id: int | None
    admin_uid: str
    event_type: str
    title: str
    message: str
    payload: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = ["InboxNotification"]
