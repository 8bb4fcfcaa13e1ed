"""Build platform-segmented push envelopes from queue records."""

from __future__ import annotations

from collections.abc import Collection
from datetime import datetime, timezone

from push_dispatch.domain.entities import (
    ADDRESSING_MULTI,
    ADDRESSING_SINGLE,
    DEFAULT_TYPE,
    INTERRUPTING_PRIORITIES,
    PRIORITY_NORMAL,
    AndroidSection,
    ApnsSection,
    Envelope,
    HumanSection,
    NotificationRecord,
    WebPushSection,
)
from push_dispatch.utils.serialization import stringify_data

DEFAULT_ICON = "/favicon.ico"
DEFAULT_CLICK_ACTION = "/"
ADMIN_CHANNEL_ID = "admin_notifications"
DIRECT_CHANNEL_ID = "messages"
DIRECT_CLICK_ACTION = "FLUTTER_NOTIFICATION_CLICK"
MOBILE_ONLY_PLATFORMS = frozenset({"android", "ios", "mobile"})


def resolve_link(base_url: str, click_action: str | None) -> str:
    """Prefix ``click_action`` with ``base_url`` to obtain an absolute link."""

    path = click_action or DEFAULT_CLICK_ACTION
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def build_envelope(
    record: NotificationRecord,
    tokens: Collection[str],
    *,
    link_base_url: str,
    icon: str = DEFAULT_ICON,
    now: datetime | None = None,
) -> Envelope:
    """Return the envelope delivering ``record`` to ``tokens``.

    Record data overrides the default ``type``/``timestamp``/``notificationId``
    keys. One token selects single addressing, more select multi addressing.
    """

    if not tokens:
        raise ValueError("An envelope needs at least one token")

    priority = record.priority or PRIORITY_NORMAL
    notification_type = record.type or DEFAULT_TYPE
    interrupting = priority in INTERRUPTING_PRIORITIES
    record_data = record.data or {}

    data = {
        "type": notification_type,
        "timestamp": (now or datetime.now(timezone.utc)).isoformat(),
        "notificationId": record.id or "unknown",
    }
    data.update(stringify_data(record_data))

    webpush = None
    if (record.platform or "").lower() not in MOBILE_ONLY_PLATFORMS:
        webpush = WebPushSection(
            title=record.title,
            body=record.body,
            icon=icon,
            badge=icon,
            require_interaction=interrupting,
            silent=False,
            tag=notification_type,
            link=resolve_link(link_base_url, record_data.get("clickAction")),
        )

    envelope = Envelope(
        notification=HumanSection(title=record.title, body=record.body, icon=icon),
        data=data,
        webpush=webpush,
        android=AndroidSection(
            priority="high" if interrupting else "normal",
            channel_id=ADMIN_CHANNEL_ID,
            notification_priority="high" if interrupting else "default",
        ),
        apns=ApnsSection(title=record.title, body=record.body),
    )

    ordered = sorted(set(tokens))
    if len(ordered) == 1:
        envelope.addressing = ADDRESSING_SINGLE
        envelope.token = ordered[0]
    else:
        envelope.addressing = ADDRESSING_MULTI
        envelope.tokens = ordered
    return envelope


def build_direct_envelope(token: str, title: str, body: str) -> Envelope:
    """Return a single-target envelope for the mobile chat channel."""

    return Envelope(
        notification=HumanSection(title=title, body=body, icon=DEFAULT_ICON),
        data={},
        android=AndroidSection(
            priority="high",
            channel_id=DIRECT_CHANNEL_ID,
            notification_priority="high",
            click_action=DIRECT_CLICK_ACTION,
        ),
        apns=ApnsSection(title=title, body=body, badge=None),
        addressing=ADDRESSING_SINGLE,
        token=token,
    )


__all__ = [
    "ADMIN_CHANNEL_ID",
    "DIRECT_CHANNEL_ID",
    "build_direct_envelope",
    "build_envelope",
    "resolve_link",
]
