"""Unit tests for the envelope builder."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from push_dispatch.application.use_cases.dispatch import (
    build_direct_envelope,
    build_envelope,
    resolve_link,
)
from push_dispatch.domain.entities import (
    ADDRESSING_MULTI,
    ADDRESSING_SINGLE,
    NotificationRecord,
)

BASE_URL = "https://push.example.com"
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _record(**overrides) -> NotificationRecord:
    values = {
        "id": "rec-1",
        "target_identity": "admin1",
        "title": "T",
        "body": "B",
    }
    values.update(overrides)
    return NotificationRecord(**values)


def test_defaults_fill_missing_optional_fields():
    """Priority falls back to normal and type to general."""

    envelope = build_envelope(_record(), {"tok"}, link_base_url=BASE_URL, now=NOW)

    assert envelope.data == {
        "type": "general",
        "timestamp": NOW.isoformat(),
        "notificationId": "rec-1",
    }
    assert envelope.android.priority == "normal"
    assert envelope.android.notification_priority == "default"
    assert envelope.webpush.require_interaction is False
    assert envelope.webpush.tag == "general"
    assert envelope.webpush.link == f"{BASE_URL}/"
    assert envelope.notification.icon == "/favicon.ico"


def test_record_data_is_merged_over_defaults():
    """Record data keeps its own keys and wins on collisions."""

    record = _record(type="test", data={"k": "v", "type": "override"})

    envelope = build_envelope(record, {"tok"}, link_base_url=BASE_URL, now=NOW)

    assert envelope.data["k"] == "v"
    assert envelope.data["type"] == "override"
    assert envelope.data["timestamp"] == NOW.isoformat()
    assert envelope.data["notificationId"] == "rec-1"


def test_non_string_data_values_are_stringified():
    record = _record(data={"test": True, "count": 3, "missing": None})

    envelope = build_envelope(record, {"tok"}, link_base_url=BASE_URL, now=NOW)

    assert envelope.data["test"] == "true"
    assert envelope.data["count"] == "3"
    assert envelope.data["missing"] == ""


@pytest.mark.parametrize(
    ("priority", "interrupting"),
    [(None, False), ("normal", False), ("high", True), ("urgent", True)],
)
def test_interruption_follows_priority(priority, interrupting):
    """Only high and urgent notifications require interaction."""

    envelope = build_envelope(
        _record(priority=priority), {"tok"}, link_base_url=BASE_URL, now=NOW
    )

    assert envelope.webpush.require_interaction is interrupting
    assert envelope.android.priority == ("high" if interrupting else "normal")
    assert envelope.android.notification_priority == ("high" if interrupting else "default")


@pytest.mark.parametrize(
    ("tokens", "expected"),
    [
        ({"a"}, ADDRESSING_SINGLE),
        ({"a", "b"}, ADDRESSING_MULTI),
        ({"a", "b", "c"}, ADDRESSING_MULTI),
    ],
)
def test_addressing_mode_depends_on_token_count(tokens, expected):
    envelope = build_envelope(_record(), tokens, link_base_url=BASE_URL, now=NOW)

    assert envelope.addressing == expected
    assert sorted(envelope.recipients()) == sorted(tokens)
    if expected == ADDRESSING_SINGLE:
        assert envelope.token == next(iter(tokens))
        assert envelope.tokens == []
    else:
        assert envelope.token is None


def test_zero_tokens_are_rejected():
    with pytest.raises(ValueError):
        build_envelope(_record(), set(), link_base_url=BASE_URL, now=NOW)


def test_click_action_becomes_absolute_link():
    record = _record(data={"clickAction": "/appointments"})

    envelope = build_envelope(record, {"tok"}, link_base_url=BASE_URL + "/", now=NOW)

    assert envelope.webpush.link == f"{BASE_URL}/appointments"


def test_mobile_platform_has_no_web_section():
    envelope = build_envelope(
        _record(platform="mobile"), {"tok"}, link_base_url=BASE_URL, now=NOW
    )

    assert envelope.webpush is None
    assert envelope.apns.title == "T"


def test_missing_id_uses_unknown_notification_id():
    envelope = build_envelope(_record(id=None), {"tok"}, link_base_url=BASE_URL, now=NOW)

    assert envelope.data["notificationId"] == "unknown"


def test_resolve_link_normalizes_slashes():
    assert resolve_link("https://a.example/", "coaches") == "https://a.example/coaches"
    assert resolve_link("https://a.example", None) == "https://a.example/"


def test_direct_envelope_targets_chat_channel():
    envelope = build_direct_envelope("tok", "Hi", "There")

    assert envelope.addressing == ADDRESSING_SINGLE
    assert envelope.token == "tok"
    assert envelope.android.channel_id == "messages"
    assert envelope.android.click_action == "FLUTTER_NOTIFICATION_CLICK"
    assert envelope.webpush is None
