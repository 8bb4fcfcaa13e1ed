"""Tests for the Firebase Cloud Messaging gateway."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from firebase_admin import exceptions, messaging

from push_dispatch.application.use_cases.dispatch import build_direct_envelope, build_envelope
from push_dispatch.domain.entities import NotificationRecord
from push_dispatch.domain.errors import TransportError
from push_dispatch.infrastructure.push.gateway import (
    FirebasePushGateway,
    to_message,
    to_multicast_message,
)

BASE_URL = "https://push.example.com"


def _envelope(tokens, **overrides):
    values = {"id": "rec-1", "target_identity": "admin1", "title": "T", "body": "B"}
    values.update(overrides)
    return build_envelope(NotificationRecord(**values), tokens, link_base_url=BASE_URL)


def test_single_token_is_sent_with_send(monkeypatch):
    captured = {}

    def fake_send(message, app=None):
        captured["message"] = message
        return "projects/demo/messages/42"

    monkeypatch.setattr(messaging, "send", fake_send)

    outcome = FirebasePushGateway().send(_envelope({"tok"}))

    assert outcome.success is True
    assert outcome.delivery_id == "projects/demo/messages/42"
    message = captured["message"]
    assert message.token == "tok"
    assert message.notification.title == "T"
    assert message.data["notificationId"] == "rec-1"


def test_multiple_tokens_use_one_multicast_call(monkeypatch, caplog):
    """Per-token failures are logged while the send still succeeds."""

    calls = []

    def fake_multicast(message, app=None):
        calls.append(message)
        return SimpleNamespace(
            success_count=1,
            failure_count=1,
            responses=[
                SimpleNamespace(success=True, message_id="m-1", exception=None),
                SimpleNamespace(
                    success=False,
                    message_id=None,
                    exception=exceptions.NotFoundError("Requested entity was not found."),
                ),
            ],
        )

    monkeypatch.setattr(messaging, "send_each_for_multicast", fake_multicast)

    with caplog.at_level("ERROR"):
        outcome = FirebasePushGateway().send(_envelope({"tokA", "tokB"}))

    assert len(calls) == 1
    assert calls[0].tokens == ["tokA", "tokB"]
    assert outcome.success is True
    assert (outcome.success_count, outcome.failure_count) == (1, 1)
    assert outcome.failed_tokens == ["tokB"]
    assert "Failed to send to token tokB" in caplog.text


def test_transport_failure_is_wrapped(monkeypatch):
    def fake_send(message, app=None):
        raise exceptions.UnavailableError("service down")

    monkeypatch.setattr(messaging, "send", fake_send)

    with pytest.raises(TransportError) as excinfo:
        FirebasePushGateway().send(_envelope({"tok"}))

    assert str(excinfo.value) == "service down (code UNAVAILABLE)"


def test_envelope_without_recipient_is_rejected():
    envelope = _envelope({"tok"})
    envelope.token = None

    with pytest.raises(ValueError):
        FirebasePushGateway().send(envelope)


def test_message_carries_every_platform_section():
    message = to_message(_envelope({"tok"}, priority="urgent", data={"clickAction": "/coaches"}))

    assert message.android.priority == "high"
    assert message.android.notification.channel_id == "admin_notifications"
    assert message.apns.payload.aps.alert.title == "T"
    assert message.apns.payload.aps.badge == 1
    assert message.webpush.notification.require_interaction is True
    assert message.webpush.fcm_options.link == f"{BASE_URL}/coaches"


def test_multicast_message_keeps_shared_payload():
    message = to_multicast_message(_envelope({"a", "b"}))

    assert message.tokens == ["a", "b"]
    assert message.notification.body == "B"
    assert message.webpush.notification.tag == "general"


def test_direct_message_has_no_webpush():
    message = to_message(build_direct_envelope("tok", "Hi", "There"))

    assert message.webpush is None
    assert message.android.notification.click_action == "FLUTTER_NOTIFICATION_CLICK"
    assert message.data == {}
