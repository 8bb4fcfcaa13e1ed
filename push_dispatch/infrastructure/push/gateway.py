"""Delivery of envelopes through Firebase Cloud Messaging."""

from __future__ import annotations

import logging
from typing import Protocol

import firebase_admin
from firebase_admin import credentials, messaging

from push_dispatch.config import Settings
from push_dispatch.domain.entities import (
    ADDRESSING_MULTI,
    DeliveryOutcome,
    Envelope,
    TokenResult,
)
from push_dispatch.domain.errors import TransportError

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "push-dispatch"


class PushGateway(Protocol):
    """Anything able to deliver an :class:`Envelope`."""

    def send(self, envelope: Envelope) -> DeliveryOutcome:
        ...


def initialize_firebase_app(settings: Settings) -> firebase_admin.App:
    """Return the process-wide Firebase app, creating it on first use."""

    try:
        return firebase_admin.get_app(FIREBASE_APP_NAME)
    except ValueError:
        pass

    if settings.firebase_credentials_file:
        credential = credentials.Certificate(settings.firebase_credentials_file)
    else:
        credential = credentials.ApplicationDefault()
    options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
    logger.info("Initializing Firebase app for project %s", settings.firebase_project_id or "<default>")
    return firebase_admin.initialize_app(credential, options, name=FIREBASE_APP_NAME)


def delete_firebase_app(app: firebase_admin.App | None) -> None:
    """Release the Firebase app created by :func:`initialize_firebase_app`."""

    if app is None:
        return
    try:
        firebase_admin.delete_app(app)
    except ValueError:
        logger.debug("Firebase app %s already deleted", app.name)


def _describe_firebase_exception(exc: BaseException) -> str:
    """Return a human readable description for a messaging error."""

    code = getattr(exc, "code", None)
    response = getattr(exc, "http_response", None)
    status_code = getattr(response, "status_code", None)
    message = str(exc) or exc.__class__.__name__
    if code and status_code:
        return f"{message} (code {code}, status {status_code})"
    if code:
        return f"{message} (code {code})"
    return message


class FirebasePushGateway:
    """Send envelopes with ``firebase_admin.messaging``.

    One token is sent with ``messaging.send``; several tokens go out in one
    ``send_each_for_multicast`` call whose per-token failures are only logged.
    """

    def __init__(self, app: firebase_admin.App | None = None) -> None:
        self._app = app

    def send(self, envelope: Envelope) -> DeliveryOutcome:
        if not envelope.recipients():
            raise ValueError("Envelope has no recipient token")

        if envelope.addressing == ADDRESSING_MULTI:
            return self._send_multicast(envelope)
        return self._send_single(envelope)

    def _send_single(self, envelope: Envelope) -> DeliveryOutcome:
        try:
            message_id = messaging.send(to_message(envelope), app=self._app)
        except Exception as exc:
            details = _describe_firebase_exception(exc)
            logger.error("Error sending push message: %s", details)
            raise TransportError(details) from exc

        logger.info("Single push message sent: %s", message_id)
        return DeliveryOutcome(
            success=True,
            delivery_id=message_id,
            success_count=1,
            failure_count=0,
        )

    def _send_multicast(self, envelope: Envelope) -> DeliveryOutcome:
        try:
            batch = messaging.send_each_for_multicast(
                to_multicast_message(envelope), app=self._app
            )
        except Exception as exc:
            details = _describe_firebase_exception(exc)
            logger.error("Error sending multicast push message: %s", details)
            raise TransportError(details) from exc

        logger.info(
            "Multicast push message sent: %s success, %s failures",
            batch.success_count,
            batch.failure_count,
        )
        results: list[TokenResult] = []
        for token, response in zip(envelope.tokens, batch.responses):
            if response.success:
                results.append(
                    TokenResult(token=token, success=True, delivery_id=response.message_id)
                )
                continue
            error = (
                _describe_firebase_exception(response.exception)
                if response.exception is not None
                else "unknown error"
            )
            logger.error("Failed to send to token %s: %s", token, error)
            results.append(TokenResult(token=token, success=False, error=error))

        return DeliveryOutcome(
            success=True,
            success_count=batch.success_count,
            failure_count=batch.failure_count,
            responses=results,
        )


def _platform_configs(
    envelope: Envelope,
) -> tuple[messaging.AndroidConfig, messaging.APNSConfig, messaging.WebpushConfig | None]:
    android = messaging.AndroidConfig(
        priority=envelope.android.priority,
        notification=messaging.AndroidNotification(
            channel_id=envelope.android.channel_id,
            priority=envelope.android.notification_priority,
            sound=envelope.android.sound,
            click_action=envelope.android.click_action,
        ),
    )
    apns = messaging.APNSConfig(
        payload=messaging.APNSPayload(
            aps=messaging.Aps(
                alert=messaging.ApsAlert(
                    title=envelope.apns.title, body=envelope.apns.body
                ),
                sound=envelope.apns.sound,
                badge=envelope.apns.badge,
            )
        )
    )
    webpush = None
    if envelope.webpush is not None:
        section = envelope.webpush
        webpush = messaging.WebpushConfig(
            notification=messaging.WebpushNotification(
                title=section.title,
                body=section.body,
                icon=section.icon,
                badge=section.badge,
                require_interaction=section.require_interaction,
                silent=section.silent,
                tag=section.tag,
            ),
            fcm_options=messaging.WebpushFCMOptions(link=section.link),
        )
    return android, apns, webpush


def to_message(envelope: Envelope) -> messaging.Message:
    """Translate a single-target envelope into a ``messaging.Message``."""

    android, apns, webpush = _platform_configs(envelope)
    return messaging.Message(
        data=dict(envelope.data),
        notification=messaging.Notification(
            title=envelope.notification.title, body=envelope.notification.body
        ),
        android=android,
        apns=apns,
        webpush=webpush,
        token=envelope.token,
    )


def to_multicast_message(envelope: Envelope) -> messaging.MulticastMessage:
    """Translate a multi-target envelope into a ``messaging.MulticastMessage``."""

    android, apns, webpush = _platform_configs(envelope)
    return messaging.MulticastMessage(
        tokens=list(envelope.tokens),
        data=dict(envelope.data),
        notification=messaging.Notification(
            title=envelope.notification.title, body=envelope.notification.body
        ),
        android=android,
        apns=apns,
        webpush=webpush,
    )


__all__ = [
    "FIREBASE_APP_NAME",
    "FirebasePushGateway",
    "PushGateway",
    "delete_firebase_app",
    "initialize_firebase_app",
    "to_message",
    "to_multicast_message",
]
