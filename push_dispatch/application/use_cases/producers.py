"""Turn business events into queued push notifications."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from push_dispatch.domain.entities import (
    PRIORITY_HIGH,
    Appointment,
    BindingRequest,
    ChatMessage,
    InboxNotification,
    STATUS_PENDING,
)
from push_dispatch.infrastructure.push import Trigger
from push_dispatch.infrastructure.repositories import GroupRepository, NotificationRepository
from push_dispatch.schemas import NotificationRequest

from .queue import enqueue_notification

logger = logging.getLogger(__name__)


def find_admin(session: Session, group_id: str) -> str | None:
    """Return the administrator identity of ``group_id``.

    Looks in the primary gym registry, then the secondary one, and finally
    treats the group id itself as the identity. Lookup errors yield ``None``.
    """

    if not group_id:
        return None
    repository = GroupRepository(session)
    try:
        group = repository.get_primary(group_id) or repository.get_secondary(group_id)
    except Exception:
        logger.exception("Error finding administrator for group %s", group_id)
        return None
    if group is not None:
        return group.admin_identity()
    return group_id


def _persist_inbox_notification(
    session: Session,
    *,
    admin_uid: str,
    event_type: str,
    title: str,
    message: str,
    payload: dict[str, str],
) -> InboxNotification:
    notification = InboxNotification(
        id=None,
        admin_uid=admin_uid,
        event_type=event_type,
        title=title,
        message=message,
        payload=payload,
    )
    return NotificationRepository(session).create(notification)


def notify_new_appointment(
    session: Session,
    appointment: Appointment,
    *,
    trigger: Trigger | None = None,
) -> str | None:
    """Queue a notification for the gym administrator about ``appointment``."""

    if not appointment.awaits_admin_approval():
        logger.debug("Appointment %s not pending admin approval; skipping", appointment.id)
        return None

    admin_uid = find_admin(session, appointment.gym_id)
    if not admin_uid:
        logger.warning("No admin found for gym %s", appointment.gym_name)
        return None

    title = "New Appointment Request"
    body = f"{appointment.user_name} requested appointment with {appointment.coach_name}"
    data = {
        "type": "new_appointment",
        "appointmentId": appointment.id,
        "userId": appointment.user_id,
        "userName": appointment.user_name,
        "coachName": appointment.coach_name,
        "gymName": appointment.gym_name,
        "date": appointment.date.isoformat(),
        "timeSlot": appointment.time_slot,
        "clickAction": "/appointments",
    }
    _persist_inbox_notification(
        session,
        admin_uid=admin_uid,
        event_type="new_appointment",
        title=title,
        message=body,
        payload=data,
    )
    notification_id = enqueue_notification(
        session,
        NotificationRequest(
            target_identity=admin_uid,
            title=title,
            body=body,
            type="new_appointment",
            data=data,
            priority=PRIORITY_HIGH,
            platform="web",
        ),
        trigger=trigger,
    )
    logger.info("Appointment notification queued for admin %s", admin_uid)
    return notification_id


def notify_new_binding_request(
    session: Session,
    request: BindingRequest,
    *,
    trigger: Trigger | None = None,
) -> str | None:
    """Queue a notification for the administrator who must review ``request``."""

    if request.status != STATUS_PENDING:
        logger.debug("Binding request %s not pending; skipping", request.id)
        return None

    admin_uid = request.target_admin_uid or find_admin(session, request.gym_id)
    if not admin_uid:
        logger.warning("No admin found for binding request %s", request.id)
        return None

    request_type = request.request_type
    event_type = f"new_{request_type}_request"
    title = f"{'Binding' if request_type == 'bind' else 'Unbinding'} Request"
    body = f"Coach {request.coach_name} wants to {request_type} {request.gym_name}"
    data = {
        "type": event_type,
        "requestId": request.id,
        "coachId": request.coach_id,
        "coachName": request.coach_name,
        "gymName": request.gym_name,
        "requestType": request_type,
        "clickAction": "/coaches",
    }
    _persist_inbox_notification(
        session,
        admin_uid=admin_uid,
        event_type=event_type,
        title=title,
        message=body,
        payload=data,
    )
    notification_id = enqueue_notification(
        session,
        NotificationRequest(
            target_identity=admin_uid,
            title=title,
            body=body,
            type=event_type,
            data=data,
            priority=PRIORITY_HIGH,
            platform="web",
        ),
        trigger=trigger,
    )
    logger.info("Binding request notification queued for admin %s", admin_uid)
    return notification_id


def notify_chat_message(
    session: Session,
    message: ChatMessage,
    *,
    trigger: Trigger | None = None,
) -> str | None:
    """Queue a notification for the other participant of a chat."""

    receiver_id = message.receiver_id()
    if not receiver_id:
        logger.warning("Could not find the receiver of chat %s", message.chat_id)
        return None
    if not message.text.strip():
        logger.debug("Chat message %s has no text; skipping", message.message_id)
        return None

    return enqueue_notification(
        session,
        NotificationRequest(
            target_identity=receiver_id,
            title="💬 New message",
            body=message.text,
            type="chat",
            data={
                "type": "chat",
                "chatId": message.chat_id,
                "senderId": message.sender_id,
            },
            platform="mobile",
        ),
        trigger=trigger,
    )


__all__ = [
    "find_admin",
    "notify_chat_message",
    "notify_new_appointment",
    "notify_new_binding_request",
]
