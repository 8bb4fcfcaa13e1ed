"""Use case for appending notification requests to the push queue."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from push_dispatch.infrastructure.push import Trigger
from push_dispatch.infrastructure.repositories import PushNotificationRepository
from push_dispatch.schemas import NotificationRequest

logger = logging.getLogger(__name__)


def enqueue_notification(
    session: Session,
    request: NotificationRequest | Mapping[str, Any],
    *,
    trigger: Trigger | None = None,
) -> str:
    """Validate ``request``, store it unprocessed and return its id.

    Raises ``pydantic.ValidationError`` (a ``ValueError``) for malformed
    requests. Delivery is handed to ``trigger`` once the row is committed; a
    record whose trigger could not be fired stays pending until the next drain.
    """

    if not isinstance(request, NotificationRequest):
        request = NotificationRequest.model_validate(dict(request))

    saved = PushNotificationRepository(session).create(request.to_record())
    logger.info(
        "Queued push notification %s (%s) for %s",
        saved.id,
        saved.type,
        saved.target_identity,
    )

    if trigger is not None and saved.id:
        try:
            trigger.fire(saved.id)
        except RuntimeError:
            logger.exception("Could not schedule delivery of push notification %s", saved.id)
    return saved.id or ""


__all__ = ["enqueue_notification"]
