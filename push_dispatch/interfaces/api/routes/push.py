"""Administrative endpoints used to test delivery and read inbox statistics."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.orm import Session

from push_dispatch.application.use_cases import enqueue_notification, get_notification_stats
from push_dispatch.application.use_cases.dispatch import build_direct_envelope
from push_dispatch.interfaces.api.dependencies import get_db, get_runtime
from push_dispatch.interfaces.api.schemas import (
    DirectPushRequest,
    NotificationStatsRead,
    TestNotificationRequest,
    TestNotificationResponse,
)
from push_dispatch.runtime import PushRuntime
from push_dispatch.schemas import NotificationRequest
from push_dispatch.utils import app_now

logger = logging.getLogger(__name__)

router = APIRouter(tags=["push"])


def _internal_error(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "message": str(exc)},
    )


@router.post(
    "/testNotification",
    response_model=TestNotificationResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
def queue_test_notification(
    payload: TestNotificationRequest | None = Body(default=None),
    db: Session = Depends(get_db),
    runtime: PushRuntime = Depends(get_runtime),
) -> TestNotificationResponse | JSONResponse:
    """Queue a test notification for ``targetUid``."""

    if payload is None or payload.missing_fields():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: targetUid, title, body",
        )

    try:
        request = NotificationRequest(
            target_identity=payload.target_uid,
            title=payload.title,
            body=payload.body,
            type=payload.type or "test",
            data={
                "type": payload.type or "test",
                "test": "true",
                "timestamp": app_now().isoformat(),
            },
            platform="web",
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc

    try:
        notification_id = enqueue_notification(db, request, trigger=runtime.trigger)
    except Exception as exc:
        db.rollback()
        logger.exception("Error queuing test notification")
        return _internal_error(exc)

    return TestNotificationResponse(notification_id=notification_id)


@router.get("/getNotificationStats", response_model=NotificationStatsRead)
def read_notification_stats(
    admin_uid: str | None = Query(default=None, alias="adminUid"),
    db: Session = Depends(get_db),
) -> NotificationStatsRead | JSONResponse:
    """Return total, unread and today's inbox counters for ``adminUid``."""

    if not admin_uid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing adminUid parameter",
        )

    try:
        stats = get_notification_stats(db, admin_uid=admin_uid)
    except Exception as exc:
        logger.exception("Error getting notification stats for %s", admin_uid)
        return _internal_error(exc)

    return NotificationStatsRead(
        total=stats.total,
        unread=stats.unread,
        today=stats.today,
        last_updated=stats.last_updated,
    )


@router.post("/send", response_class=PlainTextResponse)
def send_direct_notification(
    payload: DirectPushRequest | None = Body(default=None),
    runtime: PushRuntime = Depends(get_runtime),
) -> PlainTextResponse:
    """Deliver one notification to one device without going through the queue."""

    if payload is None or not payload.is_complete():
        return PlainTextResponse("Missing parameters", status_code=status.HTTP_400_BAD_REQUEST)

    envelope = build_direct_envelope(payload.token, payload.title, payload.body)
    try:
        outcome = runtime.gateway.send(envelope)
    except Exception:
        logger.exception("Failed to send direct notification")
        return PlainTextResponse(
            "Failed to send notification",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.info("Direct notification sent: %s", outcome.delivery_id)
    return PlainTextResponse("Notification sent", status_code=status.HTTP_200_OK)


__all__ = ["router"]
