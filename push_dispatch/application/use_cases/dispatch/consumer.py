"""Deliver queued notifications and record their terminal outcome.

Each record is claimed with one conditional update before it moves through
``resolving -> building -> sending``, and ends in a terminal success or
failure written with a second one. A claimed record is never handled again,
so a record whose outcome could not be written stays unprocessed rather than
being sent twice.

Every failure is converted into a failed terminal state; a failing
write-back is logged and reported through :class:`BestEffort` only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection

from sqlalchemy.orm import Session, sessionmaker

from push_dispatch.domain.entities import (
    DISPATCH_FAILED,
    DISPATCH_NOT_FOUND,
    DISPATCH_SENT,
    DISPATCH_SKIPPED,
    BestEffort,
    DeliveryOutcome,
    DispatchResult,
    Envelope,
    NotificationRecord,
)
from push_dispatch.domain.errors import (
    CLAIMED_REASON,
    MISSING_TARGET_REASON,
    NO_TOKENS_REASON,
    SENT_REASON,
    DispatchError,
    NoTokensFound,
    RecordValidationError,
)
from push_dispatch.infrastructure.push import PushGateway
from push_dispatch.infrastructure.repositories import PushNotificationRepository

from .payload_builder import DEFAULT_ICON, build_envelope
from .token_resolver import TokenResolver

logger = logging.getLogger(__name__)

EnvelopeBuilder = Callable[..., Envelope]


class DispatchConsumer:
    """Orchestrate resolver, builder and gateway for one record at a time."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        resolver: TokenResolver,
        gateway: PushGateway,
        *,
        link_base_url: str,
        icon: str = DEFAULT_ICON,
        builder: EnvelopeBuilder = build_envelope,
    ) -> None:
        self._session_factory = session_factory
        self._resolver = resolver
        self._gateway = gateway
        self._link_base_url = link_base_url
        self._icon = icon
        self._builder = builder

    def handle(self, record_id: str) -> DispatchResult:
        """Process the record ``record_id`` to a terminal state."""

        logger.info("Processing push notification %s", record_id)
        try:
            record = self._load(record_id)
        except Exception as exc:
            logger.exception("Could not load push notification %s", record_id)
            return DispatchResult(record_id, DISPATCH_FAILED, reason=str(exc))

        if record is None:
            logger.warning("Push notification %s not found", record_id)
            return DispatchResult(record_id, DISPATCH_NOT_FOUND)

        if record.is_terminal():
            logger.info(
                "Push notification %s already processed (%s); skipping",
                record_id,
                record.result,
            )
            return DispatchResult(record_id, DISPATCH_SKIPPED, reason=record.result)

        try:
            claimed = self._claim(record_id)
        except Exception as exc:
            logger.exception("Could not claim push notification %s", record_id)
            return DispatchResult(record_id, DISPATCH_FAILED, reason=str(exc))

        if not claimed:
            logger.info("Push notification %s already claimed; skipping", record_id)
            return DispatchResult(record_id, DISPATCH_SKIPPED, reason=CLAIMED_REASON)

        try:
            outcome = self._deliver(record)
        except DispatchError as exc:
            logger.warning("Push notification %s failed: %s", record_id, exc)
            success, reason = False, str(exc)
        except Exception as exc:
            logger.exception("Error processing push notification %s", record_id)
            success, reason = False, str(exc) or exc.__class__.__name__
        else:
            logger.info(
                "Push notification %s sent (%s success, %s failures)",
                record_id,
                outcome.success_count,
                outcome.failure_count,
            )
            success, reason = True, SENT_REASON

        write_back = self._mark_processed(record_id, success=success, result=reason)
        return DispatchResult(
            record_id,
            DISPATCH_SENT if success else DISPATCH_FAILED,
            reason=reason,
            write_back=write_back,
        )

    def drain_pending(self, *, limit: int | None = 100) -> list[DispatchResult]:
        """Handle records nobody has claimed yet, oldest first."""

        session = self._session_factory()
        try:
            pending_ids = [
                record.id
                for record in PushNotificationRepository(session).list_pending(limit=limit)
                if record.id
            ]
        finally:
            session.close()

        if pending_ids:
            logger.info("Draining %s pending push notifications", len(pending_ids))
        return [self.handle(record_id) for record_id in pending_ids]

    def _load(self, record_id: str) -> NotificationRecord | None:
        session = self._session_factory()
        try:
            return PushNotificationRepository(session).get(record_id)
        finally:
            session.close()

    def _claim(self, record_id: str) -> bool:
        session = self._session_factory()
        try:
            return PushNotificationRepository(session).claim(record_id)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def _deliver(self, record: NotificationRecord) -> DeliveryOutcome:
        if not record.target_identity:
            raise RecordValidationError(MISSING_TARGET_REASON)

        tokens: Collection[str] = self._resolver.resolve(record.target_identity)
        if not tokens:
            raise NoTokensFound(NO_TOKENS_REASON)

        envelope = self._builder(
            record, tokens, link_base_url=self._link_base_url, icon=self._icon
        )
        return self._gateway.send(envelope)

    def _mark_processed(self, record_id: str, *, success: bool, result: str) -> BestEffort:
        session = self._session_factory()
        try:
            updated = PushNotificationRepository(session).mark_processed(
                record_id, success=success, result=result
            )
        except Exception as exc:
            session.rollback()
            logger.exception("Error marking push notification %s as processed", record_id)
            return BestEffort.failed(exc)
        finally:
            session.close()

        if not updated:
            logger.warning(
                "Push notification %s was already marked processed by another handler",
                record_id,
            )
        return BestEffort.done()


__all__ = ["DispatchConsumer"]
