"""Process-wide handles shared by the API and the dispatch workers.

Everything is created once by :func:`build_runtime`, started from the
application lifespan and released by :meth:`PushRuntime.shutdown`. Tests
build a runtime around their own session factory and a fake gateway.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import firebase_admin
from apscheduler.schedulers.background import BackgroundScheduler
from sqlalchemy.orm import Session, sessionmaker

from push_dispatch.application.use_cases.dispatch import (
    DispatchConsumer,
    RetentionSweeper,
    build_token_resolver,
)
from push_dispatch.config import Settings, get_settings
from push_dispatch.infrastructure.database import SessionLocal
from push_dispatch.infrastructure.push import (
    DispatchTrigger,
    FirebasePushGateway,
    PushGateway,
    delete_firebase_app,
    initialize_firebase_app,
)
from push_dispatch.infrastructure.repositories import PushNotificationRepository
from push_dispatch.infrastructure.scheduler import build_retention_scheduler
from push_dispatch.utils import get_app_timezone

logger = logging.getLogger(__name__)


@dataclass
class PushRuntime:
    settings: Settings
    session_factory: sessionmaker[Session]
    gateway: PushGateway
    consumer: DispatchConsumer
    trigger: DispatchTrigger
    sweeper: RetentionSweeper
    scheduler: BackgroundScheduler | None = None
    firebase_app: firebase_admin.App | None = None
    _started: bool = field(default=False, init=False, repr=False)

    def start(self, *, drain: bool = True) -> None:
        """Start the scheduler and hand pending records to the workers."""

        if self._started:
            return
        if self.scheduler is not None:
            self.scheduler.start()
        self._started = True
        if drain:
            self.trigger_pending()
        logger.info("Push dispatch runtime started")

    def trigger_pending(self, *, limit: int | None = 500) -> int:
        """Fire the trigger for every record left unprocessed."""

        session = self.session_factory()
        try:
            pending = PushNotificationRepository(session).list_pending(limit=limit)
        finally:
            session.close()
        for record in pending:
            if record.id:
                self.trigger.fire(record.id)
        if pending:
            logger.info("Scheduled %s pending push notifications", len(pending))
        return len(pending)

    def shutdown(self) -> None:
        """Stop the scheduler, wait for in-flight deliveries and free Firebase."""

        if self.scheduler is not None and self.scheduler.running:
            self.scheduler.shutdown(wait=False)
        self.trigger.shutdown(wait=True)
        delete_firebase_app(self.firebase_app)
        self._started = False
        logger.info("Push dispatch runtime stopped")


def build_runtime(
    settings: Settings | None = None,
    *,
    session_factory: sessionmaker[Session] | None = None,
    gateway: PushGateway | None = None,
    with_scheduler: bool | None = None,
) -> PushRuntime:
    """Assemble the runtime from ``settings``, creating defaults as needed."""

    settings = settings or get_settings()
    if session_factory is None:
        session_factory = SessionLocal

    firebase_app = None
    if gateway is None:
        firebase_app = initialize_firebase_app(settings)
        gateway = FirebasePushGateway(firebase_app)

    consumer = DispatchConsumer(
        session_factory,
        build_token_resolver(session_factory),
        gateway,
        link_base_url=settings.push_link_base_url,
        icon=settings.push_icon,
    )
    trigger = DispatchTrigger(consumer.handle, max_workers=settings.dispatch_workers)
    sweeper = RetentionSweeper(
        session_factory,
        retention_days=settings.retention_days,
        batch_limit=settings.retention_batch_limit,
    )

    use_scheduler = settings.enable_scheduler if with_scheduler is None else with_scheduler
    scheduler = (
        build_retention_scheduler(sweeper.sweep, timezone=get_app_timezone())
        if use_scheduler
        else None
    )

    return PushRuntime(
        settings=settings,
        session_factory=session_factory,
        gateway=gateway,
        consumer=consumer,
        trigger=trigger,
        sweeper=sweeper,
        scheduler=scheduler,
        firebase_app=firebase_app,
    )


__all__ = ["PushRuntime", "build_runtime"]
