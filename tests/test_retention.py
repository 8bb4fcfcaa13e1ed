"""Tests for the retention sweep and its scheduling."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from apscheduler.triggers.cron import CronTrigger

from push_dispatch.application.use_cases.dispatch import RetentionSweeper
from push_dispatch.infrastructure.models import PushNotificationModel
from push_dispatch.infrastructure.repositories import PushNotificationRepository
from push_dispatch.infrastructure.scheduler import RETENTION_JOB_ID, build_retention_scheduler

NOW = datetime(2026, 6, 30, 2, 0, tzinfo=timezone.utc)


def _seed(session, count, *, processed, age_days, prefix):
    created_at = (NOW - timedelta(days=age_days)).replace(tzinfo=None)
    session.add_all(
        PushNotificationModel(
            id=f"{prefix}{index:04d}",
            target_identity="admin1",
            title="T",
            body="B",
            data={},
            platform="web",
            created_at=created_at + timedelta(seconds=index),
            processed=processed,
            success=True if processed else None,
            result="Successfully sent" if processed else None,
        )
        for index in range(count)
    )
    session.commit()


def test_sweep_deletes_in_bounded_batches(session, session_factory):
    """Old processed entries go 500 at a time; pending ones stay."""

    _seed(session, 600, processed=True, age_days=40, prefix="old")
    _seed(session, 10, processed=False, age_days=40, prefix="pending")
    sweeper = RetentionSweeper(session_factory, retention_days=30)

    assert sweeper.sweep(NOW) == 500
    assert sweeper.sweep(NOW) == 100
    assert sweeper.sweep(NOW) == 0

    repository = PushNotificationRepository(session)
    assert repository.count(processed=True) == 0
    assert repository.count(processed=False) == 10


def test_recent_processed_entries_are_kept(session, session_factory):
    _seed(session, 3, processed=True, age_days=29, prefix="recent")
    _seed(session, 2, processed=True, age_days=31, prefix="old")
    sweeper = RetentionSweeper(session_factory, retention_days=30)

    assert sweeper.sweep(NOW) == 2
    assert PushNotificationRepository(session).count() == 3


def test_oldest_entries_are_deleted_first(session, session_factory):
    _seed(session, 5, processed=True, age_days=45, prefix="older")
    _seed(session, 5, processed=True, age_days=35, prefix="newer")
    sweeper = RetentionSweeper(session_factory, retention_days=30, batch_limit=5)

    assert sweeper.sweep(NOW) == 5
    remaining = {model.id for model in session.query(PushNotificationModel).all()}
    assert remaining == {f"newer{index:04d}" for index in range(5)}


def test_batch_limit_is_capped():
    sweeper = RetentionSweeper(None, batch_limit=10_000)

    assert sweeper._batch_limit == 500


def test_cutoff_is_relative_to_now():
    sweeper = RetentionSweeper(None, retention_days=30)

    assert sweeper.cutoff(NOW) == NOW - timedelta(days=30)


def test_sweep_failure_is_logged(caplog):
    class BrokenSession:
        def __init__(self):
            self.rolled_back = False

        def scalars(self, *args, **kwargs):
            raise RuntimeError("database locked")

        def rollback(self):
            self.rolled_back = True

        def close(self):
            pass

    broken = BrokenSession()
    sweeper = RetentionSweeper(lambda: broken)

    with caplog.at_level("ERROR"):
        assert sweeper.sweep(NOW) == 0

    assert broken.rolled_back is True
    assert "Error in push notification cleanup" in caplog.text


def test_scheduler_runs_sweep_daily_at_two():
    calls = []
    scheduler = build_retention_scheduler(lambda: calls.append(True), timezone="UTC")

    job = scheduler.get_job(RETENTION_JOB_ID)

    assert job is not None
    assert isinstance(job.trigger, CronTrigger)
    fields = {field.name: str(field) for field in job.trigger.fields}
    assert fields["hour"] == "2"
    assert fields["minute"] == "0"
    assert scheduler.running is False
