"""Tests for the worker pool that delivers freshly queued records."""

from __future__ import annotations

import threading

import pytest

from push_dispatch.infrastructure.push import DispatchTrigger


def test_fire_runs_handler_off_the_calling_thread():
    seen = []

    def handler(record_id):
        seen.append((record_id, threading.current_thread().name))
        return record_id.upper()

    trigger = DispatchTrigger(handler, max_workers=2)
    try:
        assert trigger.fire("abc").result(timeout=5) == "ABC"
    finally:
        trigger.shutdown()

    ((record_id, thread_name),) = seen
    assert record_id == "abc"
    assert thread_name.startswith("push-dispatch")


def test_handler_crash_is_logged(caplog):
    def handler(record_id):
        raise RuntimeError("worker died")

    trigger = DispatchTrigger(handler, max_workers=1)
    with caplog.at_level("ERROR"):
        future = trigger.fire("abc")
        with pytest.raises(RuntimeError):
            future.result(timeout=5)
    trigger.shutdown()

    assert "Dispatch handler crashed for record abc" in caplog.text


def test_fire_after_shutdown_is_refused():
    trigger = DispatchTrigger(lambda record_id: None)
    trigger.shutdown()

    with pytest.raises(RuntimeError):
        trigger.fire("abc")
