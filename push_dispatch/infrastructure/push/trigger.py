"""Schedule queued notifications for delivery off the producer's thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Trigger(Protocol):
    """Receives the id of every freshly inserted queue entry."""

    def fire(self, record_id: str) -> Any:
        ...


class DispatchTrigger:
    """Run ``handler`` for each new record on a shared worker pool."""

    def __init__(
        self,
        handler: Callable[[str], Any],
        *,
        max_workers: int = 4,
    ) -> None:
        self._handler = handler
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="push-dispatch"
        )

    def fire(self, record_id: str) -> Future:
        """Schedule delivery of ``record_id`` and return immediately."""

        return self._executor.submit(self._run, record_id)

    def _run(self, record_id: str) -> Any:
        try:
            return self._handler(record_id)
        except Exception:
            logger.exception("Dispatch handler crashed for record %s", record_id)
            raise

    def shutdown(self, *, wait: bool = True) -> None:
        """Stop accepting records and wait for in-flight deliveries."""

        self._executor.shutdown(wait=wait)


__all__ = ["DispatchTrigger", "Trigger"]
