"""Shared fixtures for the push dispatch test-suite."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENABLE_SCHEDULER", "false")
os.environ.setdefault("APP_TIMEZONE", "UTC")

from push_dispatch.domain.entities import (  # noqa: E402
    ADDRESSING_MULTI,
    DeliveryOutcome,
    Envelope,
    TokenResult,
)
from push_dispatch.domain.errors import TransportError  # noqa: E402
from push_dispatch.infrastructure.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    initialize_database,
)


class FakeGateway:
    """Gateway double recording every envelope it is asked to send."""

    def __init__(
        self,
        *,
        error: Exception | None = None,
        failing_tokens: set[str] | None = None,
    ) -> None:
        self.sent: list[Envelope] = []
        self.error = error
        self.failing_tokens = failing_tokens or set()

    def send(self, envelope: Envelope) -> DeliveryOutcome:
        self.sent.append(envelope)
        if self.error is not None:
            raise self.error
        if envelope.addressing != ADDRESSING_MULTI:
            return DeliveryOutcome(
                success=True, delivery_id="projects/test/messages/1", success_count=1
            )
        responses = [
            TokenResult(token=token, success=token not in self.failing_tokens)
            for token in envelope.tokens
        ]
        failures = sum(1 for response in responses if not response.success)
        return DeliveryOutcome(
            success=True,
            success_count=len(responses) - failures,
            failure_count=failures,
            responses=responses,
        )


class StaticLookup:
    """Token lookup backed by a dictionary."""

    name = "static"

    def __init__(self, tokens: dict[str, tuple[str | None, ...]]) -> None:
        self.tokens = tokens
        self.calls: list[str] = []

    def __call__(self, identity: str) -> tuple[str | None, ...]:
        self.calls.append(identity)
        return self.tokens.get(identity, ())


@pytest.fixture()
def engine():
    """Return an in-memory SQLite engine with every table created."""

    engine = build_engine("sqlite://")
    initialize_database(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def transport_error() -> TransportError:
    return TransportError("Requested entity was not found. (code NOT_FOUND)")
