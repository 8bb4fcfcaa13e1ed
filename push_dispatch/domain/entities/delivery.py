"""Results reported by the delivery gateway and the dispatch consumer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TokenResult:
    """Outcome of a multi-target send for one token."""

    token: str
    success: bool
    delivery_id: str | None = None
    error: str | None = None


@dataclass
class DeliveryOutcome:
    """Summary of a gateway call.

    A single-target send fills ``delivery_id``; a multi-target send fills
    ``responses`` and the aggregate counters. Per-token failures never turn
    ``success`` to ``False``.
    """

    success: bool
    delivery_id: str | None = None
    error: str | None = None
    success_count: int = 0
    failure_count: int = 0
    responses: list[TokenResult] = field(default_factory=list)

    @property
    def failed_tokens(self) -> list[str]:
        return [response.token for response in self.responses if not response.success]


@dataclass(frozen=True)
class BestEffort:
    """Result of an operation whose failure is logged and never re-raised."""

    ok: bool
    error: str | None = None

    @classmethod
    def done(cls) -> "BestEffort":
        return cls(ok=True)

    @classmethod
    def failed(cls, error: BaseException | str) -> "BestEffort":
        return cls(ok=False, error=str(error))


DISPATCH_SKIPPED = "skipped"
DISPATCH_SENT = "sent"
DISPATCH_FAILED = "failed"
DISPATCH_NOT_FOUND = "not_found"


@dataclass(frozen=True)
class DispatchResult:
    """What the dispatch consumer did with one record."""

    record_id: str
    status: str
    reason: str | None = None
    write_back: BestEffort | None = None


__all__ = [
    "BestEffort",
    "DeliveryOutcome",
    "DispatchResult",
    "TokenResult",
    "DISPATCH_SKIPPED",
    "DISPATCH_SENT",
    "DISPATCH_FAILED",
    "DISPATCH_NOT_FOUND",
]
