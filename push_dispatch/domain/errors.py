"""Errors raised while dispatching a queued notification."""


class DispatchError(Exception):
    """Base class for failures that end a record in a failed terminal state."""


class RecordValidationError(DispatchError):
    """The record lacks a field required for delivery."""


class NoTokensFound(DispatchError):
    """The recipient has no known device token."""


class TransportError(DispatchError):
    """The push gateway call itself failed."""


MISSING_TARGET_REASON = "Missing targetIdentity"
NO_TOKENS_REASON = "No tokens found"
SENT_REASON = "Successfully sent"
CLAIMED_REASON = "Already claimed"


__all__ = [
    "DispatchError",
    "RecordValidationError",
    "NoTokensFound",
    "TransportError",
    "MISSING_TARGET_REASON",
    "NO_TOKENS_REASON",
    "SENT_REASON",
    "CLAIMED_REASON",
]
