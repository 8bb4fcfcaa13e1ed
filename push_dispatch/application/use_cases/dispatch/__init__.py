"""Dispatch pipeline: token resolution, envelope building, delivery and retention."""

from .consumer import DispatchConsumer
from .payload_builder import build_direct_envelope, build_envelope, resolve_link
from .retention import RetentionSweeper
from .token_resolver import (
    AdminTokenLookup,
    TokenResolver,
    UserTokenLookup,
    build_token_resolver,
)

__all__ = [
    "DispatchConsumer",
    "build_direct_envelope",
    "build_envelope",
    "resolve_link",
    "RetentionSweeper",
    "AdminTokenLookup",
    "TokenResolver",
    "UserTokenLookup",
    "build_token_resolver",
]
