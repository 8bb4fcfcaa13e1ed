"""Resolve a recipient identity into the set of its device tokens."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from sqlalchemy.orm import Session, sessionmaker

from push_dispatch.infrastructure.repositories import (
    AdminAccountRepository,
    UserAccountRepository,
)

logger = logging.getLogger(__name__)

TokenLookup = Callable[[str], Iterable[str | None]]


class AdminTokenLookup:
    """Read the web and mobile token slots of an administrator."""

    name = "admin_account"

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def __call__(self, identity: str) -> tuple[str | None, ...]:
        session = self._session_factory()
        try:
            account = AdminAccountRepository(session).get(identity)
        finally:
            session.close()
        if account is None:
            return ()
        return (account.web_fcm_token, account.fcm_token)


class UserTokenLookup:
    """Read the fallback mobile token of a general user."""

    name = "user_account"

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def __call__(self, identity: str) -> tuple[str | None, ...]:
        session = self._session_factory()
        try:
            account = UserAccountRepository(session).get(identity)
        finally:
            session.close()
        if account is None:
            return ()
        return (account.fcm_token,)


class TokenResolver:
    """Union the tokens found by a prioritized list of lookups.

    A failing lookup is logged and contributes no token, so one broken
    registry never blocks delivery through the others.
    """

    def __init__(self, lookups: Sequence[TokenLookup]) -> None:
        self._lookups = tuple(lookups)

    def resolve(self, identity: str) -> frozenset[str]:
        tokens: set[str] = set()
        for lookup in self._lookups:
            try:
                found = [value for value in lookup(identity) if value]
            except Exception:
                logger.exception(
                    "Token lookup %s failed for %s",
                    getattr(lookup, "name", repr(lookup)),
                    identity,
                )
                continue
            tokens.update(found)

        if not tokens:
            logger.warning("No push tokens found for %s", identity)
        return frozenset(tokens)


def build_token_resolver(session_factory: sessionmaker[Session]) -> TokenResolver:
    """Return the resolver over the admin registry then the user registry."""

    return TokenResolver(
        [AdminTokenLookup(session_factory), UserTokenLookup(session_factory)]
    )


__all__ = [
    "AdminTokenLookup",
    "TokenLookup",
    "TokenResolver",
    "UserTokenLookup",
    "build_token_resolver",
]
