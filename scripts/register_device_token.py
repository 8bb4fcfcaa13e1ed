"""Utility script to register a device token in one of the token registries."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from push_dispatch.domain.entities import AdminAccount, UserAccount
from push_dispatch.infrastructure.database import SessionLocal, initialize_database
from push_dispatch.infrastructure.repositories import (
    AdminAccountRepository,
    UserAccountRepository,
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for token registration."""

    parser = argparse.ArgumentParser(
        description="Register a push token for an administrator or a user.",
    )
    parser.add_argument("uid", help="Identity of the account owning the device")
    parser.add_argument("token", help="Device token issued by Firebase Cloud Messaging")
    parser.add_argument(
        "--registry",
        choices=("admin", "user"),
        default="admin",
        help="Registry receiving the token (default: admin)",
    )
    parser.add_argument(
        "--slot",
        choices=("web", "mobile"),
        default="web",
        help="Admin token slot to fill (default: web); ignored for users",
    )
    parser.add_argument("--name", default=None, help="Display name of the account")
    return parser.parse_args()


def main() -> None:
    """Store the token given on the command line."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        if args.registry == "admin":
            repository = AdminAccountRepository(session)
            account = repository.get(args.uid) or AdminAccount(uid=args.uid)
            if args.slot == "web":
                account.web_fcm_token = args.token
            else:
                account.fcm_token = args.token
            account.name = args.name or account.name
            repository.save(account)
        else:
            repository = UserAccountRepository(session)
            account = repository.get(args.uid) or UserAccount(uid=args.uid)
            account.fcm_token = args.token
            account.name = args.name or account.name
            repository.save(account)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the token: {exc}") from exc
    else:
        print(f"Token registered for {args.registry} {args.uid}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
