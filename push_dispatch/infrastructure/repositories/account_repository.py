"""Persistence layer for the admin and user token registries."""

from __future__ import annotations

from sqlalchemy.orm import Session

from push_dispatch.domain.entities import AdminAccount, UserAccount
from push_dispatch.infrastructure.models import AdminAccountModel, UserAccountModel


class AdminAccountRepository:
    """Read and register administrator device tokens."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, uid: str) -> AdminAccount | None:
        model = self.session.get(AdminAccountModel, uid)
        return self._to_entity(model) if model else None

    def save(self, account: AdminAccount) -> AdminAccount:
        model = self.session.get(AdminAccountModel, account.uid) or AdminAccountModel(
            uid=account.uid
        )
        model.name = account.name
        model.web_fcm_token = account.web_fcm_token
        model.fcm_token = account.fcm_token
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: AdminAccountModel) -> AdminAccount:
        return AdminAccount(
            uid=model.uid,
            name=model.name,
            web_fcm_token=model.web_fcm_token,
            fcm_token=model.fcm_token,
        )


class UserAccountRepository:
    """Read and register mobile user device tokens."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, uid: str) -> UserAccount | None:
        model = self.session.get(UserAccountModel, uid)
        return self._to_entity(model) if model else None

    def save(self, account: UserAccount) -> UserAccount:
        model = self.session.get(UserAccountModel, account.uid) or UserAccountModel(
            uid=account.uid
        )
        model.name = account.name
        model.fcm_token = account.fcm_token
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserAccountModel) -> UserAccount:
        return UserAccount(uid=model.uid, name=model.name, fcm_token=model.fcm_token)


__all__ = ["AdminAccountRepository", "UserAccountRepository"]
