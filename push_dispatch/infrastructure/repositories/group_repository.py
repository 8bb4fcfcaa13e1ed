"""Lookups over the gym registries."""

from __future__ import annotations

from sqlalchemy.orm import Session

from push_dispatch.domain.entities import Group
from push_dispatch.infrastructure.models import GymInfoModel, GymModel


class GroupRepository:
    """Read gyms from the primary and secondary registries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_primary(self, group_id: str) -> Group | None:
        model = self.session.get(GymInfoModel, group_id)
        return self._to_entity(model) if model else None

    def get_secondary(self, group_id: str) -> Group | None:
        model = self.session.get(GymModel, group_id)
        return self._to_entity(model) if model else None

    def save_primary(self, group: Group) -> Group:
        model = self.session.get(GymInfoModel, group.id) or GymInfoModel(id=group.id)
        model.name = group.name
        model.admin_uid = group.admin_uid
        model.owner_id = group.owner_id
        self.session.add(model)
        self.session.commit()
        return self._to_entity(model)

    def save_secondary(self, group: Group) -> Group:
        model = self.session.get(GymModel, group.id) or GymModel(id=group.id)
        model.name = group.name
        model.admin_uid = group.admin_uid
        model.owner_id = group.owner_id
        self.session.add(model)
        self.session.commit()
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: GymInfoModel | GymModel) -> Group:
        return Group(
            id=model.id,
            name=model.name,
            admin_uid=model.admin_uid,
            owner_id=model.owner_id,
        )


__all__ = ["GroupRepository"]
