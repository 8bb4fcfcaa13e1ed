"""Domain entities for the registries that hold device tokens."""

from dataclasses import dataclass


@dataclass
class AdminAccount:
    """Administrative account with a web token and a rotating mobile token."""

    uid: str
    name: str | None = None
    web_fcm_token: str | None = None
    fcm_token: str | None = None


@dataclass
class UserAccount:
    """General user account with a single mobile token."""

    uid: str
    name: str | None = None
    fcm_token: str | None = None


@dataclass
class Group:
    """Gym entry used to find the administrator of a group."""

    id: str
    name: str | None = None
    admin_uid: str | None = None
    owner_id: str | None = None

    def admin_identity(self) -> str:
        """Return the administrator uid, falling back to the group id."""

        return self.admin_uid or self.owner_id or self.id


__all__ = ["AdminAccount", "UserAccount", "Group"]
