"""Business events that producers turn into queued notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

STATUS_PENDING = "pending"
BINDING_TYPE_BIND = "bind"


@dataclass
class Appointment:
    """Appointment requested by a gym member with a coach."""

    id: str
    gym_id: str
    gym_name: str
    user_id: str
    user_name: str
    coach_name: str
    date: datetime
    time_slot: str
    overall_status: str = STATUS_PENDING
    admin_approval: str = STATUS_PENDING

    def awaits_admin_approval(self) -> bool:
        return self.overall_status == STATUS_PENDING and self.admin_approval == STATUS_PENDING


@dataclass
class BindingRequest:
    """Request from a coach to bind to, or unbind from, a gym."""

    id: str
    gym_id: str
    gym_name: str
    coach_id: str
    coach_name: str
    type: str | None = BINDING_TYPE_BIND
    status: str = STATUS_PENDING
    target_admin_uid: str | None = None

    @property
    def request_type(self) -> str:
        return self.type or BINDING_TYPE_BIND


@dataclass
class ChatMessage:
    """Message posted in a two-party chat whose id is ``uidA_uidB``."""

    chat_id: str
    message_id: str
    sender_id: str
    text: str

    def receiver_id(self) -> str | None:
        participants = self.chat_id.split("_")
        if len(participants) != 2 or self.sender_id not in participants:
            return None
        first, second = participants
        return second if self.sender_id == first else first


__all__ = [
    "Appointment",
    "BindingRequest",
    "ChatMessage",
    "BINDING_TYPE_BIND",
    "STATUS_PENDING",
]
