"""Pydantic schema for notification requests appended to the queue."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from push_dispatch.domain.entities import DEFAULT_PLATFORM, DEFAULT_TYPE, NotificationRecord
from push_dispatch.utils.serialization import stringify_data


class NotificationRequest(BaseModel):
    """Producer input for one queue entry; malformed requests never reach the queue."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    target_identity: str = Field(..., min_length=1, max_length=128)
    title: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)
    type: str = Field(default=DEFAULT_TYPE, min_length=1, max_length=64)
    data: dict[str, str] = Field(default_factory=dict)
    priority: Literal["normal", "high", "urgent"] = "normal"
    platform: str = Field(default=DEFAULT_PLATFORM, min_length=1, max_length=16)

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, value: Any) -> dict[str, str]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("data must be a mapping of string keys to string values")
        return stringify_data(value)

    def to_record(self) -> NotificationRecord:
        """Return an unsaved, unprocessed record for this request."""

        return NotificationRecord(
            id=None,
            target_identity=self.target_identity,
            title=self.title,
            body=self.body,
            type=self.type,
            data=dict(self.data),
            priority=self.priority,
            platform=self.platform,
        )


__all__ = ["NotificationRequest"]
