"""Platform-segmented message ready for the push gateway."""

from __future__ import annotations

from dataclasses import dataclass, field

ADDRESSING_SINGLE = "single"
ADDRESSING_MULTI = "multi"


@dataclass(frozen=True)
class HumanSection:
    title: str
    body: str
    icon: str


@dataclass(frozen=True)
class WebPushSection:
    title: str
    body: str
    icon: str
    badge: str
    require_interaction: bool
    silent: bool
    tag: str
    link: str


@dataclass(frozen=True)
class AndroidSection:
    priority: str
    channel_id: str
    notification_priority: str
    sound: str = "default"
    click_action: str | None = None


@dataclass(frozen=True)
class ApnsSection:
    title: str
    body: str
    sound: str = "default"
    badge: int | None = 1


@dataclass
class Envelope:
    """Message built once per record and consumed by the gateway adapter."""

    notification: HumanSection
    data: dict[str, str]
    android: AndroidSection
    apns: ApnsSection
    webpush: WebPushSection | None = None
    addressing: str = ADDRESSING_SINGLE
    token: str | None = None
    tokens: list[str] = field(default_factory=list)

    def recipients(self) -> list[str]:
        """Return every token addressed by the envelope."""

        if self.addressing == ADDRESSING_SINGLE:
            return [self.token] if self.token else []
        return list(self.tokens)


__all__ = [
    "ADDRESSING_SINGLE",
    "ADDRESSING_MULTI",
    "AndroidSection",
    "ApnsSection",
    "Envelope",
    "HumanSection",
    "WebPushSection",
]
