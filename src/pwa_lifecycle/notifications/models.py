"""Notifications – options passed to the OS notification center."""
from __future__ import annotations

import dataclasses
from typing import Any

from pwa_lifecycle.config.pwa import WorkerSettings
from pwa_lifecycle.protocol.payload import NotificationAction, PushPayload


@dataclasses.dataclass(frozen=True)
class NotificationOptions:
    """Display options for ``showNotification``."""

    body: str
    icon: str
    badge: str
    tag: str
    vibrate: tuple[int, ...] = ()
    renotify: bool = True
    data: dict[str, Any] = dataclasses.field(default_factory=dict)
    actions: tuple[NotificationAction, ...] = ()

    @property
    def url(self) -> str | None:
        return self.data.get("url")

    @classmethod
    def from_payload(cls, payload: PushPayload, settings: WorkerSettings) -> NotificationOptions:
        # renotify is always on so a same-tag notification re-alerts
        return cls(
            body=payload.body,
            icon=settings.icon,
            badge=settings.badge_icon,
            tag=payload.tag or settings.default_tag,
            vibrate=settings.vibrate,
            renotify=True,
            data={"url": payload.url or settings.default_url},
            actions=payload.actions,
        )


__all__ = ["NotificationOptions"]
