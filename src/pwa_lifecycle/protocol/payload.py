"""Protocol – push payload sent by the push service to the worker.

Wire format (JSON, every field optional)::

    {"title": str, "body": str, "tag": str, "url": str, "badge": int,
     "actions": [{"action": str, "title": str, "icon": str}]}

Decoding never fails: a body that is not a JSON object degrades to the
default title with the raw text as the notification body.
"""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any

from pwa_lifecycle.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class NotificationAction:
    """A button shown on the notification."""

    action: str
    title: str
    icon: str | None = None

    @classmethod
    def from_wire(cls, data: Any) -> NotificationAction | None:
        if not isinstance(data, Mapping):
            return None
        action, title, icon = data.get("action"), data.get("title"), data.get("icon")
        if not isinstance(action, str) or not isinstance(title, str):
            return None
        return cls(action=action, title=title, icon=icon if isinstance(icon, str) else None)

    def to_wire(self) -> dict[str, str]:
        wire = {"action": self.action, "title": self.title}
        if self.icon is not None:
            wire["icon"] = self.icon
        return wire


@dataclasses.dataclass(frozen=True)
class PushPayload:
    """Decoded push message."""

    title: str
    body: str
    tag: str | None = None
    url: str | None = None
    badge: int | None = None
    actions: tuple[NotificationAction, ...] = ()

    def to_wire(self) -> dict[str, Any]:
        """Wire dict with unset optional fields omitted."""
        wire: dict[str, Any] = {"title": self.title, "body": self.body}
        if self.tag is not None:
            wire["tag"] = self.tag
        if self.url is not None:
            wire["url"] = self.url
        if self.badge is not None:
            wire["badge"] = self.badge
        if self.actions:
            wire["actions"] = [a.to_wire() for a in self.actions]
        return wire

    def to_json(self) -> str:
        return json.dumps(self.to_wire(), ensure_ascii=False, separators=(",", ":"))


def _badge_from_wire(value: Any) -> int | None:
    # bool is an int subclass; `true` is not a count
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def parse_push_payload(
    data: bytes | str | None,
    *,
    default_title: str,
    default_body: str,
) -> PushPayload:
    """Decode the opaque push body into a :class:`PushPayload`.

    * ``None`` → defaults.
    * Text that is not a JSON object → default title, raw text as body.
    * JSON object → its fields, falling back to the defaults for a missing
      or non-string ``title`` / ``body``.
    """
    if data is None:
        return PushPayload(title=default_title, body=default_body)

    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    try:
        decoded = json.loads(text)
    except ValueError:
        logger.debug("push.payload_not_json", length=len(text))
        return PushPayload(title=default_title, body=text)

    if not isinstance(decoded, Mapping):
        logger.debug("push.payload_not_object", json_type=type(decoded).__name__)
        return PushPayload(title=default_title, body=text)

    raw_actions = decoded.get("actions") or []
    actions: list[NotificationAction] = []
    if isinstance(raw_actions, list):
        for raw in raw_actions:
            action = NotificationAction.from_wire(raw)
            if action is None:
                logger.debug("push.action_dropped", action=raw)
                continue
            actions.append(action)

    return PushPayload(
        title=_optional_str(decoded.get("title")) or default_title,
        body=_optional_str(decoded.get("body")) or default_body,
        tag=_optional_str(decoded.get("tag")) or None,
        url=_optional_str(decoded.get("url")) or None,
        badge=_badge_from_wire(decoded.get("badge")),
        actions=tuple(actions),
    )


__all__ = ["NotificationAction", "PushPayload", "parse_push_payload"]
