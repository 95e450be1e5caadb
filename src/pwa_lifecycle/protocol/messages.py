"""Protocol – foreground → worker control messages.

Wire format (structured message passing)::

    {"type": "SKIP_WAITING"}
    {"type": "CLEAR_NOTIFICATIONS", "tags": ["chat", "event"]}

There is no acknowledgement channel; the sender observes effects indirectly.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, ClassVar, TypeAlias

from pwa_lifecycle.kernel.errors import InvalidControlMessageError


class MessageType(str, Enum):
    SKIP_WAITING = "SKIP_WAITING"
    CLEAR_NOTIFICATIONS = "CLEAR_NOTIFICATIONS"


@dataclasses.dataclass(frozen=True)
class SkipWaiting:
    """Release the waiting worker so it activates and takes control."""

    type: ClassVar[MessageType] = MessageType.SKIP_WAITING

    def to_wire(self) -> dict[str, Any]:
        return {"type": self.type.value}


@dataclasses.dataclass(frozen=True)
class ClearNotifications:
    """Close displayed notifications matching ``tags`` and clear the badge.

    An empty ``tags`` tuple closes every displayed notification.
    """

    type: ClassVar[MessageType] = MessageType.CLEAR_NOTIFICATIONS

    tags: tuple[str, ...] = ()

    @classmethod
    def for_tags(cls, tags: Iterable[str]) -> ClearNotifications:
        return cls(tags=tuple(tags))

    def to_wire(self) -> dict[str, Any]:
        return {"type": self.type.value, "tags": list(self.tags)}


ControlMessage: TypeAlias = SkipWaiting | ClearNotifications


def parse_control_message(data: Any) -> ControlMessage:
    """Decode a structured message received by the worker.

    Raises
    ------
    InvalidControlMessageError
        When *data* is not a mapping with a known ``type``, or when the
        ``tags`` of a ``CLEAR_NOTIFICATIONS`` message are not strings.
    """
    if not isinstance(data, Mapping):
        raise InvalidControlMessageError(
            "Control message must be a mapping",
            detail={"received": type(data).__name__},
        )
    raw_type = data.get("type")
    try:
        message_type = MessageType(raw_type)
    except ValueError as exc:
        raise InvalidControlMessageError(
            f"Unknown control message type {raw_type!r}",
            errors=[{"field": "type", "value": raw_type}],
            cause=exc,
        ) from exc

    if message_type is MessageType.SKIP_WAITING:
        return SkipWaiting()

    # a missing or null tag list means "every notification"
    tags = data.get("tags")
    if tags is None:
        tags = []
    if not isinstance(tags, (list, tuple)):
        raise InvalidControlMessageError(
            "CLEAR_NOTIFICATIONS tags must be a list of strings",
            errors=[{"field": "tags", "value": tags}],
        )
    tags = list(tags)
    bad = [t for t in tags if not isinstance(t, str)]
    if bad:
        raise InvalidControlMessageError(
            "CLEAR_NOTIFICATIONS tags must be a list of strings",
            errors=[{"field": "tags", "value": v} for v in bad],
        )
    return ClearNotifications(tags=tuple(tags))


__all__ = [
    "ClearNotifications",
    "ControlMessage",
    "MessageType",
    "SkipWaiting",
    "parse_control_message",
]
