"""Notifications – tag matching used for group dismissal.

A requested tag ``event`` matches ``event`` itself and every per-item tag
spawned from it (``event-42``, ``event-abc``) but not ``eventually-x``.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

TAG_SEPARATOR = "-"

T = TypeVar("T")


def tag_matches(tag: str | None, requested: Sequence[str]) -> bool:
    """Return ``True`` when a notification tagged *tag* should be closed.

    An empty *requested* sequence matches every notification, including
    untagged ones.
    """
    if not requested:
        return True
    if not tag:
        return False
    return any(tag == t or tag.startswith(t + TAG_SEPARATOR) for t in requested)


def select_matching(items: Iterable[T], requested: Sequence[str], *, key: str = "tag") -> list[T]:
    """Filter *items* whose ``key`` attribute matches *requested*."""
    return [item for item in items if tag_matches(getattr(item, key, None), requested)]


__all__ = ["TAG_SEPARATOR", "select_matching", "tag_matches"]
