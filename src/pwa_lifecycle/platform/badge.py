"""Platform – feature-detected badge helpers.

A missing badge capability is a no-op, never an error.
"""
from __future__ import annotations

from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import BadgePort

logger = get_logger(__name__)


async def set_badge(badge: BadgePort | None, count: int) -> bool:
    """Set the badge to exactly *count*. Returns ``False`` when unsupported."""
    if badge is None:
        logger.debug("badge.unsupported", op="set", count=count)
        return False
    await badge.set_app_badge(count)
    logger.debug("badge.set", count=count)
    return True


async def clear_badge(badge: BadgePort | None) -> bool:
    """Clear the badge. Returns ``False`` when unsupported."""
    if badge is None:
        logger.debug("badge.unsupported", op="clear")
        return False
    await badge.clear_app_badge()
    logger.debug("badge.cleared")
    return True


__all__ = ["clear_badge", "set_badge"]
