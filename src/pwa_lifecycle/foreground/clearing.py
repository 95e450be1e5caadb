"""Foreground – dismiss notifications when the user opens the page they point to."""
from __future__ import annotations

from collections.abc import Iterable

from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.badge import clear_badge
from pwa_lifecycle.platform.ports import BadgePort, ServiceWorkerContainerPort
from pwa_lifecycle.protocol.messages import ClearNotifications

logger = get_logger(__name__)


async def clear_on_open(
    container: ServiceWorkerContainerPort | None,
    badge: BadgePort | None,
    tags: Iterable[str] = (),
) -> bool:
    """Clear the badge and ask the controlling worker to close *tags*.

    Tags match exactly or as a ``"<tag>-"`` prefix; no tags closes all.
    Returns ``True`` when the message was posted.
    """
    await clear_badge(badge)
    controller = container.controller if container is not None else None
    if controller is None:
        logger.debug("notifications.clear_skipped", reason="no_controller")
        return False
    message = ClearNotifications.for_tags(tags)
    controller.post_message(message.to_wire())
    logger.debug("notifications.clear_requested", tags=list(message.tags))
    return True


__all__ = ["clear_badge", "clear_on_open"]
