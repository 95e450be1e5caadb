"""Worker handlers – push, notification click and control messages.

Every handler is a function of ``(event, platform)``; nothing is kept in
module state because the host may tear the worker down between events.
"""
from __future__ import annotations

from collections.abc import Mapping

from pwa_lifecycle.kernel.errors import InvalidControlMessageError
from pwa_lifecycle.notifications.models import NotificationOptions
from pwa_lifecycle.notifications.tags import tag_matches
from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.badge import clear_badge, set_badge
from pwa_lifecycle.platform.ports import DisplayedNotification, WindowClient, WorkerPlatform
from pwa_lifecycle.protocol.messages import (
    ClearNotifications,
    ControlMessage,
    SkipWaiting,
    parse_control_message,
)
from pwa_lifecycle.protocol.payload import parse_push_payload
from pwa_lifecycle.worker.events import MessageEvent, NotificationClickEvent, PushEvent

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# push
# ---------------------------------------------------------------------------

async def handle_push(event: PushEvent, platform: WorkerPlatform) -> NotificationOptions:
    """Show a notification for the push and mirror its badge count."""
    settings = platform.settings
    payload = parse_push_payload(
        event.data,
        default_title=settings.default_title,
        default_body=settings.default_body,
    )
    options = NotificationOptions.from_payload(payload, settings)

    event.wait_until(platform.notifications.show_notification(payload.title, options))
    logger.info("sw.push.received", tag=options.tag, url=options.url, has_badge=payload.badge is not None)

    # the sender owns the unread count: absolute set, never increment
    if payload.badge is not None:
        await set_badge(platform.badge, payload.badge)
    return options


# ---------------------------------------------------------------------------
# notificationclick
# ---------------------------------------------------------------------------

async def _focus_or_open(platform: WorkerPlatform, url: str) -> str:
    marker = platform.settings.app_path_marker
    clients = await platform.clients.match_all(include_uncontrolled=True)
    target: WindowClient | None = next((c for c in clients if marker in c.url), None)
    if target is not None:
        try:
            await target.navigate(url)
        except Exception as exc:  # noqa: BLE001 – still focus the window
            logger.warning("sw.click.navigate_failed", url=url, client_url=target.url, error=repr(exc))
        await target.focus()
        logger.info("sw.click.focused", url=url, client_url=target.url)
        return "focused"
    await platform.clients.open_window(url)
    logger.info("sw.click.opened", url=url)
    return "opened"


def _target_url(notification: DisplayedNotification, default: str) -> str:
    # notifications shown by other scripts in the scope may carry any data
    data = notification.data
    url = data.get("url") if isinstance(data, Mapping) else None
    return url if isinstance(url, str) and url else default


async def handle_notification_click(event: NotificationClickEvent, platform: WorkerPlatform) -> None:
    notification = event.notification
    notification.close()
    await clear_badge(platform.badge)

    url = _target_url(notification, platform.settings.default_url)
    event.wait_until(_focus_or_open(platform, url))


# ---------------------------------------------------------------------------
# message
# ---------------------------------------------------------------------------

async def handle_skip_waiting(message: SkipWaiting, platform: WorkerPlatform) -> None:  # noqa: ARG001
    # a no-op on the host when this worker is not waiting
    await platform.scope.skip_waiting()
    logger.info("sw.skip_waiting")


async def handle_clear_notifications(message: ClearNotifications, platform: WorkerPlatform) -> int:
    """Close matching notifications, then clear the badge regardless.

    Returns the number of notifications closed.
    """
    closed = 0
    for notification in await platform.notifications.get_notifications():
        if tag_matches(notification.tag, message.tags):
            notification.close()
            closed += 1
    await clear_badge(platform.badge)
    logger.info("sw.notifications_cleared", tags=list(message.tags), closed=closed)
    return closed


async def dispatch_message(message: ControlMessage, platform: WorkerPlatform) -> None:
    match message:
        case SkipWaiting():
            await handle_skip_waiting(message, platform)
        case ClearNotifications():
            await handle_clear_notifications(message, platform)


async def handle_message(event: MessageEvent, platform: WorkerPlatform) -> ControlMessage | None:
    """Decode a page message and dispatch it; unknown messages are ignored."""
    try:
        message = parse_control_message(event.data)
    except InvalidControlMessageError as exc:
        logger.warning("sw.message_ignored", source=event.source, error=exc.to_dict())
        return None
    event.wait_until(dispatch_message(message, platform))
    return message


__all__ = [
    "dispatch_message",
    "handle_clear_notifications",
    "handle_message",
    "handle_notification_click",
    "handle_push",
    "handle_skip_waiting",
]
