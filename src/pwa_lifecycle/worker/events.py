"""Worker events – what the host delivers to the background worker.

Work started inside a handler is not awaited by the host unless it is
registered with :meth:`ExtendableEvent.wait_until`; the host keeps the
worker alive until every registered awaitable settles.
"""
from __future__ import annotations

import asyncio
import dataclasses
from collections.abc import Awaitable
from typing import Any

from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import DisplayedNotification

logger = get_logger(__name__)


class ExtendableEvent:
    """Base event whose lifetime can be extended with :meth:`wait_until`."""

    type: str = "extendable"

    def __init__(self) -> None:
        self._pending: list[asyncio.Future[Any]] = []

    def wait_until(self, awaitable: Awaitable[Any]) -> None:
        """Keep the worker alive until *awaitable* settles.

        Must be called from inside a running event loop (i.e. a handler).
        """
        self._pending.append(asyncio.ensure_future(awaitable))

    @property
    def pending(self) -> int:
        return sum(1 for f in self._pending if not f.done())

    async def settle(self) -> list[BaseException]:
        """Await every extension; return the failures instead of raising them."""
        if not self._pending:
            return []
        results = await asyncio.gather(*self._pending, return_exceptions=True)
        failures = [r for r in results if isinstance(r, BaseException)]
        for failure in failures:
            logger.error("sw.extension_failed", event=self.type, error=repr(failure))
        return failures

    def cancel(self) -> None:
        """Host terminated the worker: drop unfinished extensions, no retry."""
        for future in self._pending:
            if not future.done():
                future.cancel()


class InstallEvent(ExtendableEvent):
    type = "install"


class ActivateEvent(ExtendableEvent):
    type = "activate"


class PushEvent(ExtendableEvent):
    """A push delivered by the push service; ``data`` is the opaque body."""

    type = "push"

    def __init__(self, data: bytes | str | None = None) -> None:
        super().__init__()
        self.data = data


class NotificationClickEvent(ExtendableEvent):
    type = "notificationclick"

    def __init__(self, notification: DisplayedNotification, action: str = "") -> None:
        super().__init__()
        self.notification = notification
        self.action = action


class MessageEvent(ExtendableEvent):
    """A structured message posted by a page."""

    type = "message"

    def __init__(self, data: Any, source: str | None = None) -> None:
        super().__init__()
        self.data = data
        self.source = source


@dataclasses.dataclass(frozen=True)
class DispatchResult:
    """Outcome of one event dispatch, as observed by the host."""

    event_type: str
    handled: bool
    error: BaseException | None = None
    failed_extensions: tuple[BaseException, ...] = ()

    @property
    def ok(self) -> bool:
        return self.handled and self.error is None and not self.failed_extensions


__all__ = [
    "ActivateEvent",
    "DispatchResult",
    "ExtendableEvent",
    "InstallEvent",
    "MessageEvent",
    "NotificationClickEvent",
    "PushEvent",
]
