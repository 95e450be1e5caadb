"""Worker runtime – routes host events to handlers.

A handler that raises is logged and the runtime keeps going; the push
service owns redelivery, so nothing is retried here.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from types import MappingProxyType
from typing import Any

from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import WorkerPlatform
from pwa_lifecycle.worker.events import (
    ActivateEvent,
    DispatchResult,
    ExtendableEvent,
    InstallEvent,
    MessageEvent,
    NotificationClickEvent,
    PushEvent,
)
from pwa_lifecycle.worker.handlers import handle_message, handle_notification_click, handle_push
from pwa_lifecycle.worker.lifecycle import handle_activate, handle_install

logger = get_logger(__name__)

Handler = Callable[[Any, WorkerPlatform], Awaitable[Any]]

DEFAULT_HANDLERS: MappingProxyType[type[ExtendableEvent], Handler] = MappingProxyType(
    {
        InstallEvent: handle_install,
        ActivateEvent: handle_activate,
        PushEvent: handle_push,
        NotificationClickEvent: handle_notification_click,
        MessageEvent: handle_message,
    }
)


class ServiceWorkerRuntime:
    """The background worker as the host sees it: one ``dispatch`` per event.

    Holds only references to the injected platform; every piece of state
    lives behind the ports so a fresh runtime behaves identically.
    """

    def __init__(
        self,
        platform: WorkerPlatform,
        handlers: dict[type[ExtendableEvent], Handler] | None = None,
    ) -> None:
        self._platform = platform
        self._handlers: dict[type[ExtendableEvent], Handler] = dict(DEFAULT_HANDLERS)
        if handlers:
            self._handlers.update(handlers)

    @property
    def platform(self) -> WorkerPlatform:
        return self._platform

    def _handler_for(self, event: ExtendableEvent) -> Handler | None:
        for event_type in type(event).__mro__:
            handler = self._handlers.get(event_type)  # type: ignore[arg-type]
            if handler is not None:
                return handler
        return None

    async def dispatch(self, event: ExtendableEvent) -> DispatchResult:
        """Run the handler for *event*, then wait for its extensions."""
        handler = self._handler_for(event)
        if handler is None:
            logger.debug("sw.event_unhandled", event=event.type)
            return DispatchResult(event_type=event.type, handled=False)

        error: BaseException | None = None
        try:
            await handler(event, self._platform)
        except Exception as exc:  # noqa: BLE001 – a failing handler never kills the worker
            error = exc
            logger.exception("sw.handler_failed", event=event.type)
        failures = await event.settle()
        return DispatchResult(
            event_type=event.type,
            handled=True,
            error=error,
            failed_extensions=tuple(failures),
        )


__all__ = ["DEFAULT_HANDLERS", "Handler", "ServiceWorkerRuntime"]
