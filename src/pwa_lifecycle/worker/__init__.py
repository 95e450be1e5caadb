"""Worker – the background worker's event handlers and runtime."""
from pwa_lifecycle.kernel.lifecycle import WorkerState
from pwa_lifecycle.worker.events import (
    ActivateEvent,
    DispatchResult,
    ExtendableEvent,
    InstallEvent,
    MessageEvent,
    NotificationClickEvent,
    PushEvent,
)
from pwa_lifecycle.worker.handlers import (
    dispatch_message,
    handle_clear_notifications,
    handle_message,
    handle_notification_click,
    handle_push,
    handle_skip_waiting,
)
from pwa_lifecycle.worker.lifecycle import handle_activate, handle_install
from pwa_lifecycle.worker.runtime import ServiceWorkerRuntime

__all__ = [
    "ActivateEvent",
    "DispatchResult",
    "ExtendableEvent",
    "InstallEvent",
    "MessageEvent",
    "NotificationClickEvent",
    "PushEvent",
    "ServiceWorkerRuntime",
    "WorkerState",
    "dispatch_message",
    "handle_activate",
    "handle_clear_notifications",
    "handle_install",
    "handle_message",
    "handle_notification_click",
    "handle_push",
    "handle_skip_waiting",
]
