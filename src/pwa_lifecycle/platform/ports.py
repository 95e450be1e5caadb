"""Platform – ports for everything the host runtime owns.

Worker-side ports (notification center, window clients, badge, worker
scope) and page-side ports (service-worker container, registration, page,
install prompt).  All platform state lives behind these ports; nothing in
the worker keeps a shadow copy.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from pwa_lifecycle.config.pwa import WorkerSettings
from pwa_lifecycle.notifications.models import NotificationOptions
from pwa_lifecycle.kernel.lifecycle import WorkerState
from pwa_lifecycle.protocol.subscription import PushSubscriptionRecord


# ---------------------------------------------------------------------------
# Worker side
# ---------------------------------------------------------------------------

@runtime_checkable
class BadgePort(Protocol):
    """Port: the app-icon badge counter (``navigator.setAppBadge``)."""

    async def set_app_badge(self, count: int) -> None: ...
    async def clear_app_badge(self) -> None: ...


@runtime_checkable
class DisplayedNotification(Protocol):
    """A notification currently shown by the OS notification center."""

    @property
    def title(self) -> str: ...

    @property
    def tag(self) -> str | None: ...

    @property
    def data(self) -> Any: ...

    def close(self) -> None: ...


@runtime_checkable
class NotificationCenterPort(Protocol):
    """Port: show and enumerate notifications for the worker's registration."""

    async def show_notification(self, title: str, options: NotificationOptions) -> None: ...
    async def get_notifications(self) -> list[DisplayedNotification]: ...


@runtime_checkable
class WindowClient(Protocol):
    """A browser window in the worker's origin."""

    @property
    def url(self) -> str: ...

    async def navigate(self, url: str) -> None: ...
    async def focus(self) -> None: ...


@runtime_checkable
class ClientsPort(Protocol):
    """Port: ``self.clients`` inside the worker."""

    async def match_all(self, *, include_uncontrolled: bool = False) -> list[WindowClient]: ...
    async def open_window(self, url: str) -> WindowClient | None: ...
    async def claim(self) -> None: ...


@runtime_checkable
class WorkerScopePort(Protocol):
    """Port: the worker's own global scope."""

    async def skip_waiting(self) -> None: ...


@dataclasses.dataclass(frozen=True)
class WorkerPlatform:
    """Capabilities injected into every worker handler.

    ``badge`` is ``None`` when the platform has no badge API.
    """

    notifications: NotificationCenterPort
    clients: ClientsPort
    scope: WorkerScopePort
    badge: BadgePort | None = None
    settings: WorkerSettings = dataclasses.field(default_factory=WorkerSettings)


# ---------------------------------------------------------------------------
# Page side
# ---------------------------------------------------------------------------

@runtime_checkable
class ServiceWorkerHandle(Protocol):
    """A worker instance as seen from the page (``ServiceWorker``)."""

    @property
    def state(self) -> WorkerState: ...

    def post_message(self, message: dict[str, Any]) -> None: ...
    def on_state_change(self, callback: Callable[[WorkerState], None]) -> None: ...


@runtime_checkable
class PushSubscriptionHandle(Protocol):
    """A browser ``PushSubscription``."""

    @property
    def endpoint(self) -> str: ...

    def to_json(self) -> dict[str, Any]: ...
    async def unsubscribe(self) -> bool: ...


@runtime_checkable
class PushManagerPort(Protocol):
    """``registration.pushManager``."""

    async def get_subscription(self) -> PushSubscriptionHandle | None: ...

    async def subscribe(
        self, *, user_visible_only: bool, application_server_key: bytes
    ) -> PushSubscriptionHandle: ...


@runtime_checkable
class RegistrationPort(Protocol):
    """A ``ServiceWorkerRegistration``."""

    @property
    def scope(self) -> str: ...

    @property
    def installing(self) -> ServiceWorkerHandle | None: ...

    @property
    def waiting(self) -> ServiceWorkerHandle | None: ...

    @property
    def active(self) -> ServiceWorkerHandle | None: ...

    @property
    def push_manager(self) -> PushManagerPort: ...

    def on_update_found(self, callback: Callable[[], None]) -> None: ...
    async def update(self) -> None: ...


@runtime_checkable
class ServiceWorkerContainerPort(Protocol):
    """``navigator.serviceWorker``."""

    @property
    def controller(self) -> ServiceWorkerHandle | None: ...

    async def register(self, script_url: str, *, scope: str) -> RegistrationPort: ...
    async def get_registration(self) -> RegistrationPort | None: ...
    async def ready(self) -> RegistrationPort: ...
    def on_controller_change(self, callback: Callable[[], None]) -> None: ...


@runtime_checkable
class PageHost(Protocol):
    """The page the foreground controller runs in."""

    @property
    def hidden(self) -> bool: ...

    def reload(self) -> None: ...


@runtime_checkable
class UpdatePrompt(Protocol):
    """The update-available banner."""

    def show(self) -> None: ...
    def hide(self) -> None: ...


@runtime_checkable
class PermissionPort(Protocol):
    """``Notification.permission`` and ``Notification.requestPermission``.

    Values are ``"default"``, ``"granted"`` or ``"denied"``.
    """

    @property
    def permission(self) -> str: ...

    async def request_permission(self) -> str: ...


@runtime_checkable
class SubscriptionStore(Protocol):
    """Port: server-side storage the push sender reads subscriptions from."""

    async def save(self, user_id: str, record: PushSubscriptionRecord) -> None: ...
    async def delete(self, user_id: str, endpoint: str) -> None: ...


@runtime_checkable
class PreferenceStore(Protocol):
    """Port: small per-origin key/value storage (``localStorage``)."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


@runtime_checkable
class OptInView(Protocol):
    """The notification opt-in card."""

    def show(self) -> None: ...
    def hide(self) -> None: ...


@runtime_checkable
class DeferredInstallPrompt(Protocol):
    """The captured ``beforeinstallprompt`` event."""

    async def prompt(self) -> None: ...
    async def user_choice(self) -> str: ...


__all__ = [
    "BadgePort",
    "ClientsPort",
    "DeferredInstallPrompt",
    "DisplayedNotification",
    "NotificationCenterPort",
    "OptInView",
    "PageHost",
    "PermissionPort",
    "PreferenceStore",
    "PushManagerPort",
    "PushSubscriptionHandle",
    "RegistrationPort",
    "ServiceWorkerContainerPort",
    "ServiceWorkerHandle",
    "SubscriptionStore",
    "UpdatePrompt",
    "WindowClient",
    "WorkerPlatform",
    "WorkerScopePort",
]
