"""Platform – capability ports over the host runtime plus badge helpers."""
from pwa_lifecycle.platform.badge import clear_badge, set_badge
from pwa_lifecycle.platform.ports import (
    BadgePort,
    ClientsPort,
    DeferredInstallPrompt,
    DisplayedNotification,
    NotificationCenterPort,
    OptInView,
    PageHost,
    PermissionPort,
    PreferenceStore,
    PushManagerPort,
    PushSubscriptionHandle,
    RegistrationPort,
    ServiceWorkerContainerPort,
    ServiceWorkerHandle,
    SubscriptionStore,
    UpdatePrompt,
    WindowClient,
    WorkerPlatform,
    WorkerScopePort,
)

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
    "clear_badge",
    "set_badge",
]
