"""Testing fakes – in-memory doubles for the platform ports."""
from pwa_lifecycle.testing.fakes.badge import InMemoryBadge
from pwa_lifecycle.testing.fakes.clients import FakeWindowClient, InMemoryClients
from pwa_lifecycle.testing.fakes.container import (
    FakeRegistration,
    FakeServiceWorker,
    FakeServiceWorkerContainer,
)
from pwa_lifecycle.testing.fakes.notifications import FakeNotification, InMemoryNotificationCenter
from pwa_lifecycle.testing.fakes.page import FakeInstallPrompt, FakeOptInView, FakePage, FakeUpdatePrompt
from pwa_lifecycle.testing.fakes.platform import FakeWorkerPlatform
from pwa_lifecycle.testing.fakes.push import (
    FakePermission,
    FakePushManager,
    FakePushSubscription,
    InMemoryPreferences,
    InMemorySubscriptionStore,
)
from pwa_lifecycle.testing.fakes.scope import FakeWorkerScope

__all__ = [
    "FakeInstallPrompt",
    "FakeNotification",
    "FakeOptInView",
    "FakePage",
    "FakePermission",
    "FakePushManager",
    "FakePushSubscription",
    "FakeRegistration",
    "FakeServiceWorker",
    "FakeServiceWorkerContainer",
    "FakeUpdatePrompt",
    "FakeWindowClient",
    "FakeWorkerPlatform",
    "FakeWorkerScope",
    "InMemoryBadge",
    "InMemoryClients",
    "InMemoryNotificationCenter",
    "InMemoryPreferences",
    "InMemorySubscriptionStore",
]
