"""Foreground – page-side registration, update and install prompts, push subscription and clearing."""
from pwa_lifecycle.foreground.clearing import clear_badge, clear_on_open
from pwa_lifecycle.foreground.install import (
    InstallPlatform,
    InstallPromptController,
    InstallPromptResult,
    is_ios,
)
from pwa_lifecycle.foreground.opt_in import OPT_IN_SHOWN_KEY, OptInPrompt
from pwa_lifecycle.foreground.registration import register_service_worker
from pwa_lifecycle.foreground.subscription import (
    NotificationStatus,
    SubscribeResult,
    SubscriptionController,
)
from pwa_lifecycle.foreground.update import UpdateController
from pwa_lifecycle.foreground.version import (
    VERSION_CACHE_HEADERS,
    HttpVersionSource,
    VersionPoller,
    VersionSource,
    version_document,
)

__all__ = [
    "HttpVersionSource",
    "InstallPlatform",
    "InstallPromptController",
    "InstallPromptResult",
    "NotificationStatus",
    "OPT_IN_SHOWN_KEY",
    "OptInPrompt",
    "SubscribeResult",
    "SubscriptionController",
    "UpdateController",
    "VERSION_CACHE_HEADERS",
    "VersionPoller",
    "VersionSource",
    "clear_badge",
    "clear_on_open",
    "is_ios",
    "register_service_worker",
    "version_document",
]
