"""Concrete settings for the background worker and the foreground controller."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from pwa_lifecycle.config.settings.base import Settings
from pwa_lifecycle.config.validation import InvalidSettingValueError

DEFAULT_TARGET_URL = "/app/questions"
DEFAULT_ICON = "/icons/icon-192.png"


@dataclasses.dataclass
class WorkerSettings(Settings):
    """Notification defaults used by the background worker."""

    _prefix: ClassVar[str] = "PWA_WORKER"

    default_title: str = "The Two of Us"
    default_body: str = "You have a new update!"
    icon: str = DEFAULT_ICON
    badge_icon: str = DEFAULT_ICON
    vibrate: tuple[int, ...] = (100, 50, 100)
    default_tag: str = "default"
    default_url: str = DEFAULT_TARGET_URL
    app_path_marker: str = "/app"

    def _validate(self) -> None:
        if not self.default_url:
            raise InvalidSettingValueError("default_url", self.default_url, "must not be empty")
        if any(step < 0 for step in self.vibrate):
            raise InvalidSettingValueError("vibrate", self.vibrate, "durations must be >= 0")
        self.vibrate = tuple(self.vibrate)


@dataclasses.dataclass
class ForegroundSettings(Settings):
    """Registration, update detection and push subscription settings for the page context."""

    _prefix: ClassVar[str] = "PWA"

    environment: str = "production"
    script_url: str = "/sw.js"
    scope: str = "/"
    app_version: str = "unknown"
    version_url: str = "/api/version"
    version_poll_interval: float = 300.0
    version_initial_delay: float = 10.0
    reload_fallback_seconds: float = 0.0
    vapid_public_key: str = ""
    worker_ready_timeout: float = 8.0
    opt_in_delay: float = 3.0

    def _validate(self) -> None:
        if not self.script_url:
            raise InvalidSettingValueError("script_url", self.script_url, "must not be empty")
        if self.version_poll_interval <= 0:
            raise InvalidSettingValueError(
                "version_poll_interval", self.version_poll_interval, "must be positive"
            )
        if self.version_initial_delay < 0:
            raise InvalidSettingValueError(
                "version_initial_delay", self.version_initial_delay, "must be >= 0"
            )
        if self.reload_fallback_seconds < 0:
            raise InvalidSettingValueError(
                "reload_fallback_seconds", self.reload_fallback_seconds, "must be >= 0"
            )
        if self.worker_ready_timeout <= 0:
            raise InvalidSettingValueError(
                "worker_ready_timeout", self.worker_ready_timeout, "must be positive"
            )
        if self.opt_in_delay < 0:
            raise InvalidSettingValueError("opt_in_delay", self.opt_in_delay, "must be >= 0")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() != "development"


__all__ = ["DEFAULT_ICON", "DEFAULT_TARGET_URL", "ForegroundSettings", "WorkerSettings"]
