"""Foreground – home-screen install prompt."""
from __future__ import annotations

import re
from enum import Enum

from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import DeferredInstallPrompt

logger = get_logger(__name__)

_IOS_DEVICE = re.compile(r"iPad|iPhone|iPod")


class InstallPlatform(str, Enum):
    IOS = "ios"
    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"


class InstallPromptResult(str, Enum):
    """Outcome of :meth:`InstallPromptController.prompt_install`.

    ``UNAVAILABLE`` covers both a missing capability and a missing deferred
    prompt; callers offer the manual-install guide for it.
    """

    ACCEPTED = "accepted"
    DISMISSED = "dismissed"
    UNAVAILABLE = "unavailable"


def is_ios(user_agent: str, platform: str = "", max_touch_points: int = 0) -> bool:
    # iPadOS reports itself as a touch-enabled Mac
    return bool(_IOS_DEVICE.search(user_agent)) or (platform == "MacIntel" and max_touch_points > 1)


class InstallPromptController:
    """Tracks installability and drives the native prompt or the iOS guide."""

    def __init__(
        self,
        user_agent: str,
        *,
        platform: str = "",
        max_touch_points: int = 0,
        standalone: bool = False,
    ) -> None:
        self._deferred: DeferredInstallPrompt | None = None
        self._ios_guide_open = False
        self._installed = standalone
        self._platform = InstallPlatform.UNSUPPORTED
        self._installable = False
        if standalone:
            return
        if is_ios(user_agent, platform, max_touch_points):
            self._platform = InstallPlatform.IOS
            self._installable = True

    @property
    def platform(self) -> InstallPlatform:
        return self._platform

    @property
    def is_installable(self) -> bool:
        return self._installable

    @property
    def is_installed(self) -> bool:
        return self._installed

    @property
    def ios_guide_open(self) -> bool:
        return self._ios_guide_open

    def capture(self, prompt: DeferredInstallPrompt) -> None:
        """Keep the ``beforeinstallprompt`` event for later."""
        if self._installed or self._platform is InstallPlatform.IOS:
            return
        self._deferred = prompt
        self._platform = InstallPlatform.SUPPORTED
        self._installable = True

    def mark_installed(self) -> None:
        """The app was installed (``appinstalled``)."""
        self._installed = True
        self._installable = False
        self._deferred = None

    async def prompt_install(self) -> InstallPromptResult:
        if self._platform is InstallPlatform.IOS or self._deferred is None:
            return InstallPromptResult.UNAVAILABLE
        deferred = self._deferred
        try:
            await deferred.prompt()
            outcome = await deferred.user_choice()
        except Exception as exc:  # noqa: BLE001
            logger.error("install.prompt_failed", error=repr(exc))
            return InstallPromptResult.UNAVAILABLE
        # a deferred prompt can only be shown once
        self._deferred = None
        self._installable = False
        result = InstallPromptResult.ACCEPTED if outcome == "accepted" else InstallPromptResult.DISMISSED
        logger.info("install.prompt_result", result=result.value)
        return result

    def open_ios_guide(self) -> None:
        self._ios_guide_open = True

    def close_ios_guide(self) -> None:
        self._ios_guide_open = False


__all__ = ["InstallPlatform", "InstallPromptController", "InstallPromptResult", "is_ios"]
