"""Foreground – one-time notification opt-in card.

Shown once per browser, a short delay after load, only while the
permission is still undecided. Either answer sets the remembered flag.
"""
from __future__ import annotations

import asyncio

from pwa_lifecycle.config.pwa import ForegroundSettings
from pwa_lifecycle.foreground.subscription import (
    NotificationStatus,
    SubscribeResult,
    SubscriptionController,
)
from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import OptInView, PreferenceStore

logger = get_logger(__name__)

OPT_IN_SHOWN_KEY = "notif-prompt-shown"


class OptInPrompt:
    def __init__(
        self,
        subscriptions: SubscriptionController,
        view: OptInView,
        preferences: PreferenceStore,
        settings: ForegroundSettings | None = None,
    ) -> None:
        self._subscriptions = subscriptions
        self._view = view
        self._preferences = preferences
        self._settings = settings or ForegroundSettings()
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    def _already_shown(self) -> bool:
        try:
            return self._preferences.get(OPT_IN_SHOWN_KEY) is not None
        except Exception as exc:  # noqa: BLE001
            # unreadable storage: never nag
            logger.warning("push.opt_in_storage_unavailable", error=repr(exc))
            return True

    def _remember(self) -> None:
        try:
            self._preferences.set(OPT_IN_SHOWN_KEY, "1")
        except Exception as exc:  # noqa: BLE001
            logger.warning("push.opt_in_storage_unavailable", error=repr(exc))

    def should_show(self) -> bool:
        return (
            self._subscriptions.user_id is not None
            and self._subscriptions.status is NotificationStatus.PROMPT
            and not self._already_shown()
        )

    async def maybe_show(self) -> bool:
        """Wait ``opt_in_delay`` seconds, then show the card if still eligible."""
        if not self.should_show():
            return False
        await asyncio.sleep(self._settings.opt_in_delay)
        if self._visible or not self.should_show():
            return False
        self._visible = True
        self._view.show()
        logger.info("push.opt_in_shown")
        return True

    def dismiss(self) -> None:
        self._remember()
        self._hide()
        logger.info("push.opt_in_dismissed")

    async def enable(self) -> SubscribeResult:
        self._remember()
        try:
            result = await self._subscriptions.subscribe()
        finally:
            self._hide()
        logger.info("push.opt_in_answered", ok=result.ok, reason=result.reason)
        return result

    def _hide(self) -> None:
        if self._visible:
            self._visible = False
            self._view.hide()


__all__ = ["OPT_IN_SHOWN_KEY", "OptInPrompt"]
