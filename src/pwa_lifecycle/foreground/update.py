"""Foreground – update detection and the update-available prompt.

Flow::

    new worker installing ─► installed while a controller exists
        ─► prompt shown ─► user accepts ─► SKIP_WAITING posted
        ─► controllerchange ─► exactly one reload

Dismissing hides the prompt for this page session only; a fresh load
re-evaluates the worker state from scratch.
"""
from __future__ import annotations

import asyncio

from pwa_lifecycle.config.pwa import ForegroundSettings
from pwa_lifecycle.foreground.registration import register_service_worker
from pwa_lifecycle.kernel.lifecycle import WorkerState
from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import (
    PageHost,
    RegistrationPort,
    ServiceWorkerContainerPort,
    ServiceWorkerHandle,
    UpdatePrompt,
)
from pwa_lifecycle.protocol.messages import SkipWaiting

logger = get_logger(__name__)


class UpdateController:
    """Page-side counterpart of the worker's update gate."""

    def __init__(
        self,
        container: ServiceWorkerContainerPort | None,
        page: PageHost,
        prompt: UpdatePrompt,
        settings: ForegroundSettings | None = None,
    ) -> None:
        self._container = container
        self._page = page
        self._prompt = prompt
        self._settings = settings or ForegroundSettings()
        self._started = False
        self._registration: RegistrationPort | None = None
        self._waiting: ServiceWorkerHandle | None = None
        self._remote_version: str | None = None
        self._visible = False
        self._dismissed = False
        self._accepted = False
        self._reloaded = False
        self._fallback: asyncio.TimerHandle | None = None

    # -- state ------------------------------------------------------------

    @property
    def registration(self) -> RegistrationPort | None:
        return self._registration

    @property
    def waiting(self) -> ServiceWorkerHandle | None:
        return self._waiting

    @property
    def prompt_visible(self) -> bool:
        return self._visible

    @property
    def dismissed(self) -> bool:
        return self._dismissed

    @property
    def remote_version(self) -> str | None:
        return self._remote_version

    # -- detection --------------------------------------------------------

    async def start(self) -> RegistrationPort | None:
        """Register the worker and start watching it. Runs once per page load."""
        if self._started:
            return self._registration
        self._started = True
        registration = await register_service_worker(self._container, self._settings)
        if registration is None:
            return None
        self._registration = registration
        self.watch(registration)
        return registration

    def watch(self, registration: RegistrationPort) -> None:
        """Surface the prompt for a worker already waiting or one installed later."""
        if registration.waiting is not None and self._has_controller():
            self._on_waiting(registration.waiting)
        registration.on_update_found(lambda: self._on_update_found(registration))

    async def check_for_update(self) -> bool:
        """Ask the host to re-fetch the worker script. Failures are logged only."""
        if self._registration is None:
            return False
        try:
            await self._registration.update()
        except Exception as exc:  # noqa: BLE001
            logger.warning("sw.update_check_failed", error=repr(exc))
            return False
        return True

    def notify_remote_version(self, version: str) -> None:
        """A newer build was reported by the version endpoint."""
        self._remote_version = version
        self._surface(reason="version")

    def _has_controller(self) -> bool:
        return self._container is not None and self._container.controller is not None

    def _on_update_found(self, registration: RegistrationPort) -> None:
        installing = registration.installing
        if installing is None:
            return
        logger.info("sw.update_found")

        def _on_state_change(state: WorkerState) -> None:
            # with no controller this is the first install, not an update
            if state is WorkerState.INSTALLED and self._has_controller():
                self._on_waiting(installing)

        installing.on_state_change(_on_state_change)

    def _on_waiting(self, worker: ServiceWorkerHandle) -> None:
        self._waiting = worker
        worker.on_state_change(lambda state: self._on_waiting_state(worker, state))
        self._surface(reason="waiting_worker")

    def _on_waiting_state(self, worker: ServiceWorkerHandle, state: WorkerState) -> None:
        # superseded by a newer install; that one surfaces the prompt again
        if state is WorkerState.REDUNDANT and self._waiting is worker and not self._accepted:
            self._waiting = None
            if self._remote_version is None:
                self._hide()
            logger.info("sw.waiting_worker_redundant")

    def _surface(self, reason: str) -> None:
        if self._dismissed or self._visible or self._accepted:
            logger.debug("sw.update_prompt_suppressed", reason=reason, dismissed=self._dismissed)
            return
        self._visible = True
        self._prompt.show()
        logger.info("sw.update_available", reason=reason, version=self._remote_version)

    # -- user actions -----------------------------------------------------

    def accept(self) -> None:
        """User chose "Update"."""
        self._hide()
        self._accepted = True
        waiting = self._waiting
        if waiting is None or self._container is None:
            self._reload(reason="no_waiting_worker")
            return

        # another tab may already have activated it, so no controllerchange is coming
        if waiting.state is not WorkerState.INSTALLED or self._container.controller is waiting:
            self._reload(reason="controller_already_changed")
            return

        self._container.on_controller_change(lambda: self._reload(reason="controllerchange"))
        waiting.post_message(SkipWaiting().to_wire())
        logger.info("sw.skip_waiting_sent")

        delay = self._settings.reload_fallback_seconds
        if delay > 0:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                return
            self._fallback = loop.call_later(delay, self._reload, "fallback")

    def dismiss(self) -> None:
        """User chose "Later": hidden until the next page load."""
        self._hide()
        self._dismissed = True
        logger.info("sw.update_dismissed", version=self._remote_version)

    def _hide(self) -> None:
        if self._visible:
            self._prompt.hide()
        self._visible = False

    def _reload(self, reason: str) -> None:
        if self._reloaded:
            return
        self._reloaded = True
        if self._fallback is not None:
            self._fallback.cancel()
            self._fallback = None
        logger.info("sw.reloading", reason=reason)
        self._page.reload()


__all__ = ["UpdateController"]
