"""Testing fakes – page-side worker container, registration and worker handles."""
from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

from pwa_lifecycle.kernel.lifecycle import WorkerState, transition
from pwa_lifecycle.testing.fakes.push import FakePushManager


class FakeServiceWorker:
    """ServiceWorkerHandle double; transitions are validated."""

    def __init__(self, state: WorkerState = WorkerState.INSTALLING, script_url: str = "/sw.js") -> None:
        self._state = state
        self.script_url = script_url
        self.messages: list[dict[str, Any]] = []
        self._listeners: list[Callable[[WorkerState], None]] = []

    @property
    def state(self) -> WorkerState:
        return self._state

    def post_message(self, message: dict[str, Any]) -> None:
        self.messages.append(message)

    def on_state_change(self, callback: Callable[[WorkerState], None]) -> None:
        self._listeners.append(callback)

    def transition_to(self, target: WorkerState) -> None:
        self._state = transition(self._state, target)
        for callback in list(self._listeners):
            callback(target)

    def __repr__(self) -> str:
        return f"FakeServiceWorker(state={self._state.value!r})"


class FakeRegistration:
    """RegistrationPort double that moves workers between its slots."""

    def __init__(self, scope: str = "/", *, active: FakeServiceWorker | None = None) -> None:
        self.scope = scope
        self.installing: FakeServiceWorker | None = None
        self.waiting: FakeServiceWorker | None = None
        self.active = active
        self.push_manager = FakePushManager()
        self.update_calls = 0
        self.update_error: Exception | None = None
        self._update_found: list[Callable[[], None]] = []

    def on_update_found(self, callback: Callable[[], None]) -> None:
        self._update_found.append(callback)

    async def update(self) -> None:
        self.update_calls += 1
        if self.update_error is not None:
            raise self.update_error

    def begin_install(self, worker: FakeServiceWorker | None = None) -> FakeServiceWorker:
        """A new worker version was found and starts installing."""
        worker = worker or FakeServiceWorker()
        worker.on_state_change(lambda state: self._on_state(worker, state))
        self.installing = worker
        for callback in list(self._update_found):
            callback()
        return worker

    def _on_state(self, worker: FakeServiceWorker, state: WorkerState) -> None:
        if state is WorkerState.INSTALLED and self.installing is worker:
            self.installing, self.waiting = None, worker
        elif state is WorkerState.ACTIVATING and self.waiting is worker:
            if self.active is not None and not self.active.state.is_terminal:
                self.active.transition_to(WorkerState.REDUNDANT)
            self.waiting, self.active = None, worker


class FakeServiceWorkerContainer:
    """ServiceWorkerContainerPort double."""

    def __init__(
        self,
        *,
        controller: FakeServiceWorker | None = None,
        registration: FakeRegistration | None = None,
        register_error: Exception | None = None,
    ) -> None:
        self.controller = controller
        self.registration = registration
        self.register_error = register_error
        self.register_calls: list[tuple[str, str]] = []
        self._controller_change: list[Callable[[], None]] = []
        self._ready_waiters: list[asyncio.Future[FakeRegistration]] = []

    async def register(self, script_url: str, *, scope: str) -> FakeRegistration:
        self.register_calls.append((script_url, scope))
        if self.register_error is not None:
            raise self.register_error
        if self.registration is None:
            self.registration = FakeRegistration(scope, active=self.controller)
        for waiter in self._ready_waiters:
            if not waiter.done():
                waiter.set_result(self.registration)
        self._ready_waiters.clear()
        return self.registration

    async def get_registration(self) -> FakeRegistration | None:
        return self.registration

    async def ready(self) -> FakeRegistration:
        """Resolves once a registration exists; never resolves otherwise."""
        if self.registration is not None:
            return self.registration
        waiter: asyncio.Future[FakeRegistration] = asyncio.get_running_loop().create_future()
        self._ready_waiters.append(waiter)
        return await waiter

    def on_controller_change(self, callback: Callable[[], None]) -> None:
        self._controller_change.append(callback)

    def set_controller(self, worker: FakeServiceWorker | None) -> None:
        """The host switched controllers; fires ``controllerchange``."""
        self.controller = worker
        for callback in list(self._controller_change):
            callback()


__all__ = ["FakeRegistration", "FakeServiceWorker", "FakeServiceWorkerContainer"]
