"""Foreground – push subscription lifecycle.

Status is derived, never stored: support, then permission, then whether
the push manager already holds a subscription. ``subscribe`` asks for
permission, waits for a ready worker, subscribes and persists the
subscription for the push sender. ``unsubscribe`` deletes the stored record
before dropping the browser subscription.
"""
from __future__ import annotations

import asyncio
import dataclasses
from enum import Enum

from pwa_lifecycle.config.pwa import ForegroundSettings
from pwa_lifecycle.kernel.errors import ValidationError
from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import (
    PermissionPort,
    RegistrationPort,
    ServiceWorkerContainerPort,
    SubscriptionStore,
)
from pwa_lifecycle.protocol.subscription import PushSubscriptionRecord, application_server_key

logger = get_logger(__name__)


class NotificationStatus(str, Enum):
    LOADING = "loading"
    UNSUPPORTED = "unsupported"
    DENIED = "denied"
    PROMPT = "prompt"
    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"


@dataclasses.dataclass(frozen=True)
class SubscribeResult:
    ok: bool
    reason: str | None = None


NO_USER = "no-user"
NO_VAPID_KEY = "no-vapid-key"
INVALID_VAPID_KEY = "invalid-vapid-key"
UNSUPPORTED = "unsupported"
PERMISSION_DENIED = "permission-denied"
WORKER_NOT_READY = "worker-not-ready"


class SubscriptionController:
    """Page-side owner of one user's push subscription.

    ``container`` or ``permission`` is ``None`` on platforms without
    service workers or notifications. Nothing here raises to the page;
    failures come back as a :class:`SubscribeResult` or ``False``.
    """

    def __init__(
        self,
        container: ServiceWorkerContainerPort | None,
        permission: PermissionPort | None,
        store: SubscriptionStore,
        *,
        user_id: str | None = None,
        settings: ForegroundSettings | None = None,
    ) -> None:
        self._container = container
        self._permission = permission
        self._store = store
        self._user_id = user_id
        self._settings = settings or ForegroundSettings()
        self._status = NotificationStatus.LOADING
        self._subscribing = False

    @property
    def status(self) -> NotificationStatus:
        return self._status

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def is_subscribing(self) -> bool:
        return self._subscribing

    def _set_status(self, status: NotificationStatus) -> NotificationStatus:
        if status is not self._status:
            logger.debug("push.status_changed", previous=self._status.value, status=status.value)
        self._status = status
        return status

    async def _ready(self) -> RegistrationPort:
        assert self._container is not None
        return await asyncio.wait_for(self._container.ready(), timeout=self._settings.worker_ready_timeout)

    async def refresh(self) -> NotificationStatus:
        """Re-derive :attr:`status`; stays ``loading`` until a user is known."""
        if self._user_id is None:
            return self._status
        if self._container is None or self._permission is None:
            return self._set_status(NotificationStatus.UNSUPPORTED)
        permission = self._permission.permission
        if permission == "denied":
            return self._set_status(NotificationStatus.DENIED)
        try:
            registration = await self._ready()
            subscription = await registration.push_manager.get_subscription()
        except Exception as exc:  # noqa: BLE001
            logger.warning("push.status_check_failed", error=repr(exc))
            return self._set_status(NotificationStatus.UNSUPPORTED)
        if subscription is not None:
            return self._set_status(NotificationStatus.SUBSCRIBED)
        if permission == "granted":
            return self._set_status(NotificationStatus.UNSUBSCRIBED)
        return self._set_status(NotificationStatus.PROMPT)

    async def subscribe(self) -> SubscribeResult:
        if self._user_id is None:
            return SubscribeResult(False, NO_USER)
        if not self._settings.vapid_public_key:
            return SubscribeResult(False, NO_VAPID_KEY)
        try:
            server_key = application_server_key(self._settings.vapid_public_key)
        except ValidationError as exc:
            logger.error("push.subscribe_failed", error=exc.to_dict())
            return SubscribeResult(False, INVALID_VAPID_KEY)
        if self._container is None or self._permission is None:
            self._set_status(NotificationStatus.UNSUPPORTED)
            return SubscribeResult(False, UNSUPPORTED)

        self._subscribing = True
        try:
            if await self._permission.request_permission() != "granted":
                self._set_status(NotificationStatus.DENIED)
                return SubscribeResult(False, PERMISSION_DENIED)
            try:
                registration = await self._ready()
            except TimeoutError:
                logger.warning("push.worker_not_ready", timeout=self._settings.worker_ready_timeout)
                return SubscribeResult(False, WORKER_NOT_READY)
            subscription = await registration.push_manager.subscribe(
                user_visible_only=True,
                application_server_key=server_key,
            )
            record = PushSubscriptionRecord.from_wire(subscription.to_json())
            await self._store.save(self._user_id, record)
        except Exception as exc:  # noqa: BLE001
            logger.error("push.subscribe_failed", error=repr(exc))
            return SubscribeResult(False, str(exc) or type(exc).__name__)
        finally:
            self._subscribing = False

        self._set_status(NotificationStatus.SUBSCRIBED)
        logger.info("push.subscribed", endpoint=record.endpoint)
        return SubscribeResult(True)

    async def unsubscribe(self) -> bool:
        """Forget the stored record, then drop the browser subscription."""
        if self._user_id is None or self._container is None:
            return False
        try:
            registration = await self._ready()
            subscription = await registration.push_manager.get_subscription()
            if subscription is not None:
                await self._store.delete(self._user_id, subscription.endpoint)
                await subscription.unsubscribe()
        except Exception as exc:  # noqa: BLE001
            logger.error("push.unsubscribe_failed", error=repr(exc))
            return False
        self._set_status(NotificationStatus.UNSUBSCRIBED)
        logger.info("push.unsubscribed")
        return True


__all__ = [
    "INVALID_VAPID_KEY",
    "NO_USER",
    "NO_VAPID_KEY",
    "NotificationStatus",
    "PERMISSION_DENIED",
    "SubscribeResult",
    "SubscriptionController",
    "UNSUPPORTED",
    "WORKER_NOT_READY",
]
