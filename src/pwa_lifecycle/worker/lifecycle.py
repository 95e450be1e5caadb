"""Worker lifecycle handlers – install and activate."""
from __future__ import annotations

from pwa_lifecycle.kernel.lifecycle import WorkerState, can_transition, transition
from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import WorkerPlatform
from pwa_lifecycle.worker.events import ActivateEvent, InstallEvent

logger = get_logger(__name__)


async def handle_install(event: InstallEvent, platform: WorkerPlatform) -> None:  # noqa: ARG001
    """Finish installing without activating.

    The new version waits until a page posts ``SKIP_WAITING`` so the old
    worker keeps serving open tabs until the user agrees to update.
    """
    logger.info("sw.installed")


async def handle_activate(event: ActivateEvent, platform: WorkerPlatform) -> None:
    """Take control of every open tab in scope without a reload."""
    event.wait_until(platform.clients.claim())
    logger.info("sw.activated")


__all__ = ["WorkerState", "can_transition", "handle_activate", "handle_install", "transition"]
