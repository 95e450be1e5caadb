"""Foreground – worker registration."""
from __future__ import annotations

from pwa_lifecycle.config.pwa import ForegroundSettings
from pwa_lifecycle.kernel.errors import RegistrationError
from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import RegistrationPort, ServiceWorkerContainerPort

logger = get_logger(__name__)


async def register_service_worker(
    container: ServiceWorkerContainerPort | None,
    settings: ForegroundSettings,
) -> RegistrationPort | None:
    """Register ``settings.script_url`` at ``settings.scope``.

    Returns ``None`` outside production, when the platform has no worker
    support, or when registration fails; failures are logged, never raised.
    """
    if not settings.is_production:
        logger.debug("sw.registration_skipped", reason="development", environment=settings.environment)
        return None
    if container is None:
        logger.debug("sw.registration_skipped", reason="unsupported")
        return None
    try:
        registration = await container.register(settings.script_url, scope=settings.scope)
    except Exception as exc:  # noqa: BLE001 – the app keeps working without a worker
        error = RegistrationError(settings.script_url, cause=exc)
        logger.error("sw.registration_failed", error=error.to_dict())
        return None
    logger.info("sw.registered", scope=registration.scope)
    return registration


__all__ = ["register_service_worker"]
