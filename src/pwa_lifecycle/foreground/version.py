"""Foreground – build-version polling.

Complements worker-based detection: the page polls the version endpoint
and surfaces the update prompt when the server runs a different build.
"""
from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, Protocol, runtime_checkable

import httpx

from pwa_lifecycle.config.pwa import ForegroundSettings
from pwa_lifecycle.kernel.errors import ExternalServiceError, InfrastructureError, SerializationError
from pwa_lifecycle.observability.logging import get_logger
from pwa_lifecycle.platform.ports import PageHost

logger = get_logger(__name__)

UNKNOWN_VERSION = "unknown"

VERSION_CACHE_HEADERS: dict[str, str] = {
    "Cache-Control": "no-store, no-cache, max-age=0, must-revalidate",
    "CDN-Cache-Control": "no-store",
}


def version_document(settings: ForegroundSettings, built_at: datetime | None = None) -> dict[str, Any]:
    """Body served by the version endpoint."""
    return {
        "version": settings.app_version or UNKNOWN_VERSION,
        "builtAt": built_at.astimezone(UTC).isoformat() if built_at else None,
    }


@runtime_checkable
class VersionSource(Protocol):
    """Port: fetch the build version currently served."""

    async def fetch_version(self) -> str | None: ...


class HttpVersionSource:
    """Reads ``{"version": ...}`` from the version endpoint over httpx."""

    def __init__(
        self,
        url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = url
        self._client = client
        self._timeout = timeout

    async def fetch_version(self) -> str | None:
        # cache-busting query on top of no-store
        params = {"t": str(int(time.time() * 1000))}
        headers = {"Cache-Control": "no-store"}
        if self._client is not None:
            response = await self._client.get(self._url, params=params, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._url, params=params, headers=headers)

        if not response.is_success:
            raise ExternalServiceError("version-endpoint", status_code=response.status_code)
        try:
            body = response.json()
        except ValueError as exc:
            raise SerializationError(
                "Version endpoint did not return JSON", payload_type="version", cause=exc
            ) from exc
        version = body.get("version") if isinstance(body, dict) else None
        return version if isinstance(version, str) else None


class VersionPoller:
    """Polls a :class:`VersionSource` and reports builds differing from the local one."""

    def __init__(
        self,
        source: VersionSource,
        page: PageHost,
        on_update: Callable[[str], None],
        settings: ForegroundSettings | None = None,
    ) -> None:
        self._source = source
        self._page = page
        self._on_update = on_update
        self._settings = settings or ForegroundSettings()

    def is_newer(self, remote: str | None) -> bool:
        return bool(remote) and remote != UNKNOWN_VERSION and remote != self._settings.app_version

    async def poll_once(self) -> str | None:
        """One poll; returns the remote version that triggered an update, if any."""
        if self._page.hidden:
            return None
        try:
            remote = await self._source.fetch_version()
        except (InfrastructureError, httpx.HTTPError) as exc:
            # offline and flaky networks are expected
            logger.debug("version.poll_failed", error=repr(exc))
            return None
        if not self.is_newer(remote):
            return None
        logger.info("version.update_detected", local=self._settings.app_version, remote=remote)
        self._on_update(remote)  # type: ignore[arg-type]
        return remote

    async def on_visibility_change(self) -> str | None:
        """Poll immediately when the page becomes visible again."""
        if self._page.hidden:
            return None
        return await self.poll_once()

    async def run(self) -> None:
        """Poll after the initial delay, then every interval, until cancelled."""
        await asyncio.sleep(self._settings.version_initial_delay)
        while True:
            await self.poll_once()
            await asyncio.sleep(self._settings.version_poll_interval)


__all__ = [
    "HttpVersionSource",
    "UNKNOWN_VERSION",
    "VERSION_CACHE_HEADERS",
    "VersionPoller",
    "VersionSource",
    "version_document",
]
