"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from pwa_lifecycle.config.settings.base import Settings
from pwa_lifecycle.config.settings.loaders import SettingsLoader
from pwa_lifecycle.config.validation.errors import ConfigError, MissingRequiredSettingError
from pwa_lifecycle.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


class SettingsFactory:
    """Build one settings object from layered sources.

    Later loaders win over earlier ones and ``overrides`` win over every
    loader. A loader that raises is logged and skipped.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            A field without a default is still unset once every source is merged.
        ConfigError
            The merged values are rejected by the settings class.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or []:
            try:
                loaded = loader.load(settings_cls)
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "config.loader_skipped",
                    loader=type(loader).__name__,
                    settings=settings_cls.__name__,
                    error=str(exc),
                )
                continue
            merged.update({f.name: getattr(loaded, f.name) for f in dataclasses.fields(loaded)})
        merged.update(overrides or {})

        missing = [name for name in settings_cls.required_fields() if name not in merged]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            settings = settings_cls(**merged)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Could not build {settings_cls.__name__}", cause=exc) from exc
        logger.debug("config.loaded", settings=settings_cls.__name__, sources=len(loaders or []))
        return settings


__all__ = ["SettingsFactory"]
