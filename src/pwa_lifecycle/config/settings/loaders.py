"""Config settings – environment and ``.env`` loaders."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from pwa_lifecycle.config.settings.base import Settings
from pwa_lifecycle.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


def _type_name(type_hint: Any) -> str:
    # annotations are strings under ``from __future__ import annotations``
    return type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", str(type_hint))


def coerce(value: str, type_hint: Any) -> Any:
    """Convert one environment string to the annotated field type.

    ``list[...]`` and ``tuple[...]`` values are comma separated; their items
    become ints when the annotation says so.
    """
    name = _type_name(type_hint).replace(" ", "")
    if name == "bool":
        return value.strip().lower() in _TRUE
    if name == "int":
        return int(value)
    if name == "float":
        return float(value)
    if name.startswith(("list", "tuple")):
        items: list[Any] = [part.strip() for part in value.split(",") if part.strip()]
        if "[int" in name:
            items = [int(item) for item in items]
        return tuple(items) if name.startswith("tuple") else items
    return value


class EnvSettingsLoader(SettingsLoader):
    """Read every field from ``Settings.env_key(field)`` in ``os.environ``."""

    def load(self, settings_class: type[T]) -> T:
        required = set(settings_class.required_fields())
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            env_key = settings_class.env_key(field.name)
            raw = os.environ.get(env_key)
            if raw is None:
                if field.name in required:
                    raise MissingRequiredSettingError(env_key)
                continue
            try:
                kwargs[field.name] = coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Could not load {settings_class.__name__}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "coerce"]
