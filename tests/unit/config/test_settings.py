"""Unit tests for config settings, loaders and the pwa settings."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import ClassVar

import pytest

from pwa_lifecycle.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ForegroundSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingsFactory,
    SettingsLoader,
    WorkerSettings,
)
from pwa_lifecycle.config.settings import Settings
from pwa_lifecycle.config.settings.loaders import coerce


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestWorkerSettings:
    def test_defaults(self) -> None:
        s = WorkerSettings()
        assert s.default_title == "The Two of Us"
        assert s.default_body == "You have a new update!"
        assert s.icon == "/icons/icon-192.png"
        assert s.badge_icon == "/icons/icon-192.png"
        assert s.vibrate == (100, 50, 100)
        assert s.default_tag == "default"
        assert s.default_url == "/app/questions"
        assert s.app_path_marker == "/app"

    def test_empty_default_url_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            WorkerSettings(default_url="")
        assert exc_info.value.setting_name == "default_url"

    def test_negative_vibrate_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            WorkerSettings(vibrate=(100, -1))

    def test_vibrate_list_normalised_to_tuple(self) -> None:
        assert WorkerSettings(vibrate=[200, 100]).vibrate == (200, 100)  # type: ignore[arg-type]


class TestForegroundSettings:
    def test_defaults(self) -> None:
        s = ForegroundSettings()
        assert s.script_url == "/sw.js"
        assert s.scope == "/"
        assert s.version_url == "/api/version"
        assert s.version_poll_interval == 300.0
        assert s.version_initial_delay == 10.0
        assert s.reload_fallback_seconds == 0.0
        assert s.vapid_public_key == ""
        assert s.worker_ready_timeout == 8.0
        assert s.opt_in_delay == 3.0
        assert s.is_production

    def test_development_is_not_production(self) -> None:
        assert not ForegroundSettings(environment="Development").is_production

    def test_staging_counts_as_production(self) -> None:
        assert ForegroundSettings(environment="staging").is_production

    def test_zero_poll_interval_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ForegroundSettings(version_poll_interval=0)

    def test_negative_fallback_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ForegroundSettings(reload_fallback_seconds=-1)

    def test_negative_initial_delay_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ForegroundSettings(version_initial_delay=-0.5)

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_non_positive_ready_timeout_rejected(self, timeout: float) -> None:
        with pytest.raises(InvalidSettingValueError):
            ForegroundSettings(worker_ready_timeout=timeout)

    def test_negative_opt_in_delay_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ForegroundSettings(opt_in_delay=-1)

    def test_zero_opt_in_delay_allowed(self) -> None:
        assert ForegroundSettings(opt_in_delay=0).opt_in_delay == 0


@dataclasses.dataclass
class PushKeys(Settings):
    _prefix: ClassVar[str] = "NEEDS"

    vapid_public_key: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_reads_prefixed_strings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_WORKER_DEFAULT_TITLE", "Us")
        assert EnvSettingsLoader().load(WorkerSettings).default_title == "Us"

    def test_coerces_int_tuple(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_WORKER_VIBRATE", "200, 100,200")
        assert EnvSettingsLoader().load(WorkerSettings).vibrate == (200, 100, 200)

    def test_coerces_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_VERSION_POLL_INTERVAL", "60")
        assert EnvSettingsLoader().load(ForegroundSettings).version_poll_interval == 60.0

    def test_vapid_key_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_VAPID_PUBLIC_KEY", "BPubKey")
        assert EnvSettingsLoader().load(ForegroundSettings).vapid_public_key == "BPubKey"

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_ENVIRONMENT", "development")
        assert not EnvSettingsLoader().load(ForegroundSettings).is_production

    def test_uncoercible_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_VERSION_POLL_INTERVAL", "often")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(ForegroundSettings)
        assert exc_info.value.setting_name == "PWA_VERSION_POLL_INTERVAL"

    def test_validation_error_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_VERSION_POLL_INTERVAL", "0")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(ForegroundSettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NEEDS_VAPID_PUBLIC_KEY", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(PushKeys)
        assert exc_info.value.setting_name == "NEEDS_VAPID_PUBLIC_KEY"


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_APP_VERSION", "placeholder")
        env_file = tmp_path / ".env"
        env_file.write_text("PWA_APP_VERSION=abc1234\n")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(ForegroundSettings)
        assert settings.app_version == "abc1234"


# ---------------------------------------------------------------------------
# SettingsFactory
# ---------------------------------------------------------------------------


class _Broken(SettingsLoader):
    def load(self, settings_class):  # type: ignore[override]
        raise RuntimeError("unreachable vault")


class TestSettingsFactory:
    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_APP_VERSION", "from-env")
        s = SettingsFactory.create(
            ForegroundSettings,
            loaders=[EnvSettingsLoader()],
            overrides={"app_version": "override"},
        )
        assert s.app_version == "override"

    def test_failing_loader_is_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PWA_WORKER_DEFAULT_TAG", "misc")
        s = SettingsFactory.create(WorkerSettings, loaders=[EnvSettingsLoader(), _Broken()])
        assert s.default_tag == "misc"

    def test_no_loaders_gives_defaults(self) -> None:
        assert SettingsFactory.create(WorkerSettings) == WorkerSettings()

    def test_invalid_override_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(WorkerSettings, overrides={"default_url": ""})

    def test_unknown_override_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(WorkerSettings, overrides={"nope": 1})

    def test_missing_required_after_merge(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            SettingsFactory.create(PushKeys)
        assert exc_info.value.setting_name == "vapid_public_key"

    def test_required_supplied_by_override(self) -> None:
        keys = SettingsFactory.create(PushKeys, overrides={"vapid_public_key": "BAbc"})
        assert keys.vapid_public_key == "BAbc"


# ---------------------------------------------------------------------------
# Settings helpers and coercion
# ---------------------------------------------------------------------------


class TestSettingsHelpers:
    def test_env_key_uses_prefix(self) -> None:
        assert ForegroundSettings.env_key("script_url") == "PWA_SCRIPT_URL"
        assert WorkerSettings.env_key("vibrate") == "PWA_WORKER_VIBRATE"

    def test_env_key_without_prefix(self) -> None:
        assert Settings.env_key("debug") == "DEBUG"

    def test_required_fields(self) -> None:
        assert PushKeys.required_fields() == ["vapid_public_key"]
        assert WorkerSettings.required_fields() == []


class TestCoerce:
    @pytest.mark.parametrize(
        ("raw", "hint", "expected"),
        [
            ("yes", "bool", True),
            ("0", "bool", False),
            ("7", "int", 7),
            ("2.5", "float", 2.5),
            ("a, b", "list[str]", ["a", "b"]),
            ("1,2", "tuple[int, ...]", (1, 2)),
            ("1,2", tuple, ("1", "2")),
            ("/sw.js", "str", "/sw.js"),
        ],
    )
    def test_values(self, raw: str, hint: object, expected: object) -> None:
        assert coerce(raw, hint) == expected

    def test_bad_int(self) -> None:
        with pytest.raises(ValueError):
            coerce("many", "int")
