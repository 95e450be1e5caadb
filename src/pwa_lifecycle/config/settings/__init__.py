"""Config settings – 12-factor env-based configuration."""
from pwa_lifecycle.config.settings.base import Settings
from pwa_lifecycle.config.settings.factory import SettingsFactory
from pwa_lifecycle.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
