"""Config settings – 12-factor env-based configuration."""
from sqla_xlsx.config.settings.base import ExportSettings, Settings
from sqla_xlsx.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ExportSettings", "Settings", "SettingsLoader"]
