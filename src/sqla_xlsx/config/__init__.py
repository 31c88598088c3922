"""Config – env-based settings and their validation errors."""
from sqla_xlsx.config.settings import EnvSettingsLoader, ExportSettings, Settings, SettingsLoader
from sqla_xlsx.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
