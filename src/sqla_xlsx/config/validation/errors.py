"""Config validation errors raised while building ExportSettings."""
from __future__ import annotations

from sqla_xlsx.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be read or coerced."""
    code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""
    code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable {env_key} must be set", detail={"env_key": env_key})
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting was read but fails the settings class's own checks."""
    code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
