"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from sqla_xlsx.config.settings.base import Settings
from sqla_xlsx.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Build a settings dataclass from ``<PREFIX>_<FIELD>`` environment variables.

    Fields without a variable keep their dataclass default. ``bool`` and
    ``int`` fields are coerced; everything else is passed as a string.
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "")
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = "_".join(p for p in (prefix, field.name) if p).upper()
            raw = environ.get(env_key)
            if raw is not None:
                kwargs[field.name] = _coerce(env_key, raw, field.type)
            elif field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                raise MissingRequiredSettingError(env_key)

        return settings_class(**kwargs)


def _coerce(env_key: str, raw: str, type_hint: Any) -> Any:
    name = getattr(type_hint, "__name__", type_hint)
    if name == "bool":
        return raw.strip().lower() in _TRUTHY
    if name == "int":
        try:
            return int(raw)
        except ValueError as exc:
            raise ConfigError(f"{env_key} must be an integer, got {raw!r}") from exc
    return raw


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
