"""i18n – Translator port and the no-op implementation."""
from __future__ import annotations

import abc


class Translator(abc.ABC):
    """Port: resolve a dotted key to a display string."""

    @abc.abstractmethod
    def translate(self, key: str, default: str) -> str:
        """Return the string stored under *key*, or *default* when absent."""


class NullTranslator(Translator):
    """Translator with an empty catalog; every lookup yields the default."""

    def translate(self, key: str, default: str) -> str:
        return default


__all__ = ["NullTranslator", "Translator"]
