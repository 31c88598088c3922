"""Application export – RecordIntrospector port."""
from __future__ import annotations

import abc


class RecordIntrospector(abc.ABC):
    """Port: what the projector needs to know about a record type."""

    @property
    @abc.abstractmethod
    def type_key(self) -> str:
        """Snake-cased type name used in translation keys (``user_account``)."""

    @property
    @abc.abstractmethod
    def table_name(self) -> str:
        """Collective name of the record type (``user_accounts``)."""

    @abc.abstractmethod
    def field_names(self) -> list[str]: ...

    @abc.abstractmethod
    def human_attribute_name(self, field: str) -> str: ...

    @abc.abstractmethod
    def human_name(self) -> str: ...


__all__ = ["RecordIntrospector"]
