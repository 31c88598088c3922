"""SQLAlchemy adapter – SqlAlchemyIntrospector."""
from __future__ import annotations

from typing import Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import ColumnProperty
from sqlalchemy.orm.exc import UnmappedColumnError

from sqla_xlsx.application.export.inflection import humanize, underscore
from sqla_xlsx.application.export.ports import RecordIntrospector
from sqla_xlsx.i18n import NullTranslator, Translator


class SqlAlchemyIntrospector(RecordIntrospector):
    """Reads field names and display names off a mapped model class.

    Labels can be attached to the schema itself and are used as the
    translation default::

        class User(XlsxMixin, Base):
            __tablename__ = "users"
            __table_args__ = {"info": {"label": "Member"}}
            email: Mapped[str] = mapped_column(info={"label": "E-mail"})
    """

    def __init__(
        self,
        model: type[Any],
        translator: Translator | None = None,
        *,
        attributes_scope: str = "orm.attributes",
        models_scope: str = "orm.models",
    ) -> None:
        self._model = model
        self._mapper = sa_inspect(model)
        self._translator = translator or NullTranslator()
        self._attributes_scope = attributes_scope
        self._models_scope = models_scope

    @property
    def type_key(self) -> str:
        return underscore(self._model.__name__)

    @property
    def table_name(self) -> str:
        return getattr(self._model, "__tablename__", None) or self._mapper.local_table.name

    def field_names(self) -> list[str]:
        """Mapped attribute names in table column order."""
        names: list[str] = []
        for column in self._mapper.local_table.columns:
            try:
                prop = self._mapper.get_property_by_column(column)
            except UnmappedColumnError:
                continue
            if prop.key not in names:
                names.append(prop.key)
        return names

    def human_attribute_name(self, field: str) -> str:
        return self._translator.translate(
            f"{self._attributes_scope}.{self.type_key}.{field}",
            default=self._column_label(field) or humanize(field),
        )

    def human_name(self) -> str:
        info = getattr(self._mapper.local_table, "info", {})
        return self._translator.translate(
            f"{self._models_scope}.{self.type_key}",
            default=info.get("label") or humanize(self.type_key),
        )

    def _column_label(self, field: str) -> str | None:
        if field not in self._mapper.attrs:
            return None
        prop = self._mapper.attrs[field]
        if not isinstance(prop, ColumnProperty):
            return None
        return prop.columns[0].info.get("label")


__all__ = ["SqlAlchemyIntrospector"]
