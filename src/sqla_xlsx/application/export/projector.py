"""Application export – TableProjector.

Turns a column specification, a labeling mode and a record sequence into
the header row and data rows of one worksheet.

Label resolution per column (first match wins):

1. the column's explicit header;
2. ``i18n is True``: the record type's human attribute name;
3. ``i18n`` is a namespace: translation of ``"<ns>.<type_key>.<field>"``,
   falling back to the humanized field;
4. otherwise the humanized field.
"""
from __future__ import annotations

import types
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from sqla_xlsx.application.export.columns import ColumnDef
from sqla_xlsx.application.export.inflection import humanize, underscore
from sqla_xlsx.application.export.ports import RecordIntrospector
from sqla_xlsx.i18n import NullTranslator, Translator
from sqla_xlsx.kernel.errors import HeaderCountMismatchError, ValidationError

__all__ = ["I18nMode", "Projection", "TableProjector", "flatten_records", "normalize_i18n"]

I18nMode = Union[bool, str]

_GROUP_TYPES = (list, tuple, set, frozenset, types.GeneratorType)


@dataclass(frozen=True)
class Projection:
    """The rectangular table handed to the workbook writer."""

    name: str
    headers: list[Any]
    rows: list[list[Any]]


def normalize_i18n(i18n: Any) -> I18nMode:
    """Validate an ``i18n`` option; an empty namespace means no localization."""
    if isinstance(i18n, bool):
        return i18n
    if i18n is None:
        return False
    if isinstance(i18n, str):
        return i18n.strip() or False
    raise ValidationError(
        f"i18n must be a bool or a namespace string, got {type(i18n).__name__}",
        errors=[{"option": "i18n", "value": repr(i18n)}],
    )


def flatten_records(data: Iterable[Any]) -> list[Any]:
    """Flatten nested groups of records and drop ``None`` at every depth.

    Named tuples and SQLAlchemy ``Row`` objects carry ``_fields`` and are
    kept as records.
    """
    flat: list[Any] = []
    for item in data:
        if item is None:
            continue
        if isinstance(item, _GROUP_TYPES) and not hasattr(item, "_fields"):
            flat.extend(flatten_records(item))
        else:
            flat.append(item)
    return flat


class TableProjector:
    """Resolves headers, sheet name and cell values for one record type."""

    def __init__(self, introspector: RecordIntrospector, translator: Translator | None = None) -> None:
        self._introspector = introspector
        self._translator = translator or NullTranslator()

    def default_columns(self) -> list[ColumnDef]:
        return [ColumnDef(name) for name in self._introspector.field_names()]

    def resolve_headers(
        self,
        columns: Sequence[ColumnDef],
        i18n: I18nMode = False,
        headers: Sequence[Any] | None = None,
    ) -> list[Any]:
        if headers is not None:
            headers = list(headers)
            if len(headers) != len(columns):
                raise HeaderCountMismatchError(len(columns), len(headers))
            return headers
        return [self._label(column, i18n) for column in columns]

    def _label(self, column: ColumnDef, i18n: I18nMode) -> str:
        if column.header is not None:
            return column.header
        if i18n is True:
            return self._introspector.human_attribute_name(column.key)
        if i18n:
            return self._translator.translate(
                f"{i18n}.{self._introspector.type_key}.{column.key}",
                default=humanize(column.key),
            )
        return humanize(column.key)

    def resolve_sheet_name(self, i18n: I18nMode = False, name: str | None = None) -> str:
        if name:
            return name
        table_name = self._introspector.table_name
        if i18n is True:
            return self._introspector.human_name()
        if i18n:
            return self._translator.translate(
                f"{i18n}.{underscore(table_name)}",
                default=humanize(table_name),
            )
        return humanize(table_name)

    def project(
        self,
        records: Iterable[Any],
        columns: Sequence[ColumnDef] | None = None,
        *,
        i18n: Any = False,
        headers: Sequence[Any] | None = None,
        name: str | None = None,
    ) -> Projection | None:
        """Build the table, or return ``None`` when there are no records."""
        i18n = normalize_i18n(i18n)
        columns = list(columns) if columns is not None else self.default_columns()
        header_row = self.resolve_headers(columns, i18n, headers)
        sheet_name = self.resolve_sheet_name(i18n, name)

        records = flatten_records(records)
        if not records:
            return None
        rows = [[column.resolve(record) for column in columns] for record in records]
        return Projection(name=sheet_name, headers=header_row, rows=rows)
