"""Application export – column projection and the xlsx package writer."""
from sqla_xlsx.application.export.columns import ColumnDef, normalize_columns, resolve_path
from sqla_xlsx.application.export.inflection import humanize, underscore
from sqla_xlsx.application.export.package import CELL_TYPES, XlsxPackage, XlsxSheet
from sqla_xlsx.application.export.ports import RecordIntrospector
from sqla_xlsx.application.export.projector import (
    I18nMode,
    Projection,
    TableProjector,
    flatten_records,
    normalize_i18n,
)

__all__ = [
    "CELL_TYPES",
    "ColumnDef",
    "I18nMode",
    "Projection",
    "RecordIntrospector",
    "TableProjector",
    "XlsxPackage",
    "XlsxSheet",
    "flatten_records",
    "humanize",
    "normalize_columns",
    "normalize_i18n",
    "resolve_path",
    "underscore",
]
