"""SQLAlchemy adapter – model introspection, record queries and the XlsxMixin."""
from sqla_xlsx.adapters.sqlalchemy.introspection import SqlAlchemyIntrospector
from sqla_xlsx.adapters.sqlalchemy.mixins import XlsxConfig, XlsxMixin, acts_as_xlsx
from sqla_xlsx.adapters.sqlalchemy.query import afetch_records, build_select, fetch_records

__all__ = [
    "SqlAlchemyIntrospector",
    "XlsxConfig",
    "XlsxMixin",
    "acts_as_xlsx",
    "afetch_records",
    "build_select",
    "fetch_records",
]
