"""
sqla_xlsx – Excel export for SQLAlchemy models.

Import path convention::

    from sqla_xlsx import XlsxMixin, acts_as_xlsx
    from sqla_xlsx.application.export import XlsxPackage, TableProjector
    from sqla_xlsx.i18n import CatalogTranslator
"""

from sqla_xlsx.adapters.sqlalchemy import XlsxMixin, acts_as_xlsx
from sqla_xlsx.application.export import XlsxPackage

__version__ = "0.1.0"
__all__ = ["XlsxMixin", "XlsxPackage", "__version__", "acts_as_xlsx"]
