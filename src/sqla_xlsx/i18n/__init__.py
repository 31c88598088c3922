"""i18n – translation lookup used for column and sheet labels."""
from sqla_xlsx.i18n.catalog import CatalogTranslator
from sqla_xlsx.i18n.ports import NullTranslator, Translator

__all__ = ["CatalogTranslator", "NullTranslator", "Translator"]
