"""Config settings – Settings base class and ExportSettings."""
from __future__ import annotations

import dataclasses

from sqla_xlsx.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ExportSettings(Settings):
    """Process-wide defaults for ``to_xlsx``.

    Environment variables use the ``XLSX_`` prefix, e.g.
    ``XLSX_AUTOFIT_COLUMNS=true`` or ``XLSX_ATTRIBUTES_SCOPE=app.fields``.
    """

    _prefix: dataclasses.ClassVar[str] = "XLSX"

    attributes_scope: str = "orm.attributes"
    models_scope: str = "orm.models"
    autofit_columns: bool = False
    max_column_width: int = 50

    def _validate(self) -> None:
        if self.max_column_width <= 0:
            raise InvalidSettingValueError(
                "max_column_width", self.max_column_width, "must be positive"
            )


__all__ = ["ExportSettings", "Settings"]
