"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    ExportError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       ├── ColumnSpecError
    │       ├── HeaderCountMismatchError
    │       └── StyleError
    └── ApplicationError         (application.py)
        └── MissingSessionError
"""

from sqla_xlsx.kernel.errors.application import ApplicationError, MissingSessionError
from sqla_xlsx.kernel.errors.base import ExportError
from sqla_xlsx.kernel.errors.domain import (
    ColumnSpecError,
    DomainError,
    HeaderCountMismatchError,
    StyleError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "ColumnSpecError",
    "DomainError",
    "ExportError",
    "HeaderCountMismatchError",
    "MissingSessionError",
    "StyleError",
    "ValidationError",
]
