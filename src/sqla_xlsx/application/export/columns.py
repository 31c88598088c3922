"""Application export – ColumnDef and column specification parsing."""
from __future__ import annotations

import inspect
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from sqla_xlsx.kernel.errors import ColumnSpecError

__all__ = ["ColumnDef", "normalize_columns", "resolve_path"]


@dataclass(frozen=True)
class ColumnDef:
    """Defines a single column in an export."""

    key: str                   # dotted accessor path, e.g. "address.city"
    header: str | None = None  # explicit label; resolved later when None

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not all(self.path):
            raise ColumnSpecError(self.key, "field path segments must be non-empty strings")
        if self.header is not None and not isinstance(self.header, str):
            raise ColumnSpecError(self.header, "header must be a string")

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self.key.split(".")) if isinstance(self.key, str) else ()

    def resolve(self, record: Any) -> Any:
        return resolve_path(record, self.path)


def resolve_path(record: Any, path: Iterable[str]) -> Any:
    """Follow *path* from *record*; a ``None`` along the way yields ``None``.

    Mappings are read by key, everything else by attribute. Bound methods
    reached along the way are called without arguments.

    The two lookups differ on a miss: a key absent from a mapping reads as
    ``None`` (an empty cell), while an attribute absent from an object
    raises ``AttributeError``.
    """
    value = record
    for segment in path:
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(segment)
        else:
            value = getattr(value, segment)
        if inspect.ismethod(value):
            value = value()
    return value


def normalize_columns(spec: Any) -> list[ColumnDef]:
    """Parse a column specification into an ordered list of :class:`ColumnDef`.

    Accepted descriptors: ``"field"``, ``ColumnDef``, ``("field", "Label")``
    and ``{"field": "Label", ...}``. A lone string or mapping is treated as
    a whole specification.
    """
    if isinstance(spec, (str, ColumnDef, Mapping)):
        spec = [spec]
    if not isinstance(spec, Iterable):
        raise ColumnSpecError(spec, "expected a sequence of column descriptors")

    columns: list[ColumnDef] = []
    for descriptor in spec:
        if isinstance(descriptor, ColumnDef):
            columns.append(descriptor)
        elif isinstance(descriptor, str):
            columns.append(ColumnDef(descriptor))
        elif isinstance(descriptor, Mapping):
            columns.extend(ColumnDef(key, header) for key, header in descriptor.items())
        elif isinstance(descriptor, (tuple, list)) and len(descriptor) == 2:
            columns.append(ColumnDef(descriptor[0], descriptor[1]))
        else:
            raise ColumnSpecError(descriptor, "unsupported descriptor type")
    return columns
