"""SQLAlchemy adapter – record queries for exports."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select, select, text


def _clauses(value: Any) -> list[Any]:
    if value is None:
        return []
    items = value if isinstance(value, (list, tuple)) else [value]
    return [text(item) if isinstance(item, str) else item for item in items]


def build_select(model: type[Any], where: Any = None, order: Any = None) -> Select[Any]:
    """Build ``SELECT model WHERE ... ORDER BY ...``.

    ``where`` may be a mapping of attribute equalities (``filter_by``), a
    SQL expression, a raw SQL string, or a list of expressions/strings.
    ``order`` may be a column expression, a raw SQL string or a list.
    """
    stmt = select(model)
    if isinstance(where, Mapping):
        stmt = stmt.filter_by(**where)
    else:
        conditions = _clauses(where)
        if conditions:
            stmt = stmt.where(*conditions)
    ordering = _clauses(order)
    if ordering:
        stmt = stmt.order_by(*ordering)
    return stmt


def fetch_records(session: Any, model: type[Any], where: Any = None, order: Any = None) -> list[Any]:
    return list(session.scalars(build_select(model, where, order)).all())


async def afetch_records(session: Any, model: type[Any], where: Any = None, order: Any = None) -> list[Any]:
    result = await session.scalars(build_select(model, where, order))
    return list(result.all())


__all__ = ["afetch_records", "build_select", "fetch_records"]
