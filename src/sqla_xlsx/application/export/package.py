"""Application export – XlsxPackage, a thin openpyxl workbook wrapper."""
from __future__ import annotations

import datetime
import io
import re
from collections.abc import Iterable, Mapping, Sequence
from os import PathLike
from typing import Any, Callable

from openpyxl import Workbook
from openpyxl.styles import NamedStyle
from openpyxl.styles.builtins import styles as BUILTIN_STYLES
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from sqla_xlsx.kernel.errors import StyleError, ValidationError

__all__ = ["CELL_TYPES", "XlsxPackage", "XlsxSheet"]

MAX_SHEET_TITLE = 31
_INVALID_TITLE_CHARS = re.compile(r"[\\*?:/\[\]]")
_STYLE_KEYWORDS = frozenset({"font", "fill", "border", "alignment", "number_format", "protection"})


def _as_date(value: Any) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        return datetime.date.fromisoformat(value)
    raise TypeError(f"cannot treat {value!r} as a date")


def _as_datetime(value: Any) -> datetime.datetime:
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    if isinstance(value, str):
        return datetime.datetime.fromisoformat(value)
    raise TypeError(f"cannot treat {value!r} as a time")


_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off", ""})


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"cannot treat {value!r} as a boolean")
    return bool(value)


CELL_TYPES: dict[str, Callable[[Any], Any]] = {
    "string": str,
    "integer": int,
    "float": float,
    "boolean": _as_bool,
    "date": _as_date,
    "time": _as_datetime,
}

_NUMBER_FORMATS = {
    "date": "yyyy-mm-dd",
    "time": "yyyy-mm-dd hh:mm:ss",
}


def _expand_types(types: str | Sequence[str | None] | None, width: int) -> list[str | None]:
    """A single tag applies to every cell; a sequence applies positionally."""
    if types is None:
        tags: list[str | None] = [None] * width
    elif isinstance(types, str):
        tags = [types] * width
    else:
        tags = list(types)[:width]
        tags += [None] * (width - len(tags))
    for tag in tags:
        if tag is not None and tag not in CELL_TYPES:
            raise ValidationError(
                f"Unknown cell type {tag!r}",
                errors=[{"option": "types", "value": tag, "allowed": sorted(CELL_TYPES)}],
            )
    return tags


def sanitize_title(name: str) -> str:
    title = _INVALID_TITLE_CHARS.sub("", str(name)).strip()
    return title[:MAX_SHEET_TITLE] or "Sheet"


class XlsxSheet:
    """Row-by-row writer over a freshly created worksheet."""

    def __init__(self, worksheet: Worksheet) -> None:
        self._ws = worksheet
        self._row = 0

    @property
    def worksheet(self) -> Worksheet:
        return self._ws

    @property
    def title(self) -> str:
        return self._ws.title

    @property
    def row_count(self) -> int:
        return self._row

    def add_row(
        self,
        values: Iterable[Any],
        *,
        style: str | None = None,
        types: str | Sequence[str | None] | None = None,
    ) -> None:
        values = list(values)
        tags = _expand_types(types, len(values))
        self._row += 1
        for col_idx, (value, tag) in enumerate(zip(values, tags), start=1):
            if tag is not None and value is not None:
                value = CELL_TYPES[tag](value)
            cell = self._ws.cell(row=self._row, column=col_idx, value=value)
            if style is not None:
                cell.style = style
            if value is None or tag is None:
                continue
            if tag == "string":
                # keeps "=..." text from being written as a formula
                cell.data_type = "s"
            elif tag in _NUMBER_FORMATS:
                cell.number_format = _NUMBER_FORMATS[tag]

    def autofit(self, max_width: int = 50) -> None:
        for col_idx in range(1, self._ws.max_column + 1):
            letter = get_column_letter(col_idx)
            cells = self._ws[letter]
            max_len = max(len(str(cell.value or "")) for cell in cells)
            self._ws.column_dimensions[letter].width = min(max_len + 2, max_width)


class XlsxPackage:
    """An openpyxl workbook plus the style registry and sheet factory used by exports.

    A fresh package holds no worksheets at all; openpyxl's default sheet is
    removed so that each export contributes exactly the sheets it writes.
    Pass an existing :class:`~openpyxl.Workbook` to append to it instead.
    """

    def __init__(self, workbook: Workbook | None = None) -> None:
        if workbook is None:
            workbook = Workbook()
            workbook.remove(workbook.active)
        self._workbook = workbook
        self._style_seq = 0

    @property
    def workbook(self) -> Workbook:
        return self._workbook

    @property
    def sheet_names(self) -> list[str]:
        return list(self._workbook.sheetnames)

    def add_style(self, style: NamedStyle | Mapping[str, Any] | str) -> str:
        """Register *style* and return the handle to pass to ``add_row``."""
        if isinstance(style, NamedStyle):
            if style.name not in self._workbook.named_styles:
                self._workbook.add_named_style(style)
            return style.name
        if isinstance(style, str):
            if style not in self._workbook.named_styles and style not in BUILTIN_STYLES:
                raise StyleError(f"Unknown named style {style!r}")
            return style
        if isinstance(style, Mapping):
            unknown = set(style) - _STYLE_KEYWORDS
            if unknown:
                raise StyleError(
                    f"Unsupported style attributes: {', '.join(sorted(unknown))}",
                    errors=[{"option": "style", "value": sorted(unknown)}],
                )
            name = self._next_style_name()
            self._workbook.add_named_style(NamedStyle(name=name, **style))
            return name
        raise StyleError(f"Cannot build a style from {type(style).__name__}")

    def _next_style_name(self) -> str:
        while True:
            self._style_seq += 1
            name = f"xlsx_style_{self._style_seq}"
            if name not in self._workbook.named_styles:
                return name

    def add_worksheet(self, name: str) -> XlsxSheet:
        """Append a worksheet, numbering the title when it is already taken."""
        return XlsxSheet(self._workbook.create_sheet(title=self._unique_title(sanitize_title(name))))

    def _unique_title(self, title: str) -> str:
        taken = {existing.lower() for existing in self._workbook.sheetnames}
        candidate, n = title, 0
        while candidate.lower() in taken:
            n += 1
            suffix = str(n)
            candidate = title[: MAX_SHEET_TITLE - len(suffix)] + suffix
        return candidate

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self._workbook.save(buf)
        return buf.getvalue()

    def save(self, path: str | PathLike[str]) -> None:
        self._workbook.save(path)
