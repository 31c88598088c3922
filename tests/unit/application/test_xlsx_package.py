"""Unit tests for XlsxPackage / XlsxSheet (openpyxl writer)."""

from __future__ import annotations

import datetime
import io
from pathlib import Path

import openpyxl
import pytest
from openpyxl import Workbook
from openpyxl.styles import Font, NamedStyle

from sqla_xlsx.application.export import XlsxPackage
from sqla_xlsx.kernel.errors import StyleError, ValidationError


def _values(ws) -> list[tuple]:
    return list(ws.iter_rows(values_only=True))


# ---------------------------------------------------------------------------
# package
# ---------------------------------------------------------------------------
class TestXlsxPackage:
    def test_fresh_package_has_no_sheets(self):
        assert XlsxPackage().sheet_names == []

    def test_wraps_existing_workbook(self):
        wb = Workbook()
        wb.active.title = "Existing"
        package = XlsxPackage(wb)
        package.add_worksheet("New")
        assert package.sheet_names == ["Existing", "New"]
        assert package.workbook is wb

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Users", "Users"),
            ("a/b:c*d?[e]\\f", "abcdef"),
            ("x" * 40, "x" * 31),
            ("[]", "Sheet"),
        ],
    )
    def test_sheet_title_sanitized(self, name, expected):
        package = XlsxPackage()
        assert package.add_worksheet(name).title == expected

    def test_duplicate_titles_numbered(self):
        package = XlsxPackage()
        package.add_worksheet("Users")
        package.add_worksheet("Users")
        package.add_worksheet("users")
        assert package.sheet_names == ["Users", "Users1", "users2"]

    def test_duplicate_long_titles_stay_within_limit(self):
        package = XlsxPackage()
        for _ in range(12):
            package.add_worksheet("x" * 40)
        names = package.sheet_names
        assert names[0] == "x" * 31
        assert names[1] == "x" * 30 + "1"
        assert names[11] == "x" * 29 + "11"
        assert len(set(names)) == 12
        assert all(len(n) <= 31 for n in names)
        openpyxl.load_workbook(io.BytesIO(package.to_bytes()))

    def test_to_bytes_roundtrip(self):
        package = XlsxPackage()
        package.add_worksheet("Users").add_row(["id", "name"])
        wb = openpyxl.load_workbook(io.BytesIO(package.to_bytes()))
        assert wb.sheetnames == ["Users"]
        assert _values(wb["Users"]) == [("id", "name")]

    def test_save(self, tmp_path: Path):
        package = XlsxPackage()
        package.add_worksheet("Users").add_row([1])
        target = tmp_path / "out.xlsx"
        package.save(target)
        assert openpyxl.load_workbook(target).sheetnames == ["Users"]


# ---------------------------------------------------------------------------
# styles
# ---------------------------------------------------------------------------
class TestAddStyle:
    def test_mapping_registers_named_style(self):
        package = XlsxPackage()
        handle = package.add_style({"font": Font(bold=True), "number_format": "0.00"})
        assert handle in package.workbook.named_styles

    def test_each_mapping_gets_its_own_handle(self):
        package = XlsxPackage()
        assert package.add_style({"font": Font(bold=True)}) != package.add_style({"font": Font(bold=True)})

    def test_named_style_registered_once(self):
        package = XlsxPackage()
        style = NamedStyle(name="header")
        assert package.add_style(style) == "header"
        assert package.add_style(style) == "header"
        assert package.workbook.named_styles.count("header") == 1

    def test_builtin_name(self):
        assert XlsxPackage().add_style("Headline 1") == "Headline 1"

    def test_unknown_name(self):
        with pytest.raises(StyleError):
            XlsxPackage().add_style("does-not-exist")

    def test_unknown_attribute(self):
        with pytest.raises(StyleError) as exc_info:
            XlsxPackage().add_style({"colour": "red"})
        assert exc_info.value.errors == [{"option": "style", "value": ["colour"]}]

    def test_unsupported_type(self):
        with pytest.raises(StyleError):
            XlsxPackage().add_style(12)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# rows
# ---------------------------------------------------------------------------
class TestAddRow:
    @pytest.fixture()
    def sheet(self):
        return XlsxPackage().add_worksheet("Data")

    def test_values_written_in_order(self, sheet):
        sheet.add_row(["a", 1, None, 2.5])
        sheet.add_row(["b"])
        assert sheet.row_count == 2
        assert _values(sheet.worksheet) == [("a", 1, None, 2.5), ("b", None, None, None)]

    def test_style_applied_to_every_cell(self):
        package = XlsxPackage()
        sheet = package.add_worksheet("Styled")
        handle = package.add_style({"font": Font(italic=True)})
        sheet.add_row([1, 2], style=handle)
        assert [c.style for c in sheet.worksheet[1]] == [handle, handle]
        assert sheet.worksheet["A1"].font.italic is True

    def test_single_type_broadcast(self, sheet):
        sheet.add_row([1, 2.0], types="string")
        assert _values(sheet.worksheet) == [("1", "2.0")]

    def test_type_list_positional(self, sheet):
        sheet.add_row(["7", "8", "9"], types=["integer", None])
        assert _values(sheet.worksheet) == [(7, "8", "9")]

    def test_string_type_keeps_formula_text(self, sheet):
        sheet.add_row(["=SUM(A1:A2)"], types="string")
        cell = sheet.worksheet["A1"]
        assert cell.data_type == "s"
        assert cell.value == "=SUM(A1:A2)"

    def test_date_type(self, sheet):
        sheet.add_row([datetime.datetime(2024, 5, 1, 13, 30), "2024-06-02"], types="date")
        a1, b1 = sheet.worksheet["A1"], sheet.worksheet["B1"]
        assert a1.value == datetime.date(2024, 5, 1)
        assert b1.value == datetime.date(2024, 6, 2)
        assert a1.number_format == "yyyy-mm-dd"

    def test_time_type(self, sheet):
        sheet.add_row([datetime.date(2024, 5, 1)], types="time")
        cell = sheet.worksheet["A1"]
        assert cell.value == datetime.datetime(2024, 5, 1)
        assert cell.number_format == "yyyy-mm-dd hh:mm:ss"

    def test_float_and_boolean(self, sheet):
        sheet.add_row(["1.5", 0], types=["float", "boolean"])
        assert _values(sheet.worksheet) == [(1.5, False)]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("false", False), ("0", False), ("No", False), ("", False), (" TRUE ", True), ("yes", True), (1, True)],
    )
    def test_boolean_parses_common_spellings(self, sheet, raw, expected):
        sheet.add_row([raw], types="boolean")
        assert sheet.worksheet["A1"].value is expected

    def test_boolean_rejects_other_text(self, sheet):
        with pytest.raises(ValueError):
            sheet.add_row(["maybe"], types="boolean")

    def test_none_never_coerced(self, sheet):
        sheet.add_row([None], types="string")
        assert sheet.worksheet["A1"].value is None

    def test_unknown_type(self, sheet):
        with pytest.raises(ValidationError):
            sheet.add_row([1], types="currency")

    def test_uncastable_value_propagates(self, sheet):
        with pytest.raises(ValueError):
            sheet.add_row(["abc"], types="integer")

    def test_autofit(self, sheet):
        sheet.add_row(["id", "a much longer header"])
        sheet.add_row([1, "x" * 200])
        sheet.autofit(max_width=40)
        dims = sheet.worksheet.column_dimensions
        assert dims["A"].width == 4
        assert dims["B"].width == 40
