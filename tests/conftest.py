"""Shared test fixtures for sheetkit tests.

Provides an in-memory column source satisfying the ``ColumnSource``
protocol, config fixtures, and session-scoped .xlsx file generators.
"""

from __future__ import annotations

import datetime
import pathlib
import tempfile
from collections.abc import Iterator

import openpyxl
import pytest

from sheetkit.config import ConverterConfig
from sheetkit.stats import RunContext


# ---------------------------------------------------------------------------
# In-memory backend
# ---------------------------------------------------------------------------


class MemoryColumnSource:
    """In-memory column source satisfying the ``ColumnSource`` protocol.

    Sheets are given as ``{sheet_name: [column, ...]}`` in workbook order.
    """

    def __init__(self, sheets: dict[str, list[list[str]]]) -> None:
        self.sheets = sheets
        self.requested: list[str] = []
        self.closed = False

    def sheet_names(self) -> list[str]:
        return list(self.sheets)

    def iter_columns(self, sheet_name: str) -> Iterator[list[str]]:
        self.requested.append(sheet_name)
        for column in self.sheets[sheet_name]:
            yield list(column)

    def close(self) -> None:
        self.closed = True


PEOPLE_COLUMNS = [["Name", "Alice", "Bob"], ["Age", "30", "25"]]


@pytest.fixture()
def default_config() -> ConverterConfig:
    """Return a ConverterConfig with all defaults."""
    return ConverterConfig()


@pytest.fixture()
def run_context() -> RunContext:
    """Fresh, zeroed ``RunContext``."""
    return RunContext()


@pytest.fixture()
def people_source() -> MemoryColumnSource:
    """One sheet, ``Sheet1``, with Name and Age columns."""
    return MemoryColumnSource({"Sheet1": [list(c) for c in PEOPLE_COLUMNS]})


@pytest.fixture()
def multi_sheet_source() -> MemoryColumnSource:
    """Three sheets with ragged columns in the second."""
    return MemoryColumnSource(
        {
            "People": [list(c) for c in PEOPLE_COLUMNS],
            "Prices": [["Item", "Tea", "Coffee", "Cake"], ["Cost", "2"]],
            "Notes": [["Note", "remember the milk"]],
        }
    )


# ---------------------------------------------------------------------------
# Session-scoped .xlsx Fixture Generators
# ---------------------------------------------------------------------------

_XLSX_TMP_DIR: tempfile.TemporaryDirectory | None = None


def _xlsx_dir() -> pathlib.Path:
    """Lazily create a session-wide temp directory for generated .xlsx files."""
    global _XLSX_TMP_DIR  # noqa: PLW0603
    if _XLSX_TMP_DIR is None:
        _XLSX_TMP_DIR = tempfile.TemporaryDirectory(prefix="sheetkit_test_xlsx_")
    return pathlib.Path(_XLSX_TMP_DIR.name)


@pytest.fixture(scope="session")
def people_xlsx() -> pathlib.Path:
    """Generate a one-sheet .xlsx: ``Sheet1`` with Name/Age and two people."""
    path = _xlsx_dir() / "people.xlsx"
    if path.exists():
        return path
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Sheet1"
    ws.append(["Name", "Age"])
    ws.append(["Alice", 30])
    ws.append(["Bob", 25])
    wb.save(path)
    return path


@pytest.fixture(scope="session")
def multi_sheet_xlsx() -> pathlib.Path:
    """Generate a three-sheet .xlsx with a ragged sheet and a header-only column."""
    path = _xlsx_dir() / "multi_sheet.xlsx"
    if path.exists():
        return path
    wb = openpyxl.Workbook()

    ws1 = wb.active
    ws1.title = "People"
    ws1.append(["Name", "Age"])
    ws1.append(["Alice", 30])
    ws1.append(["Bob", 25])

    ws2 = wb.create_sheet("Prices")
    ws2["A1"] = "Item"
    ws2["A2"] = "Tea"
    ws2["A3"] = "Coffee"
    ws2["A4"] = "Cake"
    ws2["B1"] = "Cost"
    ws2["B2"] = 2.5
    ws2["C1"] = "Comment"

    ws3 = wb.create_sheet("Notes")
    ws3["A1"] = "Note"
    ws3["A2"] = "a, b and \"c\""

    wb.save(path)
    return path


@pytest.fixture(scope="session")
def gap_column_xlsx() -> pathlib.Path:
    """Generate a .xlsx whose column B is entirely empty between A and C."""
    path = _xlsx_dir() / "gap_column.xlsx"
    if path.exists():
        return path
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Gaps"
    ws["A1"] = "Left"
    ws["A2"] = "1"
    ws["C1"] = "Right"
    ws["C2"] = "3"
    wb.save(path)
    return path


@pytest.fixture(scope="session")
def typed_cells_xlsx() -> pathlib.Path:
    """Generate a .xlsx with numbers, booleans, dates and blanks."""
    path = _xlsx_dir() / "typed_cells.xlsx"
    if path.exists():
        return path
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Typed"
    ws.append(["Int", "Float", "Bool", "When"])
    ws.append([7, 1.5, True, datetime.datetime(2024, 3, 9, 14, 30, 0)])
    ws.append([8.0, None, False, None])
    wb.save(path)
    return path


@pytest.fixture(scope="session")
def empty_xlsx() -> pathlib.Path:
    """Generate an .xlsx workbook with one sheet and no data."""
    path = _xlsx_dir() / "empty.xlsx"
    if path.exists():
        return path
    wb = openpyxl.Workbook()
    wb.active.title = "Sheet1"
    wb.save(path)
    return path
