"""Cell-to-text rendering shared by the spreadsheet backends."""

from __future__ import annotations

import datetime
from collections.abc import Iterable


def format_cell(value: object, date_format: str) -> str:
    """Convert a raw cell value to its text representation.

    Parameters
    ----------
    value:
        The cell value as returned by openpyxl or pandas.
    date_format:
        ``strftime`` pattern applied to datetime cells.

    Returns
    -------
    str
        ``""`` for empty cells, ``TRUE``/``FALSE`` for booleans, integral
        floats without the trailing ``.0``, and ``str()`` for everything
        else.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, datetime.datetime):
        return value.strftime(date_format)
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def trim_column(cells: Iterable[str]) -> list[str]:
    """Drop trailing empty cells so columns keep their own (ragged) length."""
    column = list(cells)
    end = len(column)
    while end > 0 and column[end - 1] == "":
        end -= 1
    return column[:end]


def trim_columns(columns: list[list[str]]) -> list[list[str]]:
    """Trim every column and drop trailing columns with no cells at all.

    Interior empty columns are kept (as zero-cell columns) so column
    indexes stay aligned with the sheet.
    """
    trimmed = [trim_column(column) for column in columns]
    end = len(trimmed)
    while end > 0 and not trimmed[end - 1]:
        end -= 1
    return trimmed[:end]
