"""openpyxl backend for the ColumnSource protocol.

Reads ``.xlsx`` workbooks with ``data_only=True`` so formula cells yield
their cached values, and exposes each worksheet column by column.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import IO

import openpyxl
from openpyxl.chartsheet import Chartsheet

from sheetkit.backends._cells import format_cell, trim_columns
from sheetkit.errors import ConvertException, ErrorCode

logger = logging.getLogger("sheetkit")


class OpenpyxlColumnSource:
    """openpyxl-backed column source.

    Satisfies :class:`~sheetkit.protocols.ColumnSource` via structural
    subtyping (no inheritance required).

    Parameters
    ----------
    workbook:
        An already-loaded openpyxl ``Workbook``.
    date_format:
        ``strftime`` pattern used to render datetime cells.
    """

    def __init__(
        self,
        workbook: openpyxl.Workbook,
        date_format: str = "%Y-%m-%d %H:%M:%S",
    ) -> None:
        self._workbook = workbook
        self._date_format = date_format

    @classmethod
    def open(
        cls,
        source: str | IO[bytes],
        date_format: str = "%Y-%m-%d %H:%M:%S",
    ) -> OpenpyxlColumnSource:
        """Load a workbook from a path or a seekable binary stream.

        Exceptions from openpyxl propagate unchanged; the parser chain
        decides whether to fall back.
        """
        workbook = openpyxl.load_workbook(source, data_only=True)
        return cls(workbook, date_format=date_format)

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def sheet_names(self) -> list[str]:
        """Return every sheet name in workbook order."""
        return list(self._workbook.sheetnames)

    def iter_columns(self, sheet_name: str) -> Iterator[list[str]]:
        """Yield the columns of *sheet_name*, each trimmed of trailing blanks.

        Chart sheets have no cells and yield nothing.

        Raises
        ------
        ConvertException
            ``E_PARSE_SHEET`` if the sheet does not exist or cannot be read.
        """
        try:
            sheet = self._workbook[sheet_name]
        except KeyError as exc:
            raise ConvertException(
                code=ErrorCode.E_PARSE_SHEET,
                message=f"could not get columns for sheet {sheet_name}: no such sheet",
                sheet_name=sheet_name,
                stage="parse",
            ) from exc

        if isinstance(sheet, Chartsheet):
            logger.info("Sheet '%s' is a chart sheet; no columns", sheet_name)
            return

        try:
            columns = [
                [format_cell(value, self._date_format) for value in column]
                for column in sheet.iter_cols(values_only=True)
            ]
        except Exception as exc:
            raise ConvertException(
                code=ErrorCode.E_PARSE_SHEET,
                message=f"could not get rows of col for sheet {sheet_name} -> {exc}",
                sheet_name=sheet_name,
                stage="parse",
            ) from exc

        yield from trim_columns(columns)

    # ------------------------------------------------------------------
    # Resource management
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying workbook."""
        self._workbook.close()
