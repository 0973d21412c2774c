"""pandas backend for the ColumnSource protocol.

Used as the fallback when openpyxl cannot open a workbook.  Reads every
sheet with ``pandas.read_excel(header=None)`` so row 0 stays a regular
cell, matching the openpyxl backend.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import IO

import pandas as pd

from sheetkit.backends._cells import format_cell, trim_columns
from sheetkit.errors import ConvertException, ErrorCode

logger = logging.getLogger("sheetkit")


class PandasColumnSource:
    """pandas-backed column source (reduced fidelity).

    Satisfies :class:`~sheetkit.protocols.ColumnSource` via structural
    subtyping.

    Parameters
    ----------
    frames:
        Mapping of sheet name to a header-less ``DataFrame``, in workbook
        order.
    date_format:
        ``strftime`` pattern used to render datetime cells.
    """

    def __init__(
        self,
        frames: dict[str, pd.DataFrame],
        date_format: str = "%Y-%m-%d %H:%M:%S",
    ) -> None:
        self._frames = frames
        self._date_format = date_format

    @classmethod
    def open(
        cls,
        source: str | IO[bytes],
        date_format: str = "%Y-%m-%d %H:%M:%S",
    ) -> PandasColumnSource:
        """Read all sheets of a workbook from a path or binary stream."""
        frames = pd.read_excel(source, sheet_name=None, header=None, dtype=object)
        return cls(frames, date_format=date_format)

    def sheet_names(self) -> list[str]:
        """Return every sheet name in workbook order."""
        return list(self._frames)

    def iter_columns(self, sheet_name: str) -> Iterator[list[str]]:
        """Yield the columns of *sheet_name*, each trimmed of trailing blanks."""
        if sheet_name not in self._frames:
            raise ConvertException(
                code=ErrorCode.E_PARSE_SHEET,
                message=f"could not get columns for sheet {sheet_name}: no such sheet",
                sheet_name=sheet_name,
                stage="parse",
            )

        frame = self._frames[sheet_name]
        columns = [
            [self._format(value) for value in frame[label].tolist()]
            for label in frame.columns
        ]
        yield from trim_columns(columns)

    def _format(self, value: object) -> str:
        if pd.isna(value):
            return ""
        return format_cell(value, self._date_format)

    def close(self) -> None:
        """Release the loaded frames."""
        self._frames = {}
