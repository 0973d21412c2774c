"""Parser fallback chain for opening workbooks.

Implements a two-tier strategy:

1. **openpyxl** ``data_only=True`` (full fidelity) -- chart sheets, cached
   formula values.
2. **pandas** ``read_excel`` (reduced fidelity) -- cell values only.

A successful fallback is logged as ``W_PARSER_FALLBACK``.  When both tiers
fail the workbook is treated as corrupt and ``E_PARSE_CORRUPT`` is raised.
"""

from __future__ import annotations

import io
import logging
from typing import IO

from sheetkit.backends import OpenpyxlColumnSource, PandasColumnSource
from sheetkit.config import ConverterConfig
from sheetkit.errors import ConvertException, ErrorCode
from sheetkit.models import ParserUsed
from sheetkit.protocols import ColumnSource

logger = logging.getLogger("sheetkit")


class ParserChain:
    """Two-tier fallback workbook opener.

    Parameters
    ----------
    config:
        Conversion configuration; ``date_format`` is passed to the backend.
    """

    def __init__(self, config: ConverterConfig) -> None:
        self._config = config

    def open(self, source: str | IO[bytes]) -> tuple[ColumnSource, ParserUsed]:
        """Open *source* with the first parser that accepts it.

        Parameters
        ----------
        source:
            Filesystem path or binary stream.  Non-seekable streams are
            buffered in memory first, since both parsers seek.

        Returns
        -------
        tuple[ColumnSource, ParserUsed]
            The opened backend and which tier produced it.

        Raises
        ------
        ConvertException
            ``E_PARSE_CORRUPT`` if every parser rejects the workbook.
        """
        if not isinstance(source, str) and not source.seekable():
            source = io.BytesIO(source.read())

        date_format = self._config.date_format

        try:
            backend = OpenpyxlColumnSource.open(source, date_format=date_format)
        except Exception as exc:
            primary_error = exc
            logger.warning("openpyxl could not open workbook: %s", exc)
        else:
            logger.info(
                "Opened workbook with openpyxl: %d sheets",
                len(backend.sheet_names()),
            )
            return backend, ParserUsed.OPENPYXL

        if not isinstance(source, str):
            source.seek(0)

        try:
            backend = PandasColumnSource.open(source, date_format=date_format)
        except Exception as exc:
            logger.error("All parsers failed: %s", exc)
            raise ConvertException(
                code=ErrorCode.E_PARSE_CORRUPT,
                message=f"could not read input excel -> {primary_error}",
                stage="parse",
            ) from exc

        logger.warning(
            "%s: workbook parsed via pandas fallback (openpyxl: %s)",
            ErrorCode.W_PARSER_FALLBACK.value,
            primary_error,
        )
        return backend, ParserUsed.PANDAS_FALLBACK
