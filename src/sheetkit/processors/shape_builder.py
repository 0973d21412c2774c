"""Shape builder: column streams to Mapping or Matrix tables.

Walks the sheets in scope, feeds every column to the statistics reporter,
and assembles one table per sheet in the resolved ``OutputMode``.
Statistics runs walk the same columns but build no table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sheetkit.config import ConverterConfig
from sheetkit.errors import ConvertException, ErrorCode
from sheetkit.models import MappingTable, MatrixTable, OutputMode, Workbook
from sheetkit.protocols import ColumnSource
from sheetkit.stats import RunContext, StatisticsReporter

logger = logging.getLogger("sheetkit")


class ShapeBuilder:
    """Builds per-sheet tables from a :class:`ColumnSource`.

    Parameters
    ----------
    config:
        Conversion configuration (sheet scope and header handling).
    context:
        Run counters, updated for every column read regardless of mode.
    mode:
        Shape to build; defaults to ``config.resolve_mode()``.
    """

    def __init__(
        self,
        config: ConverterConfig,
        context: RunContext,
        mode: OutputMode | None = None,
    ) -> None:
        self._config = config
        self._context = context
        self._mode = mode or config.resolve_mode()
        self._reporter = StatisticsReporter(config, self._mode)

    @property
    def mode(self) -> OutputMode:
        return self._mode

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build_workbook(self, source: ColumnSource) -> Workbook:
        """Build a table for every sheet in scope.

        Scope is the named sheet (``config.sheet_name``) or, when empty,
        the first sheet; ``config.all_sheets`` widens it to every sheet
        (still filtered by name when one is given).

        Raises
        ------
        ConvertException
            ``E_SHAPE_EMPTY_COLUMN`` from mapping construction, or
            ``E_SHEET_NOT_FOUND`` when the requested sheet never matched.
        """
        config = self._config
        workbook: Workbook = {}
        found = False

        for sheet_name in source.sheet_names():
            if config.sheet_name and sheet_name != config.sheet_name:
                continue
            found = True
            self._context.start_sheet(sheet_name)

            first_index = self._context.columns
            columns = self._observe(sheet_name, source.iter_columns(sheet_name))
            if self._mode is OutputMode.MAPPING:
                workbook[sheet_name] = self.build_mapping(
                    sheet_name, columns, first_index=first_index
                )
            elif self._mode is OutputMode.MATRIX:
                workbook[sheet_name] = self.build_matrix(sheet_name, columns)
            else:
                for _ in columns:
                    pass

            logger.debug("Processed sheet '%s' in %s mode", sheet_name, self._mode.value)

            if not config.all_sheets:
                break

        if not found:
            raise ConvertException(
                code=ErrorCode.E_SHEET_NOT_FOUND,
                message=f"could not find sheet by name of: {config.sheet_name}",
                sheet_name=config.sheet_name or None,
                stage="build",
            )
        return workbook

    def build_mapping(
        self,
        sheet_name: str,
        columns: Iterable[list[str]],
        first_index: int = 0,
    ) -> MappingTable:
        """Map each column's header (cell 0) to its remaining cells.

        A header-only column maps to an empty list; a repeated header
        replaces the earlier entry.  *first_index* is the run-wide index of
        the first column, used in error reports.

        Raises
        ------
        ConvertException
            ``E_SHAPE_EMPTY_COLUMN`` for a column with no cells.
        """
        table: MappingTable = {}
        for position, column in enumerate(columns):
            if len(column) < 1:
                index = first_index + position
                raise ConvertException(
                    code=ErrorCode.E_SHAPE_EMPTY_COLUMN,
                    message=(
                        "can't use Map mode with no title or values; "
                        f"col #: {index} sheet: {sheet_name}"
                    ),
                    sheet_name=sheet_name,
                    column_index=index,
                    stage="build",
                )
            header = column[0]
            if header in table:
                logger.debug("Sheet '%s': header %r repeated; last column wins", sheet_name, header)
            table[header] = list(column[1:])
        return table

    def build_matrix(
        self,
        sheet_name: str,
        columns: Iterable[list[str]],
    ) -> MatrixTable:
        """Collect every column verbatim, header included, without padding."""
        return [list(column) for column in columns]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _observe(
        self,
        sheet_name: str,
        columns: Iterable[list[str]],
    ) -> Iterable[list[str]]:
        """Pass columns through, recording each one before it is shaped."""
        for column in columns:
            self._reporter.observe_column(self._context, sheet_name, column)
            yield column
