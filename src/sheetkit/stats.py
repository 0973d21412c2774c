"""Run context and statistics reporting for sheetkit.

``RunContext`` carries the running counters of one conversion run and is
threaded explicitly through the shape builder and the reporter, so repeated
runs in the same process never share state.  ``StatisticsReporter`` turns
those counters into the diagnostic summary line and, in statistics mode,
the per-column description lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sheetkit.config import ConverterConfig
from sheetkit.models import OutputMode, RunSummary

logger = logging.getLogger("sheetkit")


@dataclass
class RunContext:
    """Counters accumulated while columns are read."""

    sheets: int = 0
    columns: int = 0
    elements: int = 0
    last_column_rows: int = 0
    max_rows: int = 0
    sheet_names: list[str] = field(default_factory=list)
    column_lines: list[str] = field(default_factory=list)

    def start_sheet(self, sheet_name: str) -> None:
        self.sheets += 1
        self.sheet_names.append(sheet_name)

    def record_column(self, column: list[str]) -> int:
        """Count *column* and return its run-wide (0-based) index."""
        index = self.columns
        self.columns += 1
        self.elements += len(column)
        self.last_column_rows = len(column)
        self.max_rows = max(self.max_rows, len(column))
        return index

    def summary(self) -> RunSummary:
        return RunSummary(
            sheets=self.sheets,
            columns=self.columns,
            elements=self.elements,
            max_rows=self.max_rows,
            last_column_rows=self.last_column_rows,
            sheet_names=list(self.sheet_names),
        )


class StatisticsReporter:
    """Observes the column stream and renders descriptive counts.

    Never touches table state: it only reads columns and writes to the
    ``RunContext`` it is handed.

    Parameters
    ----------
    config:
        Conversion configuration; ``no_headers`` disables per-column lines.
    mode:
        The resolved output mode.  Per-column lines are only produced in
        ``OutputMode.STATISTICS``.
    """

    def __init__(self, config: ConverterConfig, mode: OutputMode) -> None:
        self._config = config
        self._mode = mode

    def observe_column(
        self,
        context: RunContext,
        sheet_name: str,
        column: list[str],
    ) -> int:
        """Record *column* on *context* and return its run-wide index."""
        index = context.record_column(column)

        if self._mode is OutputMode.STATISTICS and not self._config.no_headers:
            if column and column[0].strip():
                context.column_lines.append(
                    self.column_line(column[0], index, len(column))
                )
            else:
                logger.debug(
                    "Sheet '%s' col#%d has no header; no column line",
                    sheet_name,
                    index,
                )
        return index

    @staticmethod
    def column_line(name: str, index: int, rows: int) -> str:
        return f'Column name: "{name}" at col# {index} with {rows} rows'

    @staticmethod
    def summary_line(context: RunContext) -> str:
        """The always-on diagnostic line.

        ``#nrows`` is the longest column seen, not the length of the last
        column read.
        """
        return (
            f"info: #sheets read: {context.sheets} #cols: {context.columns} "
            f"#elements: {context.elements} #nrows: {context.max_rows}"
        )

    def render(self, context: RunContext) -> str:
        """Primary output of a statistics run: one line per named column."""
        if not context.column_lines:
            return ""
        return "\n".join(context.column_lines) + "\n"
