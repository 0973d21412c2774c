"""SheetConverter -- orchestrator and public API for sheetkit.

Drives one conversion run:

1. Resolve the ``OutputMode`` and ``OutputFormat`` from the config.
2. Build per-sheet tables via :class:`ShapeBuilder`, counting every column
   on a fresh :class:`RunContext`.
3. Write the diagnostic summary line.
4. Render the primary output (statistics lines, JSON, literal, or CSV of
   the first sheet after transposition).

Rendering happens entirely in memory; the caller writes
``ConversionResult.output`` only once the run has succeeded.
"""

from __future__ import annotations

import logging
from typing import IO, TextIO

from sheetkit.config import ConverterConfig
from sheetkit.errors import ConvertException, ErrorCode
from sheetkit.models import (
    ConversionResult,
    MatrixTable,
    OutputFormat,
    OutputMode,
    ParserUsed,
    Workbook,
)
from sheetkit.parser_chain import ParserChain
from sheetkit.processors.serializers import (
    CSVSerializer,
    JSONSerializer,
    LiteralSerializer,
)
from sheetkit.processors.shape_builder import ShapeBuilder
from sheetkit.processors.transposer import transpose
from sheetkit.protocols import ColumnSource
from sheetkit.stats import RunContext, StatisticsReporter

logger = logging.getLogger("sheetkit")


class SheetConverter:
    """Converts the sheets of one workbook into a single output document.

    Parameters
    ----------
    config:
        Conversion configuration. Uses defaults when *None*.
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._config = config or ConverterConfig()

    @property
    def config(self) -> ConverterConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def convert_file(
        self,
        source: str | IO[bytes],
        diagnostics: TextIO | None = None,
    ) -> ConversionResult:
        """Open a workbook (path or binary stream) and convert it.

        The backend opened by the parser chain is always closed, including
        when the conversion fails.
        """
        backend, parser_used = ParserChain(self._config).open(source)
        try:
            return self.convert(backend, diagnostics=diagnostics, parser_used=parser_used)
        finally:
            backend.close()

    def convert(
        self,
        source: ColumnSource,
        diagnostics: TextIO | None = None,
        parser_used: ParserUsed | None = None,
    ) -> ConversionResult:
        """Convert the sheets of an already-open column source.

        Parameters
        ----------
        source:
            Any :class:`ColumnSource` backend.
        diagnostics:
            Stream for the summary line (``info: #sheets read: ...``).
            Nothing is written when *None*.
        parser_used:
            Recorded on the result when known.

        Returns
        -------
        ConversionResult
            Rendered output and run counts.

        Raises
        ------
        ConvertException
            Any fatal condition (empty column in mapping mode, unknown
            sheet, serialization failure, unreadable sheet).
        """
        config = self._config
        mode = config.resolve_mode()
        output_format = config.resolve_format()
        context = RunContext()

        builder = ShapeBuilder(config, context, mode)
        try:
            workbook = builder.build_workbook(source)
        except ConvertException as exc:
            # summary covers the sheets scanned before the miss
            if exc.code is ErrorCode.E_SHEET_NOT_FOUND:
                self._emit_summary(context, diagnostics)
            logger.error("Conversion failed: %s: %s", exc.code.value, exc.message)
            raise

        self._emit_summary(context, diagnostics)

        output = self._render(mode, output_format, workbook, context)
        logger.info(
            "Converted %d sheets (%d columns) in %s mode",
            context.sheets,
            context.columns,
            mode.value,
        )
        return ConversionResult(
            mode=mode,
            output_format=output_format,
            output=output,
            summary=context.summary(),
            parser_used=parser_used,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _render(
        self,
        mode: OutputMode,
        output_format: OutputFormat | None,
        workbook: Workbook,
        context: RunContext,
    ) -> str:
        config = self._config

        if mode is OutputMode.STATISTICS:
            return StatisticsReporter(config, mode).render(context)
        if output_format is OutputFormat.JSON:
            return JSONSerializer(config).render(workbook)
        if output_format is OutputFormat.LITERAL:
            return LiteralSerializer(config).render(workbook)
        if output_format is OutputFormat.CSV:
            return CSVSerializer(config).render(
                transpose(self._first_matrix(workbook), strip_header=config.strip_headers)
            )

        logger.info("No output format requested; %s tables not rendered", mode.value)
        return ""

    @staticmethod
    def _first_matrix(workbook: Workbook) -> MatrixTable:
        """The matrix of the first sheet in scope; CSV holds a single sheet."""
        if not workbook:
            return []
        names = list(workbook)
        if len(names) > 1:
            logger.warning(
                "CSV output holds one sheet; emitting '%s' and ignoring %d others",
                names[0],
                len(names) - 1,
            )
        matrix = workbook[names[0]]
        assert isinstance(matrix, list)
        return matrix

    @staticmethod
    def _emit_summary(context: RunContext, diagnostics: TextIO | None) -> None:
        if diagnostics is None:
            return
        print(StatisticsReporter.summary_line(context), file=diagnostics)
