"""Serializers for the primary output.

``JSONSerializer`` and ``LiteralSerializer`` render a per-sheet collection
of Mapping or Matrix tables; ``CSVSerializer`` renders the rectangular grid
produced by :func:`~sheetkit.processors.transposer.transpose`.  Every
serializer returns text and checks that it can be encoded as UTF-8, so an
encoding problem fails the run before anything reaches the output sink.
"""

from __future__ import annotations

import csv
import io
import json
import logging

from sheetkit.config import ConverterConfig
from sheetkit.errors import ConvertException, ErrorCode
from sheetkit.models import Grid, OutputFormat, Workbook

logger = logging.getLogger("sheetkit")


def _check_encodable(text: str, output_format: OutputFormat) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ConvertException(
            code=ErrorCode.E_SERIALIZE,
            message=f"could not {output_format.value.upper()} encode -> {exc}",
            stage="serialize",
        ) from exc
    return text


class JSONSerializer:
    """Render tables as JSON; all cell values stay strings."""

    output_format = OutputFormat.JSON

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._indent = config.json_indent if config else None

    def render(self, workbook: Workbook) -> str:
        try:
            text = json.dumps(workbook, ensure_ascii=False, indent=self._indent)
        except (TypeError, ValueError) as exc:
            raise ConvertException(
                code=ErrorCode.E_SERIALIZE,
                message=f"could not JSON encode -> {exc}",
                stage="serialize",
            ) from exc
        return _check_encodable(text + "\n", self.output_format)


class LiteralSerializer:
    """Render tables in Python literal syntax, readable by ``ast.literal_eval``."""

    output_format = OutputFormat.LITERAL

    def __init__(self, config: ConverterConfig | None = None) -> None:
        pass

    def render(self, workbook: Workbook) -> str:
        return _check_encodable(repr(workbook) + "\n", self.output_format)


class CSVSerializer:
    """Render a rectangular grid as delimited records.

    Uses minimal quoting: fields containing the delimiter, the quote
    character, ``\\r`` or ``\\n`` are quoted, embedded quotes are doubled.
    Records end with ``\\n``.
    """

    output_format = OutputFormat.CSV

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._delimiter = config.csv_delimiter if config else ","

    def render(self, grid: Grid) -> str:
        buffer = io.StringIO()
        # QUOTE_MINIMAL only quotes line-break characters found in the
        # terminator, so records are written with "\r\n" and rewritten to "\n".
        writer = csv.writer(
            buffer,
            delimiter=self._delimiter,
            lineterminator="\r\n",
            quoting=csv.QUOTE_MINIMAL,
        )
        records: list[str] = []
        try:
            for row in grid:
                writer.writerow(row)
                records.append(buffer.getvalue()[:-2] + "\n")
                buffer.seek(0)
                buffer.truncate()
        except csv.Error as exc:
            raise ConvertException(
                code=ErrorCode.E_SERIALIZE,
                message=f"could not write output CSV -> {exc}",
                stage="serialize",
            ) from exc
        logger.debug("Rendered %d CSV records", len(records))
        return _check_encodable("".join(records), self.output_format)
