"""Data models, enumerations, and table shapes for sheetkit.

Table shapes are plain Python containers (aliases below) so they can be
handed straight to ``json``, ``repr`` and ``csv``.  Run-level results are
Pydantic models, matching the rest of the package.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Table shapes
# ---------------------------------------------------------------------------

Column = list[str]
MappingTable = dict[str, list[str]]
MatrixTable = list[list[str]]
Grid = list[list[str]]
Workbook = dict[str, MappingTable | MatrixTable]


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class OutputMode(str, Enum):
    """The single table shape (or statistics report) produced by a run."""

    MAPPING = "mapping"
    MATRIX = "matrix"
    STATISTICS = "statistics"


class OutputFormat(str, Enum):
    """Serializer selected for the primary output."""

    JSON = "json"
    LITERAL = "literal"
    CSV = "csv"


class ParserUsed(str, Enum):
    """Which parser in the fallback chain opened the workbook."""

    OPENPYXL = "openpyxl"
    PANDAS_FALLBACK = "pandas_fallback"


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class RunSummary(BaseModel):
    """Counts accumulated over one run, as reported on the diagnostic line."""

    sheets: int
    columns: int
    elements: int
    max_rows: int
    last_column_rows: int
    sheet_names: list[str]


class ConversionResult(BaseModel):
    """Final result of a conversion run.

    ``output`` holds the fully rendered primary output; nothing is written
    to the output sink until the whole run has succeeded.
    """

    mode: OutputMode
    output_format: OutputFormat | None = None
    output: str
    summary: RunSummary
    parser_used: ParserUsed | None = None
