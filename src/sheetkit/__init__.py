"""sheetkit -- spreadsheet to JSON / literal / CSV / statistics converter.

Public API exports for configuration, models, errors, the column-source
protocol and backends, the table processors, and the ``SheetConverter``
orchestrator.
"""

from sheetkit.backends import OpenpyxlColumnSource, PandasColumnSource
from sheetkit.config import ConverterConfig
from sheetkit.converter import SheetConverter
from sheetkit.errors import ConvertError, ConvertException, ErrorCode
from sheetkit.models import (
    ConversionResult,
    Grid,
    MappingTable,
    MatrixTable,
    OutputFormat,
    OutputMode,
    ParserUsed,
    RunSummary,
    Workbook,
)
from sheetkit.parser_chain import ParserChain
from sheetkit.processors import (
    CSVSerializer,
    JSONSerializer,
    LiteralSerializer,
    ShapeBuilder,
    transpose,
)
from sheetkit.protocols import ColumnSource
from sheetkit.stats import RunContext, StatisticsReporter

__all__ = [
    # Enums
    "OutputMode",
    "OutputFormat",
    "ParserUsed",
    # Table shapes
    "MappingTable",
    "MatrixTable",
    "Grid",
    "Workbook",
    # Results
    "RunSummary",
    "ConversionResult",
    # Orchestrator
    "SheetConverter",
    # Processors
    "ShapeBuilder",
    "transpose",
    "JSONSerializer",
    "LiteralSerializer",
    "CSVSerializer",
    # Statistics
    "RunContext",
    "StatisticsReporter",
    # Parser / backends
    "ParserChain",
    "OpenpyxlColumnSource",
    "PandasColumnSource",
    # Errors
    "ErrorCode",
    "ConvertError",
    "ConvertException",
    # Config
    "ConverterConfig",
    # Protocols
    "ColumnSource",
]
