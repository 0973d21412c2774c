"""Command-line interface for sheetkit.

Usage:
    sheetkit -i book.xlsx --json
    sheetkit -i book.xlsx --all --literal -o book.txt
    sheetkit -i book.xlsx --sheet Prices --striptitles --csv
    sheetkit --stats < book.xlsx

Exit status is 0 on success and 1 on any fatal error; fatal errors are
reported on stderr as ``err: <message>`` and leave the primary output
empty.
"""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from typing import IO, TextIO

import yaml

from sheetkit.config import ConverterConfig
from sheetkit.converter import SheetConverter
from sheetkit.errors import ConvertException, ErrorCode

logger = logging.getLogger("sheetkit")

# argparse dest -> ConverterConfig field
_FLAG_FIELDS = {
    "all_sheets": "all_sheets",
    "sheet": "sheet_name",
    "notitles": "no_headers",
    "striptitles": "strip_headers",
    "table": "matrix",
    "stats": "stats",
    "json": "json_output",
    "literal": "literal_output",
    "csv": "csv_output",
    "input": "input_path",
    "output": "output_path",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetkit",
        description="Convert spreadsheet sheets to JSON, Python literals, CSV, or statistics.",
    )
    parser.add_argument(
        "--all", dest="all_sheets", action="store_true", default=None,
        help="Process all sheets",
    )
    parser.add_argument(
        "--sheet", default=None,
        help="Excel sheet to search; empty uses first sheet in file",
    )
    parser.add_argument(
        "--notitles", action="store_true", default=None,
        help="Sheet does not have column names as row 0; forces matrix mode",
    )
    parser.add_argument(
        "--striptitles", action="store_true", default=None,
        help="Column names exist and should be elided from CSV output; forces matrix mode",
    )
    parser.add_argument(
        "--table", action="store_true", default=None,
        help="Output should be a 2D matrix rather than a header-keyed object",
    )
    parser.add_argument(
        "--stats", action="store_true", default=None,
        help="Print sheet statistics",
    )
    parser.add_argument(
        "--json", action="store_true", default=None,
        help="Output format should be JSON",
    )
    parser.add_argument(
        "--literal", "--go", dest="literal", action="store_true", default=None,
        help="Output format should be in Python literal syntax",
    )
    parser.add_argument(
        "--csv", action="store_true", default=None,
        help="Output format should be CSV; implies matrix mode",
    )
    parser.add_argument(
        "-i", "--input", default=None,
        help="Excel file to read from; default stdin",
    )
    parser.add_argument(
        "-o", "--output", default=None,
        help="Output file to write to; default stdout",
    )
    parser.add_argument(
        "--config", default=None,
        help="YAML or JSON file with option defaults; flags override it",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def load_config(args: argparse.Namespace) -> ConverterConfig:
    """Merge the optional config file with the flags that were given."""
    overrides = {
        field: getattr(args, dest)
        for dest, field in _FLAG_FIELDS.items()
        if getattr(args, dest) is not None
    }
    if args.verbose:
        overrides["log_level"] = "DEBUG"

    try:
        if args.config:
            return ConverterConfig.from_file(args.config, **overrides)
        return ConverterConfig(**overrides)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConvertException(
            code=ErrorCode.E_CONFIG_INVALID,
            message=f"could not load configuration -> {exc}",
            stage="config",
        ) from exc


def main(
    argv: list[str] | None = None,
    stdin: IO[bytes] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run one conversion and return the process exit status."""
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
        logging.basicConfig(
            level=config.log_level,
            stream=stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
        logger.debug("Resolved options: %s", config.model_dump())
        _run(config, stdin, stdout, stderr)
    except ConvertException as exc:
        print(f"err: {exc.message}", file=stderr)
        return 1
    return 0


def _run(
    config: ConverterConfig,
    stdin: IO[bytes],
    stdout: TextIO,
    stderr: TextIO,
) -> None:
    with ExitStack() as stack:
        in_stream = stdin
        if config.input_path:
            try:
                in_stream = stack.enter_context(open(config.input_path, "rb"))
            except OSError as exc:
                raise ConvertException(
                    code=ErrorCode.E_IO_INPUT,
                    message=f"could not open input file -> {exc}",
                    stage="io",
                ) from exc

        out_stream = stdout
        if config.output_path:
            try:
                out_stream = stack.enter_context(
                    open(config.output_path, "w", encoding="utf-8", newline="")
                )
            except OSError as exc:
                raise ConvertException(
                    code=ErrorCode.E_IO_OUTPUT,
                    message=f"could not create output file -> {exc}",
                    stage="io",
                ) from exc

        result = SheetConverter(config).convert_file(in_stream, diagnostics=stderr)

        try:
            out_stream.write(result.output)
            out_stream.flush()
        except UnicodeEncodeError as exc:
            raise ConvertException(
                code=ErrorCode.E_SERIALIZE,
                message=f"could not encode output -> {exc}",
                stage="serialize",
            ) from exc
        except OSError as exc:
            raise ConvertException(
                code=ErrorCode.E_IO_OUTPUT,
                message=f"could not write output -> {exc}",
                stage="io",
            ) from exc


if __name__ == "__main__":
    sys.exit(main())
