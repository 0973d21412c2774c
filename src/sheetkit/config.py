"""Configuration model for sheetkit.

Provides ``ConverterConfig`` with every conversion option and sensible
defaults.  Supports loading overrides from YAML or JSON files via the
``from_file()`` classmethod, and resolves the option flags into a single
``OutputMode`` / ``OutputFormat`` pair for the run.
"""

from __future__ import annotations

import json
import logging
import pathlib

import yaml
from pydantic import BaseModel, field_validator

from sheetkit.models import OutputFormat, OutputMode


class ConverterConfig(BaseModel):
    """All conversion options with sensible defaults.

    Override individual values via constructor kwargs or load a complete
    config from a file with ``ConverterConfig.from_file(path)``.
    """

    # --- Sheet scope ---
    all_sheets: bool = False
    sheet_name: str = ""

    # --- Shape ---
    no_headers: bool = False
    strip_headers: bool = False
    matrix: bool = False
    stats: bool = False

    # --- Output format ---
    json_output: bool = False
    literal_output: bool = False
    csv_output: bool = False

    # --- I/O ---
    input_path: str = ""
    output_path: str = ""

    # --- Rendering ---
    date_format: str = "%Y-%m-%d %H:%M:%S"
    csv_delimiter: str = ","
    json_indent: int | None = None

    # --- Logging ---
    log_level: str = "WARNING"

    @field_validator("csv_delimiter")
    @classmethod
    def _single_char_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("csv_delimiter must be a single character")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log_level '{value}'")
        return level

    # ------------------------------------------------------------------
    # Mode resolution
    # ------------------------------------------------------------------

    @property
    def forces_matrix(self) -> bool:
        """True when any option requires the matrix shape."""
        return self.no_headers or self.strip_headers or self.matrix or self.csv_output

    def resolve_mode(self) -> OutputMode:
        """Collapse the shape flags into exactly one ``OutputMode``.

        Priority: matrix-forcing options, then an explicit statistics
        request, then statistics as the default when no output format was
        requested, and finally the mapping shape.
        """
        if self.forces_matrix:
            return OutputMode.MATRIX
        if self.stats:
            return OutputMode.STATISTICS
        if self.resolve_format() is None:
            return OutputMode.STATISTICS
        return OutputMode.MAPPING

    def resolve_format(self) -> OutputFormat | None:
        """Return the requested serializer (first of JSON, literal, CSV)."""
        if self.json_output:
            return OutputFormat.JSON
        if self.literal_output:
            return OutputFormat.LITERAL
        if self.csv_output:
            return OutputFormat.CSV
        return None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path: str, **overrides: object) -> ConverterConfig:
        """Load configuration from a YAML or JSON file.

        File format is detected by extension: ``.yaml`` / ``.yml`` for YAML,
        ``.json`` for JSON.  Any keys present in the file override the
        corresponding defaults; keys not present retain their defaults.
        Keyword *overrides* are applied last.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the file extension is not recognized.
        """
        file_path = pathlib.Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = file_path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            with open(file_path) as fh:
                data = yaml.safe_load(fh)
        elif suffix == ".json":
            with open(file_path) as fh:
                data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping of options")

        data.update(overrides)
        return cls(**data)
