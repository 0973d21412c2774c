"""Tests for ConverterConfig defaults, mode resolution, and from_file()."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from sheetkit.config import ConverterConfig
from sheetkit.models import OutputFormat, OutputMode


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestConfigDefaults:
    """ConverterConfig() with no args selects the first sheet, statistics mode."""

    def test_sheet_scope(self, default_config: ConverterConfig) -> None:
        assert default_config.all_sheets is False
        assert default_config.sheet_name == ""

    def test_shape_flags_off(self, default_config: ConverterConfig) -> None:
        assert default_config.no_headers is False
        assert default_config.strip_headers is False
        assert default_config.matrix is False
        assert default_config.stats is False

    def test_no_output_format(self, default_config: ConverterConfig) -> None:
        assert default_config.resolve_format() is None

    def test_io_defaults_to_std_streams(self, default_config: ConverterConfig) -> None:
        assert default_config.input_path == ""
        assert default_config.output_path == ""

    def test_rendering_defaults(self, default_config: ConverterConfig) -> None:
        assert default_config.date_format == "%Y-%m-%d %H:%M:%S"
        assert default_config.csv_delimiter == ","
        assert default_config.json_indent is None

    def test_log_level(self, default_config: ConverterConfig) -> None:
        assert default_config.log_level == "WARNING"

    def test_default_mode_is_statistics(self, default_config: ConverterConfig) -> None:
        assert default_config.resolve_mode() is OutputMode.STATISTICS


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestConfigValidation:
    def test_multi_char_delimiter_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConverterConfig(csv_delimiter=";;")

    def test_tab_delimiter_accepted(self) -> None:
        assert ConverterConfig(csv_delimiter="\t").csv_delimiter == "\t"

    def test_log_level_uppercased(self) -> None:
        assert ConverterConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConverterConfig(log_level="LOUD")


# ---------------------------------------------------------------------------
# Mode resolution
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestResolveMode:
    @pytest.mark.parametrize(
        "flags, expected",
        [
            ({"json_output": True}, OutputMode.MAPPING),
            ({"literal_output": True}, OutputMode.MAPPING),
            ({"json_output": True, "matrix": True}, OutputMode.MATRIX),
            ({"json_output": True, "strip_headers": True}, OutputMode.MATRIX),
            ({"json_output": True, "no_headers": True}, OutputMode.MATRIX),
            ({"csv_output": True}, OutputMode.MATRIX),
            ({"json_output": True, "stats": True}, OutputMode.STATISTICS),
            ({"stats": True, "csv_output": True}, OutputMode.MATRIX),
            ({"matrix": True}, OutputMode.MATRIX),
            ({}, OutputMode.STATISTICS),
            ({"all_sheets": True, "sheet_name": "X"}, OutputMode.STATISTICS),
        ],
    )
    def test_priority(self, flags: dict, expected: OutputMode) -> None:
        assert ConverterConfig(**flags).resolve_mode() is expected

    def test_forces_matrix(self) -> None:
        assert ConverterConfig(csv_output=True).forces_matrix is True
        assert ConverterConfig(json_output=True).forces_matrix is False


@pytest.mark.unit
class TestResolveFormat:
    @pytest.mark.parametrize(
        "flags, expected",
        [
            ({"json_output": True}, OutputFormat.JSON),
            ({"literal_output": True}, OutputFormat.LITERAL),
            ({"csv_output": True}, OutputFormat.CSV),
            ({"json_output": True, "csv_output": True}, OutputFormat.JSON),
            ({"literal_output": True, "csv_output": True}, OutputFormat.LITERAL),
            ({"stats": True}, None),
        ],
    )
    def test_first_requested_wins(self, flags: dict, expected: OutputFormat | None) -> None:
        assert ConverterConfig(**flags).resolve_format() is expected


# ---------------------------------------------------------------------------
# from_file
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestFromFile:
    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"json_output": True, "sheet_name": "Data"}))
        config = ConverterConfig.from_file(str(path))
        assert config.json_output is True
        assert config.sheet_name == "Data"
        assert config.all_sheets is False

    def test_yml_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yml"
        path.write_text("csv_output: true\ncsv_delimiter: ';'\n")
        config = ConverterConfig.from_file(str(path))
        assert config.csv_output is True
        assert config.csv_delimiter == ";"

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"literal_output": True, "json_indent": 2}))
        config = ConverterConfig.from_file(str(path))
        assert config.literal_output is True
        assert config.json_indent == 2

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ConverterConfig.from_file(str(path)) == ConverterConfig()

    def test_overrides_win(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("sheet_name: FromFile\nstats: true\n")
        config = ConverterConfig.from_file(str(path), sheet_name="FromFlag")
        assert config.sheet_name == "FromFlag"
        assert config.stats is True

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConverterConfig.from_file(str(tmp_path / "nope.yaml"))

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("stats = true\n")
        with pytest.raises(ValueError, match="Unsupported config file extension"):
            ConverterConfig.from_file(str(path))

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- json_output\n- stats\n")
        with pytest.raises(ValueError, match="mapping"):
            ConverterConfig.from_file(str(path))
