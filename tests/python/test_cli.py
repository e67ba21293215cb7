#!/usr/bin/env python3
"""
Tests for the configuration model and the command-line interface.
"""

import json

import pytest
from pydantic import ValidationError

from swift_diagnostics.core import DiagnosticSeverity, OutputFormat
from swift_diagnostics.utils import DiagnosticsConfig
from swift_diagnostics.utils.cli import (
    EXIT_DIAGNOSTIC_ERRORS,
    EXIT_FAILURE,
    EXIT_OK,
    main_cli,
    parse_args,
)


# --- DiagnosticsConfig ---


def test_config_defaults():
    config = DiagnosticsConfig()
    assert config.filter_severities == []
    assert config.output_format == OutputFormat.JSON
    assert config.colorize is True
    assert config.concurrency == 4


def test_config_parses_strings():
    config = DiagnosticsConfig(filter_severities=["error", "note"], output_format="xml")
    assert config.filter_severities == [DiagnosticSeverity.ERROR, DiagnosticSeverity.INFO]
    assert config.output_format == OutputFormat.XML


@pytest.mark.parametrize(
    "kwargs",
    [
        {"location_pattern": "("},
        {"concurrency": 0},
        {"output_format": "yaml"},
        {"unknown_option": True},
    ],
)
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        DiagnosticsConfig(**kwargs)


def test_config_validates_assignment():
    config = DiagnosticsConfig()
    with pytest.raises(ValidationError):
        config.concurrency = 1000


# --- CLI ---


def test_parse_args_defaults(build_log):
    args = parse_args([str(build_log)])
    assert args.file_paths == [build_log]
    assert args.output_format == "json"
    assert args.filter is None
    assert not args.fail_on_error


def test_main_cli_exports_json(build_log, tmp_path, capsys):
    code = main_cli(
        [str(build_log), "--output-dir", str(tmp_path), "--no-color", "--quiet"]
    )
    assert code == EXIT_OK

    data = json.loads((tmp_path / "diagnostics.json").read_text(encoding="utf-8"))
    assert sum(len(v) for v in data["diagnostics"].values()) == 4
    assert "Extracted 4 diagnostic(s)." in capsys.readouterr().out


def test_main_cli_filter_and_format(build_log, tmp_path):
    code = main_cli(
        [
            str(build_log),
            "--output-dir", str(tmp_path),
            "--output-file", "warnings",
            "--output-format", "csv",
            "--filter", "warning",
            "--no-color",
            "--quiet",
        ]
    )
    assert code == EXIT_OK
    lines = (tmp_path / "warnings.csv").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2


def test_main_cli_fail_on_error(build_log, tmp_path):
    code = main_cli(
        [str(build_log), "--output-dir", str(tmp_path), "--fail-on-error", "--no-color", "--quiet"]
    )
    assert code == EXIT_DIAGNOSTIC_ERRORS


def test_main_cli_missing_log(tmp_path):
    code = main_cli([str(tmp_path / "missing.log"), "--output-dir", str(tmp_path), "--quiet"])
    assert code == EXIT_FAILURE


def test_main_cli_invalid_pattern(build_log, tmp_path):
    code = main_cli(
        [str(build_log), "--output-dir", str(tmp_path), "--location-pattern", "(", "--quiet"]
    )
    assert code == EXIT_FAILURE


def test_main_cli_directory_as_log(tmp_path):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    code = main_cli([str(log_dir), "--output-dir", str(tmp_path), "--quiet"])
    assert code == EXIT_FAILURE
