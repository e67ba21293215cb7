#!/usr/bin/env python3
"""
Tests for the core enums, data structures and the raw output buffer.
"""

import pytest

from swift_diagnostics.core import (
    BuildLogNotFoundError,
    Diagnostic,
    DiagnosticSeverity,
    ExtractionResult,
    OutputFormat,
    RawOutputBuffer,
    SourceRange,
    is_file_location,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("error", DiagnosticSeverity.ERROR),
        ("warning", DiagnosticSeverity.WARNING),
        ("note", DiagnosticSeverity.INFO),
        (" error ", DiagnosticSeverity.ERROR),
        ("remark", DiagnosticSeverity.INFO),
        ("", DiagnosticSeverity.INFO),
    ],
)
def test_severity_from_token(token, expected):
    assert DiagnosticSeverity.from_token(token) == expected


def test_severity_from_string():
    assert DiagnosticSeverity.from_string("Warning") == DiagnosticSeverity.WARNING
    assert DiagnosticSeverity.from_string("note") == DiagnosticSeverity.INFO
    with pytest.raises(ValueError):
        DiagnosticSeverity.from_string("fatal")


def test_output_format_from_string():
    assert OutputFormat.from_string("csv") == OutputFormat.CSV
    assert OutputFormat.from_string(".JSON") == OutputFormat.JSON
    assert OutputFormat.XML.extension == "xml"
    with pytest.raises(ValueError):
        OutputFormat.from_string("yaml")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("out/diagnostics.csv", OutputFormat.CSV),
        ("report.Xml", OutputFormat.XML),
        ("build.log", None),
        ("diagnostics", None),
    ],
)
def test_output_format_from_path(path, expected):
    assert OutputFormat.from_path(path) is expected


def test_source_range_rejects_inverted_columns():
    with pytest.raises(ValueError):
        SourceRange(line=0, start_column=5, end_column=4)


@pytest.mark.parametrize(
    "location, expected",
    [
        ("/abs/File.swift", True),
        ("C:\\proj\\File.swift", True),
        ("Sources/File.swift", False),
        ("Swift._cos", False),
        ("<unknown>", False),
        ("", False),
    ],
)
def test_is_file_location(location, expected):
    assert is_file_location(location) is expected


def test_extraction_result_grouping_and_dict():
    result = ExtractionResult()
    first = Diagnostic("/a.swift", SourceRange(0, 0, 1), DiagnosticSeverity.ERROR, " a")
    second = Diagnostic("/a.swift", SourceRange(1, 0, 0), DiagnosticSeverity.INFO, " b")
    result.add(first)
    result.add(second)

    assert result.diagnostics == {"/a.swift": [first, second]}
    assert list(result) == [first, second]
    assert result.to_dict()["diagnostics"]["/a.swift"][1]["severity"] == "info"
    assert result.to_dict()["skipped_blocks"] == []


def test_buffer_accumulates_text_and_bytes():
    buffer = RawOutputBuffer()
    assert not buffer
    buffer.append("/a.swift:1:1: ")
    buffer.append(b"error: caf\xc3\xa9\n")
    assert buffer.snapshot() == "/a.swift:1:1: error: caf\u00e9\n"
    assert len(buffer) == len(buffer.snapshot())


def test_buffer_snapshot_is_not_affected_by_later_appends():
    buffer = RawOutputBuffer()
    buffer.append("one\n")
    snapshot = buffer.snapshot()
    buffer.append("two\n")
    assert snapshot == "one\n"
    assert buffer.snapshot() == "one\ntwo\n"


def test_buffer_reset():
    buffer = RawOutputBuffer()
    buffer.append(b"\xff")
    assert buffer.snapshot() == "\ufffd"
    buffer.reset()
    assert buffer.snapshot() == ""
    assert len(buffer) == 0


def test_error_to_dict(tmp_path):
    error = BuildLogNotFoundError(tmp_path / "missing.log")
    data = error.to_dict()
    assert data["error_type"] == "BuildLogNotFoundError"
    assert data["error_code"] == "BUILDLOGNOTFOUNDERROR"
    assert data["context"]["path"].endswith("missing.log")
