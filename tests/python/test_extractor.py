#!/usr/bin/env python3
"""
Tests for the public extraction entry points.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from swift_diagnostics import extract, extract_to_dict
from swift_diagnostics.core import DiagnosticSeverity, ExtractionResult
from swift_diagnostics.parsers import SwiftDiagnosticExtractor


@pytest.fixture
def extractor():
    return SwiftDiagnosticExtractor()


def test_caret_example():
    result = extract("/a/b.swift:10:5: error: missing return\n    return\n    ^\n")
    assert list(result) == ["/a/b.swift"]
    (diag,) = result["/a/b.swift"]
    assert (diag.line, diag.start_column, diag.end_column) == (9, 4, 5)
    assert diag.severity == DiagnosticSeverity.ERROR
    assert diag.message == " missing return"


def test_header_only_example():
    result = extract("/a/b.swift:3:1: warning: unused variable 'x'\n")
    (diag,) = result["/a/b.swift"]
    assert diag.start_column == 0
    assert diag.end_column == 0
    assert diag.severity == DiagnosticSeverity.WARNING


@pytest.mark.parametrize("text", ["", "\n\n", "Compiling Demo\nLinking Demo\n", "a:b\n"])
def test_output_without_headers_is_empty(text):
    assert extract(text) == {}


def test_same_location_groups_in_input_order():
    text = (
        "/a/b.swift:5:1: error: first\n"
        "/other.swift:1:1: warning: elsewhere\n"
        "/a/b.swift:2:1: warning: second\n"
    )
    result = extract(text)
    assert list(result) == ["/a/b.swift", "/other.swift"]
    assert [d.message for d in result["/a/b.swift"]] == [" first", " second"]


def test_leading_noise_is_ignored():
    text = "Building: for debug\n/a.swift:1:1: error: real\n"
    result = extract(text)
    assert len(result["/a.swift"]) == 1


def test_malformed_block_does_not_affect_neighbours(extractor):
    text = (
        "/a.swift:1:1: error: before\n"
        "/a.swift:x:y: error: bad\n"
        "   ^\n"
        "/a.swift:3:1: note: after\n"
    )
    result = extractor.parse(text)
    assert [d.message for d in result.diagnostics["/a.swift"]] == [" before", " after"]
    assert len(result.failures) == 1
    assert result.failures[0].index == 1
    assert result.failures[0].header == "/a.swift:x:y: error: bad"


def test_only_malformed_block_yields_nothing():
    assert extract("/a.swift:x:y: error: bad") == {}


def test_trailing_block_without_newline_is_processed():
    result = extract("noise\n/a.swift:2:2: error: last\n  x\n  ^~")
    (diag,) = result["/a.swift"]
    assert diag.end_column - diag.start_column == 2


def test_crlf_output():
    result = extract("/a.swift:1:2: error: crlf\r\n  foo\r\n  ^^^\r\n")
    (diag,) = result["/a.swift"]
    assert diag.message == " crlf"
    assert diag.end_column == 4


def test_sample_build_output(extractor, sample_output):
    result = extractor.parse(sample_output)
    assert result.locations == ["/src/Demo/main.swift", "/src/Demo/util.swift", "Swift._cos"]
    assert len(result) == 4
    assert len(result.errors) == 2
    assert len(result.warnings) == 1
    assert len(result.infos) == 1
    assert result.has_errors
    assert result.failures == []

    note = result.diagnostics["/src/Demo/util.swift"][0]
    assert (note.start_column, note.end_column) == (11, 15)


def test_each_parse_returns_a_fresh_result(extractor):
    first = extractor.parse("/a.swift:1:1: error: one\n")
    second = extractor.parse("/b.swift:1:1: error: two\n")
    assert list(first.diagnostics) == ["/a.swift"]
    assert list(second.diagnostics) == ["/b.swift"]


def test_concurrent_extraction_with_disjoint_inputs(extractor):
    inputs = [f"/f{i}.swift:{i + 1}:1: error: e{i}\n" for i in range(20)]
    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(extractor.parse, inputs))
    for i, result in enumerate(results):
        assert isinstance(result, ExtractionResult)
        assert result.diagnostics[f"/f{i}.swift"][0].line == i


def test_extract_to_dict():
    data = extract_to_dict("/a.swift:2:3: warning: w\n  s\n  ^~\n")
    assert data == {
        "/a.swift": [
            {
                "location": "/a.swift",
                "line": 1,
                "start_column": 2,
                "end_column": 4,
                "severity": "warning",
                "message": " w",
            }
        ]
    }


@pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x85", " "])
def test_only_newline_separates_lines(separator):
    text = f"/a.swift:1:1: error: bad{separator}char\n  src\n  ^^\n"
    (diag,) = extract(text)["/a.swift"]
    assert diag.message == f" bad{separator}char"
    assert diag.end_column - diag.start_column == 2
