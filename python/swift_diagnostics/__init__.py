"""
Swift Build Diagnostics

This package turns the raw output of ``swift build`` into editor diagnostics:
typed, ranged messages grouped by the file (or compiler pseudo-source) they
refer to.

Features:
- Tolerant extraction of multi-line diagnostic blocks from noisy output
- Caret/underline width taken from the annotation line
- Build sessions that accumulate output and publish once per build
- An editor-style diagnostic collection with URI canonicalization
- Export to JSON, CSV or XML and colorized console output
"""

from typing import Any, Dict, List

from .core import (
    BlockFailure,
    Diagnostic,
    DiagnosticBlock,
    DiagnosticSeverity,
    DiagnosticsByLocation,
    ExtractionResult,
    OutputFormat,
    RawOutputBuffer,
    SourceRange,
    SwiftDiagnosticsError,
)

from .parsers import SwiftDiagnosticExtractor, extract

from .writers import OutputWriter, WriterFactory

from .widgets import (
    BuildOutcome,
    BuildSession,
    ConsoleFormatterWidget,
    DiagnosticCollection,
    DiagnosticProcessorWidget,
    DiagnosticsWidget,
)

from .utils import DiagnosticsConfig, setup_logging
from .utils.cli import main_cli, parse_args


def extract_to_dict(output: str) -> Dict[str, List[Dict[str, Any]]]:
    """
    Extract diagnostics and return plain dictionaries keyed by location.

    Args:
        output: The complete build output of one invocation

    Returns:
        Mapping of location to a list of diagnostic dictionaries
    """
    return {
        location: [diag.to_dict() for diag in diagnostics]
        for location, diagnostics in extract(output).items()
    }


__all__ = [
    "BlockFailure",
    "Diagnostic",
    "DiagnosticBlock",
    "DiagnosticSeverity",
    "DiagnosticsByLocation",
    "ExtractionResult",
    "OutputFormat",
    "RawOutputBuffer",
    "SourceRange",
    "SwiftDiagnosticsError",
    "SwiftDiagnosticExtractor",
    "extract",
    "extract_to_dict",
    "OutputWriter",
    "WriterFactory",
    "BuildOutcome",
    "BuildSession",
    "ConsoleFormatterWidget",
    "DiagnosticCollection",
    "DiagnosticProcessorWidget",
    "DiagnosticsWidget",
    "DiagnosticsConfig",
    "main_cli",
    "parse_args",
    "setup_logging",
]
