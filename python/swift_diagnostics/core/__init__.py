"""
Core module for the Swift diagnostics extractor.

This module contains the fundamental data structures, enums and errors used
throughout the package.
"""

from .enums import DiagnosticSeverity, OutputFormat
from .data_structures import (
    BlockFailure,
    BlockResult,
    Diagnostic,
    DiagnosticBlock,
    DiagnosticsByLocation,
    ExtractionResult,
    SourceRange,
    is_file_location,
)
from .buffer import RawOutputBuffer
from .exceptions import (
    BuildLogNotFoundError,
    BuildLogReadError,
    BuildSessionError,
    ExportError,
    SwiftDiagnosticsError,
)

__all__ = [
    "DiagnosticSeverity",
    "OutputFormat",
    "BlockFailure",
    "BlockResult",
    "Diagnostic",
    "DiagnosticBlock",
    "DiagnosticsByLocation",
    "ExtractionResult",
    "SourceRange",
    "is_file_location",
    "RawOutputBuffer",
    "BuildLogNotFoundError",
    "BuildLogReadError",
    "BuildSessionError",
    "ExportError",
    "SwiftDiagnosticsError",
]
