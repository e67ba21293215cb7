"""
Data structures for the Swift diagnostics extractor.

This module contains the value types produced while turning raw build output
into editor diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath, PureWindowsPath
from typing import Any, Dict, List, Tuple, Union

from .enums import DiagnosticSeverity


@dataclass(frozen=True)
class SourceRange:
    """A single-line, 0-based range. ``end_column`` is exclusive."""

    line: int
    start_column: int
    end_column: int

    def __post_init__(self) -> None:
        if self.end_column < self.start_column:
            raise ValueError(
                f"end column {self.end_column} precedes start column {self.start_column}"
            )

    @property
    def width(self) -> int:
        return self.end_column - self.start_column

    def to_dict(self) -> Dict[str, int]:
        return {
            "line": self.line,
            "start_column": self.start_column,
            "end_column": self.end_column,
        }


@dataclass(frozen=True)
class Diagnostic:
    """Data class representing one compiler diagnostic ready for display."""

    location: str
    range: SourceRange
    severity: DiagnosticSeverity
    message: str

    @property
    def line(self) -> int:
        return self.range.line

    @property
    def start_column(self) -> int:
        return self.range.start_column

    @property
    def end_column(self) -> int:
        return self.range.end_column

    @property
    def is_file(self) -> bool:
        """Whether the location names an absolute file rather than a pseudo-source."""
        return is_file_location(self.location)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Diagnostic to a dictionary."""
        return {
            "location": self.location,
            **self.range.to_dict(),
            "severity": self.severity.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class DiagnosticBlock:
    """The raw lines of one diagnostic occurrence: a header plus context lines."""

    index: int
    lines: Tuple[str, ...]

    @property
    def header(self) -> str:
        return self.lines[0]

    @property
    def annotation(self) -> str | None:
        """The third line, which sizes the underline, when present."""
        return self.lines[2] if len(self.lines) > 2 else None


@dataclass(frozen=True)
class BlockFailure:
    """A block that could not be turned into a Diagnostic."""

    index: int
    header: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "header": self.header, "reason": self.reason}


BlockResult = Union[Diagnostic, BlockFailure]
DiagnosticsByLocation = Dict[str, List[Diagnostic]]


@dataclass
class ExtractionResult:
    """Data class holding everything one extraction pass produced."""

    diagnostics: DiagnosticsByLocation = field(default_factory=dict)
    failures: List[BlockFailure] = field(default_factory=list)

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic under its location, keeping encounter order."""
        self.diagnostics.setdefault(diagnostic.location, []).append(diagnostic)

    def __iter__(self):
        for diagnostics in self.diagnostics.values():
            yield from diagnostics

    def __len__(self) -> int:
        return sum(len(diagnostics) for diagnostics in self.diagnostics.values())

    @property
    def locations(self) -> List[str]:
        return list(self.diagnostics)

    def get_by_severity(self, severity: DiagnosticSeverity) -> List[Diagnostic]:
        """Get all diagnostics with the specified severity."""
        return [diag for diag in self if diag.severity == severity]

    @property
    def errors(self) -> List[Diagnostic]:
        return self.get_by_severity(DiagnosticSeverity.ERROR)

    @property
    def warnings(self) -> List[Diagnostic]:
        return self.get_by_severity(DiagnosticSeverity.WARNING)

    @property
    def infos(self) -> List[Diagnostic]:
        return self.get_by_severity(DiagnosticSeverity.INFO)

    @property
    def has_errors(self) -> bool:
        return any(diag.severity == DiagnosticSeverity.ERROR for diag in self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the ExtractionResult to a dictionary."""
        return {
            "diagnostics": {
                location: [diag.to_dict() for diag in diagnostics]
                for location, diagnostics in self.diagnostics.items()
            },
            "skipped_blocks": [failure.to_dict() for failure in self.failures],
        }


def is_file_location(location: str) -> bool:
    """Return True when ``location`` is an absolute POSIX or Windows path."""
    if not location or location.startswith("<"):
        return False
    return PurePosixPath(location).is_absolute() or PureWindowsPath(location).is_absolute()
