"""
Enums for the Swift diagnostics extractor.

This module contains the enumeration types used throughout the package.
"""

from enum import Enum
from pathlib import PurePath
from typing import Optional, Union


class DiagnosticSeverity(Enum):
    """Enumeration of diagnostic severity levels as shown by an editor."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def from_token(cls, token: str) -> "DiagnosticSeverity":
        """
        Map a compiler severity token to a severity.

        The compiler prints ``error``, ``warning`` and ``note``; notes are
        surfaced as informational. Any other token maps to INFO.
        """
        mapping = {"error": cls.ERROR, "warning": cls.WARNING, "note": cls.INFO}
        return mapping.get(token.strip(), cls.INFO)

    @classmethod
    def from_string(cls, severity: str) -> "DiagnosticSeverity":
        """Convert a user supplied severity name (error, warning, info) to enum value."""
        normalized = severity.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        if normalized == "note":
            return cls.INFO
        raise ValueError(f"Unsupported severity: {severity}")


class OutputFormat(Enum):
    """Export formats, valued by the file suffix they are written with."""

    JSON = "json"
    CSV = "csv"
    XML = "xml"

    @classmethod
    def from_string(cls, format_name: str) -> "OutputFormat":
        """Accept ``json``, ``.JSON`` and similar spellings."""
        try:
            return cls(format_name.strip().lstrip(".").lower())
        except ValueError:
            raise ValueError(f"Unsupported output format: {format_name}") from None

    @classmethod
    def from_path(cls, path: Union[str, PurePath]) -> Optional["OutputFormat"]:
        """Guess the format from a file suffix; None when the suffix is unknown."""
        suffix = PurePath(path).suffix
        if not suffix:
            return None
        try:
            return cls.from_string(suffix)
        except ValueError:
            return None

    @property
    def extension(self) -> str:
        return self.value
