"""
Exception types for the Swift diagnostics package.

The extractor itself never raises on bad compiler output; these cover the
surrounding file, export and session handling.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional


class SwiftDiagnosticsError(Exception):
    """Base exception for all package errors, with structured context."""

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        original_error: Optional[Exception] = None,
        **context: Any,
    ):
        super().__init__(message)
        self.error_code = error_code or self.__class__.__name__.upper()
        self.original_error = original_error
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": str(self),
            "context": {key: str(value) for key, value in self.context.items()},
            "original_error": str(self.original_error) if self.original_error else None,
        }


class BuildLogReadError(SwiftDiagnosticsError):
    """Raised when a build log exists but cannot be read, e.g. a directory."""

    def __init__(
        self,
        path: Path,
        original_error: Optional[Exception] = None,
        message: Optional[str] = None,
    ):
        reason = getattr(original_error, "strerror", None) or original_error
        super().__init__(
            message or f"Cannot read build log {path}: {reason}",
            original_error=original_error,
            path=path,
        )
        self.path = path


class BuildLogNotFoundError(BuildLogReadError):
    """Raised when a build log file does not exist."""

    def __init__(self, path: Path, original_error: Optional[Exception] = None):
        super().__init__(path, original_error, message=f"Build log not found: {path}")


class ExportError(SwiftDiagnosticsError):
    """Raised when diagnostics cannot be written to the requested destination."""


class BuildSessionError(SwiftDiagnosticsError):
    """Raised when a build session is driven out of order."""
