"""
Base extractor interface.

This module defines the protocol that diagnostic extractors implement.
"""

from typing import Protocol

from ..core.data_structures import ExtractionResult


class DiagnosticExtractor(Protocol):
    """Protocol defining the interface for build output extractors."""

    def parse(self, output: str) -> ExtractionResult:
        """Parse a complete build output snapshot into an ExtractionResult."""
        ...
