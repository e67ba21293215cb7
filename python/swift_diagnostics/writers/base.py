"""
Base writer interface.

Every writer states the format it produces so the factory can be built from
the writer classes themselves.
"""

from pathlib import Path
from typing import ClassVar, Protocol

from ..core.data_structures import ExtractionResult
from ..core.enums import OutputFormat


class OutputWriter(Protocol):
    """An exporter for one OutputFormat."""

    output_format: ClassVar[OutputFormat]

    def write(self, result: ExtractionResult, output_path: Path) -> None:
        """Write ``result`` to ``output_path``, raising ExportError on I/O failure."""
        ...
