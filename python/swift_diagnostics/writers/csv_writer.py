"""
CSV output writer.

This module provides functionality to write extracted diagnostics to CSV format.
"""

import csv
from pathlib import Path

from loguru import logger

from ..core.data_structures import ExtractionResult
from ..core.enums import OutputFormat
from ..core.exceptions import ExportError

FIELDNAMES = ["location", "line", "start_column", "end_column", "severity", "message"]


class CsvWriter:
    """Writer for CSV output format, one row per diagnostic."""

    output_format = OutputFormat.CSV

    def write(self, result: ExtractionResult, output_path: Path) -> None:
        """Write diagnostics to a CSV file."""
        try:
            with output_path.open("w", newline="", encoding="utf-8") as csvfile:
                writer = csv.DictWriter(csvfile, fieldnames=FIELDNAMES)
                writer.writeheader()
                writer.writerows(diag.to_dict() for diag in result)
        except OSError as e:
            raise ExportError(
                f"Cannot write CSV output: {e}", original_error=e, path=output_path
            ) from e
        logger.info(f"CSV output written to {output_path}")
