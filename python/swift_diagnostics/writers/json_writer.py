"""
JSON output writer.

This module provides functionality to write extracted diagnostics to JSON format.
"""

import json
from pathlib import Path

from loguru import logger

from ..core.data_structures import ExtractionResult
from ..core.enums import OutputFormat
from ..core.exceptions import ExportError


class JsonWriter:
    """Writer for JSON output format."""

    output_format = OutputFormat.JSON

    def write(self, result: ExtractionResult, output_path: Path) -> None:
        """Write diagnostics to a JSON file, grouped by location."""
        try:
            with output_path.open("w", encoding="utf-8") as json_file:
                json.dump(result.to_dict(), json_file, indent=2)
        except OSError as e:
            raise ExportError(
                f"Cannot write JSON output: {e}", original_error=e, path=output_path
            ) from e
        logger.info(f"JSON output written to {output_path}")
