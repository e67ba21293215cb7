"""
Build log processor widget.

This module reads captured build output, runs the extractor over it, and
provides filtering, combining and statistics over the results.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from concurrent.futures import ThreadPoolExecutor

from loguru import logger

from ..core.data_structures import ExtractionResult
from ..core.enums import DiagnosticSeverity
from ..core.exceptions import BuildLogNotFoundError, BuildLogReadError
from ..parsers.base import DiagnosticExtractor
from ..parsers.extractor import SwiftDiagnosticExtractor


class DiagnosticProcessorWidget:
    """Widget for processing captured build output."""

    def __init__(self, extractor: Optional[DiagnosticExtractor] = None):
        self.extractor = extractor or SwiftDiagnosticExtractor()

    def read_log(self, file_path: Union[str, Path]) -> str:
        """Read a build log, replacing undecodable bytes."""
        file_path = Path(file_path)
        try:
            return file_path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError as e:
            logger.error(f"Build log not found: {file_path}")
            raise BuildLogNotFoundError(file_path, original_error=e) from e
        except OSError as e:
            logger.error(f"Cannot read build log {file_path}: {e}")
            raise BuildLogReadError(file_path, original_error=e) from e

    def process_file(self, file_path: Union[str, Path]) -> ExtractionResult:
        """Extract diagnostics from a single build log."""
        logger.info(f"Processing build log: {file_path}")
        return self.extractor.parse(self.read_log(file_path))

    def process_files(
        self, file_paths: List[Union[str, Path]], concurrency: int = 4
    ) -> List[ExtractionResult]:
        """
        Extract diagnostics from several build logs concurrently.

        Results are returned in the order of ``file_paths``. A missing log
        aborts the whole batch with BuildLogNotFoundError.
        """
        with ThreadPoolExecutor(max_workers=concurrency) as executor:
            results = list(executor.map(self.process_file, file_paths))
        logger.info(f"Processed {len(results)} build log(s)")
        return results

    def process_string(self, output: str) -> ExtractionResult:
        """Extract diagnostics from an in-memory build output snapshot."""
        return self.extractor.parse(output)

    def filter_diagnostics(
        self,
        result: ExtractionResult,
        severities: Optional[List[DiagnosticSeverity]] = None,
        location_pattern: Optional[str] = None,
    ) -> ExtractionResult:
        """Filter diagnostics by severity and/or a regex on their location."""
        if not severities and not location_pattern:
            return result

        filtered = ExtractionResult(failures=list(result.failures))
        for diag in result:
            severity_match = not severities or diag.severity in severities
            location_match = not location_pattern or re.search(
                location_pattern, diag.location
            )
            if severity_match and location_match:
                filtered.add(diag)

        return filtered

    def combine_results(self, results: List[ExtractionResult]) -> ExtractionResult:
        """Combine several results, keeping per-location encounter order."""
        combined = ExtractionResult()
        for result in results:
            for diag in result:
                combined.add(diag)
            combined.failures.extend(result.failures)
        return combined

    def generate_statistics(self, results: List[ExtractionResult]) -> Dict[str, Any]:
        """Generate statistics from a list of extraction results."""
        stats = {
            "total_logs": len(results),
            "total_diagnostics": 0,
            "by_severity": {severity.value: 0 for severity in DiagnosticSeverity},
            "locations_with_errors": 0,
            "skipped_blocks": 0,
        }

        error_locations = set()
        for result in results:
            stats["total_diagnostics"] += len(result)
            stats["skipped_blocks"] += len(result.failures)
            for diag in result:
                stats["by_severity"][diag.severity.value] += 1
                if diag.severity == DiagnosticSeverity.ERROR:
                    error_locations.add(diag.location)

        stats["locations_with_errors"] = len(error_locations)
        return stats
