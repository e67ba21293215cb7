"""
Main diagnostics widget.

This module provides the widget that ties extraction, filtering, display and
export together.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from ..core.data_structures import ExtractionResult
from ..core.enums import OutputFormat
from ..utils.config import DiagnosticsConfig
from ..writers.factory import WriterFactory
from .collection import DiagnosticCollection
from .formatter import ConsoleFormatterWidget
from .processor import DiagnosticProcessorWidget
from .session import BuildSession


class DiagnosticsWidget:
    """Main widget for orchestrating build diagnostics processing."""

    def __init__(self, config: Optional[DiagnosticsConfig] = None):
        self.config = config or DiagnosticsConfig()
        self.processor = DiagnosticProcessorWidget()
        self.formatter = ConsoleFormatterWidget()
        self.collection = DiagnosticCollection(workspace_root=self.config.workspace_root)

    def _apply_filters(self, result: ExtractionResult) -> ExtractionResult:
        return self.processor.filter_diagnostics(
            result,
            severities=self.config.filter_severities,
            location_pattern=self.config.location_pattern,
        )

    def parse_from_string(self, output: str) -> ExtractionResult:
        """Extract and filter diagnostics from a build output snapshot."""
        return self._apply_filters(self.processor.process_string(output))

    def parse_from_file(self, file_path: Union[str, Path]) -> ExtractionResult:
        """Extract and filter diagnostics from a build log."""
        return self._apply_filters(self.processor.process_file(file_path))

    def parse_from_files(
        self, file_paths: List[Union[str, Path]]
    ) -> List[ExtractionResult]:
        """Extract and filter diagnostics from several build logs."""
        results = self.processor.process_files(file_paths, self.config.concurrency)
        return [self._apply_filters(result) for result in results]

    def new_session(self, echo=None) -> BuildSession:
        """Create a build session publishing into this widget's collection."""
        return BuildSession(self.collection, self.processor.extractor, echo=echo)

    def write_output(
        self,
        result: ExtractionResult,
        output_path: Union[str, Path],
        output_format: Optional[Union[OutputFormat, str]] = None,
    ) -> None:
        """
        Write diagnostics to a file.

        An explicit ``output_format`` wins; otherwise a known file suffix
        decides, and the configured format covers everything else.
        """
        if output_format is not None:
            writer = WriterFactory.create_writer(output_format)
        else:
            writer = WriterFactory.for_path(output_path, default=self.config.output_format)
        writer.write(result, Path(output_path))

    def display_output(self, result: ExtractionResult) -> None:
        """Display diagnostics on the console."""
        if self.config.colorize:
            self.formatter.colorize_output(result)
        else:
            print(self.formatter.get_formatted_output(result))

    def generate_statistics(self, results: List[ExtractionResult]) -> Dict[str, Any]:
        return self.processor.generate_statistics(results)

    def process_and_export(
        self,
        input_files: List[Union[str, Path]],
        output_path: Union[str, Path],
        display_stats: bool = False,
        display_output: bool = False,
    ) -> ExtractionResult:
        """Complete pipeline: extract, filter, combine, publish and export."""
        results = self.parse_from_files(input_files)
        combined = self.processor.combine_results(results)

        self.collection.apply(combined.diagnostics)
        self.write_output(combined, output_path)

        if display_stats:
            stats = self.generate_statistics(results)
            print("\nStatistics:")
            print(json.dumps(stats, indent=4))

        if display_output:
            self.display_output(combined)

        logger.info(
            f"Exported {len(combined)} diagnostic(s) from {len(results)} log(s)"
        )
        return combined
