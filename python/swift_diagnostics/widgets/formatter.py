"""
Console formatter widget.

This module provides functionality to format extracted diagnostics for console
display with colorized output based on severity.
"""

from termcolor import colored

from ..core.data_structures import Diagnostic, ExtractionResult
from ..core.enums import DiagnosticSeverity


class ConsoleFormatterWidget:
    """Widget for formatting extracted diagnostics for console display."""

    def __init__(self):
        """Initialize the console formatter widget."""
        self.color_map = {
            DiagnosticSeverity.ERROR: "red",
            DiagnosticSeverity.WARNING: "yellow",
            DiagnosticSeverity.INFO: "blue",
        }

        self.prefix_map = {
            DiagnosticSeverity.ERROR: "ERROR",
            DiagnosticSeverity.WARNING: "WARNING",
            DiagnosticSeverity.INFO: "INFO",
        }

    def format_summary(self, result: ExtractionResult) -> str:
        """Format a summary of an extraction result."""
        lines = [
            "\nBuild Diagnostics Summary:",
            f"Locations: {len(result.diagnostics)}",
            f"Total Diagnostics: {len(result)}",
            f"Errors: {len(result.errors)}",
            f"Warnings: {len(result.warnings)}",
            f"Info: {len(result.infos)}",
        ]
        if result.failures:
            lines.append(f"Skipped Blocks: {len(result.failures)}")
        return "\n".join(lines)

    def format_plain(self, diag: Diagnostic) -> str:
        """Format one diagnostic with 1-based coordinates, as compilers print them."""
        prefix = self.prefix_map.get(diag.severity, "UNKNOWN")
        location = f"{diag.location}:{diag.line + 1}:{diag.start_column + 1}"
        if diag.range.width:
            location += f"-{diag.end_column}"
        return f"{prefix}: {location} - {diag.message.strip()}"

    def format_message(self, diag: Diagnostic) -> str:
        """Format a single diagnostic with color."""
        return colored(self.format_plain(diag), self.color_map.get(diag.severity, "white"))

    def colorize_output(self, result: ExtractionResult) -> None:
        """Print diagnostics with colorized formatting based on severity."""
        print(self.format_summary(result))
        print("\nDiagnostics:")

        for diag in result:
            print(self.format_message(diag))

    def get_formatted_output(self, result: ExtractionResult) -> str:
        """Get formatted output as a string without colors."""
        lines = [self.format_summary(result), "\nDiagnostics:"]
        lines.extend(self.format_plain(diag) for diag in result)
        return "\n".join(lines)
