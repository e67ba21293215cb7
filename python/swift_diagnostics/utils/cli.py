"""
Command-line interface utilities.

This module provides CLI argument parsing and the main function for
extracting diagnostics from saved ``swift build`` logs.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from ..core.exceptions import SwiftDiagnosticsError
from ..widgets.main_widget import DiagnosticsWidget
from .config import DiagnosticsConfig
from .logging_config import setup_logging

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_DIAGNOSTIC_ERRORS = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract editor diagnostics from Swift build output.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export diagnostics of a captured build as JSON
  swift build 2>/dev/null | tee build.log; swift-diagnostics build.log

  # Only errors from Sources/, as CSV, with statistics
  swift-diagnostics build.log --filter error --location-pattern Sources/ --output-format csv --stats
""",
    )

    parser.add_argument(
        "file_paths", nargs="+", type=Path, help="Paths to captured build output."
    )
    parser.add_argument(
        "--output-format",
        choices=["json", "csv", "xml"],
        default="json",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--output-file",
        default="diagnostics",
        help="Base name for the output file without extension (default: diagnostics).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for output files (default: current directory).",
    )
    parser.add_argument(
        "--filter",
        nargs="*",
        choices=["error", "warning", "info"],
        help="Keep only diagnostics of these severities.",
    )
    parser.add_argument(
        "--location-pattern", help="Regular expression to filter diagnostics by location."
    )
    parser.add_argument(
        "--workspace-root", type=Path, help="Root used to resolve relative locations."
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print statistics after processing."
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colorized output."
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=4,
        help="Number of threads for processing several logs (default: 4).",
    )
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help=f"Exit with status {EXIT_DIAGNOSTIC_ERRORS} when any error diagnostic is found.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Trace extraction details."
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors."
    )

    return parser.parse_args(argv)


def main_cli(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line operation."""
    args = parse_args(argv)
    setup_logging("WARNING" if args.quiet else "INFO", trace=args.verbose)

    try:
        config = DiagnosticsConfig(
            filter_severities=args.filter,
            location_pattern=args.location_pattern,
            output_format=args.output_format,
            colorize=not args.no_color,
            concurrency=args.concurrency,
            workspace_root=args.workspace_root,
        )
    except ValidationError as e:
        logger.error(f"Invalid options: {e}")
        return EXIT_FAILURE

    args.output_dir.mkdir(parents=True, exist_ok=True)
    output_path = args.output_dir / f"{args.output_file}.{config.output_format.extension}"

    widget = DiagnosticsWidget(config)
    try:
        result = widget.process_and_export(
            input_files=args.file_paths,
            output_path=output_path,
            display_stats=args.stats,
            display_output=True,
        )
    except SwiftDiagnosticsError as e:
        logger.error(f"Error processing build output: {e}")
        return EXIT_FAILURE

    print(f"\nOutput saved to: {output_path}")
    if len(result):
        print(f"Extracted {len(result)} diagnostic(s).")
    else:
        print("No diagnostics found or all diagnostics were filtered out.")

    if args.fail_on_error and result.has_errors:
        return EXIT_DIAGNOSTIC_ERRORS
    return EXIT_OK
