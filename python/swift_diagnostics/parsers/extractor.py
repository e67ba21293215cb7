"""
Swift build output extractor.

Entry point of the parsing pipeline: segment the snapshot into blocks, build
one diagnostic per block and group the results by location.
"""

from typing import Iterable

from loguru import logger

from ..core.data_structures import (
    BlockFailure,
    DiagnosticBlock,
    DiagnosticsByLocation,
    ExtractionResult,
)
from .builder import build_diagnostic
from .segmenter import iter_blocks, split_lines


class SwiftDiagnosticExtractor:
    """Stateless extractor for ``swift build`` output; safe to share between threads."""

    def parse(self, output: str) -> ExtractionResult:
        """Parse a complete build output snapshot."""
        return self.aggregate(iter_blocks(split_lines(output)))

    def aggregate(self, blocks: Iterable[DiagnosticBlock]) -> ExtractionResult:
        """Fold blocks into a fresh result, skipping the malformed ones."""
        result = ExtractionResult()
        for block in blocks:
            built = build_diagnostic(block)
            if isinstance(built, BlockFailure):
                logger.warning(
                    f"Skipped malformed diagnostic block {built.index}: {built.reason}"
                )
                result.failures.append(built)
            else:
                result.add(built)

        logger.debug(
            f"Extracted {len(result)} diagnostic(s) across "
            f"{len(result.diagnostics)} location(s), {len(result.failures)} skipped"
        )
        return result


def extract(raw_text: str) -> DiagnosticsByLocation:
    """Return diagnostics from ``raw_text`` grouped by location in encounter order."""
    return SwiftDiagnosticExtractor().parse(raw_text).diagnostics
