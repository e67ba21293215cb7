"""
Parsing pipeline for Swift compiler output.

Classification, segmentation, diagnostic construction and aggregation.
"""

from .base import DiagnosticExtractor
from .classifier import is_block_start
from .segmenter import iter_blocks, segment_blocks, split_lines
from .builder import build_diagnostic
from .extractor import SwiftDiagnosticExtractor, extract

__all__ = [
    'DiagnosticExtractor',
    'is_block_start',
    'iter_blocks',
    'segment_blocks',
    'split_lines',
    'build_diagnostic',
    'SwiftDiagnosticExtractor',
    'extract',
]
