"""
Widget modules for the Swift diagnostics tools.

This module provides widgets for processing, formatting, publishing and
managing extracted diagnostics.
"""

from .formatter import ConsoleFormatterWidget
from .processor import DiagnosticProcessorWidget
from .collection import DiagnosticCollection
from .session import BuildOutcome, BuildSession
from .main_widget import DiagnosticsWidget

__all__ = [
    'ConsoleFormatterWidget',
    'DiagnosticProcessorWidget',
    'DiagnosticCollection',
    'BuildOutcome',
    'BuildSession',
    'DiagnosticsWidget'
]
