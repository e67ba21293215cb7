"""
Utility modules for the Swift diagnostics tools.

This module provides configuration and logging setup. The command-line
interface lives in ``utils.cli``.
"""

from .config import DiagnosticsConfig
from .logging_config import setup_logging

__all__ = [
    'DiagnosticsConfig',
    'setup_logging',
]
