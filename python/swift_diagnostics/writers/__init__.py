"""
Writer modules for exporting extracted diagnostics.

This module provides writers for JSON, CSV and XML.
"""

from .base import OutputWriter
from .json_writer import JsonWriter
from .csv_writer import CsvWriter
from .xml_writer import XmlWriter
from .factory import WriterFactory

__all__ = [
    'OutputWriter',
    'JsonWriter',
    'CsvWriter',
    'XmlWriter',
    'WriterFactory'
]
