"""
Writer lookup by output format or destination path.
"""

from pathlib import Path
from typing import Dict, Optional, Type, Union

from ..core.enums import OutputFormat
from .base import OutputWriter
from .csv_writer import CsvWriter
from .json_writer import JsonWriter
from .xml_writer import XmlWriter


class WriterFactory:
    """Maps each OutputFormat to the writer class that produces it."""

    writers: Dict[OutputFormat, Type[OutputWriter]] = {
        writer.output_format: writer for writer in (JsonWriter, CsvWriter, XmlWriter)
    }

    @classmethod
    def create_writer(cls, format_type: Union[OutputFormat, str]) -> OutputWriter:
        """Create the writer for ``format_type``; unknown names raise ValueError."""
        if isinstance(format_type, str):
            format_type = OutputFormat.from_string(format_type)
        return cls.writers[format_type]()

    @classmethod
    def for_path(
        cls, output_path: Union[str, Path], default: OutputFormat = OutputFormat.JSON
    ) -> OutputWriter:
        """Pick a writer from the file suffix, falling back to ``default``."""
        output_format: Optional[OutputFormat] = OutputFormat.from_path(output_path)
        return cls.create_writer(output_format or default)
