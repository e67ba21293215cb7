"""
XML output writer.

This module provides functionality to write extracted diagnostics to XML format.
"""

from pathlib import Path
import xml.etree.ElementTree as ET

from loguru import logger

from ..core.data_structures import ExtractionResult
from ..core.enums import OutputFormat
from ..core.exceptions import ExportError


class XmlWriter:
    """Writer for XML output format."""

    output_format = OutputFormat.XML

    def write(self, result: ExtractionResult, output_path: Path) -> None:
        """Write diagnostics to an XML file."""
        root = ET.Element("BuildDiagnostics")
        metadata = ET.SubElement(root, "Metadata")
        ET.SubElement(metadata, "DiagnosticCount").text = str(len(result))
        ET.SubElement(metadata, "LocationCount").text = str(len(result.diagnostics))
        ET.SubElement(metadata, "SkippedBlocks").text = str(len(result.failures))

        for location, diagnostics in result.diagnostics.items():
            location_elem = ET.SubElement(root, "Location", path=location)
            for diag in diagnostics:
                diag_elem = ET.SubElement(location_elem, "Diagnostic")
                for key, value in diag.to_dict().items():
                    if key != "location":
                        ET.SubElement(diag_elem, key).text = str(value)

        tree = ET.ElementTree(root)
        try:
            tree.write(output_path, encoding="utf-8", xml_declaration=True)
        except OSError as e:
            raise ExportError(
                f"Cannot write XML output: {e}", original_error=e, path=output_path
            ) from e
        logger.info(f"XML output written to {output_path}")
