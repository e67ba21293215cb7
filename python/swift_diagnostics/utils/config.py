"""
Configuration model for diagnostics processing.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.enums import DiagnosticSeverity, OutputFormat


class DiagnosticsConfig(BaseModel):
    """Options controlling how build output is filtered, shown and exported."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
    )

    filter_severities: List[DiagnosticSeverity] = Field(
        default_factory=list,
        description="Severities to keep; empty keeps everything",
    )
    location_pattern: Optional[str] = Field(
        default=None, description="Regular expression a location must match"
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.JSON, description="Export format"
    )
    colorize: bool = Field(default=True, description="Colorize console output")
    concurrency: int = Field(
        default=4, ge=1, le=64, description="Worker threads for multiple logs"
    )
    workspace_root: Optional[Path] = Field(
        default=None, description="Root used to resolve relative locations"
    )

    @field_validator("filter_severities", mode="before")
    @classmethod
    def parse_severities(cls, v):
        if v is None:
            return []
        return [
            DiagnosticSeverity.from_string(item) if isinstance(item, str) else item
            for item in v
        ]

    @field_validator("output_format", mode="before")
    @classmethod
    def parse_output_format(cls, v):
        if isinstance(v, str):
            return OutputFormat.from_string(v)
        return v

    @field_validator("location_pattern")
    @classmethod
    def validate_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Reject patterns that do not compile."""
        if v:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid location pattern {v!r}: {e}") from e
        return v or None
