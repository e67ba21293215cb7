"""
Diagnostic construction.

Turns one DiagnosticBlock into either a Diagnostic or a BlockFailure. Bad
blocks are reported as values so that the extraction loop stays a plain fold.
"""

from ..core.data_structures import (
    BlockFailure,
    BlockResult,
    Diagnostic,
    DiagnosticBlock,
    SourceRange,
)
from ..core.enums import DiagnosticSeverity
from .classifier import MIN_HEADER_FIELDS


def _one_based(value: str, name: str) -> int:
    """
    Parse a 1-based compiler coordinate and return it 0-based.

    The compiler numbers lines and columns from 1, so a 0 or negative value
    cannot come from a real header and would become a negative editor
    position; such values are treated like non-integers.
    """
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} {value!r} is not an integer") from None
    if number < 1:
        raise ValueError(f"{name} {number} is not a 1-based position")
    return number - 1


def build_diagnostic(block: DiagnosticBlock) -> BlockResult:
    """
    Build the diagnostic described by ``block``.

    The header is ``location:line:column:severity:message``. The message keeps
    every character after the fourth colon, including its leading space and
    any further colons. The underline width is the length of the stripped
    third line of the block; without one the range is zero-width.

    Returns:
        A Diagnostic, or a BlockFailure naming why the header was rejected.
    """
    fields = block.header.split(":")
    if len(fields) < MIN_HEADER_FIELDS:
        return BlockFailure(
            index=block.index,
            header=block.header,
            reason=f"expected at least {MIN_HEADER_FIELDS} fields, found {len(fields)}",
        )

    location, raw_line, raw_column, token = fields[:4]
    try:
        line = _one_based(raw_line, "line")
        start_column = _one_based(raw_column, "column")
    except ValueError as e:
        return BlockFailure(index=block.index, header=block.header, reason=str(e))

    annotation = block.annotation
    width = len(annotation.strip()) if annotation is not None else 0

    return Diagnostic(
        location=location,
        range=SourceRange(line, start_column, start_column + width),
        severity=DiagnosticSeverity.from_token(token),
        message=":".join(fields[4:]),
    )
