"""
Block segmentation.

Partitions an ordered stream of lines into diagnostic blocks. Lines before the
first header (build banners, progress output) are dropped.
"""

from typing import Iterable, Iterator, List, Optional

from loguru import logger

from ..core.data_structures import DiagnosticBlock
from .classifier import is_block_start


def iter_blocks(lines: Iterable[str]) -> Iterator[DiagnosticBlock]:
    """Yield blocks in input order; the final open block is sealed at end of input."""
    current: Optional[List[str]] = None
    index = 0
    ignored = 0

    for line in lines:
        if is_block_start(line):
            if current is not None:
                yield DiagnosticBlock(index=index, lines=tuple(current))
                index += 1
            current = [line]
        elif current is not None:
            current.append(line)
        else:
            ignored += 1

    if ignored:
        logger.debug(f"Ignored {ignored} line(s) preceding the first diagnostic")

    if current is not None:
        yield DiagnosticBlock(index=index, lines=tuple(current))


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only; one trailing ``\\r`` per line is dropped for CRLF output."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def segment_blocks(text: str) -> List[DiagnosticBlock]:
    """Split ``text`` into lines and return all of its blocks."""
    return list(iter_blocks(split_lines(text)))
