"""
Build session widget.

Collects the output of one build invocation and hands it to the extractor
exactly once, after the process has exited. Spawning and supervising the
compiler is left to the caller.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from loguru import logger

from ..core.buffer import RawOutputBuffer
from ..core.data_structures import ExtractionResult
from ..core.exceptions import BuildSessionError
from ..parsers.base import DiagnosticExtractor
from ..parsers.extractor import SwiftDiagnosticExtractor
from .collection import DiagnosticCollection


@dataclass(frozen=True)
class BuildOutcome:
    """What one finished build produced."""

    exit_code: int
    result: ExtractionResult

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class BuildSession:
    """Accumulate stdout for one build, then extract and publish diagnostics."""

    def __init__(
        self,
        collection: DiagnosticCollection,
        extractor: Optional[DiagnosticExtractor] = None,
        echo: Optional[Callable[[str], None]] = None,
    ):
        self.collection = collection
        self.extractor = extractor or SwiftDiagnosticExtractor()
        self.echo = echo
        self.buffer = RawOutputBuffer()
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Begin a new build; output from any previous build is discarded."""
        self.buffer.reset()
        self._running = True
        logger.debug("Build session started")

    def _mirror(self, chunk: Union[str, bytes]) -> None:
        if self.echo is None:
            return
        if isinstance(chunk, bytes):
            chunk = chunk.decode(self.buffer.encoding, errors="replace")
        self.echo(chunk)

    def feed_stdout(self, chunk: Union[str, bytes]) -> None:
        """Record a stdout chunk; only stdout is parsed for diagnostics."""
        if not self._running:
            raise BuildSessionError("stdout received outside of a running build")
        self.buffer.append(chunk)
        self._mirror(chunk)

    def feed_stderr(self, chunk: Union[str, bytes]) -> None:
        """Mirror a stderr chunk without parsing it."""
        self._mirror(chunk)

    def finish(self, exit_code: int) -> BuildOutcome:
        """Extract from the complete snapshot and replace the displayed diagnostics."""
        if not self._running:
            raise BuildSessionError(
                "finish() called without a running build", exit_code=exit_code
            )
        self._running = False

        logger.debug(f"Build exited with code {exit_code}")
        result = self.extractor.parse(self.buffer.snapshot())
        self.buffer.reset()
        self.collection.apply(result.diagnostics)

        outcome = BuildOutcome(exit_code=exit_code, result=result)
        if outcome.succeeded:
            logger.info(f"Build succeeded with {len(result)} diagnostic(s)")
        else:
            logger.info(f"Build failed with {len(result.errors)} error(s)")
        return outcome
