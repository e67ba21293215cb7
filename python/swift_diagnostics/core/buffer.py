"""
Raw build output buffer.

One buffer accumulates the stdout chunks of a single build invocation and is
handed to the extractor as an immutable snapshot once the process has exited.
"""

from typing import List, Union


class RawOutputBuffer:
    """Append-only accumulator for compiler stdout."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self._chunks: List[str] = []
        self._length = 0

    def append(self, chunk: Union[str, bytes]) -> None:
        """Append a chunk exactly as the process emitted it."""
        if isinstance(chunk, bytes):
            chunk = chunk.decode(self.encoding, errors="replace")
        self._chunks.append(chunk)
        self._length += len(chunk)

    def snapshot(self) -> str:
        """Return the accumulated text; later appends do not affect it."""
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def reset(self) -> None:
        self._chunks.clear()
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0
