"""
Diagnostic collection widget.

An in-memory stand-in for an editor's diagnostic collection. Locations are
canonicalized to URIs here, not in the extractor.
"""

from pathlib import Path, PurePosixPath, PureWindowsPath
from urllib.parse import quote
from typing import Dict, Iterator, List, Optional, Sequence, Union

from loguru import logger

from ..core.data_structures import Diagnostic, DiagnosticsByLocation


class DiagnosticCollection:
    """Diagnostics currently displayed, keyed by canonical location."""

    def __init__(self, name: str = "swift", workspace_root: Optional[Union[str, Path]] = None):
        self.name = name
        self.workspace_root = Path(workspace_root) if workspace_root else None
        self._entries: Dict[str, List[Diagnostic]] = {}

    def canonicalize(self, location: str) -> str:
        """
        Return the display key for ``location``.

        Absolute paths become ``file://`` URIs. Relative paths are resolved
        against the workspace root when the file exists there. Pseudo-sources
        such as ``<unknown>`` or ``Swift._cos`` are kept as given.
        """
        if not location or location.startswith("<"):
            return location
        if PurePosixPath(location).is_absolute():
            return "file://" + quote(location)
        if PureWindowsPath(location).is_absolute():
            return "file:///" + quote(PureWindowsPath(location).as_posix(), safe="/:")
        if self.workspace_root is not None:
            candidate = (self.workspace_root / location).absolute()
            if candidate.exists():
                return candidate.as_uri()
        return location

    def clear(self) -> None:
        self._entries.clear()

    def set(self, location: str, diagnostics: Sequence[Diagnostic]) -> None:
        """Replace whatever is shown for ``location``."""
        key = self.canonicalize(location)
        if diagnostics:
            self._entries[key] = list(diagnostics)
        else:
            self._entries.pop(key, None)

    def get(self, location: str) -> List[Diagnostic]:
        return list(self._entries.get(self.canonicalize(location), []))

    def delete(self, location: str) -> None:
        self._entries.pop(self.canonicalize(location), None)

    def apply(self, diagnostics: DiagnosticsByLocation) -> None:
        """
        Clear stale entries, then show a fresh extraction.

        Locations that canonicalize to the same key are merged in extraction
        order rather than replacing each other.
        """
        self.clear()
        for location, items in diagnostics.items():
            if items:
                self._entries.setdefault(self.canonicalize(location), []).extend(items)
        logger.debug(f"Collection '{self.name}' now shows {len(self)} location(s)")

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, location: str) -> bool:
        return self.canonicalize(location) in self._entries
