"""Shared fixtures for the Swift diagnostics tests."""

import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "python"))

SAMPLE_BUILD_OUTPUT = """\
Compile Swift Module 'Demo' (2 sources)
/src/Demo/main.swift:10:5: error: missing return in a function expected to return 'Int'
    return
    ^
/src/Demo/main.swift:3:1: warning: unused variable 'x'
/src/Demo/util.swift:7:12: note: did you mean 'value'?
        let v = valu
                ^~~~
Swift._cos:1:13: error: use of unresolved identifier
error: terminated(1): swift-build-tool -f debug.yaml
"""


@pytest.fixture
def sample_output() -> str:
    """A realistic ``swift build`` stdout capture."""
    return SAMPLE_BUILD_OUTPUT


@pytest.fixture
def build_log(tmp_path: Path, sample_output: str) -> Path:
    """The sample output saved as a build log."""
    path = tmp_path / "build.log"
    path.write_text(sample_output, encoding="utf-8")
    return path
