"""
Block-start classification.

A header looks like ``/path/File.swift:12:7: error: message``. Rather than a
grammar, a line is recognized by splitting on ``:`` and checking the fourth
field for a severity token. Source text that itself contains four colons
followed by one of these tokens is misread as a header; this is accepted.
"""

SEVERITY_TOKENS = frozenset({"error", "warning", "note"})

# location, line, column, severity, message...
MIN_HEADER_FIELDS = 5


def is_block_start(line: str) -> bool:
    """Return True when ``line`` opens a new diagnostic block."""
    fields = line.split(":")
    return len(fields) >= MIN_HEADER_FIELDS and fields[3].strip() in SEVERITY_TOKENS
