"""Preprocessing utilities for the ingestion phase."""

from __future__ import annotations

from testcolor.utils.types import LineView

NEWLINE = b"\n"
SPACE = ord(" ")


def strip_delimiter(raw: bytes) -> bytes:
    if raw.endswith(NEWLINE):
        return raw[:-1]
    return raw


def trim_view(line: bytes) -> LineView:
    # Only 0x20 counts as leading whitespace; tabs are content.
    offset = 0
    while offset < len(line) and line[offset] == SPACE:
        offset += 1
    return LineView(buffer=line, offset=offset)
