"""Line ingestion helpers."""

from __future__ import annotations

from typing import BinaryIO, Iterator

from testcolor.utils.preprocessing import NEWLINE, strip_delimiter
from testcolor.utils.types import StreamError


def iter_lines(reader: BinaryIO) -> Iterator[bytes]:
    """Yield newline-terminated lines from ``reader`` without the newline.

    Bytes after the last newline are treated as end of stream and dropped.
    """
    while True:
        try:
            raw = reader.readline()
        except OSError as exc:
            raise StreamError(f"unhandled error reading input: {exc}") from exc
        if not raw.endswith(NEWLINE):
            return
        yield strip_delimiter(raw)
