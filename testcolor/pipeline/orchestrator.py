"""Streaming driver wiring ingestion, annotation and output together."""

from __future__ import annotations

from typing import BinaryIO

from testcolor.pipeline.ingestion import iter_lines
from testcolor.pipeline.rules import annotate_line
from testcolor.utils.preprocessing import NEWLINE
from testcolor.utils.types import Options, StreamError


class StreamOrchestrator:
    def __init__(self, options: Options | None = None) -> None:
        self.options = options or Options()

    # ------------------------------------------------------------------
    def process(self, reader: BinaryIO, writer: BinaryIO) -> int:
        """Annotate ``reader`` line by line into ``writer`` until end of stream.

        Returns the number of lines written.
        """
        written = 0
        for line in iter_lines(reader):
            self._write(writer, annotate_line(line, self.options) + NEWLINE)
            written += 1
        return written

    @staticmethod
    def _write(writer: BinaryIO, payload: bytes) -> None:
        try:
            writer.write(payload)
            # Flush per line so output keeps pace with a long-running go test.
            flush = getattr(writer, "flush", None)
            if flush is not None:
                flush()
        except OSError as exc:
            raise StreamError(f"unhandled error writing output: {exc}") from exc


def run_testcolor(options: Options, reader: BinaryIO, writer: BinaryIO) -> int:
    return StreamOrchestrator(options).process(reader, writer)
