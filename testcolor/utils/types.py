"""Shared dataclasses and enums used across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StreamError(RuntimeError):
    """Raised when reading from or writing to a stream fails."""


class ClassificationError(RuntimeError):
    """Raised when a line matched as a source reference cannot be split."""


class Mode(Enum):
    DEFAULT = "default"
    NOCOLOR = "nocolor"
    NOFMT = "nofmt"
    PLAIN = "nofmtnocolor"


class Category(Enum):
    RUN_START = "run-start"
    TEST_PASS = "test-pass"
    PACKAGE_PASS = "package-pass"
    RESULT_OK = "result-ok"
    TEST_FAIL = "test-fail"
    PACKAGE_FAIL = "package-fail"
    TEST_SKIP = "test-skip"
    BUILD_SKIP = "build-skip"
    SOURCE_REFERENCE = "source-reference"
    OTHER = "other"


@dataclass(frozen=True)
class Options:
    disable_formatting: bool = False
    disable_color: bool = False

    @property
    def mode(self) -> Mode:
        if self.disable_formatting and self.disable_color:
            return Mode.PLAIN
        if self.disable_formatting:
            return Mode.NOFMT
        if self.disable_color:
            return Mode.NOCOLOR
        return Mode.DEFAULT


@dataclass(frozen=True)
class LineView:
    """A line together with the offset of its first non-space byte.

    Matching reads ``buffer`` from ``offset`` onward while transforms keep
    access to the untouched original.
    """

    buffer: bytes
    offset: int = 0

    @property
    def trimmed(self) -> bytes:
        return self.buffer[self.offset:]
