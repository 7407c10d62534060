"""Transform policy table applied to classified lines.

Every (mode, category) pair has exactly one entry in ``POLICY``. Whole-line
transforms act on the original line so leading indentation printed by
``go test`` for subtests is preserved. The source reference transforms work on
the trimmed view instead:

    TestMockSucceed: mock_test.go:6: Checking if mocking succeed works
                   ^
                   first colon; everything from two bytes past it is kept

which turns into ``mock_test.go:6: Checking if mocking succeed works`` under a
fixed indent. Without formatting the line is not split and only gets a short
prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from testcolor.pipeline.annotation import indent, wrap_color, wrap_color_indented
from testcolor.pipeline.classifier import COLON, classify
from testcolor.pipeline.matching import first_index
from testcolor.utils.ansi import (
    BOLD_GREEN,
    BOLD_RED,
    BOLD_YELLOW,
    CYAN,
    FOUR_SPACES,
    GREEN,
    GREY,
)
from testcolor.utils.preprocessing import trim_view
from testcolor.utils.types import Category, ClassificationError, LineView, Mode, Options


class Action(Enum):
    PASSTHROUGH = "passthrough"
    COLOR = "color"
    INDENT = "indent"
    COLOR_INDENT = "color-indent"
    SPLIT_INDENT = "split-indent"
    SPLIT_COLOR_INDENT = "split-color-indent"
    PREFIX_COLOR = "prefix-color"


@dataclass(frozen=True)
class Transform:
    action: Action
    color: Optional[bytes] = None


PASSTHROUGH = Transform(Action.PASSTHROUGH)


def _row(default: Transform, nocolor: Transform, nofmt: Transform) -> Dict[Mode, Transform]:
    return {
        Mode.DEFAULT: default,
        Mode.NOCOLOR: nocolor,
        Mode.NOFMT: nofmt,
        Mode.PLAIN: PASSTHROUGH,
    }


_BY_CATEGORY: Dict[Category, Dict[Mode, Transform]] = {
    Category.RUN_START: _row(PASSTHROUGH, PASSTHROUGH, PASSTHROUGH),
    Category.TEST_PASS: _row(
        Transform(Action.COLOR_INDENT, BOLD_GREEN),
        Transform(Action.INDENT),
        Transform(Action.COLOR, BOLD_GREEN),
    ),
    Category.PACKAGE_PASS: _row(
        Transform(Action.COLOR, BOLD_GREEN),
        PASSTHROUGH,
        Transform(Action.COLOR, BOLD_GREEN),
    ),
    Category.RESULT_OK: _row(
        Transform(Action.COLOR, GREEN),
        PASSTHROUGH,
        Transform(Action.COLOR, BOLD_GREEN),
    ),
    Category.TEST_FAIL: _row(
        Transform(Action.COLOR_INDENT, BOLD_RED),
        Transform(Action.INDENT),
        Transform(Action.COLOR, BOLD_RED),
    ),
    Category.PACKAGE_FAIL: _row(
        Transform(Action.COLOR, BOLD_RED),
        PASSTHROUGH,
        Transform(Action.COLOR, BOLD_RED),
    ),
    Category.TEST_SKIP: _row(
        Transform(Action.COLOR_INDENT, BOLD_YELLOW),
        Transform(Action.INDENT),
        # tc -nofmt has always shown skipped tests in red
        Transform(Action.COLOR, BOLD_RED),
    ),
    Category.BUILD_SKIP: _row(
        Transform(Action.COLOR, CYAN),
        PASSTHROUGH,
        Transform(Action.COLOR, CYAN),
    ),
    Category.SOURCE_REFERENCE: _row(
        Transform(Action.SPLIT_COLOR_INDENT, GREY),
        Transform(Action.SPLIT_INDENT),
        Transform(Action.PREFIX_COLOR, GREY),
    ),
    Category.OTHER: _row(PASSTHROUGH, PASSTHROUGH, PASSTHROUGH),
}

POLICY: Dict[Tuple[Mode, Category], Transform] = {
    (mode, category): transform
    for category, row in _BY_CATEGORY.items()
    for mode, transform in row.items()
}


def lookup(mode: Mode, category: Category) -> Transform:
    return POLICY[(mode, category)]


def source_payload(view: LineView) -> bytes:
    colon = first_index(view, COLON)
    if colon is None:
        raise ClassificationError(f"no colon in source reference line {view.buffer!r}")
    start = colon + 2
    if start > len(view.buffer):
        raise ClassificationError(f"nothing follows the colon in source reference line {view.buffer!r}")
    return view.buffer[start:]


def apply(transform: Transform, view: LineView) -> bytes:
    action = transform.action
    if action is Action.PASSTHROUGH:
        return view.buffer
    if action is Action.COLOR:
        return wrap_color(view.buffer, transform.color)
    if action is Action.INDENT:
        return indent(view.buffer)
    if action is Action.COLOR_INDENT:
        return wrap_color_indented(view.buffer, transform.color)
    if action is Action.SPLIT_INDENT:
        return indent(source_payload(view))
    if action is Action.SPLIT_COLOR_INDENT:
        return wrap_color_indented(source_payload(view), transform.color)
    if action is Action.PREFIX_COLOR:
        return FOUR_SPACES + wrap_color(view.trimmed, transform.color)
    raise ValueError(f"unknown transform action: {action}")


def annotate_line(line: bytes, options: Options) -> bytes:
    """Return ``line`` (without its newline) rewritten for ``options``."""
    view = trim_view(line)
    return apply(lookup(options.mode, classify(view)), view)
