"""Text transforms that build a new annotated buffer from an input buffer."""

from __future__ import annotations

from testcolor.utils.ansi import RESET, TEN_SPACES


def wrap_color(text: bytes, color: bytes) -> bytes:
    return b"".join((color, text, RESET))


def indent(text: bytes) -> bytes:
    return TEN_SPACES + text


def wrap_color_indented(text: bytes, color: bytes) -> bytes:
    return b"".join((TEN_SPACES, color, text, RESET))
