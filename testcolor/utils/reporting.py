"""Tagged diagnostics written to stderr so stdout stays clean for output."""

from __future__ import annotations

import sys

PROGRAM = "testcolor"


def log(tag: str, message: str) -> None:
    print(f"{PROGRAM}: [{tag}] {message}", file=sys.stderr)


def fatal(message: str) -> None:
    log("FATAL", message)
