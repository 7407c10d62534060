"""ANSI escape codes and padding used by the annotator."""

from __future__ import annotations

BOLD_RED = b"\033[1;31m"
BOLD_GREEN = b"\033[1;32m"
BOLD_YELLOW = b"\033[1;33m"
BOLD_CYAN = b"\033[1;36m"
RED = b"\033[31m"
GREEN = b"\033[32m"
YELLOW = b"\033[33m"
CYAN = b"\033[36m"
GREY = b"\033[90m"
RESET = b"\033[0m"

FOUR_SPACES = b" " * 4
TEN_SPACES = b" " * 10
