"""CLI wiring for testcolor (``tc``)."""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO

from testcolor.pipeline.orchestrator import StreamOrchestrator
from testcolor.utils.reporting import fatal
from testcolor.utils.types import ClassificationError, Options, StreamError

VERSION = "0.1.0"

USAGE_MESSAGE = f"""testcolor v{VERSION}

tc pretty prints your 'go test' output

Usage:
\tgo test -v ./... | tc [flags]
"""

DEFAULTS = {
    "nofmt": False,
    "nocolor": False,
}

# Spellings Go's flag package accepts for boolean values (strconv.ParseBool).
TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(value: str) -> bool:
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tc",
        usage=argparse.SUPPRESS,
        description=USAGE_MESSAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-nofmt",
        "--nofmt",
        nargs="?",
        const=True,
        type=parse_bool,
        metavar="BOOL",
        default=DEFAULTS["nofmt"],
        help=f"Disables formatting (default: {str(DEFAULTS['nofmt']).lower()})",
    )
    parser.add_argument(
        "-nocolor",
        "--nocolor",
        nargs="?",
        const=True,
        type=parse_bool,
        metavar="BOOL",
        default=DEFAULTS["nocolor"],
        help=f"Disables color (default: {str(DEFAULTS['nocolor']).lower()})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"testcolor v{VERSION}",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    options = Options(disable_formatting=args.nofmt, disable_color=args.nocolor)
    reader = stdin if stdin is not None else sys.stdin.buffer
    writer = stdout if stdout is not None else sys.stdout.buffer
    orchestrator = StreamOrchestrator(options)
    try:
        orchestrator.process(reader, writer)
    except StreamError as exc:
        fatal(str(exc))
        return 1
    except ClassificationError as exc:
        fatal(f"internal error: {exc}")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
