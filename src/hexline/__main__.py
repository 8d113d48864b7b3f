from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from hexline.app import run_app
from hexline.core.errors import ArgumentError, HexlineError, format_error_chain

DEFAULT_BYTES_PER_LINE = 8
DEFAULT_LOG_LEVEL = "WARNING"


class _Parser(argparse.ArgumentParser):
    # argparse would print usage and exit 2; report it like every other error
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def _width(s: str) -> int:
    try:
        n = int(s, 10)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"bad width {s!r}, expected a positive integer") from e
    if n < 1:
        raise argparse.ArgumentTypeError(f"bad width {s!r}, must be at least 1")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="hexline", description="Print a hexadecimal and ASCII dump of files, or of standard input")
    p.add_argument("files", nargs="*", metavar="FILE", help="Files to dump (default: standard input)")
    p.add_argument("-w", dest="width", metavar="COUNT", type=_width, default=DEFAULT_BYTES_PER_LINE,
                   help=f"set number of bytes per line (default: {DEFAULT_BYTES_PER_LINE})")

    # Logging
    p.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--quiet", action="store_true", help="Drop level and logger name from log lines")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        run_app(
            files=args.files,
            width=args.width,
            log_level=args.log_level,
            quiet=args.quiet,
        )
    except SystemExit as e:
        # -h/--help
        return e.code if isinstance(e.code, int) else 0
    except HexlineError as e:
        for line in format_error_chain(e):
            print(line, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
