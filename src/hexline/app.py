from __future__ import annotations

import sys
from typing import BinaryIO, Optional, Sequence

from hexline.core.engine import dump
from hexline.core.errors import WriteError
from hexline.core.loader import open_source
from hexline.utils.logger import get_logger, setup_logging

log = get_logger(__name__)


def _flush(stdout: BinaryIO) -> None:
    try:
        stdout.flush()
    except (OSError, ValueError) as e:
        raise WriteError() from e


def run_app(
    files: Sequence[str],
    width: int,
    log_level: str = "WARNING",
    quiet: bool = False,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> None:
    setup_logging(level=log_level, quiet=quiet)

    if stdout is None:
        stdout = sys.stdout.buffer

    if not files:
        if stdin is None:
            stdin = sys.stdin.buffer
        log.debug("dumping standard input, width=%d", width)
        dump(stdin, stdout, width)
        _flush(stdout)
        return

    # Each file is its own dump: a short last line is padded per file
    for path in files:
        log.debug("dumping %s, width=%d", path, width)
        with open_source(path) as f:
            dump(f, stdout, width)
        _flush(stdout)
