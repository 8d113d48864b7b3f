from __future__ import annotations

import errno
import io
from typing import BinaryIO

from hexline.core.errors import ReadError, WriteError
from hexline.utils.hexdump import format_line


def is_retryable(exc: OSError) -> bool:
    """True for the transient "interrupted" condition that must never surface."""
    return isinstance(exc, InterruptedError) or exc.errno == errno.EINTR


def read_up_to(source: BinaryIO, buf: bytearray) -> memoryview:
    """
    Read from ``source`` as many bytes as fit in ``buf``.

    Stops early only on end-of-file (a zero-length read). Partial reads are
    accumulated, interruptions are retried. Returns a view on the filled part.
    """
    view = memoryview(buf)
    nread = 0
    while nread < len(buf):
        try:
            data = source.read(len(buf) - nread)
        except (OSError, ValueError) as e:
            # ValueError: the stream was closed under us
            if isinstance(e, OSError) and is_retryable(e):
                continue
            raise ReadError() from e
        if data is None:
            raise ReadError("read error: source would block")
        if not data:
            break
        n = len(data)
        if nread + n > len(buf):
            raise ReadError("read error: source returned more bytes than requested")
        view[nread : nread + n] = data
        nread += n
    return view[:nread]


def _write(sink: BinaryIO, line: str) -> None:
    # raw sinks may accept only part of the data
    data = line.encode("ascii")
    while data:
        try:
            n = sink.write(data)
        except (OSError, ValueError) as e:
            if isinstance(e, OSError) and is_retryable(e):
                continue
            raise WriteError() from e
        if n is None:
            # buffered streams and most file-likes take everything or raise
            break
        if n == 0:
            raise WriteError("write error: sink accepted no bytes")
        data = data[n:]


def dump(source: BinaryIO, sink: BinaryIO, width: int) -> None:
    """
    Write to ``sink`` the hexadecimal and ASCII rendering of every byte read
    from ``source``, ``width`` bytes per line.

    Neither stream is closed. Lines written before a failure stay written.
    Closing either stream from outside surfaces as ReadError or WriteError.
    """
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")

    buf = bytearray(width)
    while True:
        chunk = read_up_to(source, buf)
        if not chunk:
            break
        _write(sink, format_line(chunk, width))


def dumps(data: bytes, width: int = 8) -> str:
    out = io.BytesIO()
    dump(io.BytesIO(data), out, width)
    return out.getvalue().decode("ascii")
