from __future__ import annotations

from typing import Iterator, List


class HexlineError(Exception):
    """
    Base class for every failure reported by hexline.

    The low-level cause (usually an OSError) is attached with ``raise ... from``
    and can be walked with :meth:`chain`.
    """

    def chain(self) -> Iterator[BaseException]:
        return iter_chain(self)


class ArgumentError(HexlineError):
    """
    Malformed option or unusable width; raised before any I/O happens.
    """
    ...


class OpenError(HexlineError):
    """
    A file named on the command line could not be opened.

    Attributes:
        path: The path as given by the user.
    """
    def __init__(self, path: str) -> None:
        super().__init__(f"cannot open {path}")
        self.path = path


class ReadError(HexlineError):
    def __init__(self, msg: str = "read error") -> None:
        super().__init__(msg)


class WriteError(HexlineError):
    def __init__(self, msg: str = "write error") -> None:
        super().__init__(msg)


def iter_chain(err: BaseException) -> Iterator[BaseException]:
    seen = set()
    cur: BaseException | None = err
    while cur is not None and id(cur) not in seen:
        seen.add(id(cur))
        yield cur
        # only explicit ``raise ... from`` links, not incidental context
        cur = cur.__cause__


def _describe(err: BaseException) -> str:
    msg = str(err)
    return msg if msg else type(err).__name__


def format_error_chain(err: BaseException) -> List[str]:
    """Return ``error: ...`` followed by one ``caused by: ...`` line per cause."""
    lines = []
    for i, e in enumerate(iter_chain(err)):
        prefix = "error" if i == 0 else "caused by"
        lines.append(f"{prefix}: {_describe(e)}")
    return lines
