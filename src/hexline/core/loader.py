from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Union

from hexline.core.errors import OpenError


def open_source(path: Union[str, Path]) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as e:
        raise OpenError(str(path)) from e
