from __future__ import annotations


def is_printable(b: int) -> bool:
    # 0x7F and 0x80-0x9F are control characters, 0xA0 and up are not 7-bit ASCII
    return 0x20 <= b <= 0x7E


def ascii_char(b: int) -> str:
    return chr(b) if is_printable(b) else "?"


def format_line(chunk: bytes, width: int) -> str:
    """Render one chunk as ``XX XX ...  ascii`` with the ASCII column at 3*width+2."""
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")
    if len(chunk) > width:
        raise ValueError(f"chunk of {len(chunk)} bytes does not fit width {width}")
    if not chunk:
        return ""

    hexpart = "".join(f"{b:02X} " for b in chunk)
    asciipart = "".join(ascii_char(b) for b in chunk)
    return f"{hexpart:<{width*3}}  {asciipart}\n"
