"""A small printf supporting the conversions ``c s p d i u x X %``."""

from __future__ import annotations

import sys
from typing import Any, Iterator

CONVERSIONS = "cspdiuxX%"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    return ((value + 2**31) & _UINT_MASK) - 2**31


def _hex(value: int, digits: str) -> str:
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if not value:
            break
    return "".join(reversed(out))


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise ValueError(f"%c expects a single character, got {arg!r}")
            return arg
        return chr(arg & 0xFF)
    if spec == "s":
        if arg is None:
            return "(null)"
        text = str(arg)
        end = text.find("\0")
        return text if end < 0 else text[:end]
    if spec in "di":
        return str(_to_int32(int(arg)))
    if spec == "u":
        return str(int(arg) & _UINT_MASK)
    if spec == "x":
        return _hex(int(arg) & _UINT_MASK, HEX_LOWER)
    if spec == "X":
        return _hex(int(arg) & _UINT_MASK, HEX_UPPER)
    # spec == "p"
    address = 0 if arg is None else int(arg) & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _hex(address, HEX_LOWER)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    A ``%`` followed by a character that is not a known conversion is
    copied as is. Missing arguments raise ``TypeError``; a ``%`` at the
    very end of the format raises ``ValueError``.
    """
    arg_iter = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        if spec in CONVERSIONS:
            pieces.append(_convert(spec, arg_iter))
        else:
            pieces.append("%")
            pieces.append(spec)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)