"""String inspection, searching, comparison and integer conversion.

Strings follow C-string rules: a NUL character (``"\\0"``) ends the
string, and anything after it is ignored.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Optional, Tuple, Union

from libft.charclass import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _terminated(s: str) -> str:
    """Return ``s`` cut at its first NUL character, if it has one."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _char(c: Union[int, str]) -> str:
    """Return ``c`` as a one-character string; integers are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _wrap_int(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def strlen(s: str) -> int:
    """Return the number of characters before the terminating NUL."""
    return len(_terminated(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the copied string (at most ``size - 1`` characters) and the
    full length of ``src``, so truncation shows as a length >= ``size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    src = _terminated(src)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full concatenation
    would have had. When ``size`` does not exceed the length of ``dst``
    nothing is appended and the length reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst = _terminated(dst)
    src = _terminated(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    s = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    s = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the codes of the first differing pair, the
    end of a string counting as code 0, or 0 if no difference is found.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    a = _terminated(s1)[:n]
    b = _terminated(s2)[:n]
    for i in range(max(len(a), len(b))):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
    return 0


def strnstr(big: str, small: str, length: int) -> Optional[int]:
    """Return the index of ``small`` within the first ``length`` characters of ``big``.

    An empty ``small`` is found at index 0. Returns ``None`` when absent.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    small = _terminated(small)
    if not small:
        return 0
    index = _terminated(big)[:length].find(small)
    return None if index < 0 else index


def atoi(s: str) -> int:
    """Convert the leading decimal integer of ``s``.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. The result wraps to the signed 32-bit range.
    Returns 0 if no digits are found.
    """
    rest = _terminated(s).lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of a signed 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the signed 32-bit range")
    return str(n)