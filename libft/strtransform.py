"""Building new strings from existing ones.

Strings follow C-string rules: a NUL character (``"\\0"``) ends the
string, and anything after it is ignored.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from libft.strfuncs import strlen


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    return s[: strlen(s)]


def _separator(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return _cstr(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end of the string gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    s = _cstr(s)
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    charset = _cstr(charset)
    if not charset:
        return _cstr(s)
    return _cstr(s).strip(charset)


def split(s: str, sep: Union[int, str]) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    s = _cstr(s)
    return [word for word in s.split(_separator(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(_cstr(s)))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Apply ``f(index, char)`` to each character of ``chars`` in place.

    Iteration stops at a NUL element. When ``f`` returns a character it
    replaces the original; when it returns ``None`` the character is kept.
    """
    for index, ch in enumerate(list(chars)):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement