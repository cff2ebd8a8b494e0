"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from libft.strfuncs import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def putstr_fd(s: str, fd: int) -> None:
    """Write the string ``s`` to ``fd``."""
    _write_all(fd, s.encode())


def putendl_fd(s: str, fd: int) -> None:
    """Write the string ``s`` followed by a newline to ``fd``."""
    _write_all(fd, (s + "\n").encode())


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the signed 32-bit integer ``n`` to ``fd``."""
    putstr_fd(itoa(n), fd)