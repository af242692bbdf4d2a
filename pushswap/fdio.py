"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

from pushswap.charutil import itoa
from pushswap.strutil import strdup


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    if len(c) != 1:
        raise TypeError("expected a single character")
    stream.write(c)


def putstr_fd(s: str | None, stream: TextIO) -> None:
    """Write ``s`` up to its first NUL; a missing string writes nothing."""
    if s is None:
        return
    stream.write(strdup(s))


def putendl_fd(s: str | None, stream: TextIO) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    stream.write(strdup(s) + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    stream.write(itoa(n))