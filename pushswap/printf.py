"""A small formatter with the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

_INT_MIN = -2147483648


class FormatError(ValueError):
    """Raised when formatting fails; ``written`` holds the text produced before that."""

    def __init__(self, message: str, written: str = "") -> None:
        super().__init__(message)
        self.written = written


def _int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _positive(value: int) -> str:
    if value > 10:
        return _positive(value // 10) + _positive(value % 10)
    return chr(value + ord("0"))


def _signed(value: int) -> str:
    value = _int32(value)
    if value == _INT_MIN:
        return "-2147483648"
    if value < 0:
        return "-"
    return _positive(value)


def _unsigned(value: int) -> str:
    value &= 0xFFFFFFFF
    head = _unsigned(value // 10) if value > 10 else ""
    return head + str(value % 10)


def _string(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError("%s needs a string")
    return value


def _char(value: str | int) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(value & 0xFF)


def _hex(value: int, upper: bool) -> str:
    return format(value & 0xFFFFFFFF, "X" if upper else "x")


def _pointer(address: int | None) -> str:
    if not address:
        return "0x0"
    return "0x1" + _hex(address, upper=False)


_CONVERSIONS: dict[str, Callable[[object], str]] = {
    "d": _signed,
    "i": _signed,
    "s": _string,
    "c": _char,
    "X": lambda value: _hex(value, upper=True),
    "x": lambda value: _hex(value, upper=False),
    "p": _pointer,
    "u": _unsigned,
}

# These conversions write their output and are then reported as failed.
_REPORTED_AS_FAILED = frozenset("dis")


def render(fmt: str, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    if fmt is None:
        raise FormatError("no format string")
    out: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends after '%'", "".join(out))
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise FormatError(f"unknown conversion '%{spec}'", "".join(out))
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for '%{spec}'", "".join(out)) from None
        out.append(convert(value))
        if spec in _REPORTED_AS_FAILED:
            raise FormatError(f"conversion '%{spec}' failed", "".join(out))
    return "".join(out)


def printf(fmt: str, *args: object, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default) and return its length.

    On failure the text produced so far is still written before the error is raised.
    """
    stream = sys.stdout if file is None else file
    try:
        text = render(fmt, *args)
    except FormatError as error:
        stream.write(error.written)
        raise
    stream.write(text)
    return len(text)