"""String helpers that follow C string conventions.

A NUL character ends a string, and ``None`` stands for a missing string.
Character buffers passed to ``strlcpy``, ``strlcat`` and ``striteri`` are
lists of single characters, terminated by ``"\\0"``.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

NUL = "\0"


def _cstr(s: str) -> str:
    """The part of ``s`` before its first NUL."""
    end = s.find(NUL)
    return s if end < 0 else s[:end]


def _char(c: str | int) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise TypeError("expected a single character")
    return c


def _buffer_text(buf: MutableSequence[str]) -> str:
    """Characters of a buffer up to its terminating NUL or its end."""
    return _cstr("".join(buf))


def _write(buf: MutableSequence[str], start: int, text: str) -> None:
    end = start + len(text)
    if end > len(buf):
        raise IndexError(f"buffer of {len(buf)} characters cannot hold {end}")
    buf[start:end] = list(text)


def strlen(s: str | None) -> int:
    """Length of ``s`` up to its first NUL; 0 for a missing string."""
    if s is None:
        return 0
    return len(_cstr(s))


def split(s: str | None, c: str | int) -> list[str] | None:
    """The non-empty pieces of ``s`` between occurrences of ``c``."""
    if s is None:
        return None
    sep = _char(c)
    text = _cstr(s)
    if sep == NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Looking for NUL finds the end of the string.
    """
    ch = _char(c)
    text = _cstr(s)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Looking for NUL finds the end of the string.
    """
    ch = _char(c)
    text = _cstr(s)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s`` up to its first NUL."""
    return _cstr(s)


def striteri(
    chars: MutableSequence[str] | None,
    f: Callable[[int, str], str | None] | None,
) -> None:
    """Call ``f(index, char)`` on each character up to the NUL.

    A character returned by ``f`` replaces the one in ``chars``; None keeps it.
    """
    if chars is None or f is None:
        return
    for index, char in enumerate(chars):
        if char == NUL:
            break
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = _char(replacement)


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """``s1`` followed by ``s2``; a missing side counts as empty, both missing give None."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return _cstr(s2)
    if s2 is None:
        return _cstr(s1)
    return _cstr(s1) + _cstr(s2)


def strlcpy(dst: MutableSequence[str], src: str, size: int) -> int:
    """Copy at most ``size - 1`` characters of ``src`` into ``dst`` and end it with NUL.

    Returns the length of ``src``. Nothing is written when ``size`` is 0.
    """
    text = _cstr(src)
    if size < 0:
        raise ValueError("negative size")
    if size == 0:
        return len(text)
    _write(dst, 0, text[: size - 1] + NUL)
    return len(text)


def strlcat(dst: MutableSequence[str], src: str, size: int) -> int:
    """Append ``src`` to the text in ``dst`` so that the result fits in ``size``.

    Returns the length the full result would have had, or ``len(src) + size``
    when ``size`` is no larger than the text already in ``dst``.
    """
    if size < 0:
        raise ValueError("negative size")
    existing = len(_buffer_text(dst))
    text = _cstr(src)
    if size <= existing:
        return len(text) + size
    _write(dst, existing, text[: size - existing - 1] + NUL)
    return existing + len(text)


def strmapi(s: str | None, f: Callable[[int, str], str] | None) -> str | None:
    """A new string made of ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(_char(f(index, char)) for index, char in enumerate(_cstr(s)))


def strncmp(s1: str | None, s2: str | None, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders the strings.

    Returns -1 when either string is missing.
    """
    if s1 is None or s2 is None:
        return -1
    a = _cstr(s1) + NUL
    b = _cstr(s2) + NUL
    for index in range(n):
        x, y = a[index], b[index]
        if x != y or x == NUL:
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first ``little`` in ``big`` lying within its first ``length`` characters."""
    haystack = _cstr(big)
    needle = _cstr(little)
    if not needle:
        return 0
    for index in range(min(len(haystack), max(length, 0))):
        if index + len(needle) <= length and haystack.startswith(needle, index):
            return index
    return None


def strtrim(s: str | None, charset: str | None) -> str | None:
    """``s`` without the characters of ``charset`` at its start and end."""
    if s is None or charset is None:
        return None
    return _cstr(s).strip(_cstr(charset))


def substr(s: str | None, start: int, length: int) -> str | None:
    """At most ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start : start + length]