"""Byte-buffer helpers: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_range(length: int, start: int, n: int, name: str) -> None:
    if n < 0 or start < 0 or start + n > length:
        raise ValueError(f"{name}: range of {n} bytes at {start} exceeds buffer of {length}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (taken modulo 256) and return ``buf``."""
    _check_range(len(buf), 0, n, "memset")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("calloc: negative size")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError("calloc: size overflows")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_range(len(data), 0, n, "memchr")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0 if they agree."""
    _check_range(len(a), 0, n, "memcmp")
    _check_range(len(b), 0, n, "memcmp")
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_range(len(dest), 0, n, "memcpy")
    _check_range(len(src), 0, n, "memcpy")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from one offset to another, overlap allowed."""
    _check_range(len(buf), dst_offset, n, "memmove")
    _check_range(len(buf), src_offset, n, "memmove")
    buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf