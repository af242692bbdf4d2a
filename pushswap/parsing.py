"""Turning command-line words into the list of integers to sort."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = frozenset(" \t\n\v\f\r")


class ParseError(ValueError):
    """Raised for any invalid input; its message is always ``Error``."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def is_space(char: str) -> bool:
    """True for the six ASCII whitespace characters."""
    return char in _SPACES


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def atol(text: str) -> int:
    """Read an optionally signed decimal number after leading whitespace.

    Reading stops at the first character that is not a digit.
    """
    stripped = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if not _is_digit(char):
            break
        result = result * 10 + (ord(char) - ord("0"))
    return sign * result


def is_valid_number(token: str) -> bool:
    """Check that a token has the shape of one signed decimal number."""
    body = token.lstrip(" \t\n\v\f\r")
    if not body:
        return False
    first = body[0]
    if not (first in "+-" or _is_digit(first)):
        return False
    if first in "+-" and not (len(body) > 1 and _is_digit(body[1])):
        return False
    return all(_is_digit(char) or is_space(char) for char in body[1:])


def validate_args(args: Sequence[str]) -> None:
    """Reject any argument that is empty or holds only whitespace."""
    for arg in args:
        if all(is_space(char) for char in arg):
            raise ParseError()


def parse_args(args: Sequence[str]) -> list[int]:
    """Join the arguments, split them on spaces and return the numbers.

    Raises ParseError on a malformed number, a value outside the 32-bit
    signed range, a duplicate, or when no number is given at all.
    """
    tokens = [word for word in " ".join(args).split(" ") if word]
    if not all(is_valid_number(token) for token in tokens):
        raise ParseError()
    values = []
    for token in tokens:
        value = atol(token)
        if not INT_MIN <= value <= INT_MAX:
            raise ParseError()
        values.append(value)
    if len(set(values)) != len(values):
        raise ParseError()
    if not values:
        raise ParseError()
    return values