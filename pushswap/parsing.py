"""Validation of command-line numbers and construction of the starting stack."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.stack import Node, Stack

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised when the program's arguments are not acceptable."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_long(text: str) -> int:
    """Read a leading integer the way atoi does, clamped to the 64-bit range."""
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    magnitude = int("".join(digits)) if digits else 0
    if negative:
        return max(-magnitude, LONG_MIN)
    return min(magnitude, LONG_MAX)


def is_digits(text: str) -> bool:
    """True for an optional sign followed by one or more decimal digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(char in _DIGITS for char in body)


def _fits_int(text: str) -> bool:
    return INT_MIN <= parse_long(text) <= INT_MAX


def has_duplicates(args: Sequence[str]) -> bool:
    """True when two arguments denote the same number."""
    seen: set[int] = set()
    for arg in args:
        number = parse_long(arg)
        if number in seen:
            return True
        seen.add(number)
    return False


def validate(args: Sequence[str]) -> None:
    """Raise InputError unless every argument is a distinct 32-bit integer."""
    for arg in args:
        if not is_digits(arg) or not _fits_int(arg):
            raise InputError()
    if has_duplicates(args):
        raise InputError()


def build_stack(args: Iterable[str]) -> Stack:
    """Build stack a from the arguments, first argument on top."""
    nodes = []
    for arg in args:
        number = parse_long(arg)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError()
        nodes.append(Node(number))
    return Stack(nodes)