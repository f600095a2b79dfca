"""Parsing of command-line numbers into a ranked stack."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, Sequence

from .stack import Element, Stack

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
_INT_MIN_TEXT = "-2147483648"


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def parse_int(text: str) -> int:
    """Parse a 32-bit signed integer with optional surrounding whitespace.

    Raises ParseError on anything else, including values out of range.
    """
    body = text.lstrip(_WHITESPACE)
    if body == _INT_MIN_TEXT:
        return INT_MIN
    negative = body.startswith("-")
    rest = body[1:] if body.startswith(("+", "-")) else body
    if not rest:
        raise ParseError(f"not a number: {text!r}")
    if rest[0] in "+-":
        raise ParseError(f"repeated sign: {text!r}")
    digits = "".join(takewhile(_DIGITS.__contains__, rest))
    if rest[len(digits):].strip(_WHITESPACE):
        raise ParseError(f"not a number: {text!r}")
    magnitude = int(digits) if digits else 0
    if magnitude > INT_MAX:
        raise ParseError(f"out of range: {text!r}")
    return -magnitude if negative else magnitude


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def has_duplicates(values: Iterable[int]) -> bool:
    """True if any value occurs more than once."""
    items = list(values)
    return len(set(items)) != len(items)


def rank(values: Sequence[int]) -> list[int]:
    """The rank of each value among all values, listed in input order."""
    order = sorted(range(len(values)), key=values.__getitem__)
    ranks = [0] * len(values)
    for position, input_position in enumerate(order):
        ranks[input_position] = position
    return ranks


def build_stack(args: Sequence[str]) -> Stack:
    """Build a ranked stack from number strings, top first."""
    if not args:
        raise ParseError("no numbers given")
    values = []
    for text in args:
        if not text:
            raise ParseError("empty argument")
        values.append(parse_int(text))
    if has_duplicates(values):
        raise ParseError("duplicate values")
    return Stack(Element(value, index) for value, index in zip(values, rank(values)))