"""Literal parsing for typed environment values.

Integers follow a strict base-10 grammar: an optional sign followed by ASCII
digits. Python's int() is more permissive (underscores, surrounding
whitespace, non-ASCII digits), so it is only applied after the grammar check.
"""

from __future__ import annotations

import re

from envtier.errors import ParseError

_INT_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(key: str, value: str, bits: int = 64) -> int:
    """Parse a signed base-10 integer that must fit in `bits` bits.

    Args:
        key: Variable name (for error messages only).
        value: Trimmed string value.
        bits: Target width of the signed integer.

    Returns:
        The parsed integer.

    Raises:
        ParseError: Invalid syntax, or the value is out of range.
    """
    target = f"int{bits}"
    if not _INT_RE.fullmatch(value):
        raise ParseError(key, value, target)

    parsed = int(value)
    limit = 1 << (bits - 1)
    if not -limit <= parsed < limit:
        raise ParseError(key, value, target, reason="value out of range")
    return parsed


def parse_bool(key: str, value: str) -> bool:
    """Parse one of the conventional boolean literals."""
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ParseError(key, value, "bool")


def narrow_int(value: int, bits: int) -> int:
    """Truncate `value` to a two's-complement signed integer of `bits` bits."""
    mask = (1 << bits) - 1
    narrowed = value & mask
    if narrowed >= 1 << (bits - 1):
        narrowed -= 1 << bits
    return narrowed


def sign_flipped(original: int, narrowed: int) -> bool:
    """True when narrowing turned a positive value non-positive or vice versa."""
    return (original <= 0) == (narrowed > 0)
