"""strutil.base62

Encode non-negative integers as short base-62 strings and back.
"""
from __future__ import annotations

import operator

__all__ = [
    "BASE62_ALPHABET",
    "int_to_base62",
    "base62_to_int",
]


BASE62_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

_BASE = len(BASE62_ALPHABET)
_DIGIT_VALUES = {ch: i for i, ch in enumerate(BASE62_ALPHABET)}


def int_to_base62(n: int) -> str:
    """Return *n* in base 62, most significant digit first.

    Digits run ``0-9``, then ``a-z``, then ``A-Z``; ``0`` encodes to ``"0"``.
    Raises ``ValueError`` for negative numbers and ``TypeError`` for
    anything that is not an integer.
    """
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"int_to_base62 expects a non-negative integer, got {n}")
    if n == 0:
        return BASE62_ALPHABET[0]

    digits = []
    while n > 0:
        n, rem = divmod(n, _BASE)
        digits.append(BASE62_ALPHABET[rem])
    return "".join(reversed(digits))


def base62_to_int(s: str) -> int:
    """Decode a base-62 string produced by :func:`int_to_base62`."""
    if not s:
        raise ValueError("base62_to_int expects a non-empty string")

    value = 0
    for ch in s:
        try:
            value = value * _BASE + _DIGIT_VALUES[ch]
        except KeyError:
            raise ValueError(f"invalid base-62 digit {ch!r} in {s!r}") from None
    return value
