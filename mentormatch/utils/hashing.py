"""Hashing utilities for deriving ordering seeds.

This module provides deterministic hashing functions for:
- seed_from_string: 32-bit rolling hash of a user-identifying string
- to_int32: wrap an arbitrary Python int to signed 32-bit range

Python integers never overflow, so every step is masked explicitly. Without the
masking the derived seeds (and therefore every per-user ordering) would diverge
from the seeds produced by the mobile clients.
"""

from typing import Iterator

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN_BIT = 0x80000000


def to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range.

    Args:
        value: Any Python integer

    Returns:
        Integer in [-2**31, 2**31 - 1] with two's complement wraparound

    Example:
        >>> to_int32(2**31)
        -2147483648
    """
    value &= _UINT32_MASK
    if value & _INT32_SIGN_BIT:
        return value - (1 << 32)
    return value


def _utf16_code_units(value: str) -> Iterator[int]:
    """Yield UTF-16 code units, splitting astral characters into surrogate pairs."""
    encoded = value.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        yield encoded[i] | (encoded[i + 1] << 8)


def seed_from_string(value: str) -> int:
    """Derive a non-negative ordering seed from a string.

    Rolling hash over UTF-16 code units: ``hash = hash * 31 + unit`` truncated
    to signed 32 bits after every step, then the absolute value of the result.
    The empty string hashes to 0.

    Args:
        value: Seed material, usually the viewer's email

    Returns:
        Integer in [0, 2**31]. ``2**31`` is produced when the hash lands on the
        most negative 32-bit value.

    Example:
        >>> seed_from_string("hello")
        99162322
    """
    hash_value = 0
    for unit in _utf16_code_units(value):
        hash_value = to_int32(hash_value * 31 + unit)
    return abs(hash_value)
