"""Default hashing, equality and capacity-growth policies used by the containers."""

from __future__ import annotations

import struct
from typing import Any

_PRIME = 29
_SIZE_MASK = (1 << 64) - 1


def _signed_byte_sum(data: bytes) -> int:
    """Sum the bytes as signed chars, the way character strings are hashed."""
    return sum(b - 256 if b >= 128 else b for b in data)


def _raw_bytes(key: Any) -> bytes:
    """Return a fixed-width byte image of a plain value."""
    if isinstance(key, bool):
        return bytes([int(key)])
    if isinstance(key, int):
        width = max(8, (key.bit_length() + 8) // 8)
        return key.to_bytes(width, "little", signed=True)
    if isinstance(key, float):
        return struct.pack("<d", key)
    return hash(key).to_bytes(8, "little", signed=True)


def default_hash(key: Any) -> int:
    """Hash a key by summing its bytes, each multiplied by 29.

    Strings and byte strings are hashed character by character (characters
    taken as signed bytes); other values are hashed over their raw byte image.
    The result is an unsigned 64-bit value.
    """
    if isinstance(key, str):
        total = _signed_byte_sum(key.encode("utf-8"))
    elif isinstance(key, (bytes, bytearray)):
        total = _signed_byte_sum(bytes(key))
    else:
        total = sum(_raw_bytes(key))
    return (total * _PRIME) & _SIZE_MASK


def default_equality(lhs: Any, rhs: Any) -> bool:
    """Compare two values for equality; strings compare by content."""
    return bool(lhs == rhs)


def default_reserve_strategy(capacity: int) -> int:
    """Return the next capacity: 1 for an empty container, otherwise double."""
    if capacity < 0:
        raise ValueError("Capacity cannot be negative")
    return 1 if capacity == 0 else capacity * 2