"""Slot codec.

A slot file holds exactly one unsigned 64-bit integer, big-endian, with no header.
"""

from __future__ import annotations

import struct
from typing import Optional

_SLOT = struct.Struct(">Q")

SLOT_SIZE = _SLOT.size
U64_MAX = (1 << 64) - 1


def check_u64(value: int, name: str = "value") -> int:
    """Return `value` unchanged if it fits in an unsigned 64-bit integer, else raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > U64_MAX:
        raise ValueError(f"{name} must be between 0 and {U64_MAX}, got {value}")
    return value


def encode(value: int) -> bytes:
    return _SLOT.pack(check_u64(value))


def decode(raw: bytes) -> Optional[int]:
    """Decode slot content; anything that is not exactly 8 bytes is treated as corrupt (None)."""
    if len(raw) != SLOT_SIZE:
        return None
    (value,) = _SLOT.unpack(raw)
    return value
