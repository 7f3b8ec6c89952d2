"""32-bit FNV-1a hashing of strings and byte sequences."""

from __future__ import annotations

FNV_32_OFFSET_BASIS = 0x811C9DC5
FNV_32_PRIME = 0x01000193
_MASK_32 = 0xFFFFFFFF


def fnv1a_32(data: bytes) -> int:
    """Return the 32-bit FNV-1a hash of ``data``."""
    value = FNV_32_OFFSET_BASIS
    for byte in bytes(data):
        value ^= byte
        value = (value * FNV_32_PRIME) & _MASK_32
    return value


def string_hash(text: str) -> int:
    """Return the 32-bit FNV-1a hash of ``text`` encoded as UTF-8."""
    return fnv1a_32(text.encode("utf-8"))