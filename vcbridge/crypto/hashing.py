"""
Module 03 - Hashing Utilities
Basic hashing helpers shared by native and circuit digest strategies.

This module provides:
- SHA-256 hashing for raw bytes
- SHA-256 reduced into the BN254 scalar field

Security/Determinism Notes:
- Always hash raw bytes exactly as given (no stripping of padding spaces)
- All operations are deterministic
"""
from __future__ import annotations

import hashlib

from vcbridge.codec.field_elements import to_field


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"abc").hex()
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    return hashlib.sha256(data).digest()


def sha256_to_field(*values: int) -> int:
    """
    Hash integers with SHA-256 and map the digest into the field.

    Each value is encoded as 32 fixed-width big-endian bytes, so the same
    inputs always hash identically.

    Args:
        *values: Non-negative integers (field elements or byte values)

    Returns:
        Integer in [0, FIELD_MODULUS)
    """
    h = hashlib.sha256()
    for v in values:
        h.update(v.to_bytes(32, byteorder="big", signed=False))
    return to_field(int.from_bytes(h.digest(), byteorder="big"))


__all__ = [
    "sha256",
    "sha256_to_field",
]
