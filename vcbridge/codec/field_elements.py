"""
Field-element packing for arithmetic hash circuits.

Circuits over the BN254 scalar field take their inputs as field elements
rather than words. A field's padded bytes are read as one unsigned integer
(big- or little-endian) and reduced modulo the field.
"""
from __future__ import annotations

from typing import Literal

from vcbridge.schemas.layout import SerializedRecord

# BN254 scalar field modulus
FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617

ByteOrder = Literal["big", "little"]


def to_field(value: int) -> int:
    """Reduce an integer into the field."""
    return value % FIELD_MODULUS


def bytes_to_field_element(data: bytes, byteorder: ByteOrder = "big") -> int:
    """
    Read bytes as an unsigned integer and reduce it into the field.

    Inputs of 31 bytes or fewer never wrap, so they are recoverable.
    """
    return to_field(int.from_bytes(data, byteorder=byteorder, signed=False))


def pack_fields(
    serialized: SerializedRecord,
    byteorder: ByteOrder = "big",
) -> list[int]:
    """One field element per layout field, in layout order."""
    return [
        bytes_to_field_element(serialized.field_bytes(name), byteorder)
        for name in serialized.layout.names
    ]


def bytes_to_signals(data: bytes) -> list[int]:
    """One field element per byte, as a circuit reading a char-code array."""
    return list(data)
