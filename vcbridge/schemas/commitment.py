"""
Module 01 - Schemas & Errors
File: commitment.py

Purpose: 256-bit hash commitment with interchangeable renderings.

A Commitment is stored as a single integer. The byte digest rendering is
its 32-byte big-endian encoding and the word rendering is that digest read
as eight big-endian 32-bit words, so two commitments are equivalent exactly
when their integers are equal.
"""

from __future__ import annotations

import re
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidAlignmentException, InvalidHexException

DIGEST_SIZE: int = 32
DIGEST_WORDS: int = 8
_MAX_VALUE: int = 1 << 256
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


class Commitment(BaseModel):
    """A 256-bit hash value."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: int = Field(..., description="Digest as an unsigned 256-bit integer")

    @field_validator("value")
    @classmethod
    def validate_range(cls, v: int) -> int:
        if v < 0 or v >= _MAX_VALUE:
            raise ValueError("Commitment value must fit in 256 bits")
        return v

    @classmethod
    def from_digest(cls, digest: bytes) -> "Commitment":
        """Build from a 32-byte digest."""
        if len(digest) != DIGEST_SIZE:
            raise InvalidAlignmentException(
                f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}",
                length=len(digest),
            )
        return cls(value=int.from_bytes(digest, "big"))

    @classmethod
    def from_words(cls, words: Sequence[int]) -> "Commitment":
        """Build from eight big-endian 32-bit words."""
        if len(words) != DIGEST_WORDS:
            raise InvalidAlignmentException(
                f"Digest must be {DIGEST_WORDS} words, got {len(words)}",
                length=len(words) * 4,
            )
        value = 0
        for word in words:
            if not 0 <= word <= 0xFFFFFFFF:
                raise ValueError(f"Word out of 32-bit range: {word}")
            value = (value << 32) | word
        return cls(value=value)

    @classmethod
    def from_hex(cls, hex_digest: str) -> "Commitment":
        """Build from a 64-character hex digest, with or without 0x prefix."""
        content = hex_digest[2:] if hex_digest.startswith("0x") else hex_digest
        if len(content) != DIGEST_SIZE * 2:
            raise InvalidHexException(
                f"Hex digest must be {DIGEST_SIZE * 2} characters, got {len(content)}",
                details={"length": len(content)},
            )
        if not _HEX_DIGITS.fullmatch(content):
            raise InvalidHexException("Invalid hex characters in digest")
        return cls(value=int(content, 16))

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(DIGEST_SIZE, "big")

    def to_words(self) -> list[int]:
        return [
            (self.value >> (32 * (DIGEST_WORDS - 1 - i))) & 0xFFFFFFFF
            for i in range(DIGEST_WORDS)
        ]

    def to_hex(self) -> str:
        """Lowercase 64-character hex digest without prefix."""
        return self.to_bytes().hex()

    def is_equivalent(self, other: "Commitment") -> bool:
        return self.value == other.value
