"""
Module 02 - Word Encoding
Byte array <-> big-endian 32-bit word array conversion.

This module provides:
- bytes_to_words / words_to_bytes (exact inverses for 4-byte aligned input)
- string_to_words with explicit right space-padding to a target length
- hex_digest_to_words for 32-byte hex digests
- words_to_hex / hex_to_words for the "0x" + 8 hex digit interchange format

Round-trip law:
    words_to_bytes(bytes_to_words(b)) == b   for len(b) % 4 == 0
"""
from __future__ import annotations

import re
import struct
from typing import Sequence

from vcbridge.schemas.commitment import Commitment
from vcbridge.schemas.errors import (
    FieldTooLongException,
    InvalidAlignmentException,
    InvalidHexException,
)
from vcbridge.schemas.layout import WORD_SIZE

SPACE: bytes = b" "
_WORD_MAX: int = 0xFFFFFFFF
_HEX_WORD = re.compile(r"0x[0-9a-fA-F]{8}")


def bytes_to_words(buf: bytes) -> list[int]:
    """
    Read a byte buffer as big-endian unsigned 32-bit words.

    Args:
        buf: Bytes whose length is a multiple of 4

    Returns:
        List of words, one per 4-byte group

    Raises:
        InvalidAlignmentException: If len(buf) is not a multiple of 4

    Example:
        >>> bytes_to_words(b"abcd")
        [1633837924]
    """
    if len(buf) % WORD_SIZE != 0:
        raise InvalidAlignmentException(
            f"Byte length {len(buf)} is not a multiple of {WORD_SIZE}",
            length=len(buf),
        )
    return list(struct.unpack(f">{len(buf) // WORD_SIZE}I", buf))


def words_to_bytes(words: Sequence[int]) -> bytes:
    """
    Inverse of bytes_to_words().

    Raises:
        ValueError: If a word is outside the unsigned 32-bit range
    """
    for word in words:
        if not 0 <= word <= _WORD_MAX:
            raise ValueError(f"Word out of 32-bit range: {word}")
    return struct.pack(f">{len(words)}I", *words)


def pad_right(data: bytes, length: int, field: str = "value") -> bytes:
    """
    Right-pad data with spaces to exactly `length` bytes.

    Data longer than `length` is an error, never truncated.
    """
    if len(data) > length:
        raise FieldTooLongException(field=field, max_width=length, actual_width=len(data))
    return data + SPACE * (length - len(data))


def string_to_words(text: str, target_length: int) -> list[int]:
    """
    Encode a string as UTF-8, right-pad with spaces, and convert to words.

    Args:
        text: String to encode
        target_length: Padded byte length; must be a multiple of 4

    Raises:
        InvalidAlignmentException: If target_length is not a multiple of 4
        FieldTooLongException: If the encoded string exceeds target_length
    """
    if target_length % WORD_SIZE != 0:
        raise InvalidAlignmentException(
            f"Expected length must be divisible by {WORD_SIZE}, got {target_length}",
            length=target_length,
        )
    return bytes_to_words(pad_right(text.encode("utf-8"), target_length))


def hex_digest_to_words(hex_digest: str) -> list[int]:
    """
    Convert a 32-byte hex digest into eight big-endian words.

    Accepts the digest with or without a 0x prefix.

    Raises:
        InvalidHexException: On a wrong length or non-hex characters
    """
    return Commitment.from_hex(hex_digest).to_words()


def word_to_hex(word: int) -> str:
    """Render one word as "0x" + 8 lowercase hex digits."""
    if not 0 <= word <= _WORD_MAX:
        raise ValueError(f"Word out of 32-bit range: {word}")
    return f"0x{word:08x}"


def words_to_hex(words: Sequence[int]) -> list[str]:
    """Render a word array in the interchange format of circuit evaluators."""
    return [word_to_hex(w) for w in words]


def hex_to_words(hex_words: Sequence[str]) -> list[int]:
    """
    Parse "0x"-prefixed 8-digit hex words back into integers.

    Raises:
        InvalidHexException: On a missing prefix, wrong width or bad digits
    """
    words = []
    for index, item in enumerate(hex_words):
        if not _HEX_WORD.fullmatch(item):
            raise InvalidHexException(
                f"Word {index} must be '0x' followed by 8 hex digits, got {item!r}",
                details={"index": index},
            )
        words.append(int(item[2:], 16))
    return words


__all__ = [
    "bytes_to_words",
    "words_to_bytes",
    "pad_right",
    "string_to_words",
    "hex_digest_to_words",
    "word_to_hex",
    "words_to_hex",
    "hex_to_words",
]
