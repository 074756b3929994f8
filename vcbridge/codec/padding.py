"""
Module 02 - Block Padding
Padding policies that shape a serialized record for a hash circuit.

This module provides two interchangeable policies:
- LengthPaddingScheme: Merkle-Damgard style padding into a single block
  (0x80 marker, zero fill, 8-byte big-endian bit length)
- ChunkSplitScheme: exact partition into N equal chunks, no suffix

Both are pure: no state survives a call and preconditions are checked
before any output is built.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

from vcbridge.schemas.errors import ChunkSizeMismatchException, PaddingOverflowException
from vcbridge.schemas.layout import WORD_SIZE

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Sequence)

PADDING_MARKER: bytes = b"\x80"
LENGTH_SUFFIX_SIZE: int = 8


class BlockPadder(ABC):
    """Base class for block padding policies."""

    name: str = "base"

    @abstractmethod
    def pad(self, message: bytes) -> bytes:
        """Return the padded message (PaddedBlock)."""

    @abstractmethod
    def blocks(self, message: bytes) -> list[bytes]:
        """Return the padded message partitioned into its blocks."""


class LengthPaddingScheme(BlockPadder):
    """
    Single-block length padding.

    Output layout for a message m of L bytes and block size B:
        m || 0x80 || 0x00 * k || uint64_be(8 * L)
    where k is the smallest value making the total a multiple of B.

    The downstream circuit ingests exactly one block, so L must not exceed
    B - 9 (55 bytes for B = 64).
    """

    name = "length_padding"

    def __init__(self, block_size: int = 64) -> None:
        if block_size < 16 or block_size % WORD_SIZE != 0:
            raise ValueError(
                f"Block size must be a multiple of {WORD_SIZE} and at least 16, "
                f"got {block_size}"
            )
        self.block_size = block_size

    @property
    def capacity(self) -> int:
        """Largest message that still fits in one block."""
        return self.block_size - len(PADDING_MARKER) - LENGTH_SUFFIX_SIZE

    def pad(self, message: bytes) -> bytes:
        """
        Pad a message into a single block.

        Raises:
            PaddingOverflowException: If len(message) > capacity

        Example:
            >>> padded = LengthPaddingScheme(64).pad(b"abc")
            >>> len(padded), padded[3], padded[-1]
            (64, 128, 24)
        """
        if len(message) > self.capacity:
            raise PaddingOverflowException(length=len(message), capacity=self.capacity)

        zero_count = (self.block_size - LENGTH_SUFFIX_SIZE - len(message) - 1) % self.block_size
        bit_length = len(message) * 8
        # Inputs stay far below 2^32 bits, so the high four bytes are zero.
        suffix = bytes(4) + bit_length.to_bytes(4, "big")

        padded = message + PADDING_MARKER + bytes(zero_count) + suffix
        logger.debug(
            f"Length-padded {len(message)} bytes into {len(padded)} "
            f"(block size {self.block_size})"
        )
        return padded

    def blocks(self, message: bytes) -> list[bytes]:
        padded = self.pad(message)
        return [
            padded[i:i + self.block_size]
            for i in range(0, len(padded), self.block_size)
        ]


class ChunkSplitScheme(BlockPadder):
    """
    Partition an input into `chunk_count` contiguous equal-size slices.

    Order is preserved and nothing is appended, so concatenating the chunks
    reproduces the input exactly.
    """

    name = "chunk_split"

    def __init__(self, chunk_count: int = 4) -> None:
        if chunk_count <= 0:
            raise ValueError(f"Chunk count must be positive, got {chunk_count}")
        self.chunk_count = chunk_count

    def chunk_size(self, length: int) -> int:
        """
        Raises:
            ChunkSizeMismatchException: If length is not divisible by chunk_count
        """
        if length % self.chunk_count != 0:
            raise ChunkSizeMismatchException(length=length, chunk_count=self.chunk_count)
        return length // self.chunk_count

    def split(self, data: S) -> list[S]:
        """
        Split any sliceable sequence (bytes, list of field elements).

        Raises:
            ChunkSizeMismatchException: If len(data) % chunk_count != 0

        Example:
            >>> ChunkSplitScheme(2).split(b"abcd")
            [b'ab', b'cd']
        """
        size = self.chunk_size(len(data))
        return [data[i * size:(i + 1) * size] for i in range(self.chunk_count)]

    def pad(self, message: bytes) -> bytes:
        self.chunk_size(len(message))
        return message

    def blocks(self, message: bytes) -> list[bytes]:
        return self.split(message)


__all__ = [
    "PADDING_MARKER",
    "LENGTH_SUFFIX_SIZE",
    "BlockPadder",
    "LengthPaddingScheme",
    "ChunkSplitScheme",
]
