"""
Module 02 - Block Padding Unit Tests
Tests for vcbridge/codec/padding.py

Required behaviour:
1. Length padding yields a multiple of the block size for len(m) <= 55
2. Marker byte, zero fill and big-endian bit-length suffix
3. 56-byte message overflows a 64-byte block
4. Chunk split concatenates back to the input
5. Chunk split rejects indivisible lengths
"""
import os

import pytest

from vcbridge.codec.padding import ChunkSplitScheme, LengthPaddingScheme
from vcbridge.schemas.errors import (
    ChunkSizeMismatchException,
    ErrorCodes,
    PaddingOverflowException,
)


class TestLengthPaddingScheme:
    """Tests for single-block length padding."""

    def test_capacity(self):
        assert LengthPaddingScheme(64).capacity == 55

    @pytest.mark.parametrize("length", [0, 1, 3, 52, 54, 55])
    def test_block_multiple(self, length):
        padded = LengthPaddingScheme(64).pad(b"x" * length)

        assert len(padded) % 64 == 0
        assert len(padded) == 64

    def test_all_lengths_up_to_capacity(self):
        scheme = LengthPaddingScheme(64)
        for length in range(56):
            assert len(scheme.pad(os.urandom(length))) == 64

    def test_layout_abc(self):
        """'abc' -> abc || 0x80 || zeros || 0x...18."""
        padded = LengthPaddingScheme(64).pad(b"abc")

        assert padded[:3] == b"abc"
        assert padded[3] == 0x80
        assert padded[4:56] == bytes(52)
        assert padded[56:] == (24).to_bytes(8, "big")

    def test_max_message_has_no_zero_fill(self):
        padded = LengthPaddingScheme(64).pad(b"m" * 55)

        assert padded[55] == 0x80
        assert padded[56:] == (55 * 8).to_bytes(8, "big")

    def test_high_length_bytes_zero(self):
        padded = LengthPaddingScheme(64).pad(b"m" * 52)

        assert padded[56:60] == b"\x00\x00\x00\x00"
        assert int.from_bytes(padded[60:], "big") == 416

    def test_overflow(self):
        """56 bytes does not fit the 55-byte single-block capacity."""
        with pytest.raises(PaddingOverflowException) as exc_info:
            LengthPaddingScheme(64).pad(b"x" * 56)

        assert exc_info.value.code == ErrorCodes.PADDING_OVERFLOW
        assert exc_info.value.length == 56
        assert exc_info.value.capacity == 55

    def test_other_block_size(self):
        scheme = LengthPaddingScheme(32)
        padded = scheme.pad(b"hello")

        assert scheme.capacity == 23
        assert len(padded) == 32

    def test_blocks(self):
        blocks = LengthPaddingScheme(64).blocks(b"abc")

        assert len(blocks) == 1
        assert len(blocks[0]) == 64

    @pytest.mark.parametrize("block_size", [0, 8, 62])
    def test_invalid_block_size(self, block_size):
        with pytest.raises(ValueError, match="Block size"):
            LengthPaddingScheme(block_size)

    def test_stateless(self):
        scheme = LengthPaddingScheme(64)
        assert scheme.pad(b"abc") == scheme.pad(b"abc")


class TestChunkSplitScheme:
    """Tests for equal-size chunk partitioning."""

    def test_split_bytes(self):
        assert ChunkSplitScheme(2).split(b"abcd") == [b"ab", b"cd"]

    def test_split_list(self):
        assert ChunkSplitScheme(3).split([1, 2, 3, 4, 5, 6]) == [[1, 2], [3, 4], [5, 6]]

    @pytest.mark.parametrize("chunk_count", [1, 2, 4, 13, 52])
    def test_concatenation_reproduces_input(self, chunk_count):
        data = os.urandom(52)
        chunks = ChunkSplitScheme(chunk_count).split(data)

        assert len(chunks) == chunk_count
        assert b"".join(chunks) == data
        assert len({len(c) for c in chunks}) == 1

    def test_mismatch(self):
        with pytest.raises(ChunkSizeMismatchException) as exc_info:
            ChunkSplitScheme(4).split(b"x" * 50)

        assert exc_info.value.code == ErrorCodes.CHUNK_SIZE_MISMATCH
        assert exc_info.value.length == 50
        assert exc_info.value.chunk_count == 4

    def test_pad_validates_without_suffix(self):
        scheme = ChunkSplitScheme(4)

        assert scheme.pad(b"x" * 60) == b"x" * 60
        with pytest.raises(ChunkSizeMismatchException):
            scheme.pad(b"x" * 61)

    def test_blocks_are_chunks(self):
        assert ChunkSplitScheme(4).blocks(b"x" * 60) == [b"x" * 15] * 4

    def test_invalid_chunk_count(self):
        with pytest.raises(ValueError, match="positive"):
            ChunkSplitScheme(0)
