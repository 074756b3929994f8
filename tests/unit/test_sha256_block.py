"""
Module 03 - SHA-256 Block Evaluator Unit Tests
Tests for vcbridge/crypto/sha256_block.py

The evaluator must agree with hashlib on any message once the message is
length padded, since that is what a SHA-256 circuit computes.
"""
import hashlib

import pytest

from vcbridge.codec.padding import LengthPaddingScheme
from vcbridge.codec.u32 import bytes_to_words, hex_digest_to_words
from vcbridge.crypto.sha256_block import INITIAL_STATE, Sha256BlockEvaluator, compress


def _padded_words(message: bytes) -> list[int]:
    return bytes_to_words(LengthPaddingScheme(64).pad(message))


class TestSha256BlockEvaluator:
    """Tests for the single-block SHA-256 evaluator."""

    def test_abc_known_vector(self):
        output = Sha256BlockEvaluator().evaluate(_padded_words(b"abc"))

        assert output == [
            0xBA7816BF, 0x8F01CFEA, 0x414140DE, 0x5DAE2223,
            0xB00361A3, 0x96177A9C, 0xB410FF61, 0xF20015AD,
        ]

    def test_empty_message(self):
        output = Sha256BlockEvaluator().evaluate(_padded_words(b""))

        assert output == hex_digest_to_words(hashlib.sha256(b"").hexdigest())

    @pytest.mark.parametrize("length", [1, 31, 52, 55])
    def test_matches_hashlib(self, length):
        message = bytes(range(length))
        output = Sha256BlockEvaluator().evaluate(_padded_words(message))

        assert output == hex_digest_to_words(hashlib.sha256(message).hexdigest())

    def test_two_blocks(self):
        """Chaining blocks matches hashlib for a 64-byte message."""
        message = b"a" * 64
        padded = message + b"\x80" + bytes(55) + (512).to_bytes(8, "big")

        output = Sha256BlockEvaluator().evaluate(bytes_to_words(padded))

        assert output == hex_digest_to_words(hashlib.sha256(message).hexdigest())

    def test_rejects_partial_block(self):
        with pytest.raises(ValueError, match="multiple of 16"):
            Sha256BlockEvaluator().evaluate([0] * 15)

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            Sha256BlockEvaluator().evaluate([])


class TestCompress:
    """Tests for the compression function."""

    def test_block_size_enforced(self):
        with pytest.raises(ValueError, match="16 words"):
            compress(INITIAL_STATE, [0] * 8)

    def test_returns_eight_words(self):
        state = compress(INITIAL_STATE, [0] * 16)

        assert len(state) == 8
        assert all(0 <= w <= 0xFFFFFFFF for w in state)
