"""
Module 03 - SHA-256 Block Evaluator
Pure-Python SHA-256 compression over pre-padded word blocks.

A SHA-256 circuit such as ZoKrates' `hashes/sha256/512bit` takes an already
padded 512-bit block as sixteen u32 words and runs only the compression
function. This evaluator computes exactly that witness output, so the
word-level encoding can be checked against hashlib without compiling a
circuit.
"""
from __future__ import annotations

import logging
from typing import Sequence

from vcbridge.crypto.hashers import CircuitEvaluator

logger = logging.getLogger(__name__)

BLOCK_WORDS = 16
BLOCK_SIZE = BLOCK_WORDS * 4
_MASK = 0xFFFFFFFF

INITIAL_STATE: tuple[int, ...] = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

ROUND_CONSTANTS: tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def compress(state: Sequence[int], block: Sequence[int]) -> list[int]:
    """
    Apply the SHA-256 compression function to one 16-word block.

    Args:
        state: Eight chaining words
        block: Sixteen message words

    Returns:
        The next eight chaining words
    """
    if len(block) != BLOCK_WORDS:
        raise ValueError(f"Block must be {BLOCK_WORDS} words, got {len(block)}")

    w = list(block)
    for t in range(16, 64):
        s0 = _rotr(w[t - 15], 7) ^ _rotr(w[t - 15], 18) ^ (w[t - 15] >> 3)
        s1 = _rotr(w[t - 2], 17) ^ _rotr(w[t - 2], 19) ^ (w[t - 2] >> 10)
        w.append((w[t - 16] + s0 + w[t - 7] + s1) & _MASK)

    a, b, c, d, e, f, g, h = state
    for t in range(64):
        s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & f) ^ (~e & g)
        temp1 = (h + s1 + ch + ROUND_CONSTANTS[t] + w[t]) & _MASK
        s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        temp2 = (s0 + maj) & _MASK
        h, g, f, e = g, f, e, (d + temp1) & _MASK
        d, c, b, a = c, b, a, (temp1 + temp2) & _MASK

    return [(x + y) & _MASK for x, y in zip(state, (a, b, c, d, e, f, g, h))]


class Sha256BlockEvaluator(CircuitEvaluator):
    """
    Circuit evaluator for SHA-256 over pre-padded blocks.

    Accepts any positive multiple of sixteen words and chains the blocks in
    order; a single 64-byte block matches the one-block circuit.
    """

    name = "sha256_block"

    def evaluate(self, words: Sequence[int]) -> list[int]:
        if not words or len(words) % BLOCK_WORDS != 0:
            raise ValueError(
                f"Input must be a positive multiple of {BLOCK_WORDS} words, got {len(words)}"
            )
        state = list(INITIAL_STATE)
        for i in range(0, len(words), BLOCK_WORDS):
            state = compress(state, words[i:i + BLOCK_WORDS])
        logger.debug(f"Evaluated {len(words) // BLOCK_WORDS} SHA-256 block(s)")
        return state


__all__ = [
    "BLOCK_WORDS",
    "BLOCK_SIZE",
    "INITIAL_STATE",
    "ROUND_CONSTANTS",
    "compress",
    "Sha256BlockEvaluator",
]
