"""
Module 03 - Injected Hash Capabilities
Narrow interfaces for the external hash primitives the bridge depends on.

- NativeHasher: trusted byte-oriented hash (ground truth)
- CircuitEvaluator: circuit witness evaluation over a word array
- PermutationHasher: fixed-arity field hash (Poseidon-style)

The core only talks to these interfaces, so it can be exercised with fakes
and with the pure-Python defaults below without any circuit toolchain.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from vcbridge.crypto.hashing import sha256, sha256_to_field


class NativeHasher(ABC):
    """Byte-oriented hash returning a 32-byte digest."""

    name: str = "native"

    @abstractmethod
    def digest(self, data: bytes) -> bytes:
        """Hash raw bytes."""


class CircuitEvaluator(ABC):
    """
    Evaluates a hash circuit on a padded word array.

    Implementations may call out to a compiled circuit's witness generator.
    The call is treated as an opaque, blocking, pure function.
    """

    name: str = "circuit"

    @abstractmethod
    def evaluate(self, words: Sequence[int]) -> list[int]:
        """Return the circuit's eight 32-bit output words."""


class PermutationHasher(ABC):
    """Hash over at most `arity` field elements, returning one element."""

    name: str = "permutation"
    arity: int = 16

    @abstractmethod
    def hash(self, elements: Sequence[int]) -> int:
        """Hash field elements to a single field element."""


class Sha256Hasher(NativeHasher):
    """Standard SHA-256 via hashlib."""

    name = "sha256"

    def digest(self, data: bytes) -> bytes:
        return sha256(data)


class Sha256FieldPermutation(PermutationHasher):
    """
    Off-circuit permutation stand-in: SHA-256 reduced into the BN254 field.

    Deterministic and collision resistant, but not circuit friendly; use it
    where a real Poseidon evaluator is not available.
    """

    name = "sha256_field"

    def __init__(self, arity: int = 16) -> None:
        if arity <= 0:
            raise ValueError(f"Arity must be positive, got {arity}")
        self.arity = arity

    def hash(self, elements: Sequence[int]) -> int:
        if len(elements) > self.arity:
            raise ValueError(
                f"{self.name} accepts at most {self.arity} elements, got {len(elements)}"
            )
        return sha256_to_field(*elements)


__all__ = [
    "NativeHasher",
    "CircuitEvaluator",
    "PermutationHasher",
    "Sha256Hasher",
    "Sha256FieldPermutation",
]
