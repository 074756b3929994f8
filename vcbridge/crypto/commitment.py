"""
Module 04 - Commitment Computation
Digests of a serialized record under a native hash and a circuit hash.

Two circuit digest strategies are provided:

1. DelegatedCircuitDigest
   message -> LengthPaddingScheme -> words -> CircuitEvaluator -> 8 words
   The evaluator is an opaque pure function (a compiled circuit's witness
   generator, or Sha256BlockEvaluator).

2. HierarchicalCircuitDigest ("hash-of-hashes")
   message -> elements -> ChunkSplitScheme -> N chunks
   each chunk -> PermutationHasher -> intermediate element
   N intermediates -> PermutationHasher -> final element
   Needed because a permutation-style hash has a fixed arity smaller than
   the whole record.

Both strategies are stateless and re-entrant. Collaborator failures are
wrapped in EvaluatorException and never retried.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Literal, Mapping, Sequence

from vcbridge.codec.field_elements import bytes_to_signals
from vcbridge.codec.padding import ChunkSplitScheme, LengthPaddingScheme
from vcbridge.codec.serializer import serialize
from vcbridge.codec.u32 import bytes_to_words
from vcbridge.config.runtime import BridgeConfig, build_padding_scheme
from vcbridge.crypto.hashers import (
    CircuitEvaluator,
    NativeHasher,
    PermutationHasher,
    Sha256FieldPermutation,
    Sha256Hasher,
)
from vcbridge.crypto.sha256_block import BLOCK_SIZE, Sha256BlockEvaluator
from vcbridge.schemas.commitment import Commitment
from vcbridge.schemas.errors import BridgeException, EvaluatorException
from vcbridge.schemas.layout import FieldLayout, Record

logger = logging.getLogger(__name__)

ElementUnit = Literal["byte", "word"]


class CircuitDigest(ABC):
    """A circuit-compatible digest strategy."""

    name: str = "circuit"

    @abstractmethod
    def encode(self, message: bytes) -> list[int]:
        """Shape a serialized message into circuit input elements."""

    @abstractmethod
    def digest_elements(self, elements: Sequence[int]) -> Commitment:
        """Hash circuit input elements."""

    def compute(self, message: bytes) -> Commitment:
        return self.digest_elements(self.encode(message))


class DelegatedCircuitDigest(CircuitDigest):
    """Length-pad into one block and delegate hashing to a circuit evaluator."""

    name = "length_padding"

    def __init__(
        self,
        evaluator: CircuitEvaluator | None = None,
        padder: LengthPaddingScheme | None = None,
    ) -> None:
        self.evaluator = evaluator or Sha256BlockEvaluator()
        self.padder = padder or LengthPaddingScheme()

    def encode(self, message: bytes) -> list[int]:
        return bytes_to_words(self.padder.pad(message))

    def digest_elements(self, elements: Sequence[int]) -> Commitment:
        try:
            output = self.evaluator.evaluate(elements)
        except BridgeException:
            raise
        except Exception as e:
            raise EvaluatorException(
                f"Circuit evaluation failed: {e}",
                evaluator=self.evaluator.name,
            ) from e
        return Commitment.from_words(output)


def hierarchical_hash(
    elements: Sequence[int],
    permutation: PermutationHasher,
    splitter: ChunkSplitScheme,
) -> int:
    """
    Hash each chunk, then hash the chunk digests together.

    Raises:
        ChunkSizeMismatchException: If elements don't split evenly
        ValueError: If a chunk or the chunk count exceeds the permutation arity
    """
    chunks = splitter.split(list(elements))
    if len(chunks[0]) > permutation.arity or splitter.chunk_count > permutation.arity:
        raise ValueError(
            f"Permutation arity {permutation.arity} cannot absorb "
            f"{splitter.chunk_count} chunks of {len(chunks[0])} elements"
        )
    intermediates = [permutation.hash(chunk) for chunk in chunks]
    return permutation.hash(intermediates)


class HierarchicalCircuitDigest(CircuitDigest):
    """
    Chunked hash-of-hashes over a permutation-style hasher.

    element_unit selects the circuit signals: "byte" feeds one signal per
    byte (char-code arrays), "word" one per big-endian 32-bit word.
    """

    name = "hierarchical"

    def __init__(
        self,
        permutation: PermutationHasher | None = None,
        splitter: ChunkSplitScheme | None = None,
        element_unit: ElementUnit = "byte",
    ) -> None:
        self.permutation = permutation or Sha256FieldPermutation()
        self.splitter = splitter or ChunkSplitScheme()
        self.element_unit = element_unit

    def encode(self, message: bytes) -> list[int]:
        if self.element_unit == "word":
            return bytes_to_words(message)
        return bytes_to_signals(message)

    def digest_elements(self, elements: Sequence[int]) -> Commitment:
        try:
            value = hierarchical_hash(elements, self.permutation, self.splitter)
        except (BridgeException, ValueError):
            raise
        except Exception as e:
            raise EvaluatorException(
                f"Permutation hash failed: {e}",
                evaluator=self.permutation.name,
            ) from e
        return Commitment(value=value)


class HierarchicalNativeHasher(NativeHasher):
    """
    Native side of the hierarchical scheme.

    Runs the same chunked computation off-circuit with a trusted permutation
    implementation and renders the result as a 32-byte digest.
    """

    name = "hierarchical_native"

    def __init__(
        self,
        permutation: PermutationHasher | None = None,
        splitter: ChunkSplitScheme | None = None,
        element_unit: ElementUnit = "byte",
    ) -> None:
        self._digest = HierarchicalCircuitDigest(permutation, splitter, element_unit)

    def digest(self, data: bytes) -> bytes:
        return self._digest.compute(data).to_bytes()


class CommitmentComputer:
    """
    Computes native and circuit commitments for serialized records.

    Example:
        >>> computer = CommitmentComputer()
        >>> native = computer.native_commitment(serialized.data)
        >>> circuit = computer.circuit_commitment(serialized.data)
        >>> native.is_equivalent(circuit)
        True
    """

    def __init__(
        self,
        native: NativeHasher | None = None,
        circuit: CircuitDigest | None = None,
    ) -> None:
        self.native = native or Sha256Hasher()
        self.circuit = circuit or DelegatedCircuitDigest()

    @classmethod
    def from_config(
        cls,
        config: BridgeConfig,
        native: NativeHasher | None = None,
        evaluator: CircuitEvaluator | None = None,
        permutation: PermutationHasher | None = None,
    ) -> "CommitmentComputer":
        """
        Build a computer for the configured scheme.

        For the hierarchical scheme `permutation` is the circuit-side hasher;
        the native side defaults to the same computation with a trusted
        Sha256FieldPermutation of the configured arity.

        Raises:
            ValueError: If the default Sha256BlockEvaluator is paired with a
                block size other than its 64-byte block
        """
        padder = build_padding_scheme(config)
        if config.scheme == "hierarchical":
            h = config.hierarchical
            circuit: CircuitDigest = HierarchicalCircuitDigest(
                permutation or Sha256FieldPermutation(h.arity),
                padder,
                h.element_unit,
            )
            native = native or HierarchicalNativeHasher(
                Sha256FieldPermutation(h.arity),
                ChunkSplitScheme(h.chunk_count),
                h.element_unit,
            )
        else:
            if evaluator is None and config.padding.block_size != BLOCK_SIZE:
                raise ValueError(
                    f"Sha256BlockEvaluator needs {BLOCK_SIZE}-byte blocks, "
                    f"got block_size={config.padding.block_size}; "
                    f"inject a CircuitEvaluator for other sizes"
                )
            circuit = DelegatedCircuitDigest(evaluator, padder)
        return cls(native=native, circuit=circuit)

    @property
    def scheme(self) -> str:
        return self.circuit.name

    def native_digest(self, data: bytes) -> bytes:
        try:
            digest = self.native.digest(data)
        except BridgeException:
            raise
        except Exception as e:
            raise EvaluatorException(
                f"Native hash failed: {e}",
                evaluator=self.native.name,
            ) from e
        logger.debug(f"{self.native.name} digest: {digest.hex()}")
        return digest

    def native_commitment(self, data: bytes) -> Commitment:
        return Commitment.from_digest(self.native_digest(data))

    def circuit_inputs(self, data: bytes) -> list[int]:
        return self.circuit.encode(data)

    def circuit_commitment(self, data: bytes) -> Commitment:
        commitment = self.circuit.compute(data)
        logger.debug(f"{self.circuit.name} circuit digest: {commitment.to_hex()}")
        return commitment


def compute_digest(
    record: Record | Mapping[str, str],
    layout: FieldLayout,
    scheme: CircuitDigest | None = None,
) -> Commitment:
    """Serialize a record and compute its circuit commitment under a scheme."""
    serialized = serialize(record, layout)
    return (scheme or DelegatedCircuitDigest()).compute(serialized.data)


__all__ = [
    "ElementUnit",
    "CircuitDigest",
    "DelegatedCircuitDigest",
    "HierarchicalCircuitDigest",
    "HierarchicalNativeHasher",
    "CommitmentComputer",
    "hierarchical_hash",
    "compute_digest",
]
