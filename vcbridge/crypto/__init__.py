"""
Cryptographic primitives and commitment computation.
"""
from .commitment import (
    CircuitDigest,
    CommitmentComputer,
    DelegatedCircuitDigest,
    HierarchicalCircuitDigest,
    HierarchicalNativeHasher,
    compute_digest,
    hierarchical_hash,
)
from .hashers import (
    CircuitEvaluator,
    NativeHasher,
    PermutationHasher,
    Sha256FieldPermutation,
    Sha256Hasher,
)
from .hashing import sha256, sha256_to_field
from .sha256_block import Sha256BlockEvaluator

__all__ = [
    "CircuitDigest",
    "CommitmentComputer",
    "DelegatedCircuitDigest",
    "HierarchicalCircuitDigest",
    "HierarchicalNativeHasher",
    "compute_digest",
    "hierarchical_hash",
    "CircuitEvaluator",
    "NativeHasher",
    "PermutationHasher",
    "Sha256FieldPermutation",
    "Sha256Hasher",
    "sha256",
    "sha256_to_field",
    "Sha256BlockEvaluator",
]
