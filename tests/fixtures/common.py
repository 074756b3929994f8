"""
Common test fixtures shared by all modules.

Provides factory functions for layouts and records, plus fake
implementations of the injected hash collaborators so mismatch and failure
paths can be exercised without a circuit toolchain.
"""

from typing import Optional, Sequence

from vcbridge.crypto.hashers import CircuitEvaluator, NativeHasher, PermutationHasher
from vcbridge.schemas.layout import FieldLayout, Record


SCENARIO_LAYOUT: dict[str, int] = {
    "name": 12,
    "degree": 32,
    "university": 4,
    "year": 4,
}

SCENARIO_RECORD: dict[str, str] = {
    "name": "Lukas",
    "degree": "Financial Technologies",
    "university": "VU",
    "year": "2025",
}

SCENARIO_EXPECTED_DEGREE = "Financial Technologies"

# name(12) + degree(32) + university(4) + year(4), space padded
SCENARIO_SERIALIZED: bytes = (
    b"Lukas       "
    b"Financial Technologies          "
    b"VU  "
    b"2025"
)


# =============================================================================
# Layout / Record Factories
# =============================================================================

def make_layout(fields: Optional[dict[str, int]] = None) -> FieldLayout:
    """Create a FieldLayout for testing (defaults to the 52-byte layout)."""
    return FieldLayout.from_mapping(fields if fields is not None else SCENARIO_LAYOUT)


def make_record(
    values: Optional[dict[str, str]] = None,
    layout: Optional[FieldLayout] = None,
    **overrides: str,
) -> Record:
    """Create a Record for testing, validated against the layout."""
    data = dict(values if values is not None else SCENARIO_RECORD)
    data.update(overrides)
    return Record.for_layout(data, layout or make_layout())


# =============================================================================
# Fake Collaborators
# =============================================================================

class ConstantEvaluator(CircuitEvaluator):
    """Circuit evaluator that always returns the same output words."""

    name = "constant"

    def __init__(self, output: Sequence[int]) -> None:
        self.output = list(output)
        self.calls: list[list[int]] = []

    def evaluate(self, words: Sequence[int]) -> list[int]:
        self.calls.append(list(words))
        return list(self.output)


class FailingEvaluator(CircuitEvaluator):
    """Circuit evaluator whose backend crashes."""

    name = "failing"

    def evaluate(self, words: Sequence[int]) -> list[int]:
        raise RuntimeError("witness generation crashed")


class FailingHasher(NativeHasher):
    """Native hasher whose backend crashes."""

    name = "failing_native"

    def digest(self, data: bytes) -> bytes:
        raise OSError("hash service unavailable")


class SumPermutation(PermutationHasher):
    """Toy permutation: weighted sum, easy to compute by hand."""

    name = "sum"

    def __init__(self, arity: int = 16) -> None:
        self.arity = arity
        self.calls: list[list[int]] = []

    def hash(self, elements: Sequence[int]) -> int:
        self.calls.append(list(elements))
        return sum((i + 1) * e for i, e in enumerate(elements))
