"""
Module 05 - Equivalence Checker
Verifies that the circuit encoding of a record hashes to the same value as
the trusted native hash, and that a designated field survives encoding.

Checks:
1. digest_match: native digest over the serialized bytes equals the circuit
   digest over the word-encoded (padded or chunked) bytes
2. subrange_match: the serialized bytes at the field's offset/width, read
   as words, equal the expected value padded to the same width

Encoding errors raise. Check failures are returned as data; a failed check
means the circuit constraints would not be satisfied.
"""
from __future__ import annotations

import logging
from typing import Mapping

from vcbridge.codec.serializer import serialize
from vcbridge.codec.u32 import bytes_to_words, string_to_words, words_to_hex
from vcbridge.config.runtime import BridgeConfig, get_default_config
from vcbridge.crypto.commitment import CommitmentComputer
from vcbridge.crypto.hashers import CircuitEvaluator, NativeHasher, PermutationHasher
from vcbridge.schemas.commitment import Commitment
from vcbridge.schemas.errors import ErrorCodes
from vcbridge.schemas.layout import FieldLayout, Record, SerializedRecord
from vcbridge.schemas.verification import CheckResult, EquivalenceResult

logger = logging.getLogger(__name__)


def check_digest(native: Commitment, circuit: Commitment, scheme: str) -> CheckResult:
    """Compare native and circuit commitments."""
    details = {
        "scheme": scheme,
        "native_digest": native.to_hex(),
        "circuit_digest": circuit.to_hex(),
    }
    if native.is_equivalent(circuit):
        return CheckResult.passed(
            check_id="digest_match",
            message="Native and circuit digests are equivalent",
            details=details,
        )
    return CheckResult.failed(
        check_id="digest_match",
        message="Native and circuit digests differ",
        details={"code": ErrorCodes.DIGEST_MISMATCH, **details},
    )


def check_subrange(
    serialized: SerializedRecord,
    field: str,
    expected_value: str,
) -> CheckResult:
    """
    Compare a field's encoded bytes with an expected value, word by word.

    Raises:
        InvalidAlignmentException: If the field is not on word boundaries
        FieldTooLongException: If the expected value is wider than the field
    """
    word_offset, word_count = serialized.layout.word_span(field)
    actual = bytes_to_words(serialized.field_bytes(field))
    expected = string_to_words(expected_value, serialized.layout.width(field))

    details = {
        "field": field,
        "word_offset": word_offset,
        "word_count": word_count,
    }
    if actual == expected:
        return CheckResult.passed(
            check_id="subrange_match",
            message=f"Field '{field}' matches expected value",
            details=details,
        )
    return CheckResult.failed(
        check_id="subrange_match",
        message=f"Field '{field}' does not match expected value",
        details={
            "code": ErrorCodes.SUBRANGE_MISMATCH,
            "actual": words_to_hex(actual),
            "expected": words_to_hex(expected),
            **details,
        },
    )


class EquivalenceChecker:
    """
    Composes serializer, padder, word view and commitment computer.

    Example:
        >>> checker = EquivalenceChecker()
        >>> result = checker.verify(record, layout, "degree", "Financial Technologies")
        >>> result.hash_match, result.subrange_match
        (True, True)
    """

    def __init__(
        self,
        config: BridgeConfig | None = None,
        native: NativeHasher | None = None,
        evaluator: CircuitEvaluator | None = None,
        permutation: PermutationHasher | None = None,
        computer: CommitmentComputer | None = None,
    ) -> None:
        self.config = config or get_default_config()
        self.computer = computer or CommitmentComputer.from_config(
            self.config,
            native=native,
            evaluator=evaluator,
            permutation=permutation,
        )

    def verify(
        self,
        record: Record | Mapping[str, str],
        layout: FieldLayout,
        subrange_field: str,
        expected_subrange_value: str,
    ) -> EquivalenceResult:
        """
        Verify hash and sub-range agreement for one record.

        Raises:
            BridgeException: On any encoding error (field too long, padding
                overflow, chunk mismatch, misalignment) or collaborator failure
        """
        serialized = serialize(record, layout)

        native = self.computer.native_commitment(serialized.data)
        circuit = self.computer.circuit_commitment(serialized.data)
        digest_check = check_digest(native, circuit, self.computer.scheme)
        subrange_check = check_subrange(serialized, subrange_field, expected_subrange_value)

        if not digest_check.ok:
            logger.warning(
                f"Digest mismatch under {self.computer.scheme}: "
                f"native={native.to_hex()} circuit={circuit.to_hex()}"
            )
        if not subrange_check.ok:
            logger.warning(f"Subrange mismatch for field '{subrange_field}'")

        return EquivalenceResult(
            hash_match=digest_check.ok,
            subrange_match=subrange_check.ok,
            scheme=self.computer.scheme,
            native_digest=native.to_hex(),
            circuit_digest=circuit.to_hex(),
            checks=[digest_check, subrange_check],
        )


def verify(
    record: Record | Mapping[str, str],
    layout: FieldLayout,
    subrange_field: str,
    expected_subrange_value: str,
    config: BridgeConfig | None = None,
) -> EquivalenceResult:
    """Convenience wrapper around EquivalenceChecker.verify()."""
    return EquivalenceChecker(config).verify(
        record, layout, subrange_field, expected_subrange_value
    )


__all__ = [
    "check_digest",
    "check_subrange",
    "EquivalenceChecker",
    "verify",
]
