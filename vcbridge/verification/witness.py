"""
Circuit input builder.

Produces the three public/private input arrays a single-block SHA-256
credential circuit expects, in the "0x" + 8 hex digit word format:

- data: the length-padded serialized record (16 words for a 64-byte block)
- digest: the native SHA-256 digest of the serialized record (8 words)
- expected_subrange: the expected field value, space padded (width / 4 words)
"""
from __future__ import annotations

import logging
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from vcbridge.codec.padding import LengthPaddingScheme
from vcbridge.codec.serializer import serialize
from vcbridge.codec.u32 import bytes_to_words, string_to_words, words_to_hex
from vcbridge.crypto.hashers import NativeHasher, Sha256Hasher
from vcbridge.schemas.commitment import Commitment
from vcbridge.schemas.layout import FieldLayout, Record

logger = logging.getLogger(__name__)


class CircuitInputs(BaseModel):
    """Word arrays handed to an external witness evaluator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    data: list[str] = Field(..., description="Padded message words")
    digest: list[str] = Field(..., description="Native digest words")
    expected_subrange: list[str] = Field(..., description="Expected field words")
    subrange_word_offset: int = Field(..., ge=0, description="First word of the field in data")
    native_digest_hex: str = Field(..., description="Native digest, hex encoded")

    def as_witness_args(self) -> list[list[str]]:
        """Positional argument order used by the credential circuit."""
        return [self.data, self.digest, self.expected_subrange]


def build_circuit_inputs(
    record: Record | Mapping[str, str],
    layout: FieldLayout,
    subrange_field: str,
    expected_subrange_value: str,
    padder: LengthPaddingScheme | None = None,
    native: NativeHasher | None = None,
) -> CircuitInputs:
    """
    Encode a record into circuit inputs.

    Raises:
        FieldTooLongException, PaddingOverflowException, InvalidAlignmentException
    """
    padder = padder or LengthPaddingScheme()
    native = native or Sha256Hasher()

    serialized = serialize(record, layout)
    word_offset, _ = layout.word_span(subrange_field)
    data_words = bytes_to_words(padder.pad(serialized.data))
    digest = Commitment.from_digest(native.digest(serialized.data))
    expected_words = string_to_words(expected_subrange_value, layout.width(subrange_field))

    logger.debug(
        f"Built circuit inputs: {len(data_words)} data words, "
        f"subrange '{subrange_field}' at word {word_offset}"
    )
    return CircuitInputs(
        data=words_to_hex(data_words),
        digest=words_to_hex(digest.to_words()),
        expected_subrange=words_to_hex(expected_words),
        subrange_word_offset=word_offset,
        native_digest_hex=digest.to_hex(),
    )


__all__ = [
    "CircuitInputs",
    "build_circuit_inputs",
]
