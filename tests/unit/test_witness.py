"""
Module 05 - Circuit Input Builder Unit Tests
Tests for vcbridge/verification/witness.py
"""
import hashlib

import pytest

from fixtures.common import SCENARIO_SERIALIZED
from vcbridge.codec.padding import LengthPaddingScheme
from vcbridge.codec.u32 import hex_to_words, string_to_words
from vcbridge.schemas.errors import FieldTooLongException, PaddingOverflowException
from vcbridge.schemas.layout import FieldLayout
from vcbridge.verification.witness import build_circuit_inputs


class TestBuildCircuitInputs:
    """Tests for build_circuit_inputs()."""

    def test_array_sizes(self, record, layout, expected_degree):
        inputs = build_circuit_inputs(record, layout, "degree", expected_degree)

        assert len(inputs.data) == 16
        assert len(inputs.digest) == 8
        assert len(inputs.expected_subrange) == 8
        assert inputs.subrange_word_offset == 3

    def test_word_format(self, record, layout, expected_degree):
        inputs = build_circuit_inputs(record, layout, "degree", expected_degree)

        for word in inputs.data + inputs.digest + inputs.expected_subrange:
            assert word.startswith("0x")
            assert len(word) == 10
            assert word == word.lower()

    def test_data_is_padded_record(self, record, layout, expected_degree):
        inputs = build_circuit_inputs(record, layout, "degree", expected_degree)
        padded = LengthPaddingScheme().pad(SCENARIO_SERIALIZED)

        assert b"".join(w.to_bytes(4, "big") for w in hex_to_words(inputs.data)) == padded

    def test_digest_is_native_sha256(self, record, layout, expected_degree):
        inputs = build_circuit_inputs(record, layout, "degree", expected_degree)
        expected = hashlib.sha256(SCENARIO_SERIALIZED).hexdigest()

        assert inputs.native_digest_hex == expected
        assert "".join(w[2:] for w in inputs.digest) == expected

    def test_subrange_slice_matches_expected(self, record, layout, expected_degree):
        inputs = build_circuit_inputs(record, layout, "degree", expected_degree)
        offset = inputs.subrange_word_offset

        assert inputs.data[offset:offset + 8] == inputs.expected_subrange
        assert hex_to_words(inputs.expected_subrange) == string_to_words(expected_degree, 32)

    def test_witness_args_order(self, record, layout, expected_degree):
        inputs = build_circuit_inputs(record, layout, "degree", expected_degree)

        assert inputs.as_witness_args() == [
            inputs.data,
            inputs.digest,
            inputs.expected_subrange,
        ]

    def test_field_too_long(self, layout):
        values = {"name": "Lukas", "degree": "x", "university": "Vilnius", "year": "2025"}

        with pytest.raises(FieldTooLongException):
            build_circuit_inputs(values, layout, "degree", "x")

    def test_overflow(self):
        layout = FieldLayout.from_mapping({"name": 24, "degree": 32})

        with pytest.raises(PaddingOverflowException):
            build_circuit_inputs({"name": "a", "degree": "b"}, layout, "degree", "b")

    def test_larger_block(self):
        layout = FieldLayout.from_mapping({"name": 24, "degree": 32})
        inputs = build_circuit_inputs(
            {"name": "a", "degree": "b"},
            layout,
            "degree",
            "b",
            padder=LengthPaddingScheme(128),
        )

        assert len(inputs.data) == 32
        assert inputs.subrange_word_offset == 6
