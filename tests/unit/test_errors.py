"""
Module 01 - Error Taxonomy Unit Tests
Tests for vcbridge/schemas/errors.py
"""
import pytest

from vcbridge.schemas.errors import (
    BridgeError,
    BridgeException,
    ChunkSizeMismatchException,
    ErrorCodes,
    EvaluatorException,
    FieldTooLongException,
    InvalidLayoutException,
    RecordLayoutMismatchException,
)


class TestBridgeException:

    def test_default_code(self):
        assert BridgeException("boom").code == "BRIDGE_ERROR"

    def test_to_error_model(self):
        exc = FieldTooLongException("degree", 32, 40)
        model = exc.to_error_model()

        assert isinstance(model, BridgeError)
        assert model.code == ErrorCodes.FIELD_TOO_LONG
        assert model.details == {"field": "degree", "max_width": 32, "actual_width": 40}
        assert "degree" in model.message

    def test_round_trip_through_model(self):
        exc = ChunkSizeMismatchException(length=50, chunk_count=4)
        restored = exc.to_error_model().to_exception()

        assert restored.code == exc.code
        assert restored.message == exc.message
        assert restored.details == exc.details

    def test_repr(self):
        exc = EvaluatorException("evaluator crashed", evaluator="sha256")

        assert repr(exc) == (
            "EvaluatorException(code='EVALUATOR_FAILURE', message='evaluator crashed')"
        )

    def test_subclasses_are_bridge_exceptions(self):
        with pytest.raises(BridgeException):
            raise InvalidLayoutException("bad", field="x")


class TestSpecificExceptions:

    def test_layout_mismatch_message(self):
        exc = RecordLayoutMismatchException(missing=["year"], unexpected=["extra"])

        assert "missing fields: year" in exc.message
        assert "unexpected fields: extra" in exc.message
        assert exc.code == ErrorCodes.RECORD_LAYOUT_MISMATCH

    def test_invalid_layout_field_detail(self):
        exc = InvalidLayoutException("Width must be positive", field="name")

        assert exc.details == {"field": "name"}

    def test_evaluator_without_name(self):
        assert EvaluatorException("failed").details == {}
