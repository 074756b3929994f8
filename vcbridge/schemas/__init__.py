"""
Module 01 - Schemas & Errors
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

from .commitment import DIGEST_SIZE, DIGEST_WORDS, Commitment

from .errors import (
    BridgeError,
    BridgeException,
    ChunkSizeMismatchException,
    ErrorCodes,
    EvaluatorException,
    FieldTooLongException,
    InvalidAlignmentException,
    InvalidHexException,
    InvalidLayoutException,
    PaddingOverflowException,
    RecordLayoutMismatchException,
)

from .layout import WORD_SIZE, FieldLayout, Record, SerializedRecord

from .verification import CheckResult, EquivalenceResult

__all__ = [
    # Commitment
    "DIGEST_SIZE",
    "DIGEST_WORDS",
    "Commitment",
    # Errors
    "BridgeError",
    "BridgeException",
    "ChunkSizeMismatchException",
    "ErrorCodes",
    "EvaluatorException",
    "FieldTooLongException",
    "InvalidAlignmentException",
    "InvalidHexException",
    "InvalidLayoutException",
    "PaddingOverflowException",
    "RecordLayoutMismatchException",
    # Layout
    "WORD_SIZE",
    "FieldLayout",
    "Record",
    "SerializedRecord",
    # Verification
    "CheckResult",
    "EquivalenceResult",
]
