"""
Module 01 - Schemas & Errors
File: errors.py

Purpose: Standard error taxonomy for the credential-to-circuit bridge.
Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.

Encoding errors (field too long, padding overflow, chunk mismatch,
misalignment) are raised immediately. Digest and subrange mismatches are
never raised; they are reported through verification results.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the bridge."""

    # Record & Layout Errors
    FIELD_TOO_LONG = "FIELD_TOO_LONG"
    RECORD_LAYOUT_MISMATCH = "RECORD_LAYOUT_MISMATCH"
    INVALID_LAYOUT = "INVALID_LAYOUT"

    # Block Padding Errors
    PADDING_OVERFLOW = "PADDING_OVERFLOW"
    CHUNK_SIZE_MISMATCH = "CHUNK_SIZE_MISMATCH"

    # Word Encoding Errors
    INVALID_ALIGNMENT = "INVALID_ALIGNMENT"
    INVALID_HEX = "INVALID_HEX"

    # Verification Outcomes (reported, not raised)
    DIGEST_MISMATCH = "DIGEST_MISMATCH"
    SUBRANGE_MISMATCH = "SUBRANGE_MISMATCH"

    # External Collaborators
    EVALUATOR_FAILURE = "EVALUATOR_FAILURE"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class BridgeError(BaseModel):
    """
    Base error model for structured error communication.

    Used when an error has to cross a boundary as data (CLI JSON output,
    verification results) rather than as a raised exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.FIELD_TOO_LONG],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "BridgeException":
        """Convert this error model to a raised exception."""
        return BridgeException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class BridgeException(Exception):
    """
    Base exception for all bridge errors.

    Carries structured error information and can be converted to a
    BridgeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "BRIDGE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> BridgeError:
        """Convert this exception to a BridgeError model."""
        return BridgeError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class FieldTooLongException(BridgeException):
    """Raised when a record value does not fit its declared field width."""

    def __init__(
        self,
        field: str,
        max_width: int,
        actual_width: int,
    ) -> None:
        super().__init__(
            message=(
                f"Value for '{field}' is too long: {actual_width} bytes "
                f"(max {max_width})"
            ),
            code=ErrorCodes.FIELD_TOO_LONG,
            details={
                "field": field,
                "max_width": max_width,
                "actual_width": actual_width,
            },
        )
        self.field = field
        self.max_width = max_width


class RecordLayoutMismatchException(BridgeException):
    """Raised when a record's keys differ from its layout's field names."""

    def __init__(
        self,
        missing: list[str],
        unexpected: list[str],
    ) -> None:
        parts = []
        if missing:
            parts.append(f"missing fields: {', '.join(missing)}")
        if unexpected:
            parts.append(f"unexpected fields: {', '.join(unexpected)}")
        super().__init__(
            message="Record does not match layout (" + "; ".join(parts) + ")",
            code=ErrorCodes.RECORD_LAYOUT_MISMATCH,
            details={"missing": missing, "unexpected": unexpected},
        )
        self.missing = missing
        self.unexpected = unexpected


class InvalidLayoutException(BridgeException):
    """Raised when a field layout is malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field:
            full_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_LAYOUT,
            details=full_details,
        )


class PaddingOverflowException(BridgeException):
    """Raised when a message cannot fit into a single padded block."""

    def __init__(
        self,
        length: int,
        capacity: int,
    ) -> None:
        super().__init__(
            message=(
                f"Message of {length} bytes exceeds single-block capacity "
                f"of {capacity} bytes"
            ),
            code=ErrorCodes.PADDING_OVERFLOW,
            details={"length": length, "capacity": capacity},
        )
        self.length = length
        self.capacity = capacity


class ChunkSizeMismatchException(BridgeException):
    """Raised when input length is not divisible by the chunk count."""

    def __init__(
        self,
        length: int,
        chunk_count: int,
    ) -> None:
        super().__init__(
            message=(
                f"Input length {length} is not divisible into "
                f"{chunk_count} equal chunks"
            ),
            code=ErrorCodes.CHUNK_SIZE_MISMATCH,
            details={"length": length, "chunk_count": chunk_count},
        )
        self.length = length
        self.chunk_count = chunk_count


class InvalidAlignmentException(BridgeException):
    """Raised when a byte length is not a multiple of the 4-byte word size."""

    def __init__(
        self,
        message: str,
        length: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if length is not None:
            full_details["length"] = length
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ALIGNMENT,
            details=full_details,
        )


class InvalidHexException(BridgeException):
    """Raised when a hex word or digest string cannot be decoded."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_HEX,
            details=details,
        )


class EvaluatorException(BridgeException):
    """Raised when an injected hasher or circuit evaluator fails."""

    def __init__(
        self,
        message: str,
        evaluator: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if evaluator:
            full_details["evaluator"] = evaluator
        super().__init__(
            message=message,
            code=ErrorCodes.EVALUATOR_FAILURE,
            details=full_details,
        )
