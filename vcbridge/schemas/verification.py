"""
Module 01 - Schemas & Errors
File: verification.py

Purpose: Standard result format for equivalence checks.
Mismatches are reported here as failed checks instead of exceptions, so a
caller can tell "circuit constraints would fail" apart from an encoding bug.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class CheckResult(BaseModel):
    """
    Result of a single verification check.

    Checks are atomic verification steps that can pass or fail.
    """

    model_config = ConfigDict(extra="forbid")

    check_id: str = Field(
        ...,
        description="Unique identifier for this check",
        min_length=1,
    )
    ok: bool = Field(
        ...,
        description="Whether the check passed",
    )
    severity: Literal["info", "error"] = Field(
        ...,
        description="Severity level of this check",
    )
    message: str = Field(
        ...,
        description="Human-readable message describing the result",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional details about the check",
    )

    @classmethod
    def passed(
        cls,
        check_id: str,
        message: str = "Check passed",
        details: dict[str, Any] | None = None,
    ) -> "CheckResult":
        """Create a passed check result."""
        return cls(
            check_id=check_id,
            ok=True,
            severity="info",
            message=message,
            details=details or {},
        )

    @classmethod
    def failed(
        cls,
        check_id: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> "CheckResult":
        """Create a failed check result."""
        return cls(
            check_id=check_id,
            ok=False,
            severity="error",
            message=message,
            details=details or {},
        )


class EquivalenceResult(BaseModel):
    """
    Outcome of verifying one record against the circuit encoding.

    hash_match: native digest and circuit digest denote the same value
    subrange_match: the designated field survives encoding unchanged
    """

    model_config = ConfigDict(extra="forbid")

    hash_match: bool = Field(..., description="Native and circuit digests agree")
    subrange_match: bool = Field(..., description="Extracted field equals expected value")
    scheme: str = Field(..., description="Circuit digest scheme used")
    native_digest: str = Field(..., description="Native digest, hex encoded")
    circuit_digest: str = Field(..., description="Circuit digest, hex encoded")
    checks: list[CheckResult] = Field(
        default_factory=list,
        description="Individual check results",
    )

    @property
    def ok(self) -> bool:
        return self.hash_match and self.subrange_match

    @property
    def failed_checks(self) -> list[CheckResult]:
        return [c for c in self.checks if not c.ok]
