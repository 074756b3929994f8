"""
Equivalence verification and circuit input preparation.
"""
from .equivalence import EquivalenceChecker, check_digest, check_subrange, verify
from .witness import CircuitInputs, build_circuit_inputs

__all__ = [
    "EquivalenceChecker",
    "check_digest",
    "check_subrange",
    "verify",
    "CircuitInputs",
    "build_circuit_inputs",
]
