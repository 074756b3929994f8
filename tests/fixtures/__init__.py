"""
Test fixtures package for vcbridge tests.

- common.py: record/layout factories and fake hash collaborators

Usage:
    from fixtures import make_layout, make_record

    def test_something():
        layout = make_layout({"a": 4})
"""

from .common import (
    SCENARIO_EXPECTED_DEGREE,
    SCENARIO_LAYOUT,
    SCENARIO_RECORD,
    ConstantEvaluator,
    FailingEvaluator,
    FailingHasher,
    SumPermutation,
    make_layout,
    make_record,
)

__all__ = [
    "SCENARIO_EXPECTED_DEGREE",
    "SCENARIO_LAYOUT",
    "SCENARIO_RECORD",
    "ConstantEvaluator",
    "FailingEvaluator",
    "FailingHasher",
    "SumPermutation",
    "make_layout",
    "make_record",
]
