"""
vcbridge CLI

Command-line interface for encoding credential records into circuit inputs
and checking native/circuit hash equivalence.

Usage:
    python -m vcbridge_cli encode --record vc.json --layout layout.json --field degree --expected "..."
    python -m vcbridge_cli verify --record vc.json --layout layout.json --field degree --expected "..."
    python -m vcbridge_cli config --show
"""

__version__ = "0.1.0"
