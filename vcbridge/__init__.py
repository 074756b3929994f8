"""
vcbridge - credential-to-circuit bridge.

Turns structured identity records into fixed-width, block-aligned word
encodings for arithmetic hash circuits, and checks that the circuit hash
agrees with a trusted native hash.
"""

__version__ = "0.1.0"
