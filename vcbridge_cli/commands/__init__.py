"""
CLI command modules.
"""

from vcbridge_cli.commands import encode, verify

__all__ = ["encode", "verify"]
