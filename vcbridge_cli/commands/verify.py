"""
CLI Verify Command

Check that the configured circuit digest of a record matches its native
digest and that a designated field survives encoding.

Usage:
    vcbridge verify --record vc.json --layout layout.json --field degree --expected "..." [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from vcbridge.schemas.errors import BridgeException
from vcbridge.schemas.verification import EquivalenceResult
from vcbridge.verification.equivalence import EquivalenceChecker
from vcbridge_cli.inputs import InputError, load_layout, load_record


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def print_result_human(result: EquivalenceResult) -> None:
    """Print result in human-readable format."""
    print(f"scheme: {result.scheme}")
    print(f"native_digest: {result.native_digest}")
    print(f"circuit_digest: {result.circuit_digest}")
    print(f"hash_match: {str(result.hash_match).lower()}")
    print(f"subrange_match: {str(result.subrange_match).lower()}")

    if result.failed_checks:
        print(f"\nerrors ({len(result.failed_checks)}):")
        for check in result.failed_checks:
            print(f"  ✗ {check.check_id}: {check.message}")


def print_result_json(result: EquivalenceResult) -> None:
    """Print result as JSON."""
    print(json.dumps(result.model_dump(), indent=2))


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        layout = load_layout(args.layout)
        record = load_record(args.record, layout)
    except (InputError, BridgeException) as e:
        print(f"Error loading inputs: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    checker = EquivalenceChecker(args.bridge_config)
    logger.info(f"Verifying record under scheme: {checker.computer.scheme}")
    try:
        result = checker.verify(record, layout, args.field, args.expected)
    except BridgeException as e:
        print(f"Encoding error [{e.code}]: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print_result_json(result)
    else:
        print_result_human(result)

    return EXIT_SUCCESS if result.ok else EXIT_VERIFICATION_FAILED
