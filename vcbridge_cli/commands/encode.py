"""
CLI Encode Command

Serialize a record and print the word arrays a single-block SHA-256
credential circuit takes as input.

Usage:
    vcbridge encode --record vc.json --layout layout.json --field degree --expected "..."
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from vcbridge.codec.padding import LengthPaddingScheme
from vcbridge.schemas.errors import BridgeException
from vcbridge.verification.witness import build_circuit_inputs
from vcbridge_cli.inputs import InputError, load_layout, load_record


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def encode_cmd(args: Namespace) -> int:
    """
    Execute the encode command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.bridge_config

    if config.scheme != "length_padding":
        print(
            f"Error: encode builds SHA-256 block inputs and needs scheme "
            f"'length_padding', got '{config.scheme}'",
            file=sys.stderr,
        )
        return EXIT_RUNTIME_ERROR

    try:
        layout = load_layout(args.layout)
        record = load_record(args.record, layout)
    except (InputError, BridgeException) as e:
        print(f"Error loading inputs: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    logger.info(f"Encoding record with {len(layout.fields)} fields ({layout.record_width} bytes)")
    try:
        inputs = build_circuit_inputs(
            record,
            layout,
            args.field,
            args.expected,
            padder=LengthPaddingScheme(config.padding.block_size),
        )
    except BridgeException as e:
        print(f"Encoding error [{e.code}]: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps(inputs.model_dump(), indent=2))
    else:
        print(f"data: {json.dumps(inputs.data)}")
        print(f"digest: {json.dumps(inputs.digest)}")
        print(f"expected_subrange: {json.dumps(inputs.expected_subrange)}")
        print(f"subrange_word_offset: {inputs.subrange_word_offset}")
        print(f"native_digest: {inputs.native_digest_hex}")

    return EXIT_SUCCESS
