"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m vcbridge_cli encode --record R.json --layout L.json --field F --expected V [--json]
    python -m vcbridge_cli verify --record R.json --layout L.json --field F --expected V [--json]
    python -m vcbridge_cli config --show

Environment Variables:
    VCBRIDGE_SCHEME         Circuit digest scheme: length_padding, hierarchical
    VCBRIDGE_BLOCK_SIZE     Length-padding block size in bytes (default: 64)
    VCBRIDGE_CHUNK_COUNT    Hierarchical chunk count (default: 4)
    VCBRIDGE_LOG_LEVEL      Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from vcbridge.config.runtime import BridgeConfig, SUPPORTED_SCHEMES
from vcbridge_cli.commands import encode, verify


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_record_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--record", "-r",
        type=str,
        required=True,
        help="JSON file with the record (field name -> value)",
    )
    parser.add_argument(
        "--layout", "-l",
        type=str,
        required=True,
        help="JSON file with the layout (field name -> byte width, in order)",
    )
    parser.add_argument(
        "--field", "-f",
        type=str,
        required=True,
        help="Field whose encoded bytes are checked",
    )
    parser.add_argument(
        "--expected", "-e",
        type=str,
        required=True,
        help="Expected value of the checked field",
    )
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("--debug", action="store_true", help="Debug mode")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="vcbridge",
        description="Encode credential records for hash circuits and verify hash equivalence.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--scheme",
        type=str,
        choices=list(SUPPORTED_SCHEMES),
        default=None,
        help="Circuit digest scheme (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- encode command ---
    encode_parser = subparsers.add_parser(
        "encode",
        help="Print circuit input word arrays for a record",
        description=(
            "Serialize, length-pad and word-encode a record for a SHA-256 circuit. "
            "Only the length_padding scheme is supported."
        ),
    )
    _add_record_arguments(encode_parser)
    encode_parser.set_defaults(func=encode.encode_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Check native/circuit digest equivalence for a record",
        description="Compare the native digest with the circuit digest and check a field sub-range.",
    )
    _add_record_arguments(verify_parser)
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Show effective configuration",
        description="Display configuration after file and environment overrides.",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def load_config(path: Path | None, scheme: str | None = None) -> BridgeConfig:
    """Load config from a YAML file (if given) with env and flag overrides."""
    if path is not None:
        config = BridgeConfig.from_yaml(path).with_env_overrides()
    else:
        config = BridgeConfig.from_env()
    if scheme:
        data = config.to_dict()
        data["scheme"] = scheme
        config = BridgeConfig.from_dict(data)
    return config


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.show:
        print(json.dumps(args.bridge_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: vcbridge config --show")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config, args.scheme)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=args.log_file)

    args.bridge_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if hasattr(args, "debug") and args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
