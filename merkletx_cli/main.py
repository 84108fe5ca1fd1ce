"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m merkletx_cli demo [--algorithm A] [--levels N] [--index I] [--iterations K] [--json]
    python -m merkletx_cli bench [--algorithm A] [--levels N] [--iterations K] [--json]
    python -m merkletx_cli prove TX... --target TX [--file PATH] [--tamper] [--json]
    python -m merkletx_cli tree TX... [--file PATH] [--plain] [--hash-chars N]
    python -m merkletx_cli hash DATA... [--algorithm A]
    python -m merkletx_cli config --init|--show

Environment Variables:
    MERKLETX_ALGORITHM          Digest algorithm (default: SHA-256)
    MERKLETX_FALLBACK_ALGORITHM Used when the algorithm is unsupported
    MERKLETX_LEVELS             Demo tree size exponent (default: 10)
    MERKLETX_ITERATIONS         Benchmark iterations (default: 20000)
    MERKLETX_LOG_LEVEL          Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from merkletx import __version__
from merkletx.config import get_default_config_template, load_config
from merkletx.crypto import supported_algorithms
from merkletx.schemas.errors import MerkleTxException
from merkletx_cli.commands import demo, explore, prove
from merkletx_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS


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
        force=True,
    )


def _add_algorithm_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--algorithm", "-a",
        type=str,
        default=None,
        help=f"Hash algorithm (default: from config). One of: {', '.join(supported_algorithms())}",
    )


def _add_transactions_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "transactions",
        nargs="*",
        help="Transaction strings, in tree order",
    )
    parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="Read transactions from a file, one per line (overrides positional transactions)",
    )


def _add_random_tree_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--levels", "-n",
        type=int,
        default=None,
        help="Tree of 2**levels random transactions (default: from config, 10)",
    )
    parser.add_argument(
        "--index", "-i",
        type=int,
        default=None,
        help="Index of the transaction to prove (default: 0)",
    )
    parser.add_argument(
        "--iterations", "-k",
        type=int,
        default=None,
        help="Benchmark iterations (default: from config, 20000)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkletx",
        description="Build Merkle trees over transactions, prove membership, verify proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./merkletx.yaml or ~/.config/merkletx/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- demo command ---
    demo_parser = subparsers.add_parser(
        "demo",
        help="Random tree, proof, tamper check and benchmark",
        description="Generate random transactions, prove one, and benchmark verification.",
    )
    _add_algorithm_arg(demo_parser)
    _add_random_tree_args(demo_parser)
    demo_parser.add_argument(
        "--no-bench",
        action="store_true",
        default=False,
        help="Skip the benchmark loops",
    )
    demo_parser.set_defaults(func=demo.demo_cmd)

    # --- bench command ---
    bench_parser = subparsers.add_parser(
        "bench",
        help="Benchmark proof verification against a full rebuild",
    )
    _add_algorithm_arg(bench_parser)
    _add_random_tree_args(bench_parser)
    bench_parser.set_defaults(func=demo.bench_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Prove and verify one transaction",
        description="Build a tree over the given transactions and prove membership of --target.",
    )
    _add_algorithm_arg(prove_parser)
    _add_transactions_args(prove_parser)
    prove_parser.add_argument(
        "--target", "-t",
        type=str,
        required=True,
        help="Transaction to prove",
    )
    prove_parser.add_argument(
        "--tamper",
        action="store_true",
        default=False,
        help="Also verify a copy of the proof with one nibble flipped",
    )
    prove_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON report",
    )
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- tree command ---
    tree_parser = subparsers.add_parser(
        "tree",
        help="Render a tree as ASCII art",
    )
    _add_algorithm_arg(tree_parser)
    _add_transactions_args(tree_parser)
    tree_parser.add_argument(
        "--hash-chars",
        type=int,
        default=None,
        help="Hash prefix length per node (default: 8)",
    )
    tree_parser.add_argument(
        "--plain",
        action="store_true",
        default=False,
        help="One line per level with full hashes",
    )
    tree_parser.set_defaults(func=explore.tree_cmd)

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Hash strings with the configured algorithm",
    )
    _add_algorithm_arg(hash_parser)
    hash_parser.add_argument("data", nargs="+", help="Strings to hash")
    hash_parser.set_defaults(func=explore.hash_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="merkletx.yaml",
        help="Path for config file (default: merkletx.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (MERKLETX_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: merkletx config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed / not found)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except (MerkleTxException, OSError, ValueError) as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
