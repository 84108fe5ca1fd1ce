"""
CLI Demo and Bench Commands

demo: generate 2**levels random transactions, build the tree, print it
(small trees only), prove and verify one transaction, check that a tampered
proof is rejected, then benchmark verification against a full rebuild.

bench: the same setup without printing the tree or the proof.

Usage:
    merkletx demo [--algorithm A] [--levels N] [--index I] [--iterations K] [--json]
    merkletx bench [--algorithm A] [--levels N] [--index I] [--iterations K] [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace

from merkletx.merkle import MerkleTree
from merkletx.schemas.errors import InvalidArgumentError
from merkletx.schemas.reports import BenchmarkReport
from merkletx_cli.benchmark import run_benchmarks
from merkletx_cli.commands.common import (
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    get_config,
    resolve_provider,
)
from merkletx_cli.commands.prove import build_report, print_report_human
from merkletx_cli.render import render_pretty
from merkletx_cli.txgen import generate_random_distinct_transactions, tamper_first_step


logger = logging.getLogger(__name__)

MAX_LEVELS = 24


def _setup(args: Namespace) -> tuple[MerkleTree, str]:
    """
    Build the random tree and pick the target transaction.

    Raises:
        InvalidArgumentError: If --levels is outside 0..MAX_LEVELS
    """
    config = get_config(args)
    levels = args.levels if args.levels is not None else config.demo.levels
    if not 0 <= levels <= MAX_LEVELS:
        raise InvalidArgumentError(
            f"--levels must be between 0 and {MAX_LEVELS}, got {levels}",
            argument="levels",
            value=levels,
        )

    provider = resolve_provider(args)
    count = 1 << levels
    transactions = generate_random_distinct_transactions(count, config.demo.tx_bytes)
    logger.info(f"Generated {count} random transactions (2^{levels})")

    tree = MerkleTree(transactions, provider)

    index = args.index if args.index is not None else config.demo.index
    if not 0 <= index < count:
        logger.warning(f"Index {index} out of range, using 0")
        index = 0
    return tree, transactions[index]


def _benchmark(args: Namespace, tree: MerkleTree, target: str) -> BenchmarkReport:
    bench = get_config(args).benchmark
    proof = tree.proof_for(target)
    return run_benchmarks(
        tree,
        target,
        proof,
        tamper_first_step(proof),
        iterations=args.iterations if args.iterations is not None else bench.iterations,
        warmup_iterations=bench.warmup_iterations,
        brute_force_iterations=bench.brute_force_iterations,
        brute_force_warmup=bench.brute_force_warmup,
    )


def print_benchmark_human(report: BenchmarkReport) -> None:
    """Print benchmark averages in human-readable format."""
    print("\n=== Results (averages) ===")
    print(f"Verify VALID proof   : {report.valid_ns / 1_000:.2f} us/op ({report.valid_ns:.2f} ns)")
    print(f"Verify TAMPERED proof: {report.invalid_ns / 1_000:.2f} us/op ({report.invalid_ns:.2f} ns)")
    print(f"Brute force (rebuild): {report.brute_force_ns / 1_000_000:.2f} ms/op ({report.brute_force_ns:.2f} ns)")
    print(f"Speedup vs brute (valid)   : {report.speedup_valid:.1f}x")
    print(f"Speedup vs brute (tampered): {report.speedup_invalid:.1f}x")


def demo_cmd(args: Namespace) -> int:
    """Execute the demo command."""
    tree, target = _setup(args)
    config = get_config(args)

    proof_report = build_report(tree, target, tamper=True)
    bench_report = None if args.no_bench else _benchmark(args, tree, target)

    if args.json:
        payload = {
            "proof": proof_report.model_dump(),
            "benchmark": bench_report.model_dump() if bench_report else None,
        }
        print(json.dumps(payload, indent=2))
    else:
        if tree.height <= config.demo.render_max_levels:
            print(render_pretty(tree, config.demo.hash_chars))
            print()
        print_report_human(proof_report)
        if bench_report:
            print_benchmark_human(bench_report)

    # A tampered proof that still verifies is a failure of the demo itself
    if not proof_report.verified or proof_report.tampered_verified:
        logger.warning("Demo verification checks failed")
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS


def bench_cmd(args: Namespace) -> int:
    """Execute the bench command."""
    tree, target = _setup(args)

    report = _benchmark(args, tree, target)
    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(f"algorithm: {report.algorithm}, transactions: {report.leaf_count}")
        print_benchmark_human(report)
    return EXIT_SUCCESS
