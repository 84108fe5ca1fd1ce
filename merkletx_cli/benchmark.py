"""
Benchmark loops: proof verification vs. rebuilding the whole tree.

Each measurement runs a warmup loop first and reports the mean time per
operation in nanoseconds.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Sequence

from merkletx.crypto import HashProvider
from merkletx.merkle import MerkleTree, Proof
from merkletx.schemas.reports import BenchmarkReport


logger = logging.getLogger(__name__)


def time_per_op(fn: Callable[[], object], iterations: int, warmup: int = 0) -> float:
    """Mean wall-clock nanoseconds per call of `fn` after `warmup` untimed calls."""
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    for _ in range(warmup):
        fn()
    start = time.perf_counter_ns()
    for _ in range(iterations):
        fn()
    return (time.perf_counter_ns() - start) / iterations


def brute_force_validate(
    transactions: Sequence[str],
    provider: HashProvider,
    expected_root: str,
) -> bool:
    """Membership check without proofs: rebuild the tree and compare roots."""
    return MerkleTree(transactions, provider).root_hash() == expected_root


def run_benchmarks(
    tree: MerkleTree,
    transaction: str,
    proof: Proof,
    tampered_proof: Proof,
    iterations: int,
    warmup_iterations: int,
    brute_force_iterations: int,
    brute_force_warmup: int,
) -> BenchmarkReport:
    """
    Time valid-proof verification, tampered-proof verification and a
    brute-force rebuild of the tree.
    """
    root = tree.root_hash()
    provider = tree.hash_provider
    transactions = list(tree.transactions)

    logger.info(f"Benchmarking proof verification ({iterations} iterations)")
    valid_ns = time_per_op(
        lambda: tree.verify(transaction, proof, root),
        iterations,
        warmup_iterations,
    )
    invalid_ns = time_per_op(
        lambda: tree.verify(transaction, tampered_proof, root),
        iterations,
        warmup_iterations,
    )

    logger.info(f"Benchmarking brute-force rebuild ({brute_force_iterations} iterations)")
    brute_force_ns = time_per_op(
        lambda: brute_force_validate(transactions, provider, root),
        brute_force_iterations,
        brute_force_warmup,
    )

    return BenchmarkReport(
        algorithm=provider.name,
        leaf_count=len(transactions),
        iterations=iterations,
        brute_force_iterations=brute_force_iterations,
        valid_ns=valid_ns,
        invalid_ns=invalid_ns,
        brute_force_ns=brute_force_ns,
    )
