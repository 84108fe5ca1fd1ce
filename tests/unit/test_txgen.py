"""
Module 06 - Demo Helpers Unit Tests
Tests for merkletx_cli/txgen.py and merkletx_cli/benchmark.py
"""
import pytest

from merkletx.merkle import ProofStep, Side
from merkletx.schemas.reports import BenchmarkReport
from merkletx_cli.benchmark import brute_force_validate, run_benchmarks, time_per_op
from merkletx_cli.txgen import (
    flip_last_nibble,
    generate_random_distinct_transactions,
    tamper_first_step,
)


class TestGenerateTransactions:
    """Tests for random transaction generation."""

    def test_count_and_distinct(self):
        txs = generate_random_distinct_transactions(64)

        assert len(txs) == 64
        assert len(set(txs)) == 64

    def test_hex_length(self):
        txs = generate_random_distinct_transactions(3, bytes_per_tx=4)

        for tx in txs:
            assert len(tx) == 8
            int(tx, 16)

    def test_zero(self):
        assert generate_random_distinct_transactions(0) == []

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            generate_random_distinct_transactions(-1)
        with pytest.raises(ValueError):
            generate_random_distinct_transactions(1, bytes_per_tx=0)


class TestTampering:
    """Tests for proof tampering helpers."""

    @pytest.mark.parametrize("value,expected", [("ab0", "ab1"), ("ab9", "aba"), ("abf", "ab0"), ("ABF", "AB0")])
    def test_flip_last_nibble(self, value, expected):
        assert flip_last_nibble(value) == expected

    def test_flip_empty(self):
        assert flip_last_nibble("") == ""

    def test_tamper_first_step_only(self):
        proof = [
            ProofStep(sibling_hash="aaaa", side=Side.RIGHT),
            ProofStep(sibling_hash="bbbb", side=Side.LEFT),
        ]

        tampered = tamper_first_step(proof)

        assert tampered[0] == ProofStep(sibling_hash="aaab", side=Side.RIGHT)
        assert tampered[1] == proof[1]
        assert proof[0].sibling_hash == "aaaa"

    def test_tamper_empty_proof(self):
        assert tamper_first_step([]) == []

    def test_tampered_proof_rejected(self, tree):
        proof = tree.proof_for("tx0")

        assert not tree.verify("tx0", tamper_first_step(proof), tree.root_hash())


class TestBenchmark:
    """Tests for timing helpers, with tiny iteration counts."""

    def test_time_per_op_calls(self):
        calls = []

        result = time_per_op(lambda: calls.append(1), iterations=5, warmup=3)

        assert len(calls) == 8
        assert result >= 0

    def test_time_per_op_rejects_zero(self):
        with pytest.raises(ValueError):
            time_per_op(lambda: None, iterations=0)

    def test_brute_force_validate(self, tree, transactions, sha256_provider):
        assert brute_force_validate(transactions, sha256_provider, tree.root_hash())
        assert not brute_force_validate(transactions[:-1], sha256_provider, tree.root_hash())

    def test_run_benchmarks_report(self, tree):
        proof = tree.proof_for("tx1")

        report = run_benchmarks(
            tree,
            "tx1",
            proof,
            tamper_first_step(proof),
            iterations=3,
            warmup_iterations=1,
            brute_force_iterations=2,
            brute_force_warmup=0,
        )

        assert isinstance(report, BenchmarkReport)
        assert report.algorithm == "SHA-256"
        assert report.leaf_count == 5
        assert report.iterations == 3
        assert report.brute_force_iterations == 2
        assert report.valid_ns >= 0 and report.brute_force_ns > 0
