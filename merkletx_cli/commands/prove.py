"""
CLI Prove Command

Build a tree over the given transactions, extract the proof for one of them
and verify it against the root.

Usage:
    merkletx prove tx1 tx2 tx3 --target tx2 [--algorithm SHA-256] [--json]
    merkletx prove --file txs.txt --target tx2
"""

from __future__ import annotations

import logging
from argparse import Namespace

from merkletx.merkle import MerkleTree
from merkletx.schemas.errors import EmptyInputError
from merkletx.schemas.reports import ProofReport, ProofStepRecord
from merkletx_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    print_error,
    read_transactions,
    resolve_provider,
)
from merkletx_cli.txgen import tamper_first_step


logger = logging.getLogger(__name__)


def build_report(tree: MerkleTree, transaction: str, tamper: bool = False) -> ProofReport:
    """Prove and verify `transaction`; optionally verify a tampered copy too."""
    root = tree.root_hash()
    proof = tree.proof_for(transaction)
    found = tree.contains(transaction)
    try:
        index = tree.transactions.index(transaction)
    except ValueError:
        index = None

    tampered_verified = None
    if tamper and proof:
        tampered_verified = tree.verify(transaction, tamper_first_step(proof), root)

    return ProofReport(
        algorithm=tree.hash_provider.name,
        leaf_count=len(tree.transactions),
        padded_count=tree.leaf_count,
        height=tree.height,
        root=root,
        transaction=transaction,
        index=index,
        found=found,
        proof=[ProofStepRecord(**step.to_dict()) for step in proof],
        verified=found and tree.verify(transaction, proof, root),
        tampered_verified=tampered_verified,
    )


def print_report_human(report: ProofReport) -> None:
    """Print a proof report in human-readable format."""
    print(f"algorithm: {report.algorithm}")
    print(f"transactions: {report.leaf_count} (padded to {report.padded_count}, height {report.height})")
    print(f"root: {report.root}")
    target = report.transaction if report.index is None else f"{report.transaction} (index {report.index})"
    print(f"target: {target}")
    if not report.found:
        print("found: false")
        return
    steps = "  ".join(f"{s.sibling_hash[:8]}({s.side})" for s in report.proof)
    print(f"proof ({len(report.proof)} steps): [ {steps} ]")
    print(f"verified: {str(report.verified).lower()}")
    if report.tampered_verified is not None:
        print(f"tampered proof verified: {str(report.tampered_verified).lower()}")


def prove_cmd(args: Namespace) -> int:
    """
    Execute the prove command.

    Returns:
        Exit code (2 when the target is not in the tree or fails to verify)
    """
    transactions = read_transactions(args)
    provider = resolve_provider(args)

    try:
        tree = MerkleTree(transactions, provider)
    except EmptyInputError as e:
        print_error(e.message)
        return EXIT_RUNTIME_ERROR

    report = build_report(tree, args.target, tamper=args.tamper)

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print_report_human(report)

    if not report.found:
        logger.warning("Target transaction not found in tree")
        return EXIT_VERIFICATION_FAILED
    if not report.verified:
        logger.warning("Proof verification failed")
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS
