"""
Module 03 - Merkle Tree and Membership Proofs

This module provides:
- TreeNode / ProofStep / Side: immutable data types
- MerkleTree: build once from transactions, extract proofs, verify
- verify_proof / verify_proof_from_leaf_hash: tree-independent verification
- MerkleProver / MerkleVerifier: convenience wrappers

Canonical Commitment Rules:
1. Leaf hashing: H(transaction)
2. Parent hashing: H(min(a, b) + max(a, b))  (commutative)
3. Padding: append "" until the leaf count is a power of two
4. Empty input: EmptyInputError
5. Single transaction: root = H(transaction), empty proof

Usage:
    from merkletx.crypto import HashProvider
    from merkletx.merkle import MerkleTree

    tree = MerkleTree(["tx1", "tx2", "tx3"], HashProvider("SHA-256"))
    proof = tree.proof_for("tx2")
    assert tree.verify("tx2", proof, tree.root_hash())
"""
from .nodes import (
    Proof,
    ProofStep,
    Side,
    TreeNode,
    canonical_order,
    pair_hash,
)
from .merkle_tree import (
    PADDING_TRANSACTION,
    MerkleTree,
    is_power_of_two,
    next_power_of_two,
    pad_transactions,
)
from .verification import (
    verify_proof,
    verify_proof_from_leaf_hash,
)
from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Core types
    "TreeNode",
    "ProofStep",
    "Side",
    "Proof",
    "MerkleTree",
    "PADDING_TRANSACTION",
    # Core functions
    "canonical_order",
    "pair_hash",
    "is_power_of_two",
    "next_power_of_two",
    "pad_transactions",
    "verify_proof",
    "verify_proof_from_leaf_hash",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
]
