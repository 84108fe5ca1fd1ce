"""
merkletx - Merkle trees over transaction strings.

Build a binary hash tree over an ordered transaction list, extract compact
membership proofs, and verify them against a known root without the tree.

Usage:
    from merkletx import HashProvider, MerkleTree

    tree = MerkleTree(["alice->bob:5", "bob->carol:2"], HashProvider("SHA-256"))
    proof = tree.proof_for("bob->carol:2")
    assert tree.verify("bob->carol:2", proof, tree.root_hash())
"""

from merkletx.crypto import HashProvider, supported_algorithms
from merkletx.merkle import (
    MerkleTree,
    ProofStep,
    Side,
    TreeNode,
    verify_proof,
    verify_proof_from_leaf_hash,
)
from merkletx.schemas.errors import (
    EmptyInputError,
    InvalidArgumentError,
    MerkleTxException,
    TreeInvariantError,
    UnsupportedAlgorithmError,
)

__version__ = "0.1.0"

__all__ = [
    "HashProvider",
    "supported_algorithms",
    "MerkleTree",
    "ProofStep",
    "Side",
    "TreeNode",
    "verify_proof",
    "verify_proof_from_leaf_hash",
    "MerkleTxException",
    "UnsupportedAlgorithmError",
    "EmptyInputError",
    "InvalidArgumentError",
    "TreeInvariantError",
]
