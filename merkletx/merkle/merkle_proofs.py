"""
Module 03 - Merkle Proofs Convenience Wrappers
Thin wrappers around MerkleTree and the verification functions.

This module provides class-based interfaces:
- MerkleProver: build a tree and extract proofs in one call
- MerkleVerifier: verify proofs without a tree
"""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from merkletx.crypto.hashing import HashProvider
from merkletx.merkle.merkle_tree import MerkleTree
from merkletx.merkle.nodes import Proof, ProofStep
from merkletx.merkle.verification import verify_proof, verify_proof_from_leaf_hash


class MerkleProver:
    """
    Convenience class for generating Merkle proofs.

    Example:
        >>> provider = HashProvider("SHA-256")
        >>> root, proof = MerkleProver.prove(["a", "b", "c"], "b", provider)
        >>> len(proof)
        2
    """

    @staticmethod
    def prove(
        transactions: Sequence[str],
        transaction: str,
        provider: HashProvider,
    ) -> tuple[str, Proof]:
        """
        Build a tree over `transactions` and prove `transaction`.

        Returns:
            (root hash, proof); the proof is empty if not found

        Raises:
            EmptyInputError: If transactions is empty
        """
        tree = MerkleTree(transactions, provider)
        return tree.root_hash(), tree.proof_for(transaction)

    @staticmethod
    def compute_root(transactions: Sequence[str], provider: HashProvider) -> str:
        """
        Root hash of the tree over `transactions`.

        Raises:
            EmptyInputError: If transactions is empty
        """
        return MerkleTree(transactions, provider).root_hash()


class MerkleVerifier:
    """
    Convenience class for verifying Merkle proofs.

    Holds a provider so callers that verify many proofs do not pass it
    around. Like the underlying functions, every method returns a bool and
    never raises.
    """

    def __init__(self, provider: HashProvider) -> None:
        self.provider = provider

    def verify(
        self,
        transaction: Optional[str],
        proof: Optional[Iterable[ProofStep]],
        expected_root: Optional[str],
    ) -> bool:
        return verify_proof(self.provider, transaction, proof, expected_root)

    def verify_leaf_hash(
        self,
        leaf_hash: Optional[str],
        proof: Optional[Iterable[ProofStep]],
        expected_root: Optional[str],
    ) -> bool:
        return verify_proof_from_leaf_hash(self.provider, leaf_hash, proof, expected_root)


__all__ = [
    "MerkleProver",
    "MerkleVerifier",
]
