"""
Module 03 - Merkle Tree Implementation
Tree construction with power-of-two padding, proof extraction, verification.

Owner: Protocol/Crypto Engineer
Module ID: M03

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = H(transaction) via HashProvider.compute_hash()
2. Parent hashing: parent = H(min(a, b) + max(a, b)), see nodes.pair_hash()
3. Padding rule: append "" transactions until the count is a power of two
4. Empty input: rejected with EmptyInputError (there is no empty-tree root)
5. Single transaction: root = H(transaction), no padding, height 0

Padding Notes:
- A genuine "" transaction and a padding leaf hash identically; they are
  indistinguishable in the tree and in proofs.
- Leaf ordering is the input order. This module never sorts transactions.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from merkletx.crypto.hashing import HashProvider
from merkletx.merkle.nodes import Proof, ProofStep, Side, TreeNode
from merkletx.merkle.verification import verify_proof, verify_proof_from_leaf_hash
from merkletx.schemas.errors import EmptyInputError, TreeInvariantError


logger = logging.getLogger(__name__)

PADDING_TRANSACTION = ""


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def pad_transactions(
    transactions: Sequence[str],
    filler: str = PADDING_TRANSACTION,
) -> list[str]:
    """
    Extend a transaction list to the next power of two.

    Example: ["a", "b", "c"] -> ["a", "b", "c", ""]

    Args:
        transactions: Non-empty ordered transactions
        filler: Padding value appended at the end

    Returns:
        New list; unchanged contents when the length is already a power of two

    Raises:
        EmptyInputError: If transactions is empty
    """
    count = len(transactions)
    if count == 0:
        raise EmptyInputError()
    padded = list(transactions)
    padded.extend([filler] * (next_power_of_two(count) - count))
    return padded


def _build_root(leaves: list[TreeNode], provider: HashProvider) -> TreeNode:
    """Reduce a power-of-two leaf level to a single root node."""
    current_level = leaves
    level = 0
    while len(current_level) > 1:
        if len(current_level) % 2 == 1:
            raise TreeInvariantError(
                f"Odd-sized level during reduction: {len(current_level)} nodes at level {level}",
                level=level,
                size=len(current_level),
            )
        current_level = [
            TreeNode.combine(current_level[i], current_level[i + 1], provider)
            for i in range(0, len(current_level), 2)
        ]
        level += 1
    return current_level[0]


def _collect_path(node: TreeNode, leaf_hash: str, acc: list[ProofStep]) -> bool:
    """
    Depth-first search for `leaf_hash`; appends siblings while unwinding.

    Recursion depth is bounded by the tree height.
    """
    if node.left is None or node.right is None:
        return node.hash == leaf_hash
    if _collect_path(node.left, leaf_hash, acc):
        acc.append(ProofStep(sibling_hash=node.right.hash, side=Side.RIGHT))
        return True
    if _collect_path(node.right, leaf_hash, acc):
        acc.append(ProofStep(sibling_hash=node.left.hash, side=Side.LEFT))
        return True
    return False


class MerkleTree:
    """
    Binary Merkle tree over an ordered list of transaction strings.

    The tree is built once in the constructor and never mutated afterwards,
    so one instance can serve any number of concurrent readers.

    Usage:
        provider = HashProvider("SHA-256")
        tree = MerkleTree.build(["a", "b", "c"], provider)
        proof = tree.proof_for("b")
        assert tree.verify("b", proof, tree.root_hash())
    """

    def __init__(self, transactions: Sequence[str], hash_provider: HashProvider) -> None:
        """
        Args:
            transactions: Ordered, non-empty transaction strings
            hash_provider: Provider used for leaves and internal nodes

        Raises:
            EmptyInputError: If transactions is empty
            TreeInvariantError: If padding or reduction breaks the
                power-of-two shape (a programming error)
        """
        self._transactions: tuple[str, ...] = tuple(transactions)
        self._hash_provider = hash_provider

        padded = pad_transactions(self._transactions)
        if not is_power_of_two(len(padded)):
            raise TreeInvariantError(
                f"Leaf count {len(padded)} is not a power of two after padding",
                size=len(padded),
            )
        self._padded: tuple[str, ...] = tuple(padded)
        self._height = len(padded).bit_length() - 1

        logger.debug(
            f"Building Merkle tree: {len(self._transactions)} transactions, "
            f"{len(padded)} leaves, height {self._height}, algorithm {hash_provider.name}"
        )

        leaves = [TreeNode.leaf(h) for h in hash_provider.compute_hash_batch(self._padded)]
        self._root = _build_root(leaves, hash_provider)

        logger.debug(f"Merkle root {self._root.hash} over {len(padded)} leaves")

    @classmethod
    def build(cls, transactions: Sequence[str], hash_provider: HashProvider) -> "MerkleTree":
        """Alias for the constructor."""
        return cls(transactions, hash_provider)

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def transactions(self) -> tuple[str, ...]:
        """Transactions as supplied, without padding."""
        return self._transactions

    @property
    def padded_transactions(self) -> tuple[str, ...]:
        return self._padded

    @property
    def hash_provider(self) -> HashProvider:
        return self._hash_provider

    @property
    def root(self) -> TreeNode:
        return self._root

    @property
    def leaf_count(self) -> int:
        """Number of leaves, padding included."""
        return len(self._padded)

    @property
    def height(self) -> int:
        """log2(leaf_count); 0 for a single-leaf tree."""
        return self._height

    def root_hash(self) -> str:
        return self._root.hash

    def levels(self) -> list[list[TreeNode]]:
        """Nodes grouped by level, root level first."""
        result: list[list[TreeNode]] = []
        current = [self._root]
        while current:
            result.append(current)
            current = [
                child
                for node in current
                for child in (node.left, node.right)
                if child is not None
            ]
        return result

    # -------------------------------------------------------------------------
    # Proofs
    # -------------------------------------------------------------------------

    def contains(self, transaction: str) -> bool:
        """True if some leaf hashes equal H(transaction)."""
        leaf_hash = self._hash_provider.compute_hash(transaction)
        return any(node.hash == leaf_hash for node in self.levels()[-1])

    def proof_for(self, transaction: str) -> Proof:
        """
        Membership proof for `transaction`, ordered leaf-to-root.

        Returns an empty list when no leaf matches. A single-leaf tree also
        yields an empty proof for its one transaction; use contains() to tell
        the two apart.

        Args:
            transaction: Raw transaction string

        Returns:
            List of ProofStep (empty = not found)
        """
        leaf_hash = self._hash_provider.compute_hash(transaction)
        acc: list[ProofStep] = []
        if not _collect_path(self._root, leaf_hash, acc):
            logger.debug("Transaction not found in tree")
            return []
        return acc

    def verify(
        self,
        transaction: Optional[str],
        proof: Optional[Iterable[ProofStep]],
        expected_root: Optional[str],
    ) -> bool:
        """See verification.verify_proof(); never raises."""
        return verify_proof(self._hash_provider, transaction, proof, expected_root)

    def verify_from_leaf_hash(
        self,
        leaf_hash: Optional[str],
        proof: Optional[Iterable[ProofStep]],
        expected_root: Optional[str],
    ) -> bool:
        """See verification.verify_proof_from_leaf_hash(); never raises."""
        return verify_proof_from_leaf_hash(self._hash_provider, leaf_hash, proof, expected_root)

    def __repr__(self) -> str:
        return (
            f"MerkleTree(leaves={self.leaf_count}, height={self._height}, "
            f"algorithm={self._hash_provider.name!r}, root={self._root.hash[:16]!r})"
        )


__all__ = [
    "PADDING_TRANSACTION",
    "is_power_of_two",
    "next_power_of_two",
    "pad_transactions",
    "MerkleTree",
]
