"""
Module 03 - Tree Nodes, Proof Steps and Canonical Pairing

Canonical Pairing Rule (Hard Contract):
    parent = H(min(a, b) + max(a, b))

The two child hashes are ordered by plain lexicographic comparison of their
hex strings before concatenation, so combining is commutative: the parent
hash does not depend on which structural side a child sits on. Verification
relies on this and never needs to know the side.

Changing the comparator changes every root; treat it as part of the format.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from merkletx.schemas.errors import TreeInvariantError

if TYPE_CHECKING:
    from merkletx.crypto.hashing import HashProvider


def canonical_order(a: str, b: str) -> tuple[str, str]:
    """Return (a, b) sorted so the lexicographically smaller hash comes first."""
    return (a, b) if a <= b else (b, a)


def pair_hash(provider: "HashProvider", a: str, b: str) -> str:
    """
    Hash two child hashes into their parent hash.

    Args:
        provider: HashProvider used for the whole tree
        a: One child hash (hex)
        b: The other child hash (hex)

    Returns:
        Parent hash; pair_hash(p, a, b) == pair_hash(p, b, a)
    """
    first, second = canonical_order(a, b)
    return provider.compute_hash(first + second)


@dataclass(frozen=True)
class TreeNode:
    """
    Immutable binary tree node.

    A leaf has no children and its hash is the digest of one (possibly
    padding) transaction. An internal node has exactly two children and its
    hash is pair_hash() of theirs.
    """
    hash: str
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __post_init__(self) -> None:
        if (self.left is None) != (self.right is None):
            raise TreeInvariantError(
                "Internal node must have exactly two children",
                details={"hash": self.hash},
            )

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    @classmethod
    def leaf(cls, hash: str) -> "TreeNode":
        return cls(hash=hash)

    @classmethod
    def combine(cls, left: "TreeNode", right: "TreeNode", provider: "HashProvider") -> "TreeNode":
        """Build the parent of two nodes; `left`/`right` record structure only."""
        return cls(
            hash=pair_hash(provider, left.hash, right.hash),
            left=left,
            right=right,
        )

    def height(self) -> int:
        """Number of levels in this subtree (a leaf has height 1)."""
        # Perfectly balanced by construction, so the left spine is enough
        depth = 1
        node = self
        while node.left is not None:
            node = node.left
            depth += 1
        return depth


class Side(str, Enum):
    """Which side of the path a proof sibling occupied."""
    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class ProofStep:
    """
    One element of a membership proof.

    `side` is informational only. Verification recomputes the order with
    canonical_order() and never reads it.
    """
    sibling_hash: str
    side: Side

    def to_dict(self) -> dict[str, Any]:
        return {"sibling_hash": self.sibling_hash, "side": self.side.value}

    def __str__(self) -> str:
        return f"{self.sibling_hash[:8]}({self.side.value})"


# Ordered leaf-to-root
Proof = list[ProofStep]


__all__ = [
    "canonical_order",
    "pair_hash",
    "TreeNode",
    "Side",
    "ProofStep",
    "Proof",
]
