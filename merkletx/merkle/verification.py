"""
Module 03 - Proof Verification
Tree-independent membership proof verification.

Verification is total: malformed or incomplete input, absent values and hash
mismatches all produce False. Nothing in this module raises on bad proofs.

Algorithm:
1. running = H(transaction)  (or the supplied leaf hash)
2. For each step, leaf-to-root: running = pair_hash(running, step.sibling_hash)
3. Accept iff running == expected_root (exact string equality)

The declared side of each step is never consulted; ordering comes from
canonical_order() alone, the same rule used to build the tree.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Optional

from merkletx.merkle.nodes import pair_hash

if TYPE_CHECKING:
    from merkletx.crypto.hashing import HashProvider


logger = logging.getLogger(__name__)


def _replay(
    provider: "HashProvider",
    leaf_hash: str,
    proof: Iterable[Any],
    expected_root: str,
) -> bool:
    running = leaf_hash
    try:
        steps = iter(proof)
    except TypeError:
        return False

    for position, step in enumerate(steps):
        sibling = getattr(step, "sibling_hash", None)
        if not isinstance(sibling, str):
            logger.debug(f"Proof step {position} is missing its sibling hash")
            return False
        running = pair_hash(provider, running, sibling)

    return running == expected_root


def verify_proof(
    provider: "HashProvider",
    transaction: Optional[str],
    proof: Optional[Iterable[Any]],
    expected_root: Optional[str],
) -> bool:
    """
    Verify that `transaction` is a member of the tree with `expected_root`.

    Args:
        provider: HashProvider the tree was built with
        transaction: Raw transaction string
        proof: Proof steps, leaf-to-root
        expected_root: Trusted root hash

    Returns:
        True if the recomputed root equals expected_root, False otherwise
        (including for any absent or malformed argument)
    """
    if not isinstance(transaction, str):
        return False
    if proof is None or not isinstance(expected_root, str):
        return False
    return _replay(provider, provider.compute_hash(transaction), proof, expected_root)


def verify_proof_from_leaf_hash(
    provider: "HashProvider",
    leaf_hash: Optional[str],
    proof: Optional[Iterable[Any]],
    expected_root: Optional[str],
) -> bool:
    """
    Like verify_proof(), starting from an already-computed leaf hash.

    Returns:
        True if the recomputed root equals expected_root, False otherwise
    """
    if not isinstance(leaf_hash, str):
        return False
    if proof is None or not isinstance(expected_root, str):
        return False
    return _replay(provider, leaf_hash, proof, expected_root)


__all__ = [
    "verify_proof",
    "verify_proof_from_leaf_hash",
]
