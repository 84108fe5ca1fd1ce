"""
Common test fixtures shared by all test modules.

Provides factory functions for transactions and trees.
"""

from typing import Optional, Sequence

from merkletx.crypto import HashProvider
from merkletx.merkle import MerkleTree


def make_transactions(count: int, prefix: str = "tx") -> list[str]:
    """Deterministic transactions: tx0, tx1, ..."""
    return [f"{prefix}{i}" for i in range(count)]


def make_tree(
    transactions: Optional[Sequence[str]] = None,
    provider: Optional[HashProvider] = None,
) -> MerkleTree:
    """Build a tree, defaulting to four transactions under SHA-256."""
    if transactions is None:
        transactions = make_transactions(4)
    if provider is None:
        provider = HashProvider("SHA-256")
    return MerkleTree(transactions, provider)


def tamper_char(hex_string: str, position: int) -> str:
    """Replace the hex digit at `position` with a different one."""
    current = hex_string[position]
    replacement = "0" if current != "0" else "1"
    return hex_string[:position] + replacement + hex_string[position + 1:]
