"""
Test fixtures package for merkletx tests.

This package provides factory functions for creating test objects.

Usage:
    from fixtures import make_transactions, make_tree

    def test_something(sha256_provider):
        tree = make_tree(make_transactions(4), sha256_provider)
"""

from .common import (
    make_transactions,
    make_tree,
    tamper_char,
)

__all__ = [
    "make_transactions",
    "make_tree",
    "tamper_char",
]
