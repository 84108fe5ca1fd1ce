"""
CLI Tree and Hash Commands

Usage:
    merkletx tree tx1 tx2 tx3 [--file PATH] [--algorithm A] [--hash-chars N] [--plain]
    merkletx hash "some data" ["more data" ...] [--algorithm A]
"""

from __future__ import annotations

from argparse import Namespace

from merkletx.merkle import MerkleTree
from merkletx.schemas.errors import EmptyInputError
from merkletx_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    get_config,
    print_error,
    read_transactions,
    resolve_provider,
)
from merkletx_cli.render import render_levels, render_pretty


def tree_cmd(args: Namespace) -> int:
    """Render the tree built over the given transactions."""
    transactions = read_transactions(args)
    provider = resolve_provider(args)

    try:
        tree = MerkleTree(transactions, provider)
    except EmptyInputError as e:
        print_error(e.message)
        return EXIT_RUNTIME_ERROR

    if args.plain:
        print(render_levels(tree))
    else:
        hash_chars = args.hash_chars or get_config(args).demo.hash_chars
        print(render_pretty(tree, hash_chars))
    print(f"\nroot: {tree.root_hash()}")
    return EXIT_SUCCESS


def hash_cmd(args: Namespace) -> int:
    """Print one digest per input string."""
    # No fallback: asking for a digest under the wrong algorithm is an error
    provider = resolve_provider(args, fallback=False)
    for data, digest in zip(args.data, provider.compute_hash_batch(args.data)):
        print(f"{digest}  {data}")
    return EXIT_SUCCESS
