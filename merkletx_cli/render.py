"""
ASCII rendering of a built MerkleTree.

Two layouts:
- render_levels: one line per level, full hashes, root first
- render_pretty: centered tree with / \\ connectors and shortened hashes

Both only read the tree; they are meant for small trees (a few levels).
"""

from __future__ import annotations

from merkletx.merkle import MerkleTree


def shorten(value: str, n: int) -> str:
    return value if len(value) <= n else value[:n]


def render_levels(tree: MerkleTree) -> str:
    """Level-order dump, one line per level."""
    return "\n".join(
        " ".join(node.hash for node in level)
        for level in tree.levels()
    )


def render_pretty(tree: MerkleTree, hash_chars: int = 8) -> str:
    """
    Render the tree as centered ASCII art.

    Every node on a level gets an equal-width field; the leaf level uses
    one cell of max(3, hash_chars) + 2 characters per leaf.

    Args:
        tree: Tree to render
        hash_chars: Hash prefix length shown per node

    Returns:
        Multi-line string (no trailing newline)
    """
    if hash_chars < 1:
        raise ValueError(f"hash_chars must be positive, got {hash_chars}")

    levels = tree.levels()
    cell = max(3, hash_chars) + 2
    width = len(levels[-1]) * cell

    lines: list[str] = []
    for depth, nodes in enumerate(levels):
        field_width = width // len(nodes)
        lines.append(
            "".join(shorten(node.hash, hash_chars).center(field_width) for node in nodes).rstrip()
        )

        if depth == len(levels) - 1:
            break

        quarter = field_width // 4
        connector = [" "] * field_width
        connector[quarter] = "/"
        connector[field_width - 1 - quarter] = "\\"
        lines.append(("".join(connector) * len(nodes)).rstrip())

    return "\n".join(lines)
