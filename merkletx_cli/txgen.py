"""
Random transaction generation and proof tampering for the demo driver.
"""

from __future__ import annotations

import secrets

from merkletx.merkle import Proof, ProofStep


def generate_random_distinct_transactions(count: int, bytes_per_tx: int = 16) -> list[str]:
    """
    Generate `count` distinct random hex strings.

    Args:
        count: Number of transactions
        bytes_per_tx: Random bytes per transaction (hex length is twice this)

    Returns:
        List of distinct lowercase hex strings
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if bytes_per_tx < 1:
        raise ValueError(f"bytes_per_tx must be positive, got {bytes_per_tx}")

    seen: set[str] = set()
    out: list[str] = []
    while len(out) < count:
        tx = secrets.token_hex(bytes_per_tx)
        if tx not in seen:
            seen.add(tx)
            out.append(tx)
    return out


def flip_last_nibble(hex_string: str) -> str:
    """Increment the last hex digit, wrapping "f" to "0"."""
    if not hex_string:
        return hex_string
    last = hex_string[-1].lower()
    flipped = "0" if last == "f" else format(int(last, 16) + 1, "x")
    return hex_string[:-1] + flipped


def tamper_first_step(proof: Proof) -> Proof:
    """Copy of `proof` with the first sibling hash altered by one nibble."""
    out = list(proof)
    if out:
        first = out[0]
        out[0] = ProofStep(sibling_hash=flip_last_nibble(first.sibling_hash), side=first.side)
    return out
