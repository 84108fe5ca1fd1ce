"""
Module 02 - MurmurHash2 (32-bit)

Non-cryptographic 32-bit MurmurHash2 over raw bytes.

Arithmetic is done on Python ints masked to 32 bits, so every right shift
is an unsigned shift and every multiply wraps. Results are bit-for-bit
identical to the classic reference implementation.

Do not use this for anything security-relevant: a 32-bit digest is trivial
to collide.
"""
from __future__ import annotations

DEFAULT_SEED: int = 0x9747B28C

_M: int = 0x5BD1E995
_R: int = 24
_MASK: int = 0xFFFFFFFF


def murmur2_32(data: bytes, seed: int = DEFAULT_SEED) -> int:
    """
    Compute the 32-bit MurmurHash2 of `data`.

    Args:
        data: Raw bytes to hash
        seed: 32-bit seed (default 0x9747B28C)

    Returns:
        Unsigned 32-bit hash value
    """
    length = len(data)
    h = (seed ^ length) & _MASK

    # Body: 4-byte little-endian blocks
    block_end = length - (length % 4)
    for i in range(0, block_end, 4):
        k = int.from_bytes(data[i:i + 4], "little")

        k = (k * _M) & _MASK
        k ^= k >> _R
        k = (k * _M) & _MASK

        h = (h * _M) & _MASK
        h ^= k

    # Tail: highest remaining byte first
    tail = length - block_end
    if tail == 3:
        h ^= data[block_end + 2] << 16
    if tail >= 2:
        h ^= data[block_end + 1] << 8
    if tail >= 1:
        h ^= data[block_end]
        h = (h * _M) & _MASK

    # Final avalanche
    h ^= h >> 13
    h = (h * _M) & _MASK
    h ^= h >> 15

    return h


def murmur2_digest(data: bytes, seed: int = DEFAULT_SEED) -> bytes:
    """
    MurmurHash2 serialized as 4 bytes, least-significant byte first.

    Example:
        >>> len(murmur2_digest(b"hello"))
        4
    """
    return murmur2_32(data, seed).to_bytes(4, "little")


__all__ = [
    "DEFAULT_SEED",
    "murmur2_32",
    "murmur2_digest",
]
