"""
Module 02 - MurmurHash2 Unit Tests
Tests for merkletx/crypto/murmur.py

Known-answer values are derived step by step from the algorithm definition
(seed 0x9747B28C, m = 0x5BD1E995, r = 24) rather than taken from the
implementation under test.
"""
import pytest

from merkletx.crypto import HashProvider
from merkletx.crypto.murmur import DEFAULT_SEED, murmur2_32, murmur2_digest


M = 0x5BD1E995
MASK = 0xFFFFFFFF


def _finalize(h: int) -> int:
    h ^= h >> 13
    h = (h * M) & MASK
    h ^= h >> 15
    return h


class TestKnownAnswers:
    """Bit-exact derivations for the simplest inputs."""

    def test_default_seed(self):
        assert DEFAULT_SEED == 0x9747B28C

    def test_empty_input(self):
        """Empty input: h0 = seed, loop and tail are no-ops, then finalize."""
        expected = _finalize(0x9747B28C)

        assert murmur2_32(b"") == expected

    def test_single_byte_tail(self):
        """One tail byte: XOR at shift 0, then one multiply."""
        h = 0x9747B28C ^ 1
        h ^= ord("a")
        h = (h * M) & MASK

        assert murmur2_32(b"a") == _finalize(h)

    def test_three_byte_tail(self):
        """Tail bytes XOR in at shifts 16, 8 and 0."""
        data = bytes([0x01, 0x02, 0x03])
        h = 0x9747B28C ^ 3
        h ^= 0x03 << 16
        h ^= 0x02 << 8
        h ^= 0x01
        h = (h * M) & MASK

        assert murmur2_32(data) == _finalize(h)

    def test_one_full_block(self):
        """A 4-byte input is one little-endian block and no tail."""
        data = b"abcd"
        k = int.from_bytes(data, "little")
        k = (k * M) & MASK
        k ^= k >> 24
        k = (k * M) & MASK

        h = 0x9747B28C ^ 4
        h = (h * M) & MASK
        h ^= k

        assert murmur2_32(data) == _finalize(h)

    def test_block_plus_tail(self):
        """Five bytes: one block, then a single tail byte with one multiply."""
        data = b"abcde"
        k = int.from_bytes(b"abcd", "little")
        k = (k * M) & MASK
        k ^= k >> 24
        k = (k * M) & MASK

        h = 0x9747B28C ^ 5
        h = (h * M) & MASK
        h ^= k
        h ^= ord("e")
        h = (h * M) & MASK

        assert murmur2_32(data) == _finalize(h)


class TestReferenceVectors:
    """Fixed outputs for seed 0x9747B28C, as 32-bit values and as digest hex."""

    @pytest.mark.parametrize(
        "data,value,digest_hex",
        [
            (b"", 0x106E08D9, "d9086e10"),
            (b"abc", 0x1C94221B, "1b22941c"),
            (b"hello", 0x7F1DDBBD, "bddb1d7f"),
            (b"The quick brown fox jumps over the lazy dog", 0x1D84D036, "36d0841d"),
        ],
    )
    def test_vector(self, data, value, digest_hex):
        assert murmur2_32(data) == value
        assert murmur2_digest(data).hex() == digest_hex

    def test_provider_output(self):
        provider = HashProvider("MurmurHash2")

        assert provider.compute_hash("") == "d9086e10"
        assert provider.compute_hash("hello") == "bddb1d7f"


class TestProperties:
    """General behavior of the hash function."""

    def test_digest_is_little_endian(self):
        """murmur2_digest serializes the least-significant byte first."""
        value = murmur2_32(b"hello")
        digest = murmur2_digest(b"hello")

        assert len(digest) == 4
        assert digest == value.to_bytes(4, "little")
        assert digest[0] == value & 0xFF

    def test_result_fits_32_bits(self):
        """Long inputs never overflow 32 bits."""
        value = murmur2_32(bytes(range(256)) * 17)

        assert 0 <= value <= MASK

    def test_seed_changes_result(self):
        assert murmur2_32(b"data", seed=1) != murmur2_32(b"data", seed=2)

    def test_seed_is_masked(self):
        """Seeds wider than 32 bits behave like their low 32 bits."""
        assert murmur2_32(b"data", seed=(1 << 32) | 7) == murmur2_32(b"data", seed=7)

    @pytest.mark.parametrize("data", [b"x", b"xy", b"xyz", b"wxyz", b"vwxyz"])
    def test_every_byte_position_matters(self, data):
        """Changing any byte changes the hash, for block and tail bytes alike."""
        original = murmur2_32(data)
        for i in range(len(data)):
            changed = bytearray(data)
            changed[i] ^= 0x01
            assert murmur2_32(bytes(changed)) != original, f"byte {i} of {data!r} ignored"

    def test_deterministic(self):
        assert murmur2_32(b"repeatable") == murmur2_32(b"repeatable")
