"""
Module 02 - Hashing Unit Tests
Tests for merkletx/crypto/hashing.py

Tests:
- Digest dispatch and hex formatting per algorithm
- Algorithm name normalization and rejection
- Batch hashing order
- Provider independence (no shared algorithm state)
"""
import dataclasses
import hashlib

import pytest

from merkletx.crypto.hashing import (
    CryptographicDigest,
    HashProvider,
    Murmur2Digest,
    resolve_algorithm,
    supported_algorithms,
)
from merkletx.crypto.murmur import murmur2_digest
from merkletx.schemas.errors import ErrorCodes, UnsupportedAlgorithmError


class TestCryptographicDigests:
    """Tests for hashlib-backed algorithms."""

    def test_sha256_known_value(self):
        """SHA-256 of "hello" matches the well-known digest."""
        provider = HashProvider("SHA-256")

        assert provider.compute_hash("hello") == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_default_algorithm_is_sha256(self):
        assert HashProvider().name == "SHA-256"

    @pytest.mark.parametrize(
        "name,hashlib_name",
        [
            ("SHA-1", "sha1"),
            ("SHA-256", "sha256"),
            ("SHA-512", "sha512"),
            ("SHA3-256", "sha3_256"),
            ("MD5", "md5"),
            ("BLAKE2b", "blake2b"),
        ],
    )
    def test_matches_hashlib(self, name, hashlib_name):
        """Output is the lowercase hex of hashlib's raw digest."""
        expected = hashlib.new(hashlib_name, "payload".encode("utf-8")).hexdigest()

        assert HashProvider(name).compute_hash("payload") == expected

    def test_hex_is_lowercase_two_chars_per_byte(self):
        digest = HashProvider("SHA-1").compute_hash("abc")

        assert len(digest) == 40
        assert digest == digest.lower()
        int(digest, 16)

    def test_empty_string(self):
        assert HashProvider("SHA-256").compute_hash("") == hashlib.sha256(b"").hexdigest()

    def test_utf8_encoding(self):
        """Non-ASCII input is hashed as UTF-8 bytes."""
        expected = hashlib.sha256("héllo €".encode("utf-8")).hexdigest()

        assert HashProvider("SHA-256").compute_hash("héllo €") == expected

    @pytest.mark.parametrize("name", ["SHA-256", "MurmurHash2"])
    def test_lone_surrogate_hashes_as_question_mark(self, name):
        """Unpaired surrogates are replaced by "?" instead of raising."""
        provider = HashProvider(name)

        assert provider.compute_hash("\ud800") == provider.compute_hash("?")
        assert provider.compute_hash("a\udc80b") == provider.compute_hash("a?b")


class TestMurmurDigest:
    """Tests for the MurmurHash2 variant."""

    def test_eight_lowercase_hex_chars(self):
        digest = HashProvider("MurmurHash2").compute_hash("hello")

        assert len(digest) == 8
        assert digest == digest.lower()

    def test_matches_little_endian_digest(self):
        """Hex output is the 4 little-endian bytes of the 32-bit value."""
        expected = murmur2_digest("é".encode("utf-8")).hex()

        assert HashProvider("MurmurHash2").compute_hash("é") == expected

    def test_name_is_case_insensitive(self):
        assert isinstance(HashProvider("murmurhash2").algorithm, Murmur2Digest)

    def test_custom_seed(self):
        default = HashProvider.murmur2()
        custom = HashProvider.murmur2(seed=42)

        assert default == HashProvider("MurmurHash2")
        assert custom.compute_hash("x") != default.compute_hash("x")


class TestAlgorithmResolution:
    """Tests for name normalization and rejection."""

    @pytest.mark.parametrize("alias", ["SHA3-256", "SHA-3-256", "sha3_256", "sha3-256"])
    def test_sha3_aliases(self, alias):
        algorithm = resolve_algorithm(alias)

        assert algorithm == CryptographicDigest(name="SHA3-256", hashlib_name="sha3_256")

    @pytest.mark.parametrize("alias", ["sha256", "SHA256", "sha-256", " SHA-256 "])
    def test_sha256_aliases(self, alias):
        assert HashProvider(alias).name == "SHA-256"

    def test_unsupported_algorithm_raises(self):
        with pytest.raises(UnsupportedAlgorithmError) as exc_info:
            HashProvider("ROT13")

        error = exc_info.value
        assert error.algorithm == "ROT13"
        assert error.code == ErrorCodes.UNSUPPORTED_ALGORITHM
        assert error.details["algorithm"] == "ROT13"
        assert error.retryable is True
        assert "ROT13" in str(error)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_raises(self, name):
        with pytest.raises(UnsupportedAlgorithmError):
            HashProvider(name)

    def test_supported_algorithms_listed(self):
        names = supported_algorithms()

        assert "SHA-256" in names
        assert "SHA3-256" in names
        assert "MurmurHash2" in names


class TestBatchHashing:
    """Tests for compute_hash_batch()."""

    def test_batch_preserves_order(self):
        provider = HashProvider("SHA-256")
        data = ["c", "a", "b", "a"]

        assert provider.compute_hash_batch(data) == [provider.compute_hash(d) for d in data]

    def test_batch_empty(self):
        assert HashProvider("SHA-256").compute_hash_batch([]) == []


class TestProviderIndependence:
    """Each provider owns its algorithm; nothing is shared between them."""

    def test_murmur_provider_does_not_affect_sha256(self):
        sha = HashProvider("SHA-256")
        before = sha.compute_hash("data")

        murmur = HashProvider("MurmurHash2")
        murmur.compute_hash("data")

        assert sha.compute_hash("data") == before
        assert len(sha.compute_hash("data")) == 64

    def test_sha256_provider_does_not_affect_murmur(self):
        murmur = HashProvider("MurmurHash2")
        HashProvider("SHA-256")

        assert len(murmur.compute_hash("data")) == 8

    def test_algorithm_variant_is_frozen(self):
        provider = HashProvider("SHA-256")

        with pytest.raises(dataclasses.FrozenInstanceError):
            provider.algorithm.hashlib_name = "md5"

    def test_equality_by_algorithm(self):
        assert HashProvider("sha256") == HashProvider("SHA-256")
        assert HashProvider("SHA-256") != HashProvider("SHA-1")
        assert len({HashProvider("SHA-256"), HashProvider("sha256")}) == 1
