"""
Module 02 - Hashing Utilities
Pluggable digest algorithms behind a single HashProvider.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- CryptographicDigest: hashlib-backed algorithms (SHA-256, SHA-1, SHA3-256, ...)
- Murmur2Digest: the custom 32-bit non-cryptographic hash
- HashProvider: hex digests of strings under one configured algorithm

Encoding Rules (Hard Contracts):
1. Input strings are hashed as their UTF-8 bytes, never stripped or normalized;
   unpaired surrogates encode as "?" so hashing never raises
2. Cryptographic output: lowercase hex, two characters per digest byte
3. MurmurHash2 output: 4 bytes little-endian, lowercase hex (8 characters)

Each HashProvider owns its algorithm choice. Providers are immutable
after construction; two providers with different algorithms never
affect each other.
"""
from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Sequence, Union

from merkletx.crypto.murmur import DEFAULT_SEED, murmur2_digest
from merkletx.schemas.errors import UnsupportedAlgorithmError


logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "SHA-256"
MURMUR2_NAME = "MurmurHash2"

# Canonical name -> hashlib constructor name
_CRYPTOGRAPHIC_ALGORITHMS: dict[str, str] = {
    "SHA-1": "sha1",
    "SHA-224": "sha224",
    "SHA-256": "sha256",
    "SHA-384": "sha384",
    "SHA-512": "sha512",
    "SHA-512/224": "sha512_224",
    "SHA-512/256": "sha512_256",
    "SHA3-224": "sha3_224",
    "SHA3-256": "sha3_256",
    "SHA3-384": "sha3_384",
    "SHA3-512": "sha3_512",
    "MD5": "md5",
    "BLAKE2b": "blake2b",
    "BLAKE2s": "blake2s",
}

# Alternate spellings, keyed by _normalize() output
_ALIASES: dict[str, str] = {
    "SHA1": "SHA-1",
    "SHA224": "SHA-224",
    "SHA256": "SHA-256",
    "SHA384": "SHA-384",
    "SHA512": "SHA-512",
    "SHA-3-224": "SHA3-224",
    "SHA-3-256": "SHA3-256",
    "SHA-3-384": "SHA3-384",
    "SHA-3-512": "SHA3-512",
    "BLAKE2": "BLAKE2b",
}


def _normalize(name: str) -> str:
    return name.strip().upper().replace("_", "-")


_LOOKUP: dict[str, str] = {_normalize(n): n for n in _CRYPTOGRAPHIC_ALGORITHMS}
_LOOKUP.update({_normalize(alias): target for alias, target in _ALIASES.items()})


@dataclass(frozen=True)
class CryptographicDigest:
    """A standard digest delegated to hashlib."""
    name: str
    hashlib_name: str

    def digest(self, data: bytes) -> bytes:
        return hashlib.new(self.hashlib_name, data).digest()


@dataclass(frozen=True)
class Murmur2Digest:
    """32-bit MurmurHash2 with a fixed seed."""
    seed: int = DEFAULT_SEED
    name: str = MURMUR2_NAME

    def digest(self, data: bytes) -> bytes:
        return murmur2_digest(data, self.seed)


DigestAlgorithm = Union[CryptographicDigest, Murmur2Digest]


def resolve_algorithm(name: str) -> DigestAlgorithm:
    """
    Map an algorithm name to its digest variant.

    Names are matched case-insensitively and "_" is accepted for "-"
    (so "sha3_256", "SHA-3-256" and "SHA3-256" are the same algorithm).

    Args:
        name: Algorithm name, e.g. "SHA-256" or "MurmurHash2"

    Returns:
        The immutable digest variant

    Raises:
        UnsupportedAlgorithmError: If the name is unknown, or hashlib on this
            interpreter does not provide the algorithm
    """
    if not isinstance(name, str) or not name.strip():
        raise UnsupportedAlgorithmError(str(name))

    key = _normalize(name)
    if key == _normalize(MURMUR2_NAME):
        return Murmur2Digest()

    canonical = _LOOKUP.get(key)
    if canonical is None:
        raise UnsupportedAlgorithmError(name)

    hashlib_name = _CRYPTOGRAPHIC_ALGORITHMS[canonical]
    try:
        hashlib.new(hashlib_name)
    except ValueError as e:
        # Known name, but not compiled into this interpreter's OpenSSL
        raise UnsupportedAlgorithmError(
            name, details={"reason": str(e)}
        ) from e

    return CryptographicDigest(name=canonical, hashlib_name=hashlib_name)


def supported_algorithms() -> list[str]:
    """Canonical names accepted by HashProvider."""
    return [*_CRYPTOGRAPHIC_ALGORITHMS, MURMUR2_NAME]


class HashProvider:
    """
    Computes hex digests of strings under one configured algorithm.

    Example:
        >>> HashProvider("SHA-256").compute_hash("hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
        >>> len(HashProvider("MurmurHash2").compute_hash("hello"))
        8
    """

    __slots__ = ("_algorithm",)

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        """
        Args:
            algorithm: Algorithm name (see supported_algorithms())

        Raises:
            UnsupportedAlgorithmError: If the algorithm name is unknown
        """
        self._algorithm: DigestAlgorithm = resolve_algorithm(algorithm)
        logger.debug(f"HashProvider using {self._algorithm.name}")

    @classmethod
    def from_algorithm(cls, algorithm: DigestAlgorithm) -> "HashProvider":
        """Wrap an already-resolved digest variant."""
        provider = cls.__new__(cls)
        provider._algorithm = algorithm
        return provider

    @classmethod
    def murmur2(cls, seed: int = DEFAULT_SEED) -> "HashProvider":
        """MurmurHash2 provider with a custom seed."""
        return cls.from_algorithm(Murmur2Digest(seed=seed & 0xFFFFFFFF))

    @property
    def algorithm(self) -> DigestAlgorithm:
        return self._algorithm

    @property
    def name(self) -> str:
        return self._algorithm.name

    def compute_hash(self, data: str) -> str:
        """
        Hex digest of the UTF-8 bytes of `data`.

        Args:
            data: String to hash (may be empty)

        Returns:
            Lowercase hex digest
        """
        return self._algorithm.digest(data.encode("utf-8", errors="replace")).hex()

    def compute_hash_batch(self, data: Sequence[str]) -> list[str]:
        """Element-wise compute_hash(), preserving order."""
        return [self.compute_hash(item) for item in data]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashProvider):
            return NotImplemented
        return self._algorithm == other._algorithm

    def __hash__(self) -> int:
        return hash(self._algorithm)

    def __repr__(self) -> str:
        return f"HashProvider({self._algorithm!r})"


__all__ = [
    "DEFAULT_ALGORITHM",
    "MURMUR2_NAME",
    "CryptographicDigest",
    "Murmur2Digest",
    "DigestAlgorithm",
    "resolve_algorithm",
    "supported_algorithms",
    "HashProvider",
]
