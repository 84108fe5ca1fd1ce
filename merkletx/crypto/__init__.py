"""
Hash providers and the MurmurHash2 primitive.
"""
from .hashing import (
    DEFAULT_ALGORITHM,
    MURMUR2_NAME,
    CryptographicDigest,
    Murmur2Digest,
    DigestAlgorithm,
    HashProvider,
    resolve_algorithm,
    supported_algorithms,
)
from .murmur import (
    DEFAULT_SEED,
    murmur2_32,
    murmur2_digest,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "MURMUR2_NAME",
    "CryptographicDigest",
    "Murmur2Digest",
    "DigestAlgorithm",
    "HashProvider",
    "resolve_algorithm",
    "supported_algorithms",
    "DEFAULT_SEED",
    "murmur2_32",
    "murmur2_digest",
]
