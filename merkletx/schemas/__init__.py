"""
Schemas: error taxonomy and display records.
"""

from .errors import (
    ErrorCodes,
    MerkleTxError,
    MerkleTxException,
    UnsupportedAlgorithmError,
    EmptyInputError,
    InvalidArgumentError,
    TreeInvariantError,
)
from .reports import (
    ProofStepRecord,
    ProofReport,
    BenchmarkReport,
)

__all__ = [
    # Errors
    "ErrorCodes",
    "MerkleTxError",
    "MerkleTxException",
    "UnsupportedAlgorithmError",
    "EmptyInputError",
    "InvalidArgumentError",
    "TreeInvariantError",
    # Reports
    "ProofStepRecord",
    "ProofReport",
    "BenchmarkReport",
]
