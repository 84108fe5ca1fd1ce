"""
Module 01 - Schemas
File: errors.py

Purpose: Error taxonomy for tree construction and hashing.
Defines both a Pydantic model for structured error reporting
and Python exceptions for control flow.

Verification never raises: a failed proof is an ordinary False result
and has no exception class.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Hashing
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"

    # Tree construction
    EMPTY_INPUT = "EMPTY_INPUT"
    TREE_INVARIANT_VIOLATION = "TREE_INVARIANT_VIOLATION"

    # Caller errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MerkleTxError(BaseModel):
    """
    Error model for structured error reporting (e.g. CLI --json output).
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.EMPTY_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the caller can recover (e.g. by substituting a default)",
    )

    def to_exception(self) -> "MerkleTxException":
        """Convert this error model to a raisable exception."""
        return MerkleTxException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleTxException(Exception):
    """
    Base exception for all merkletx errors.

    Carries structured error information and can be converted
    to a MerkleTxError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLETX_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleTxError:
        """Convert this exception to a MerkleTxError model."""
        return MerkleTxError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class UnsupportedAlgorithmError(MerkleTxException):
    """
    Raised when a HashProvider is constructed with an unknown digest name.

    Recoverable: the caller may substitute a default algorithm.
    """

    def __init__(
        self,
        algorithm: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["algorithm"] = algorithm
        super().__init__(
            message=f"Unsupported hash algorithm: {algorithm!r}",
            code=ErrorCodes.UNSUPPORTED_ALGORITHM,
            details=full_details,
            retryable=True,
        )
        self.algorithm = algorithm


class EmptyInputError(MerkleTxException):
    """Raised when a tree is built from zero transactions."""

    def __init__(
        self,
        message: str = "Cannot build a Merkle tree from an empty transaction list",
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details.setdefault("transaction_count", 0)
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=full_details,
            retryable=False,
        )


class InvalidArgumentError(MerkleTxException):
    """Raised when a caller-supplied value is outside its allowed range."""

    def __init__(
        self,
        message: str,
        argument: str,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["argument"] = argument
        full_details["value"] = value
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ARGUMENT,
            details=full_details,
            retryable=False,
        )
        self.argument = argument


class TreeInvariantError(MerkleTxException):
    """
    Raised when a structural invariant is broken during construction.

    Indicates a programming error rather than bad data: an odd-sized level
    during reduction, a non power-of-two leaf count after padding, or an
    internal node with only one child.
    """

    def __init__(
        self,
        message: str,
        level: int | None = None,
        size: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if level is not None:
            full_details["level"] = level
        if size is not None:
            full_details["size"] = size
        super().__init__(
            message=message,
            code=ErrorCodes.TREE_INVARIANT_VIOLATION,
            details=full_details,
            retryable=False,
        )
