"""
Module 01 - Schemas
File: reports.py

Purpose: Display records for proof and benchmark results.
Used by the CLI for --json output; nothing here is read back.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


SideName = Literal["LEFT", "RIGHT"]


class ProofStepRecord(BaseModel):
    """One proof step as shown to a user."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sibling_hash: str = Field(..., min_length=1)
    side: SideName


class ProofReport(BaseModel):
    """
    Outcome of proving (and verifying) one transaction against a tree.

    `found` is False when the tree holds no leaf for the transaction;
    `proof` is then empty.
    """

    model_config = ConfigDict(extra="forbid")

    algorithm: str
    leaf_count: int = Field(..., ge=1, description="Transactions supplied")
    padded_count: int = Field(..., ge=1, description="Leaves after padding")
    height: int = Field(..., ge=0)
    root: str
    transaction: str
    index: Optional[int] = Field(default=None, ge=0)
    found: bool
    proof: list[ProofStepRecord] = Field(default_factory=list)
    verified: bool
    tampered_verified: Optional[bool] = Field(
        default=None,
        description="Verification result after flipping one nibble of the first sibling",
    )


class BenchmarkReport(BaseModel):
    """Average timings, in nanoseconds per operation."""

    model_config = ConfigDict(extra="forbid")

    algorithm: str
    leaf_count: int = Field(..., ge=1)
    iterations: int = Field(..., ge=1)
    brute_force_iterations: int = Field(..., ge=1)
    valid_ns: float = Field(..., ge=0)
    invalid_ns: float = Field(..., ge=0)
    brute_force_ns: float = Field(..., ge=0)

    @computed_field
    @property
    def speedup_valid(self) -> float:
        return self.brute_force_ns / self.valid_ns if self.valid_ns else 0.0

    @computed_field
    @property
    def speedup_invalid(self) -> float:
        return self.brute_force_ns / self.invalid_ns if self.invalid_ns else 0.0
