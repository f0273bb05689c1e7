"""
Pair Exclusion records for the Superposition algebra.

A cross product is evaluated pair by pair. A pair that cannot be
evaluated is dropped from the result, never the whole operation.
Each drop is an explicit, auditable outcome:

    NON_NUMERIC  — an operand of the pair does not coerce to a number
    ZERO_DIVISOR — division or modulo by a divisor that coerces to zero

Per-pair operators raise PairExclusionError. The engines catch it at
pair granularity and record a PairOutcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ExclusionRule(Enum):
    """Reasons a single pair is dropped from a result."""
    NON_NUMERIC = "non_numeric"
    ZERO_DIVISOR = "zero_divisor"


class SuperpositionError(Exception):
    """Base exception for the superposition package."""
    pass


class PairExclusionError(SuperpositionError):
    """Raised when a single (left, right) pair must be excluded."""

    def __init__(self, rule: ExclusionRule, reason: str):
        self.rule = rule
        self.reason = reason
        super().__init__(f"[{rule.value}] {reason}")


@dataclass(frozen=True)
class PairOutcome:
    """
    The outcome of evaluating one (left, right) pair.

    Exactly one of `result` or `rule` is meaningful:
    - included pairs carry the operator result
    - excluded pairs carry the ExclusionRule and its reason
    """
    left: Any
    right: Any
    result: Any = None
    rule: Optional[ExclusionRule] = None
    reason: str = ""

    @property
    def excluded(self) -> bool:
        return self.rule is not None

    @classmethod
    def success(cls, left: Any, right: Any, result: Any) -> PairOutcome:
        return cls(left=left, right=right, result=result)

    @classmethod
    def from_error(
        cls,
        left: Any,
        right: Any,
        error: PairExclusionError,
    ) -> PairOutcome:
        """Create an excluded outcome from a PairExclusionError."""
        return cls(
            left=left,
            right=right,
            rule=error.rule,
            reason=error.reason,
        )

    def describe(self) -> str:
        """One-line human-readable form, used by the CLI --explain output."""
        if self.excluded:
            return f"({self.left!r}, {self.right!r}) excluded [{self.rule.value}] {self.reason}"
        return f"({self.left!r}, {self.right!r}) -> {self.result!r}"
