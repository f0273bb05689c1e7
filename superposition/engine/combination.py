"""
Combination Engine for the Superposition algebra.

Cross-product evaluation of two operands under an arithmetic operator.

Algorithm:
    1. Extract (values, mode) from both operands
    2. Visit every (a, b) pair, a-major and b-minor
    3. Apply the operator; a pair that raises PairExclusionError is
       dropped and recorded, the rest of the scan continues
    4. Results keep scan order and duplicates
    5. Result mode is promoted: any conjunctive operand makes it conjunctive
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain import Superposition, promote_mode
from ..exclusion import PairExclusionError, PairOutcome
from .operands import Operand, extract_operand
from .operators import ArithmeticOperator, resolve_operator

logger = logging.getLogger(__name__)


# =============================================================================
# COMBINATION RESULT
# =============================================================================

@dataclass
class CombinationResult:
    """
    Complete result of combining two operands.

    Exposes:
    - The resulting superposition
    - Every pair outcome, in scan order (for audit)
    """
    superposition: Superposition
    outcomes: list[PairOutcome] = field(default_factory=list)

    @property
    def pairs_evaluated(self) -> int:
        return len(self.outcomes)

    @property
    def exclusions(self) -> list[PairOutcome]:
        """Outcomes that were dropped from the result."""
        return [outcome for outcome in self.outcomes if outcome.excluded]


# =============================================================================
# ENGINE
# =============================================================================

def combine(
    a: Operand,
    b: Operand,
    operator: str | ArithmeticOperator,
) -> CombinationResult:
    """
    Combine two operands pairwise under an arithmetic operator.

    Args:
        a: Left operand (bare value or Superposition)
        b: Right operand (bare value or Superposition)
        operator: Operator name from ARITHMETIC_OPERATORS, or a callable
            taking (left, right) that may raise PairExclusionError

    Returns:
        CombinationResult with the new superposition and all pair outcomes

    Raises:
        ValueError: If the operator name is unknown
    """
    op = resolve_operator(operator)
    a_values, a_mode = extract_operand(a)
    b_values, b_mode = extract_operand(b)

    outcomes: list[PairOutcome] = []
    for av in a_values:
        for bv in b_values:
            try:
                outcomes.append(PairOutcome.success(av, bv, op(av, bv)))
            except PairExclusionError as e:
                logger.debug(f"Excluded pair ({av!r}, {bv!r}): {e}")
                outcomes.append(PairOutcome.from_error(av, bv, e))

    result = Superposition(
        values=tuple(outcome.result for outcome in outcomes if not outcome.excluded),
        mode=promote_mode(a_mode, b_mode),
    )
    logger.debug(
        f"Combined {len(a_values)}x{len(b_values)} pairs: "
        f"{len(result.values)} kept, {len(outcomes) - len(result.values)} excluded"
    )
    return CombinationResult(superposition=result, outcomes=outcomes)


def add(a: Operand, b: Operand) -> Superposition:
    """Every pairwise sum."""
    return combine(a, b, "add").superposition


def subtract(a: Operand, b: Operand) -> Superposition:
    """Every pairwise difference a - b."""
    return combine(a, b, "subtract").superposition


def multiply(a: Operand, b: Operand) -> Superposition:
    """Every pairwise product."""
    return combine(a, b, "multiply").superposition


def divide(a: Operand, b: Operand) -> Superposition:
    """Every pairwise quotient a / b; zero divisors are dropped."""
    return combine(a, b, "divide").superposition


def modulo(a: Operand, b: Operand) -> Superposition:
    """Every pairwise remainder fmod(a, b); zero divisors are dropped."""
    return combine(a, b, "modulo").superposition
