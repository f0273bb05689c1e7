"""
Filtering Engine for the Superposition algebra.

Filters the left operand's eigenstates by a comparison against the
right operand's eigenstates.

Quantification is set by the RIGHT operand's mode:
    disjunctive b — keep a if pred(a, b) holds for some b
    conjunctive b — keep a if pred(a, b) holds for every b

The result keeps the LEFT operand's mode. The right operand's mode
never reaches the output tag.

A pair that does not coerce gives no verdict: it neither matches nor
counts as a counterexample. An a-value needs at least one true verdict
to be kept, so an empty or entirely non-numeric b keeps nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..domain import Mode, Superposition
from ..exclusion import PairExclusionError, PairOutcome
from .operands import Operand, extract_operand
from .operators import Comparison, resolve_comparison

logger = logging.getLogger(__name__)


# =============================================================================
# FILTER RESULT
# =============================================================================

@dataclass
class FilterResult:
    """
    Complete result of filtering one operand by another.

    Exposes:
    - The resulting superposition
    - Left eigenstates kept and dropped
    - Every visited pair outcome, in scan order (for audit)
    """
    superposition: Superposition
    accepted: list[Any] = field(default_factory=list)
    rejected: list[Any] = field(default_factory=list)
    outcomes: list[PairOutcome] = field(default_factory=list)

    @property
    def exclusions(self) -> list[PairOutcome]:
        """Pairs that gave no verdict."""
        return [outcome for outcome in self.outcomes if outcome.excluded]


# =============================================================================
# ENGINE
# =============================================================================

def _matches(
    av: Any,
    b_values: tuple,
    b_mode: Mode,
    comp: Comparison,
    outcomes: list[PairOutcome],
) -> bool:
    """
    Decide one left eigenstate.

    Disjunctive b stops on the first true verdict; conjunctive b stops
    on the first false verdict.
    """
    match = False
    for bv in b_values:
        try:
            verdict = comp(av, bv)
        except PairExclusionError as e:
            logger.debug(f"No verdict for pair ({av!r}, {bv!r}): {e}")
            outcomes.append(PairOutcome.from_error(av, bv, e))
            continue

        outcomes.append(PairOutcome.success(av, bv, verdict))
        if verdict:
            match = True
            if b_mode is Mode.DISJUNCTIVE:
                break
        elif b_mode is Mode.CONJUNCTIVE:
            return False
    return match


def filter_by(
    a: Operand,
    b: Operand,
    comparison: str | Comparison,
) -> FilterResult:
    """
    Keep the eigenstates of `a` that satisfy `comparison` against `b`.

    Args:
        a: Operand being filtered
        b: Predicate set; its mode selects any/all quantification
        comparison: Name from COMPARISONS, or a callable taking
            (left, right) that may raise PairExclusionError

    Returns:
        FilterResult with a superposition in a's mode

    Raises:
        ValueError: If the comparison name is unknown
    """
    comp = resolve_comparison(comparison)
    a_values, a_mode = extract_operand(a)
    b_values, b_mode = extract_operand(b)

    accepted: list[Any] = []
    rejected: list[Any] = []
    outcomes: list[PairOutcome] = []

    for av in a_values:
        if _matches(av, b_values, b_mode, comp, outcomes):
            accepted.append(av)
        else:
            rejected.append(av)

    logger.debug(
        f"Filtered {len(a_values)} eigenstates against {b_mode.value}-set of "
        f"{len(b_values)}: {len(accepted)} kept"
    )
    return FilterResult(
        superposition=Superposition(values=tuple(accepted), mode=a_mode),
        accepted=accepted,
        rejected=rejected,
        outcomes=outcomes,
    )


def less_than(a: Operand, b: Operand) -> Superposition:
    """Eigenstates of a that are less than b."""
    return filter_by(a, b, "less_than").superposition


def greater_than(a: Operand, b: Operand) -> Superposition:
    """Eigenstates of a that are greater than b."""
    return filter_by(a, b, "greater_than").superposition


def equal_to(a: Operand, b: Operand) -> Superposition:
    """Eigenstates of a that are numerically equal to b."""
    return filter_by(a, b, "equal_to").superposition
