"""
Per-pair operators for the Superposition engines.

Each operator acts on one (left, right) pair of raw eigenstates:
    - both sides are coerced to floats first
    - a pair that cannot be evaluated raises PairExclusionError

Arithmetic:
    add, subtract, multiply  — IEEE double arithmetic
    divide                   — excludes a zero divisor
    modulo                   — math.fmod (sign follows the dividend),
                               excludes a zero divisor

Comparison:
    less_than, greater_than, equal_to — on the coerced floats
"""

from __future__ import annotations

import math
from typing import Any, Callable

from ..coercion import coerce_numeric
from ..exclusion import ExclusionRule, PairExclusionError

ArithmeticOperator = Callable[[Any, Any], float]
Comparison = Callable[[Any, Any], bool]


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def coerce_pair(left: Any, right: Any) -> tuple[float, float]:
    """
    Coerce both sides of a pair.

    Raises:
        PairExclusionError: If either side is not numeric (NON_NUMERIC)
    """
    left_value, left_ok = coerce_numeric(left)
    right_value, right_ok = coerce_numeric(right)

    if not left_ok:
        raise PairExclusionError(
            ExclusionRule.NON_NUMERIC,
            f"left operand {left!r} is not numeric",
        )
    if not right_ok:
        raise PairExclusionError(
            ExclusionRule.NON_NUMERIC,
            f"right operand {right!r} is not numeric",
        )
    return left_value, right_value


def _require_nonzero_divisor(divisor: float, operation: str) -> None:
    if divisor == 0:
        raise PairExclusionError(
            ExclusionRule.ZERO_DIVISOR,
            f"{operation} by zero",
        )


# =============================================================================
# ARITHMETIC
# =============================================================================

def add_values(left: Any, right: Any) -> float:
    a, b = coerce_pair(left, right)
    return a + b


def subtract_values(left: Any, right: Any) -> float:
    a, b = coerce_pair(left, right)
    return a - b


def multiply_values(left: Any, right: Any) -> float:
    a, b = coerce_pair(left, right)
    return a * b


def divide_values(left: Any, right: Any) -> float:
    a, b = coerce_pair(left, right)
    _require_nonzero_divisor(b, "division")
    return a / b


def modulo_values(left: Any, right: Any) -> float:
    """
    Floating-point remainder with the sign of the dividend.

    An infinite dividend has no remainder; IEEE fmod gives NaN there,
    while math.fmod raises, so the NaN is returned explicitly.
    """
    a, b = coerce_pair(left, right)
    _require_nonzero_divisor(b, "modulo")
    if math.isinf(a):
        return math.nan
    return math.fmod(a, b)


ARITHMETIC_OPERATORS: dict[str, ArithmeticOperator] = {
    "add": add_values,
    "subtract": subtract_values,
    "multiply": multiply_values,
    "divide": divide_values,
    "modulo": modulo_values,
}


# =============================================================================
# COMPARISON
# =============================================================================

def less_than_values(left: Any, right: Any) -> bool:
    a, b = coerce_pair(left, right)
    return a < b


def greater_than_values(left: Any, right: Any) -> bool:
    a, b = coerce_pair(left, right)
    return a > b


def equal_to_values(left: Any, right: Any) -> bool:
    a, b = coerce_pair(left, right)
    return a == b


COMPARISONS: dict[str, Comparison] = {
    "less_than": less_than_values,
    "greater_than": greater_than_values,
    "equal_to": equal_to_values,
}


def resolve_operator(operator: str | ArithmeticOperator) -> ArithmeticOperator:
    """
    Look up an arithmetic operator by name, or pass a callable through.

    Raises:
        ValueError: If the name is unknown
    """
    if callable(operator):
        return operator
    if operator not in ARITHMETIC_OPERATORS:
        raise ValueError(
            f"Unknown operator: {operator}. Available: {list(ARITHMETIC_OPERATORS.keys())}"
        )
    return ARITHMETIC_OPERATORS[operator]


def resolve_comparison(comparison: str | Comparison) -> Comparison:
    """
    Look up a comparison by name, or pass a callable through.

    Raises:
        ValueError: If the name is unknown
    """
    if callable(comparison):
        return comparison
    if comparison not in COMPARISONS:
        raise ValueError(
            f"Unknown comparison: {comparison}. Available: {list(COMPARISONS.keys())}"
        )
    return COMPARISONS[comparison]
