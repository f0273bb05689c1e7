# Superposition Algebra
# Disjunctive and conjunctive value bundles with combinatorial arithmetic

"""
Core behavior: an operation over superpositions evaluates every pair
of eigenstates. Pairs that cannot be evaluated are dropped one by one,
never the whole operation.

    >>> from superposition import add, any_of, all_of
    >>> str(add(any_of(1, 2, 3), all_of(4, 5)))
    'all(5, 6, 6, 7, 7, 8)'
"""

from .coercion import NumericKind, coerce_numeric, is_numeric, numeric_kind
from .domain import (
    Mode,
    Superposition,
    all_of,
    any_of,
    display,
    eigenstates,
    is_true,
)
from .engine.combination import (
    CombinationResult,
    add,
    combine,
    divide,
    modulo,
    multiply,
    subtract,
)
from .engine.filtering import (
    FilterResult,
    equal_to,
    filter_by,
    greater_than,
    less_than,
)
from .exclusion import (
    ExclusionRule,
    PairExclusionError,
    PairOutcome,
    SuperpositionError,
)
from .sampling import random_eigenstate

__version__ = "0.1.0"

__all__ = [
    "Mode",
    "Superposition",
    "any_of",
    "all_of",
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "less_than",
    "greater_than",
    "equal_to",
    "is_true",
    "eigenstates",
    "display",
    "combine",
    "filter_by",
    "CombinationResult",
    "FilterResult",
    "ExclusionRule",
    "PairExclusionError",
    "PairOutcome",
    "SuperpositionError",
    "NumericKind",
    "coerce_numeric",
    "is_numeric",
    "numeric_kind",
    "random_eigenstate",
]
