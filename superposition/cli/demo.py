"""
Worked examples for the Superposition CLI.

Examples:
    1. Arithmetic — pairwise sums and products with mode promotion
    2. Comparison — membership and threshold checks
    3. Primality  — modulo against every candidate divisor at once
    4. Intersection — equality filter between two disjunctive sets

The examples are deterministic. Same input, same output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from ..domain import all_of, any_of, display, format_value
from ..engine.combination import add, modulo, multiply
from ..engine.filtering import equal_to, less_than


# =============================================================================
# VALUE PARSING
# =============================================================================

def parse_value(text: str) -> Any:
    """Read a command-line token as int, then float, then plain text."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def format_values(values: tuple | list) -> str:
    """Render an eigenstate list the way display() renders its members."""
    return "[" + ", ".join(format_value(v) for v in values) + "]"


# =============================================================================
# PRIMALITY
# =============================================================================

def is_prime(n: int) -> bool:
    """
    Primality via one modulo over all divisors 2..isqrt(n).

    n is composite iff some remainder equals zero, so the check is the
    negation of equal_to(remainders, 0).

    Raises:
        ValueError: If n is not an integer
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"is_prime requires an integer, got {n!r}")
    if n <= 1:
        return False

    divisors = all_of(range(2, math.isqrt(n) + 1))
    remainders = modulo(n, divisors)
    return not equal_to(remainders, 0).is_true()


# =============================================================================
# EXAMPLES
# =============================================================================

@dataclass
class DemoSection:
    """One titled example and the lines it prints."""
    title: str
    lines: list[str] = field(default_factory=list)


def run_examples(
    prime_candidate: int = 29,
) -> list[DemoSection]:
    """Evaluate the worked examples and collect their output."""
    sections: list[DemoSection] = []

    # Example 1: arithmetic
    a = any_of(1, 2, 3)
    b = all_of(4, 5)
    sections.append(DemoSection(
        title="Example 1: Basic Arithmetic Operations",
        lines=[
            f"Sum: {display(add(a, b))}",
            f"Product: {display(multiply(a, b))}",
        ],
    ))

    # Example 2: comparison
    lines = []
    x = 5
    if equal_to(x, any_of(3, 4, 5)).is_true():
        lines.append(f"{x} is 3, 4, or 5")
    else:
        lines.append(f"{x} is not 3, 4, or 5")

    thresholds = [10, 15, 20]
    next_val = 12
    if less_than(next_val, all_of(thresholds)).is_true():
        lines.append(f"{next_val} is less than all thresholds {thresholds}")
    else:
        lines.append(f"{next_val} is not less than all thresholds {thresholds}")
    sections.append(DemoSection(title="Example 2: Comparison Operations", lines=lines))

    # Example 3: primality
    verdict = "is prime" if is_prime(prime_candidate) else "is not prime"
    sections.append(DemoSection(
        title="Example 3: Primality Testing",
        lines=[f"{prime_candidate} {verdict}"],
    ))

    # Example 4: intersection
    intersection = equal_to(any_of(1, 2, 3, 4), any_of(3, 4, 5, 6))
    sections.append(DemoSection(
        title="Example 4: Set Intersection",
        lines=[f"Intersection: {format_values(intersection.eigenstates())}"],
    ))

    return sections
