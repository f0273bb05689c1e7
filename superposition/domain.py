"""
Core Domain Objects for the Superposition algebra.

Domain Objects:
    Mode           — Disjunctive ("any") or Conjunctive ("all")
    Superposition  — An ordered bundle of eigenstates plus a Mode

A Superposition is immutable once produced. Engines never modify
their inputs; every operation returns a new Superposition.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# =============================================================================
# MODE
# =============================================================================

class Mode(Enum):
    """
    How the eigenstates of a superposition are quantified.

    DISJUNCTIVE: holds if at least one eigenstate satisfies a predicate
    CONJUNCTIVE: holds only if every eigenstate satisfies a predicate
    """
    DISJUNCTIVE = "any"
    CONJUNCTIVE = "all"


def promote_mode(*modes: Mode) -> Mode:
    """
    Mode promotion for combined operands.

    Any conjunctive operand makes the result conjunctive. Conjunctive
    is never demoted.
    """
    if any(mode is Mode.CONJUNCTIVE for mode in modes):
        return Mode.CONJUNCTIVE
    return Mode.DISJUNCTIVE


# =============================================================================
# SUPERPOSITION
# =============================================================================

@dataclass(frozen=True)
class Superposition:
    """
    An ordered sequence of eigenstates tagged with a Mode.

    Invariants enforced:
    1. values is stored as a tuple (read-only, order preserved)
    2. mode is a Mode (the strings "any" and "all" are accepted)
    3. No deduplication: repeated equal eigenstates are kept

    An empty superposition is legal and is always false.
    """
    values: tuple = field(default_factory=tuple)
    mode: Mode = Mode.DISJUNCTIVE

    def __post_init__(self):
        """Normalize values and mode at construction time."""
        object.__setattr__(self, "values", tuple(self.values))
        if not isinstance(self.mode, Mode):
            object.__setattr__(self, "mode", Mode(self.mode))

    @property
    def is_conjunctive(self) -> bool:
        return self.mode is Mode.CONJUNCTIVE

    def is_true(self) -> bool:
        """True iff there is at least one eigenstate, regardless of mode."""
        return len(self.values) > 0

    def eigenstates(self) -> tuple:
        """The possible values, in scan order."""
        return self.values

    def __bool__(self) -> bool:
        return self.is_true()

    def __str__(self) -> str:
        return display(self)

    # Arithmetic delegates to the combination engine; == stays structural.

    def __add__(self, other: Any) -> Superposition:
        from .engine.combination import add
        return add(self, other)

    def __radd__(self, other: Any) -> Superposition:
        from .engine.combination import add
        return add(other, self)

    def __sub__(self, other: Any) -> Superposition:
        from .engine.combination import subtract
        return subtract(self, other)

    def __rsub__(self, other: Any) -> Superposition:
        from .engine.combination import subtract
        return subtract(other, self)

    def __mul__(self, other: Any) -> Superposition:
        from .engine.combination import multiply
        return multiply(self, other)

    def __rmul__(self, other: Any) -> Superposition:
        from .engine.combination import multiply
        return multiply(other, self)

    def __truediv__(self, other: Any) -> Superposition:
        from .engine.combination import divide
        return divide(self, other)

    def __rtruediv__(self, other: Any) -> Superposition:
        from .engine.combination import divide
        return divide(other, self)

    def __mod__(self, other: Any) -> Superposition:
        from .engine.combination import modulo
        return modulo(self, other)

    def __rmod__(self, other: Any) -> Superposition:
        from .engine.combination import modulo
        return modulo(other, self)


# =============================================================================
# CONSTRUCTORS
# =============================================================================

# Single arguments of these types are spread into eigenstates
_EXPANDABLE = (list, tuple, range)


def _collect(values: tuple) -> tuple:
    if len(values) == 1 and isinstance(values[0], _EXPANDABLE):
        return tuple(values[0])
    return values


def any_of(*values: Any) -> Superposition:
    """
    Create a disjunctive superposition.

    A single list, tuple or range argument is expanded, so
    any_of([1, 2, 3]) == any_of(1, 2, 3).
    """
    return Superposition(values=_collect(values), mode=Mode.DISJUNCTIVE)


def all_of(*values: Any) -> Superposition:
    """Create a conjunctive superposition. Expands a single list like any_of."""
    return Superposition(values=_collect(values), mode=Mode.CONJUNCTIVE)


# =============================================================================
# ACCESSORS
# =============================================================================

def is_true(superposition: Superposition) -> bool:
    """
    Truth evaluation: non-empty means true.

    Conjunctive semantics are not re-checked here; the filtering
    engine has already applied them to comparison results.
    """
    return superposition.is_true()


def eigenstates(superposition: Superposition) -> tuple:
    """Read-only access to the eigenstates."""
    return superposition.eigenstates()


def format_value(value: Any) -> str:
    """Render one eigenstate; integral floats drop their fractional part."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def display(superposition: Superposition) -> str:
    """
    Render a superposition.

    A single eigenstate renders as the bare value; otherwise
    "<mode>(<v1>, <v2>, ...)" with mode "any" or "all".
    """
    values = superposition.values
    if len(values) == 1:
        return format_value(values[0])

    body = ", ".join(format_value(v) for v in values)
    return f"{superposition.mode.value}({body})"
